#!/usr/bin/env python3
"""
Dispatch Benchmark

Measures how many increment() calls through the ICounter interface run per
millisecond.  Ten trials of 10,000,000 calls are timed; each trial's score is
printed, followed by the best score.

Usage:
    python bin/benchmark.py
    python bin/benchmark.py --output results/benchmark
    python bin/benchmark.py --config benchmark.yaml --verbose
"""
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

import argparse
import logging

from dispatchbench import Counter, ConfigError
from dispatchbench.benchmark import BenchmarkRunner, ReportGenerator
from dispatchbench.config import Settings


# =============================================================================
# Terminal output helpers
# =============================================================================

class Colors:
    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    RED = "\033[91m"
    RESET = "\033[0m"


def _c(text: str, color: str) -> str:
    return f"{color}{text}{Colors.RESET}"


def print_error(msg: str) -> None:
    print(f"  {_c('✗', Colors.RED)} {msg}", file=sys.stderr)


def print_success(msg: str) -> None:
    print(f"  {_c('✓', Colors.GREEN)} {msg}", file=sys.stderr)


# =============================================================================
# CLI
# =============================================================================

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Virtual dispatch throughput benchmark",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
examples:
  %(prog)s                                  Run and print scores
  %(prog)s --output results/benchmark       Also write JSON/Markdown/PNG reports
  %(prog)s --config benchmark.yaml -v       Settings from YAML, debug logging
""",
    )

    opts = parser.add_argument_group("Options")
    opts.add_argument(
        "--config", type=Path, metavar="FILE",
        help="YAML settings file (output_dir, log_level, chart)",
    )
    opts.add_argument(
        "--output", "-o", type=Path, default=None, metavar="DIR",
        help="Output directory for reports (default: none, nothing is written)",
    )
    opts.add_argument(
        "--no-chart", dest="chart", action="store_false", default=None,
        help="Skip the PNG chart when writing reports",
    )

    runtime = parser.add_argument_group("Runtime")
    runtime.add_argument("--verbose", "-v", action="store_true",
                         help="Verbose output with debug logging")

    return parser


def load_settings(args: argparse.Namespace) -> Settings:
    """Environment, then YAML file, then command line flags."""
    settings = Settings.from_env()
    if args.config:
        settings = Settings.from_yaml(args.config, base=settings)
    return settings.merge({
        "output_dir": args.output,
        "chart": args.chart,
        "log_level": "DEBUG" if args.verbose else None,
    })


def write_reports(summary, settings: Settings) -> None:
    output_dir = settings.output_dir
    output_dir.mkdir(parents=True, exist_ok=True)

    reporter = ReportGenerator(output_dir)
    paths = [reporter.save_json(summary), reporter.generate_markdown(summary)]
    if settings.chart:
        paths.append(reporter.generate_chart(summary))

    print("\n  Reports saved to:", file=sys.stderr)
    for path in paths:
        print_success(str(path))


# =============================================================================
# Main
# =============================================================================

def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = load_settings(args)
    except ConfigError as e:
        print_error(str(e))
        return 1

    # --- Logging ---
    logging.basicConfig(
        level=settings.level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    # --- Run ---
    runner = BenchmarkRunner(Counter())
    summary = runner.run()

    # --- Reports ---
    if settings.output_dir is not None:
        try:
            write_reports(summary, settings)
        except OSError as e:
            print_error(f"Could not write reports: {e}")
            return 1

    return 0


if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        print(f"\n{_c('Benchmark interrupted by user.', Colors.YELLOW)}", file=sys.stderr)
        sys.exit(130)
