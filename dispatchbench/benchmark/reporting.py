import json
import logging
from pathlib import Path

import matplotlib
matplotlib.use("Agg")  # Non-interactive backend
import matplotlib.pyplot as plt

from .models import BenchmarkSummary

COLORS = {
    "TRIAL": "#3498db",  # Blue
    "BEST": "#2ecc71",   # Green
}


class ReportGenerator:
    """Generates reports from benchmark results."""

    def __init__(self, output_dir: Path):
        self.output_dir = output_dir
        self.logger = logging.getLogger(__name__)

    def save_json(self, summary: BenchmarkSummary) -> Path:
        """Save detailed results to JSON."""
        output_path = self.output_dir / "benchmark_results.json"

        with open(output_path, "w") as f:
            json.dump(summary.to_dict(), f, indent=2)

        self.logger.debug(f"Wrote {output_path}")
        return output_path

    def generate_markdown(self, summary: BenchmarkSummary) -> Path:
        """Generate a Markdown summary report."""
        output_path = self.output_dir / "benchmark_report.md"

        lines = [
            "# Dispatch Benchmark Report",
            f"\n**Timestamp:** {summary.timestamp}",
            f"**Duration:** {summary.duration:.1f}s",
            f"**Calls per trial:** {summary.limit}",
            f"**Trials:** {len(summary.trials)}",
            "",
            f"**Calls per millisecond (best):** {summary.best_score}",
            "",
            "## Trials",
            "",
            "| Trial | Count | Elapsed (ms) | Divisor | Score |",
            "|-------|-------|--------------|---------|-------|",
        ]

        for t in summary.trials:
            marker = " *" if t.index == summary.best_trial else ""
            lines.append(
                f"| {t.index} | {t.count} | {t.elapsed_ms} | {t.divisor} | {t.score}{marker} |"
            )

        with open(output_path, "w") as f:
            f.write("\n".join(lines) + "\n")

        self.logger.debug(f"Wrote {output_path}")
        return output_path

    def generate_chart(self, summary: BenchmarkSummary) -> Path:
        """Bar chart of per-trial scores with the best trial highlighted."""
        output_path = self.output_dir / "trial_scores.png"

        indices = [t.index for t in summary.trials]
        scores = [t.score for t in summary.trials]
        best = summary.best_trial
        colors = [COLORS["BEST"] if i == best else COLORS["TRIAL"] for i in indices]

        fig, ax = plt.subplots(figsize=(8, 4))
        ax.bar(indices, scores, color=colors)
        ax.axhline(summary.best_score, color=COLORS["BEST"], linestyle="--", linewidth=1)
        ax.set_title("Calls per millisecond by trial")
        ax.set_xlabel("Trial")
        ax.set_ylabel("Calls / ms")
        ax.set_xticks(indices)

        fig.savefig(output_path, format="png", bbox_inches="tight", dpi=100)
        plt.close(fig)

        self.logger.debug(f"Wrote {output_path}")
        return output_path
