"""Visualization utilities for generation benchmark results."""

from __future__ import annotations
import os
from typing import List

import matplotlib.pyplot as plt
import seaborn as sns
import numpy as np

from .benchmark import GenerationResult
from ..generator import Difficulty


class Visualizer:
    """
    Chart generator for puzzle generation benchmarks.

    Charts compare difficulties by clue count, generation time and search effort.
    """

    COLORS = {
        "easy": "#2ecc71",    # Green
        "medium": "#f39c12",  # Orange
        "hard": "#e74c3c",    # Red
    }

    def __init__(self, results: List[GenerationResult], output_dir: str = "results"):
        """
        Initialize the visualizer.

        Args:
            results: List of generation results.
            output_dir: Directory to save generated charts.
        """
        self.results = results
        self.output_dir = output_dir
        os.makedirs(output_dir, exist_ok=True)

        plt.style.use('seaborn-v0_8-whitegrid')
        sns.set_palette("husl")

    def _difficulties(self) -> List[str]:
        present = {r.difficulty for r in self.results}
        return [d.value for d in Difficulty if d.value in present]

    def _save(self, name: str) -> str:
        plt.tight_layout()
        path = os.path.join(self.output_dir, name)
        plt.savefig(path, dpi=150, bbox_inches='tight')
        plt.close()
        return path

    def generate_all(self) -> List[str]:
        """
        Generate all charts.

        Returns:
            List of paths to generated chart files.
        """
        return [
            self.plot_clue_distribution(),
            self.plot_time_by_difficulty(),
            self.plot_backtracks_distribution(),
        ]

    def plot_clue_distribution(self) -> str:
        """Histogram of clue counts per difficulty, with the target ranges shaded."""
        fig, ax = plt.subplots(figsize=(10, 6))

        for diff in self._difficulties():
            clues = [r.clues for r in self.results if r.difficulty == diff]
            color = self.COLORS.get(diff, "#95a5a6")
            sns.histplot(clues, ax=ax, discrete=True, color=color,
                         label=diff.capitalize(), alpha=0.7)
            low, high = Difficulty(diff).clue_range
            ax.axvspan(low - 0.5, high + 0.5, color=color, alpha=0.08)

        ax.set_xlabel('Clues', fontsize=12)
        ax.set_ylabel('Puzzles', fontsize=12)
        ax.set_title('Clue Count by Difficulty', fontsize=14, fontweight='bold')
        ax.legend(title='Difficulty')

        return self._save("clue_distribution.png")

    def plot_time_by_difficulty(self) -> str:
        """Bar chart of average generation time per difficulty."""
        fig, ax = plt.subplots(figsize=(10, 6))

        difficulties = self._difficulties()
        avg_times = [
            np.mean([r.time_seconds for r in self.results if r.difficulty == diff])
            for diff in difficulties
        ]
        colors = [self.COLORS.get(diff, "#95a5a6") for diff in difficulties]

        bars = ax.bar([d.capitalize() for d in difficulties], avg_times,
                      color=colors, edgecolor='black', linewidth=0.5)

        for bar, t in zip(bars, avg_times):
            ax.annotate(f'{t:.4f}s',
                        xy=(bar.get_x() + bar.get_width() / 2, bar.get_height()),
                        xytext=(0, 3),
                        textcoords="offset points",
                        ha='center', va='bottom', fontsize=10)

        ax.set_xlabel('Difficulty', fontsize=12)
        ax.set_ylabel('Average Time (seconds)', fontsize=12)
        ax.set_title('Average Generation Time', fontsize=14, fontweight='bold')
        ax.set_ylim(bottom=0)

        return self._save("time_by_difficulty.png")

    def plot_backtracks_distribution(self) -> str:
        """Box plot of solver backtracks per difficulty."""
        fig, ax = plt.subplots(figsize=(10, 6))

        difficulties = self._difficulties()
        data = [[r.backtracks for r in self.results if r.difficulty == diff] for diff in difficulties]

        bp = ax.boxplot(data, patch_artist=True)

        for patch, diff in zip(bp['boxes'], difficulties):
            patch.set_facecolor(self.COLORS.get(diff, "#95a5a6"))
            patch.set_alpha(0.7)

        ax.set_xticks(range(1, len(difficulties) + 1))
        ax.set_xticklabels([d.capitalize() for d in difficulties])
        ax.set_xlabel('Difficulty', fontsize=12)
        ax.set_ylabel('Backtracks', fontsize=12)
        ax.set_title('Solver Backtracks per Generated Grid', fontsize=14, fontweight='bold')

        return self._save("backtracks_distribution.png")
