"""Benchmarking framework for puzzle generation."""

from __future__ import annotations
import json
import os
import random
import time
import tracemalloc
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import numpy as np
from tqdm import tqdm

from ..core.validator import is_solved, validate_solution
from ..generator import SudokuGenerator, Difficulty
from ..session import GameSession


@dataclass
class GenerationResult:
    """Results from generating a single puzzle."""
    puzzle_id: int
    difficulty: str
    clues: int
    time_seconds: float
    memory_bytes: int
    iterations: int
    backtracks: int
    solution_valid: bool
    hint_playthrough_won: bool
    puzzle: str = ""
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "puzzle_id": self.puzzle_id,
            "difficulty": self.difficulty,
            "clues": self.clues,
            "time_seconds": self.time_seconds,
            "memory_bytes": self.memory_bytes,
            "memory_mb": self.memory_bytes / (1024 * 1024),
            "iterations": self.iterations,
            "backtracks": self.backtracks,
            "solution_valid": self.solution_valid,
            "hint_playthrough_won": self.hint_playthrough_won,
            "puzzle": self.puzzle,
            **self.extra
        }


class GenerationBenchmark:
    """
    Benchmark for the puzzle generator.

    Generates puzzles for each difficulty, measures time and memory, checks
    the solution and replays every puzzle to a win with hints.
    """

    def __init__(
        self,
        puzzles_per_difficulty: int = 10,
        difficulties: Optional[List[Difficulty]] = None,
        seed: Optional[int] = None
    ):
        """
        Initialize the benchmark.

        Args:
            puzzles_per_difficulty: Number of puzzles to generate per difficulty.
            difficulties: List of difficulties to test (default: all).
            seed: Random seed for reproducibility.
        """
        self.puzzles_per_difficulty = puzzles_per_difficulty
        self.difficulties = difficulties or list(Difficulty)
        self.seed = seed
        self.results: List[GenerationResult] = []

    def run(self, show_progress: bool = True) -> List[GenerationResult]:
        """
        Run the full benchmark suite.

        Returns:
            List of GenerationResult objects.
        """
        rng = random.Random(self.seed)
        generator = SudokuGenerator(rng=rng)
        self.results = []

        total = len(self.difficulties) * self.puzzles_per_difficulty
        pbar = tqdm(total=total, desc="Generating", disable=not show_progress)

        for difficulty in self.difficulties:
            for puzzle_id in range(self.puzzles_per_difficulty):
                self.results.append(self._run_single(generator, rng, puzzle_id, difficulty))
                pbar.update(1)

        pbar.close()
        return self.results

    def _run_single(
        self,
        generator: SudokuGenerator,
        rng: random.Random,
        puzzle_id: int,
        difficulty: Difficulty
    ) -> GenerationResult:
        """Generate and check a single puzzle."""
        tracemalloc.start()
        start_time = time.perf_counter()

        puzzle, solution = generator.generate_with_solution(difficulty)

        elapsed = time.perf_counter() - start_time
        _, peak = tracemalloc.get_traced_memory()
        tracemalloc.stop()

        return GenerationResult(
            puzzle_id=puzzle_id,
            difficulty=difficulty.value,
            clues=puzzle.count_filled(),
            time_seconds=elapsed,
            memory_bytes=peak,
            iterations=generator.stats.iterations,
            backtracks=generator.stats.backtracks,
            solution_valid=is_solved(solution) and validate_solution(puzzle, solution),
            hint_playthrough_won=self._play_with_hints(puzzle, solution, rng),
            puzzle=puzzle.to_string(),
        )

    @staticmethod
    def _play_with_hints(puzzle, solution, rng: random.Random) -> bool:
        """Fill every empty cell with hints and report whether the game was won."""
        session = GameSession.from_grids(puzzle, solution, rng=rng)
        while session.hint() is not None:
            pass
        return session.won and session.grid == solution

    def get_summary(self) -> Dict[str, Any]:
        """Get summary statistics from benchmark results."""
        summary = {
            "total_puzzles": len(self.results),
            "difficulties": [d.value for d in self.difficulties],
            "results_by_difficulty": {}
        }

        for difficulty in self.difficulties:
            diff_results = [r for r in self.results if r.difficulty == difficulty.value]
            if not diff_results:
                continue

            clues = np.array([r.clues for r in diff_results])
            times = np.array([r.time_seconds for r in diff_results])
            backtracks = np.array([r.backtracks for r in diff_results])
            memory = np.array([r.memory_bytes for r in diff_results])

            summary["results_by_difficulty"][difficulty.value] = {
                "min_clues": int(clues.min()),
                "max_clues": int(clues.max()),
                "avg_clues": float(clues.mean()),
                "avg_time_seconds": float(times.mean()),
                "max_time_seconds": float(times.max()),
                "avg_backtracks": float(backtracks.mean()),
                "avg_memory_mb": float(memory.mean()) / (1024 * 1024),
                "valid_solutions": sum(1 for r in diff_results if r.solution_valid),
                "playthroughs_won": sum(1 for r in diff_results if r.hint_playthrough_won),
                "tested": len(diff_results)
            }

        return summary

    def save_results(self, output_dir: str) -> None:
        """Save benchmark results and summary as JSON files."""
        os.makedirs(output_dir, exist_ok=True)

        results_file = os.path.join(output_dir, "generation_results.json")
        with open(results_file, "w") as f:
            json.dump([r.to_dict() for r in self.results], f, indent=2)

        summary_file = os.path.join(output_dir, "generation_summary.json")
        with open(summary_file, "w") as f:
            json.dump(self.get_summary(), f, indent=2)

        print(f"Results saved to {output_dir}")
