"""Command-line interface for the Sudoku game engine."""

import argparse
import json
import sys

from .core.board import SudokuGrid
from .generator import SudokuGenerator, Difficulty


def main(argv=None):
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(
        description="Sudoku Puzzle Generator & Game Engine",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Generate 5 medium difficulty puzzles
  python -m sudoku_game.cli generate --count 5 --difficulty medium

  # Complete a puzzle
  python -m sudoku_game.cli solve --puzzle "5300700006001950..."

  # Measure generation
  python -m sudoku_game.cli benchmark --puzzles 10 --output results/
        """
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    difficulty_choices = [d.value for d in Difficulty] + ["all"]

    # Generate command
    gen_parser = subparsers.add_parser("generate", help="Generate Sudoku puzzles")
    gen_parser.add_argument(
        "--count", "-n", type=int, default=5,
        help="Number of puzzles to generate (default: 5)"
    )
    gen_parser.add_argument(
        "--difficulty", "-d",
        choices=difficulty_choices,
        default="medium",
        help="Difficulty level (default: medium)"
    )
    gen_parser.add_argument(
        "--output", "-o", type=str, default=None,
        help="Output file for puzzles (JSON format)"
    )
    gen_parser.add_argument(
        "--seed", "-s", type=int, default=None,
        help="Random seed for reproducibility"
    )
    gen_parser.add_argument(
        "--with-solution", action="store_true",
        help="Also print and save each puzzle's solution"
    )

    # Solve command
    solve_parser = subparsers.add_parser("solve", help="Complete a Sudoku puzzle")
    solve_parser.add_argument(
        "--puzzle", "-p", type=str, required=True,
        help="Puzzle string (81 chars, 0 or . for empty cells)"
    )
    solve_parser.add_argument(
        "--seed", "-s", type=int, default=None,
        help="Random seed for reproducibility"
    )
    solve_parser.add_argument(
        "--verbose", "-v", action="store_true",
        help="Show search statistics"
    )

    # Benchmark command
    bench_parser = subparsers.add_parser("benchmark", help="Measure puzzle generation")
    bench_parser.add_argument(
        "--puzzles", "-n", type=int, default=10,
        help="Puzzles per difficulty (default: 10)"
    )
    bench_parser.add_argument(
        "--difficulty", "-d",
        choices=difficulty_choices,
        default="all",
        help="Difficulty to benchmark (default: all)"
    )
    bench_parser.add_argument(
        "--output", "-o", type=str, default="results",
        help="Output directory for results (default: results)"
    )
    bench_parser.add_argument(
        "--seed", "-s", type=int, default=42,
        help="Random seed for reproducibility (default: 42)"
    )
    bench_parser.add_argument(
        "--no-charts", action="store_true",
        help="Skip chart generation"
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    if args.command == "generate":
        cmd_generate(args)
    elif args.command == "solve":
        cmd_solve(args)
    elif args.command == "benchmark":
        cmd_benchmark(args)


def _parse_difficulties(value):
    if value == "all":
        return list(Difficulty)
    return [Difficulty(value)]


def cmd_generate(args):
    """Handle the generate command."""
    generator = SudokuGenerator(seed=args.seed)
    all_puzzles = []

    for difficulty in _parse_difficulties(args.difficulty):
        print(f"\nGenerating {args.count} {difficulty.value} puzzles...")

        for i, (puzzle, solution) in enumerate(generator.generate_batch(args.count, difficulty), 1):
            puzzle_data = {
                "difficulty": difficulty.value,
                "index": i,
                "puzzle": puzzle.to_string(),
                "clues": puzzle.count_filled()
            }
            if args.with_solution:
                puzzle_data["solution"] = solution.to_string()
            all_puzzles.append(puzzle_data)

            print(f"\n--- {difficulty.value.capitalize()} Puzzle {i} ({puzzle.count_filled()} clues) ---")
            print(puzzle)
            if args.with_solution:
                print("Solution:")
                print(solution)

    if args.output:
        with open(args.output, "w") as f:
            json.dump(all_puzzles, f, indent=2)
        print(f"\nAll puzzles saved to {args.output}")

    print(f"\nTotal puzzles generated: {len(all_puzzles)}")


def cmd_solve(args):
    """Handle the solve command."""
    try:
        grid = SudokuGrid.from_string(args.puzzle)
    except ValueError as e:
        print(f"Error parsing puzzle: {e}")
        sys.exit(1)

    print("Input puzzle:")
    print(grid)
    print()

    generator = SudokuGenerator(seed=args.seed)
    solution = generator.solve(grid)

    if solution is None:
        print("✗ No solution found")
        if args.verbose:
            print(f"  Iterations: {generator.stats.iterations:,}")
            print(f"  Backtracks: {generator.stats.backtracks:,}")
        sys.exit(1)

    print("✓ Solved")
    if args.verbose:
        print(f"  Iterations: {generator.stats.iterations:,}")
        print(f"  Backtracks: {generator.stats.backtracks:,}")
    print(solution)


def cmd_benchmark(args):
    """Handle the benchmark command."""
    from .benchmark import GenerationBenchmark, Visualizer

    difficulties = _parse_difficulties(args.difficulty)

    print("=" * 60)
    print("SUDOKU GENERATION BENCHMARK")
    print("=" * 60)
    print(f"Puzzles per difficulty: {args.puzzles}")
    print(f"Difficulties: {[d.value for d in difficulties]}")
    print(f"Output directory: {args.output}")
    print("=" * 60)

    benchmark = GenerationBenchmark(
        puzzles_per_difficulty=args.puzzles,
        difficulties=difficulties,
        seed=args.seed
    )
    results = benchmark.run()
    summary = benchmark.get_summary()

    print("\n" + "=" * 60)
    print("RESULTS SUMMARY")
    print("=" * 60)
    for diff, stats in summary["results_by_difficulty"].items():
        print(f"\n{diff}:")
        print(f"  Clues: {stats['min_clues']}-{stats['max_clues']} (avg {stats['avg_clues']:.1f})")
        print(f"  Avg Time: {stats['avg_time_seconds']:.4f}s")
        print(f"  Avg Backtracks: {stats['avg_backtracks']:.1f}")
        print(f"  Avg Memory: {stats['avg_memory_mb']:.2f} MB")
        print(f"  Hint playthroughs won: {stats['playthroughs_won']}/{stats['tested']}")

    benchmark.save_results(args.output)

    if not args.no_charts:
        print("\nGenerating charts...")
        charts = Visualizer(results, args.output).generate_all()
        print(f"Charts saved to {args.output}/")
        for chart in charts:
            print(f"  - {chart.split('/')[-1]}")

    print("\n" + "=" * 60)
    print("Benchmark complete!")


if __name__ == "__main__":
    main()
