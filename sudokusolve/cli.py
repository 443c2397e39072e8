"""Command-line interface for the Sudoku solver."""

import argparse
import sys
from typing import List, Optional

from rich.console import Console

from .core.board import SudokuBoard
from .core.errors import SudokuError
from .formats.parser import board_from_text, read_puzzle
from .formats.renderer import render_plain, render_fancy
from .puzzle import Sudoku


def main(argv: Optional[List[str]] = None):
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(
        description="Sudoku solver: backtracking search with constraint propagation",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Solve a puzzle given as an 81-character string
  python -m sudokusolve.cli solve --puzzle "1000600009800006050..."

  # Solve a puzzle file, stop after the first solution
  python -m sudokusolve.cli solve --file puzzle.txt --limit 1 --fancy

  # Check a puzzle for conflicts
  python -m sudokusolve.cli check --file puzzle.txt
        """
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Solve command
    solve_parser = subparsers.add_parser("solve", help="Solve a Sudoku puzzle")
    _add_input_arguments(solve_parser)
    solve_parser.add_argument(
        "--limit", "-l", type=int, default=None,
        help="Stop after this many solutions (default: find all)"
    )
    solve_parser.add_argument(
        "--no-rules", action="store_true",
        help="Disable the deduction rules and use plain backtracking"
    )
    solve_parser.add_argument(
        "--progress", action="store_true",
        help="Show a progress bar while searching"
    )
    solve_parser.add_argument(
        "--fancy", action="store_true",
        help="Draw boards with box-drawing characters and colours"
    )
    solve_parser.add_argument(
        "--verbose", "-v", action="store_true",
        help="Show detailed solving statistics"
    )

    # Check command
    check_parser = subparsers.add_parser("check", help="Check a puzzle for conflicts")
    _add_input_arguments(check_parser)

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    if args.command == "solve":
        cmd_solve(args)
    elif args.command == "check":
        cmd_check(args)


def _add_input_arguments(subparser: argparse.ArgumentParser) -> None:
    group = subparser.add_mutually_exclusive_group(required=True)
    group.add_argument(
        "--puzzle", "-p", type=str,
        help="Puzzle string: 81 chars, or rows separated by / (0 or . for empty cells)"
    )
    group.add_argument(
        "--file", "-f", type=str,
        help="Puzzle file (9 lines of digits)"
    )


def _load_puzzle(args) -> Sudoku:
    """Load the puzzle named on the command line, exiting on bad input."""
    try:
        if args.file:
            board = read_puzzle(args.file)
        else:
            board = board_from_text(args.puzzle)
    except (SudokuError, OSError) as e:
        print(f"Error loading puzzle: {e}")
        sys.exit(1)
    return Sudoku(board)


def _show(board: SudokuBoard, original: SudokuBoard, fancy: bool, console: Console) -> None:
    if fancy:
        console.print(render_fancy(board, original))
    else:
        print(render_plain(board))


def cmd_solve(args):
    """Handle the solve command."""
    if args.limit is not None and args.limit < 1:
        print("Error: --limit must be at least 1")
        sys.exit(1)

    puzzle = _load_puzzle(args)
    console = Console()
    original = puzzle.original()

    print("Input puzzle:")
    _show(original, original, args.fancy, console)
    print()

    if not puzzle.valid:
        print("✗ Puzzle has conflicting values")
        return

    solutions = puzzle.solve(
        limit=args.limit,
        use_deduction_rules=not args.no_rules,
        show_progress=args.progress,
        track_memory=args.verbose,
    )
    stats = puzzle.last_stats

    if not solutions:
        print(f"✗ No solution found in {stats.time_seconds:.4f}s")
    else:
        for i, solution in enumerate(solutions, 1):
            print(f"--- Solution {i} ---")
            _show(solution, original, args.fancy, console)
        print()
        print(f"✓ Found {len(solutions):,} solution(s) in {stats.time_seconds:.4f}s")

    if args.verbose:
        print(f"  Iterations: {stats.iterations:,}")
        print(f"  Trials: {stats.nodes_explored:,}")
        print(f"  Backtracks: {stats.backtracks:,}")
        print(f"  Memory: {stats.memory_bytes / 1024:.2f} KB")


def cmd_check(args):
    """Handle the check command."""
    puzzle = _load_puzzle(args)
    board = puzzle.current()

    print(board)
    print()
    print(f"Clues: {board.count_filled()}")
    print(f"Valid: {'yes' if puzzle.valid else 'no'}")
    print(f"Solved: {'yes' if puzzle.solved else 'no'}")

    empty_cells = board.get_empty_cells()
    if empty_cells and puzzle.valid:
        counts = [len(puzzle.candidates(x, y)) for x, y in empty_cells]
        singles = sum(1 for c in counts if c == 1)
        print(f"Empty cells: {len(empty_cells)}")
        print(f"  Naked singles: {singles}")
        print(f"  Fewest candidates: {min(counts)}")


if __name__ == "__main__":
    main()
