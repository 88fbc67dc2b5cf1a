#!/usr/bin/env python3
"""
Scramble a 2x2x2 cube (or a custom move table) and search for a solution.

Runs iterative deepening by default; --depth runs a single exact-depth search
instead. Every run appends a receipt to receipts.jsonl.

Usage:
    python scripts/run_solver.py --move-set=qtm --scramble="R U F'" --max-depth=5
    python scripts/run_solver.py --move-set=htm --depth=7
    python scripts/run_solver.py --moves-file=data/moves.json --scramble="A B" --max-depth=4
"""

import sys
import argparse
from pathlib import Path
from datetime import datetime

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / 'src'))

from perm_solver import (
    PermutationState,
    N_FACELETS, DEFAULT_SCRAMBLE,
    get_move_set, load_move_table, parse_moves, apply_moves,
    solve_with_iddfs, solve_at_depth,
    residual, to_array, state_sha, moves_sha, log_receipt
)


def run_solver(move_set, scramble: str, n: int, max_depth: int, depth: int = None,
               output_dir: str = None, verbose: bool = True):
    """
    Scramble the solved state of n positions and search for a solution.

    Args:
        move_set: generators to scramble and search with
        scramble: space-separated move names
        n: number of positions
        max_depth: exclusive iterative-deepening ceiling
        depth: if set, run one exact-depth search at this depth instead
        output_dir: receipts directory
        verbose: print progress messages

    Returns:
        SolveResult
    """
    scramble_idx = parse_moves(scramble, move_set)
    start = apply_moves(PermutationState.identity(n), move_set, scramble_idx)

    if verbose:
        print("=" * 70)
        print("Permutation Solver")
        print(f"Moves: {[m.name for m in move_set]}")
        print(f"Scramble: {scramble} ({len(scramble_idx)} moves)")
        print(f"Start: {to_array(start, n).tolist()}")
        print(f"Residual: {residual(start, n)}")
        print("=" * 70)

    if depth is not None:
        result = solve_at_depth("run_solver", start, move_set, depth)
    else:
        result = solve_with_iddfs("run_solver", start, move_set, max_depth)

    status = "solved" if result.moves is not None else "failed"
    receipt = {
        "scramble": scramble,
        "status": status,
        "mode": "fixed_depth" if depth is not None else "iddfs",
        "max_depth": depth if depth is not None else max_depth,
        "moves": result.move_names,
        "depth": result.depth,
        "stats": result.stats,
        "hashes": {
            "start_sha": state_sha(start),
            "moves_sha": moves_sha(result.moves, move_set) if result.moves is not None else ""
        }
    }
    log_receipt(receipt, out_dir=output_dir)

    if verbose:
        if result.moves is not None:
            print(f"Solution: {' '.join(result.move_names) or '(already solved)'} {result.moves}")
        else:
            print("No solution found.")
        print(f"Expanded: {result.stats['expanded']}  Timing: {result.stats['timing_ms']} ms")
        print("=" * 70)

    return result


def main():
    parser = argparse.ArgumentParser(description="Search for a move sequence that solves a scrambled puzzle")
    parser.add_argument(
        "--move-set",
        type=str,
        default="htm",
        help="Built-in 2x2x2 move set: qtm or htm (default: htm)"
    )
    parser.add_argument(
        "--moves-file",
        type=str,
        default=None,
        help="JSON move table to use instead of a built-in move set"
    )
    parser.add_argument(
        "--positions",
        type=int,
        default=N_FACELETS,
        help=f"Number of puzzle positions (default: {N_FACELETS})"
    )
    parser.add_argument(
        "--scramble",
        type=str,
        default=DEFAULT_SCRAMBLE,
        help=f"Space-separated move names (default: \"{DEFAULT_SCRAMBLE}\")"
    )
    parser.add_argument(
        "--max-depth",
        type=int,
        default=8,
        help="Iterative-deepening ceiling, exclusive (default: 8)"
    )
    parser.add_argument(
        "--depth",
        type=int,
        default=None,
        help="Run a single exact-depth search at this depth"
    )
    parser.add_argument(
        "--output",
        type=str,
        default=None,
        help="Output directory (default: runs/YYYY-MM-DD)"
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress progress messages"
    )

    args = parser.parse_args()

    if args.max_depth < 0 or (args.depth is not None and args.depth < 0):
        parser.error("depths must be non-negative")

    try:
        if args.moves_file is not None:
            move_set = load_move_table(args.moves_file, validate=True)
        else:
            move_set = get_move_set(args.move_set)
    except ValueError as e:
        parser.error(str(e))

    if args.output is None:
        date_str = datetime.now().strftime("%Y-%m-%d")
        output_dir = f"runs/{date_str}"
    else:
        output_dir = args.output

    try:
        result = run_solver(move_set, args.scramble, args.positions, args.max_depth,
                            depth=args.depth, output_dir=output_dir, verbose=not args.quiet)
    except ValueError as e:
        parser.error(str(e))

    # Exit code: 0 if solved, 1 otherwise
    sys.exit(0 if result.moves is not None else 1)


if __name__ == "__main__":
    main()
