#!/usr/bin/env python3
"""
Determinism verification for the permutation search.

Tests:
1. Same scramble -> same solution across multiple runs
2. Several solutions of equal length -> lowest generator indices chosen
3. Iterative deepening returns the shortest solution

Usage:
    PYTHONPATH=src python scripts/verify_determinism.py
"""

import sys
import os

# Add src to path if not already there
src_path = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), 'src')
if src_path not in sys.path:
    sys.path.insert(0, src_path)

from perm_solver import (
    PermutationState, Move, MOVE_R, N_FACELETS, quarter_turn_moves, scrambled_state,
    bounded_search, iterative_deepening, SearchNode, apply_moves, format_moves
)


def test_basic_determinism():
    """Test: Same scramble produces same solution across runs."""
    print("Test 1: Basic determinism")

    move_set = quarter_turn_moves()
    start = scrambled_state(move_set, "R U F")

    results = [iterative_deepening(start, move_set, 5) for _ in range(10)]

    all_same = all(r == results[0] for r in results)
    print(f"  10 runs: {'PASS - identical' if all_same else 'FAIL - different outputs'}")
    if not all_same:
        for i, r in enumerate(results[:3]):
            print(f"    Run {i+1}: {r}")
        return False
    print(f"    Solution: {format_moves(results[0], move_set)}")
    return True


def test_tied_solutions():
    """Test: Equal-length solutions resolve to the lowest indices."""
    print("\nTest 2: Tied solutions")

    # Two copies of R: both [0, 0] and [1, 1] (and mixes) undo R R
    move_set = [Move("R", MOVE_R), Move("R*", MOVE_R)]
    start = apply_moves(PermutationState.identity(N_FACELETS), move_set, [0, 0])

    found = bounded_search(SearchNode.root(start), move_set, 2)
    ok = found is not None and found.moves_taken == [0, 0]
    print(f"  Depth 2: {'PASS' if ok else 'FAIL'} - {found.moves_taken if found else None}")
    return ok


def test_shortest_solution():
    """Test: Iterative deepening stops at the first solving depth."""
    print("\nTest 3: Shortest solution")

    move_set = quarter_turn_moves()
    start = scrambled_state(move_set, "R U")

    moves = iterative_deepening(start, move_set, 6)
    ok = moves == [3, 1]
    print(f"  R U: {'PASS' if ok else 'FAIL'} - {format_moves(moves, move_set) if moves else None}")
    return ok


def main():
    print("=" * 60)
    print("SEARCH DETERMINISM VERIFICATION")
    print("=" * 60)

    tests = [
        test_basic_determinism,
        test_tied_solutions,
        test_shortest_solution,
    ]

    results = [test() for test in tests]

    print("\n" + "=" * 60)
    print(f"OVERALL: {sum(results)}/{len(results)} tests passed")
    print("=" * 60)

    if all(results):
        print("\n✓ Search is DETERMINISTIC")
        return 0
    else:
        print("\n✗ Some tests failed - review implementation")
        return 1


if __name__ == "__main__":
    sys.exit(main())
