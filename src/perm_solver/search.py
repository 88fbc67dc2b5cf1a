"""
Search logic for Permutation Solver.

Exact-depth depth-first search over generator sequences, and the
iterative-deepening driver on top of it. No pruning, no memoization:
a move set of size M searched to depth D costs up to M**D compositions.
"""

import time
from typing import List, Optional, Dict, Sequence

from .permutation import PermutationState
from .types import MoveSet, SearchNode, SolveResult


def apply_moves(start: PermutationState, move_set: MoveSet, indices: Sequence[int]) -> PermutationState:
    """Compose start with the listed generators, left to right."""
    state = start
    for i in indices:
        state = state.compose(move_set[i].state)
    return state


def bounded_search(node: SearchNode, move_set: MoveSet, target_depth: int,
                   depth: int = 0, stats: Optional[Dict] = None) -> Optional[SearchNode]:
    """
    Exact-depth DFS.

    Args:
        node: node at the current depth
        move_set: generators, tried in index order
        target_depth: the only depth at which the solved test runs
        depth: current depth of node
        stats: optional counters ("expanded", "leaves"), updated in place

    Returns:
        First solved node at target_depth (generator-index order, leftmost
        first), or None if there is none.
    """
    if depth == target_depth:
        if stats is not None:
            stats["leaves"] = stats.get("leaves", 0) + 1
        return node if node.state.is_solved() else None

    for i in range(len(move_set)):
        if stats is not None:
            stats["expanded"] = stats.get("expanded", 0) + 1
        found = bounded_search(node.extend(i, move_set), move_set, target_depth, depth + 1, stats)
        if found is not None:
            return found
    return None


def iterative_deepening(start: PermutationState, move_set: MoveSet, max_depth: int,
                        stats: Optional[Dict] = None) -> Optional[List[int]]:
    """
    Bounded search at depths 0, 1, ..., max_depth - 1.

    The ceiling itself is never searched, so max_depth=0 always returns None.

    Returns:
        Generator indices of the first (shortest) solution, or None.
    """
    root = SearchNode.root(start)
    for depth in range(max_depth):
        found = bounded_search(root, move_set, depth, stats=stats)
        if found is not None:
            if stats is not None:
                stats["depth"] = depth
            return found.moves_taken
    return None


def _result(name: str, moves: Optional[List[int]], move_set: MoveSet, stats: Dict, t_start: float) -> SolveResult:
    stats["timing_ms"] = int((time.time() - t_start) * 1000)
    stats.setdefault("expanded", 0)
    stats.setdefault("leaves", 0)
    if moves is None:
        return SolveResult(name, None, [], None, stats)
    return SolveResult(name, moves, [move_set[i].name for i in moves], len(moves), stats)


def solve_with_iddfs(name: str, start: PermutationState, move_set: MoveSet, max_depth: int) -> SolveResult:
    """
    Solve with iterative deepening.

    Returns:
        SolveResult with stats {"expanded", "leaves", "depth", "timing_ms"};
        moves is None when no depth below max_depth solves start.
    """
    assert max_depth >= 0, f"max_depth must be non-negative, got {max_depth}"
    t_start = time.time()
    stats = {"expanded": 0, "leaves": 0, "depth": None}
    moves = iterative_deepening(start, move_set, max_depth, stats=stats)
    return _result(name, moves, move_set, stats, t_start)


def solve_at_depth(name: str, start: PermutationState, move_set: MoveSet, depth: int) -> SolveResult:
    """Solve with a single exact-depth search."""
    assert depth >= 0, f"depth must be non-negative, got {depth}"
    t_start = time.time()
    stats = {"expanded": 0, "leaves": 0, "depth": depth}
    found = bounded_search(SearchNode.root(start), move_set, depth, stats=stats)
    return _result(name, found.moves_taken if found is not None else None, move_set, stats, t_start)
