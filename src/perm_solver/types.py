"""
Type definitions and dataclasses for Permutation Solver.
"""

from dataclasses import dataclass, field
from typing import List, Dict, Optional

from .permutation import PermutationState


@dataclass
class Move:
    """
    Move = (name, state)

    - name: move notation (e.g., "R", "U'", "F2")
    - state: generator applied by this move
    """
    name: str
    state: PermutationState


# Move set: ordered generators, indices are the move vocabulary
MoveSet = List[Move]


@dataclass
class SearchNode:
    """Search node: accumulated state plus the generator indices taken to reach it."""
    state: PermutationState
    moves_taken: List[int] = field(default_factory=list)

    @classmethod
    def root(cls, state: PermutationState) -> "SearchNode":
        return cls(state, [])

    def extend(self, i: int, move_set: MoveSet) -> "SearchNode":
        """Child node after applying generator i; self is left untouched."""
        return SearchNode(self.state.compose(move_set[i].state), self.moves_taken + [i])

    @property
    def depth(self) -> int:
        return len(self.moves_taken)


@dataclass
class SolveResult:
    """Result of a solve run (moves is None when no solution was found)."""
    name: str
    moves: Optional[List[int]]
    move_names: List[str]
    depth: Optional[int]
    stats: Dict
