#!/usr/bin/env python3
"""Permutation Solver - 2x2x2 Move Tables

Facelets are numbered 0..23. Each face turn is three 4-cycles of facelets.
"""

from typing import Callable, Dict

from .permutation import PermutationState, power
from .types import Move, MoveSet
from .search import apply_moves
from .utils import parse_moves

N_FACELETS = 24

MOVE_U = PermutationState({0: 1, 1: 3, 3: 2, 2: 0,
                           7: 5, 5: 11, 11: 9, 9: 7,
                           6: 4, 4: 10, 10: 8, 8: 6})

MOVE_R = PermutationState({15: 3, 3: 10, 10: 23, 23: 15,
                           7: 1, 1: 18, 18: 21, 21: 7,
                           8: 9, 9: 17, 17: 16, 16: 8})

MOVE_F = PermutationState({6: 7, 7: 15, 15: 14, 14: 6,
                           2: 8, 8: 21, 21: 13, 13: 2,
                           3: 16, 16: 20, 20: 5, 5: 3})

FACES = [("R", MOVE_R), ("U", MOVE_U), ("F", MOVE_F)]

# Scripted scramble (half-turn metric) and the depth it is searched at
DEFAULT_SCRAMBLE = "R U R' U R U2 R"
DEFAULT_DEPTH = 7


def quarter_turn_moves() -> MoveSet:
    """[R, R', U, U', F, F']"""
    out = []
    for name, state in FACES:
        out.append(Move(name, state))
        out.append(Move(name + "'", state.inverse()))
    return out


def half_turn_moves() -> MoveSet:
    """[R, R2, R', U, U2, U', F, F2, F'] with X2 = X·X and X' = X·X·X."""
    out = []
    for name, state in FACES:
        out.append(Move(name, state))
        out.append(Move(name + "2", power(state, 2)))
        out.append(Move(name + "'", power(state, 3)))
    return out


MOVE_SETS: Dict[str, Callable[[], MoveSet]] = {
    "qtm": quarter_turn_moves,
    "htm": half_turn_moves,
}


def get_move_set(name: str) -> MoveSet:
    """Build a named move set ('qtm' or 'htm')."""
    if name not in MOVE_SETS:
        raise ValueError(f"Unknown move set {name!r}, expected one of {sorted(MOVE_SETS)}")
    return MOVE_SETS[name]()


def scrambled_state(move_set: MoveSet, scramble: str, n: int = N_FACELETS) -> PermutationState:
    """Solved state of n positions with the scramble applied."""
    return apply_moves(PermutationState.identity(n), move_set, parse_moves(scramble, move_set))
