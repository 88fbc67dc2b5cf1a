"""
Permutation Solver

Sparse permutation algebra and iterative-deepening search for
piece-permutation puzzles (2x2x2 cube move tables included).
"""

from .permutation import (
    PermutationState, compose,
    from_cycles, power, to_array, from_array,
    agrees_on, is_bijective
)
from .types import Move, MoveSet, SearchNode, SolveResult
from .search import (
    apply_moves,
    bounded_search,
    iterative_deepening,
    solve_with_iddfs,
    solve_at_depth
)
from .utils import (
    format_moves, parse_moves, residual,
    state_sha, moves_sha,
    load_move_table, log_receipt
)
from .moves import (
    N_FACELETS, MOVE_U, MOVE_R, MOVE_F,
    DEFAULT_SCRAMBLE, DEFAULT_DEPTH,
    quarter_turn_moves, half_turn_moves,
    MOVE_SETS, get_move_set, scrambled_state
)

__all__ = [
    # Permutation
    'PermutationState', 'compose',
    'from_cycles', 'power', 'to_array', 'from_array',
    'agrees_on', 'is_bijective',

    # Types
    'Move', 'MoveSet', 'SearchNode', 'SolveResult',

    # Search
    'apply_moves',
    'bounded_search',
    'iterative_deepening',
    'solve_with_iddfs',
    'solve_at_depth',

    # Utils
    'format_moves', 'parse_moves', 'residual',
    'state_sha', 'moves_sha',
    'load_move_table', 'log_receipt',

    # Moves
    'N_FACELETS', 'MOVE_U', 'MOVE_R', 'MOVE_F',
    'DEFAULT_SCRAMBLE', 'DEFAULT_DEPTH',
    'quarter_turn_moves', 'half_turn_moves',
    'MOVE_SETS', 'get_move_set', 'scrambled_state',
]
