"""
Utility functions for Permutation Solver.
"""

import numpy as np
import json
import hashlib
from typing import List, Dict, Sequence
from pathlib import Path
from datetime import datetime

from .permutation import PermutationState, from_cycles, to_array, is_bijective
from .types import Move, MoveSet


# ==============================================================================
# Move notation
# ==============================================================================

def format_moves(indices: Sequence[int], move_set: MoveSet) -> str:
    """Render generator indices as space-separated move names."""
    return " ".join(move_set[i].name for i in indices)


def parse_moves(text: str, move_set: MoveSet) -> List[int]:
    """
    Parse space-separated move names into generator indices.

    The first move with a given name wins when names repeat.

    Raises:
        ValueError on a name not present in move_set
    """
    index = {}
    for i, move in enumerate(move_set):
        index.setdefault(move.name, i)

    out = []
    for token in text.split():
        if token not in index:
            raise ValueError(f"Unknown move {token!r}, expected one of {sorted(index)}")
        out.append(index[token])
    return out


# ==============================================================================
# Residual
# ==============================================================================

def residual(state: PermutationState, n: int) -> int:
    """Number of positions in 0..n-1 not holding their own piece."""
    return int((to_array(state, n) != np.arange(n)).sum())


# ==============================================================================
# Hash functions for receipts
# ==============================================================================

def state_sha(state: PermutationState) -> str:
    """SHA-256 of the stored (position, piece) pairs."""
    payload = sorted([int(i), int(j)] for i, j in state.elements.items())
    return hashlib.sha256(json.dumps(payload).encode()).hexdigest()


def moves_sha(indices: Sequence[int], move_set: MoveSet) -> str:
    """SHA-256 of a move sequence, by name."""
    payload = [move_set[i].name for i in indices]
    return hashlib.sha256(json.dumps(payload).encode()).hexdigest()


# ==============================================================================
# Move tables
# ==============================================================================

def _parse_move_entry(name: str, entry) -> PermutationState:
    # Cycle form: [[0, 1, 3, 2], ...]; mapping form: {"0": 1, ...}
    if isinstance(entry, list):
        for cycle in entry:
            if not isinstance(cycle, list) or not all(isinstance(v, int) for v in cycle):
                raise ValueError(f"Move {name!r}: cycles must be lists of ints, got {cycle!r}")
        return from_cycles(entry)
    if isinstance(entry, dict):
        try:
            return PermutationState({int(k): int(v) for k, v in entry.items()})
        except (TypeError, ValueError) as e:
            raise ValueError(f"Move {name!r}: mapping must be position -> piece ints ({e})") from e
    raise ValueError(f"Move {name!r}: expected cycle list or mapping, got {type(entry).__name__}")


def load_move_table(path: str, validate: bool = False) -> MoveSet:
    """
    Load a move set from JSON.

    Format:
        {"moves": {"U": [[0, 1, 3, 2], ...], "R'": {"3": 15, ...}}}

    Moves keep file order. With validate=True, moves that are not
    bijective over their own domain are rejected.

    Raises:
        ValueError on a malformed table
    """
    with open(path) as f:
        table = json.load(f)

    if not isinstance(table, dict) or not isinstance(table.get("moves"), dict):
        raise ValueError(f"{path}: expected an object with a 'moves' mapping")
    if len(table["moves"]) == 0:
        raise ValueError(f"{path}: move table is empty")

    move_set = []
    for name, entry in table["moves"].items():
        state = _parse_move_entry(name, entry)
        if validate and not is_bijective(state):
            raise ValueError(f"{path}: move {name!r} is not a bijection over its positions")
        move_set.append(Move(name, state))
    return move_set


# ==============================================================================
# Receipt logging
# ==============================================================================

def log_receipt(record: Dict, out_dir: str = None) -> None:
    """
    Write receipt record to JSONL file.

    Args:
        record: Dictionary with receipt data
        out_dir: Output directory (default: runs/YYYY-MM-DD)
    """
    if out_dir is None:
        date_str = datetime.now().strftime("%Y-%m-%d")
        out_dir = f"runs/{date_str}"

    Path(out_dir).mkdir(parents=True, exist_ok=True)
    receipt_path = Path(out_dir) / "receipts.jsonl"

    with open(receipt_path, "a") as f:
        f.write(json.dumps(record, sort_keys=True) + "\n")
