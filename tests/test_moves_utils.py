"""
Tests for the 2x2x2 move tables, move notation, receipts and move-table loading.
"""

import json
import os
import sys
import tempfile

import pytest

# Add src to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from perm_solver import (
    PermutationState,
    MOVE_R, MOVE_U, MOVE_F, N_FACELETS,
    DEFAULT_SCRAMBLE, DEFAULT_DEPTH,
    quarter_turn_moves, half_turn_moves, get_move_set, scrambled_state,
    apply_moves, agrees_on,
    format_moves, parse_moves, residual,
    state_sha, moves_sha, load_move_table, log_receipt
)


# ==============================================================================
# Move sets
# ==============================================================================

def test_quarter_turn_layout():
    move_set = quarter_turn_moves()
    assert [m.name for m in move_set] == ["R", "R'", "U", "U'", "F", "F'"]
    assert move_set[0].state.elements == MOVE_R.elements
    assert move_set[3].state.elements == MOVE_U.inverse().elements


def test_half_turn_layout():
    move_set = half_turn_moves()
    assert [m.name for m in move_set] == ["R", "R2", "R'", "U", "U2", "U'", "F", "F2", "F'"]
    ident = PermutationState.identity(N_FACELETS)
    assert agrees_on(move_set[2].state, MOVE_R.inverse(), range(N_FACELETS))
    assert agrees_on(move_set[7].state, MOVE_F.compose(MOVE_F), range(N_FACELETS))
    assert ident.compose(move_set[4].state).compose(move_set[4].state).is_solved()


def test_get_move_set_unknown():
    assert len(get_move_set("qtm")) == 6
    assert len(get_move_set("htm")) == 9
    with pytest.raises(ValueError):
        get_move_set("stm")


def test_default_scramble_indices():
    """Scripted scramble R U R' U R U2 R in half-turn indices."""
    move_set = half_turn_moves()
    assert parse_moves(DEFAULT_SCRAMBLE, move_set) == [0, 3, 2, 3, 0, 4, 0]
    assert DEFAULT_DEPTH == 7


def test_default_scramble_undone_by_inverse():
    """The reversed, inverted scramble solves it at the scripted depth."""
    move_set = half_turn_moves()
    start = scrambled_state(move_set, DEFAULT_SCRAMBLE)
    assert not start.is_solved()
    undo = parse_moves("R' U2 R' U' R U' R'", move_set)
    assert len(undo) == DEFAULT_DEPTH
    assert apply_moves(start, move_set, undo).is_solved()


def test_scrambled_state_is_dense():
    start = scrambled_state(quarter_turn_moves(), "R U")
    assert len(start) == N_FACELETS


# ==============================================================================
# Notation
# ==============================================================================

def test_format_and_parse_moves():
    move_set = quarter_turn_moves()
    assert format_moves([3, 1], move_set) == "U' R'"
    assert format_moves([], move_set) == ""
    assert parse_moves("U' R'", move_set) == [3, 1]
    assert parse_moves("  F   F' ", move_set) == [4, 5]
    assert parse_moves("", move_set) == []


def test_parse_unknown_move():
    with pytest.raises(ValueError, match="U2"):
        parse_moves("R U2", quarter_turn_moves())


# ==============================================================================
# Residual and hashes
# ==============================================================================

def test_residual():
    ident = PermutationState.identity(N_FACELETS)
    assert residual(ident, N_FACELETS) == 0
    assert residual(ident.compose(MOVE_R), N_FACELETS) == 12
    assert residual(PermutationState.empty(), N_FACELETS) == 0


def test_hashes_are_stable():
    move_set = quarter_turn_moves()
    a = scrambled_state(move_set, "R U")
    b = scrambled_state(move_set, "R U")
    assert state_sha(a) == state_sha(b)
    assert state_sha(a) != state_sha(scrambled_state(move_set, "U R"))
    assert moves_sha([3, 1], move_set) == moves_sha([3, 1], move_set)
    assert moves_sha([3, 1], move_set) != moves_sha([1, 3], move_set)


# ==============================================================================
# Move tables and receipts
# ==============================================================================

def _write_json(tmp, name, payload):
    path = os.path.join(tmp, name)
    with open(path, "w") as f:
        json.dump(payload, f)
    return path


def test_load_move_table_cycles_and_mapping():
    with tempfile.TemporaryDirectory() as tmp:
        path = _write_json(tmp, "moves.json", {
            "moves": {
                "U": [[0, 1, 3, 2], [7, 5, 11, 9], [6, 4, 10, 8]],
                "X": {"0": 1, "1": 0}
            }
        })
        move_set = load_move_table(path, validate=True)

    assert [m.name for m in move_set] == ["U", "X"]
    assert move_set[0].state.elements == MOVE_U.elements
    assert move_set[1].state.elements == {0: 1, 1: 0}


def test_load_move_table_validation():
    """Non-bijective moves load silently unless validation is requested."""
    with tempfile.TemporaryDirectory() as tmp:
        path = _write_json(tmp, "bad.json", {"moves": {"B": {"0": 2, "1": 2}}})
        assert load_move_table(path)[0].state.elements == {0: 2, 1: 2}
        with pytest.raises(ValueError, match="not a bijection"):
            load_move_table(path, validate=True)


def test_load_move_table_malformed():
    with tempfile.TemporaryDirectory() as tmp:
        for payload in [[], {"moves": {}}, {"moves": {"A": 3}}, {"moves": {"A": [[0, "x"]]}}]:
            path = _write_json(tmp, "m.json", payload)
            with pytest.raises(ValueError):
                load_move_table(path)


def test_log_receipt_appends_jsonl():
    with tempfile.TemporaryDirectory() as tmp:
        log_receipt({"status": "solved", "moves": ["U'", "R'"]}, out_dir=tmp)
        log_receipt({"status": "failed", "moves": []}, out_dir=tmp)
        with open(os.path.join(tmp, "receipts.jsonl")) as f:
            lines = [json.loads(line) for line in f]

    assert [r["status"] for r in lines] == ["solved", "failed"]
    assert lines[0]["moves"] == ["U'", "R'"]


def run_all_tests():
    """Run all move and utility tests."""
    print("Running Move & Utility Tests...")
    print("=" * 50)

    test_quarter_turn_layout()
    test_half_turn_layout()
    test_get_move_set_unknown()
    test_default_scramble_indices()
    test_default_scramble_undone_by_inverse()
    test_scrambled_state_is_dense()
    test_format_and_parse_moves()
    test_parse_unknown_move()
    test_residual()
    test_hashes_are_stable()
    test_load_move_table_cycles_and_mapping()
    test_load_move_table_validation()
    test_load_move_table_malformed()
    test_log_receipt_appends_jsonl()

    print("=" * 50)
    print("All tests passed! ✅")


if __name__ == "__main__":
    run_all_tests()
