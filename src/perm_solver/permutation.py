#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Permutation Solver - Permutation State
=======================================

Sparse permutation of integer positions:
- elements: position -> piece, only positions of interest are stored
- unlisted positions are implicitly fixed (identity)

Composition reads "apply self, then rhs" and only ever iterates the domain of
the left operand. Identity entries produced by composition are kept.
Bijectivity is assumed, never checked, by the algebra itself.
"""

import numpy as np
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Sequence


@dataclass
class PermutationState:
    """Sparse mapping position -> piece."""
    elements: Dict[int, int] = field(default_factory=dict)

    @classmethod
    def empty(cls) -> "PermutationState":
        """State with no stored entries (accumulator target, not a general identity)."""
        return cls({})

    @classmethod
    def identity(cls, n: int) -> "PermutationState":
        """Dense identity over positions 0..n-1."""
        return cls({i: i for i in range(n)})

    def is_solved(self) -> bool:
        """True iff every stored position holds its own piece."""
        return all(i == j for i, j in self.elements.items())

    def inverse(self) -> "PermutationState":
        """
        Swap every stored (position, piece) pair.

        Only meaningful for bijective states: duplicate pieces silently
        overwrite each other.
        """
        return PermutationState({j: i for i, j in self.elements.items()})

    def compose(self, rhs: "PermutationState") -> "PermutationState":
        """
        Apply self, then rhs.

        For each stored (i, j) of self the result maps i to rhs[j] when rhs
        stores j, otherwise to j. Positions only stored in rhs are dropped.
        """
        rhs_elements = rhs.elements
        return PermutationState({i: rhs_elements.get(j, j) for i, j in self.elements.items()})

    def __len__(self) -> int:
        return len(self.elements)


def compose(p: PermutationState, q: PermutationState) -> PermutationState:
    """Compose two states: (p; q), neither operand is modified."""
    return p.compose(q)


def from_cycles(cycles: Iterable[Sequence[int]]) -> PermutationState:
    """
    Build a state from literal cycles.

    [a, b, c, d] stores a -> b, b -> c, c -> d, d -> a. Cycles are not checked
    for overlap; a later cycle overwrites an earlier entry.
    """
    elements = {}
    for cycle in cycles:
        for k, pos in enumerate(cycle):
            elements[pos] = cycle[(k + 1) % len(cycle)]
    return PermutationState(elements)


def power(state: PermutationState, k: int) -> PermutationState:
    """state composed with itself k times; k=0 fixes every stored position."""
    assert k >= 0, f"k must be non-negative, got {k}"
    result = PermutationState({i: i for i in state.elements})
    for _ in range(k):
        result = result.compose(state)
    return result


def to_array(state: PermutationState, n: int) -> np.ndarray:
    """Dense image vector of length n, identity on unlisted positions."""
    arr = np.arange(n, dtype=int)
    for i, j in state.elements.items():
        if i < n:
            arr[i] = j
    return arr


def from_array(arr) -> PermutationState:
    """Dense state from a 1-D integer array of images."""
    return PermutationState({i: int(j) for i, j in enumerate(np.asarray(arr, dtype=int).tolist())})


def agrees_on(p: PermutationState, q: PermutationState, domain: Iterable[int]) -> bool:
    """Check that p and q send every position of domain to the same piece."""
    return all(p.elements.get(i, i) == q.elements.get(i, i) for i in domain)


def is_bijective(state: PermutationState) -> bool:
    """Stored images are distinct and cover exactly the stored domain."""
    images: List[int] = list(state.elements.values())
    return len(set(images)) == len(images) and set(images) == set(state.elements)
