"""
Emission and transition tables for Plan7 profile HMMs.

Emission tables are dense arrays of log-odds scores indexed by residue byte,
offset by the smallest byte in the alphabet. Transition tables carry the seven
transitions a Plan7 node allows; insertion <-> deletion moves do not exist in
this topology.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable, Iterator, Tuple

import numpy as np

from .alphabet import Alphabet
from .prob import MIN_PROB, Prob


class HMMState(IntEnum):
    """HMM states in the Plan7 architecture."""

    MATCH = 0
    DELETION = 1
    INSERTION = 2
    BEGIN = 3
    END = 4


# Begin and End are boundary markers and never occupy table storage.
HMM_STATES: Tuple[HMMState, HMMState, HMMState] = (
    HMMState.MATCH,
    HMMState.DELETION,
    HMMState.INSERTION,
)


class ResidueRangeError(ValueError):
    """Raised when a residue falls outside an emission table's byte span."""


class EProbs:
    """Emission probabilities, as log-odds scores, for the residues of an alphabet."""

    __slots__ = ("offset", "probs")

    # Tables are mutable, so they compare by value and are not hashable.
    __hash__ = None

    def __init__(self, alphabet: Alphabet) -> None:
        codes = [ord(r) for r in alphabet]
        if codes:
            self.offset = min(codes)
            span = 1 + max(codes) - self.offset
        else:
            self.offset, span = 0, 0
        self.probs = np.full(span, MIN_PROB, dtype=np.float64)

    def __len__(self) -> int:
        return len(self.probs)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EProbs):
            return NotImplemented
        return self.offset == other.offset and np.array_equal(self.probs, other.probs)

    def __repr__(self) -> str:
        body = ", ".join(f"{r}: {p}" for r, p in self.items())
        return f"EProbs({{{body}}})"

    def lookup(self, residue: str) -> Prob:
        """Return the emission score of ``residue``.

        Residues outside the table's span score as ``MIN_PROB``.
        """
        i = ord(residue) - self.offset
        if i < 0 or i >= len(self.probs):
            return MIN_PROB
        return Prob(self.probs[i])

    def lookup_many(self, residues: Iterable[str]) -> np.ndarray:
        """Vectorized ``lookup`` over a run of residues."""
        codes = np.fromiter((ord(r) for r in residues), dtype=np.int64)
        idx = codes - self.offset
        inside = (idx >= 0) & (idx < len(self.probs))
        out = np.full(len(codes), MIN_PROB, dtype=np.float64)
        out[inside] = self.probs[idx[inside]]
        return out

    def set(self, residue: str, prob: float) -> None:
        """Set the emission score of ``residue``.

        Raises:
            ResidueRangeError: if the residue lies outside the table's span.
        """
        i = ord(residue) - self.offset
        if i < 0 or i >= len(self.probs):
            lo = chr(self.offset) if len(self.probs) else ""
            hi = chr(self.offset + len(self.probs) - 1) if len(self.probs) else ""
            raise ResidueRangeError(
                f"Residue {residue!r} is outside the alphabet range [{lo!r}, {hi!r}]"
            )
        self.probs[i] = prob

    def items(self) -> Iterator[Tuple[str, Prob]]:
        """Yield ``(residue, prob)`` for every byte in the table's span."""
        for i, p in enumerate(self.probs):
            yield chr(self.offset + i), Prob(p)

    def copy(self) -> "EProbs":
        clone = EProbs.__new__(EProbs)
        clone.offset = self.offset
        clone.probs = self.probs.copy()
        return clone


@dataclass(frozen=True)
class TProbs:
    """Transition probabilities, as log-odds scores. I->D and D->I are omitted."""

    mm: float = MIN_PROB
    mi: float = MIN_PROB
    md: float = MIN_PROB
    im: float = MIN_PROB
    ii: float = MIN_PROB
    dm: float = MIN_PROB
    dd: float = MIN_PROB


TRANSITION_FIELDS: Tuple[str, ...] = ("mm", "mi", "md", "im", "ii", "dm", "dd")


__all__ = [
    "HMMState",
    "HMM_STATES",
    "EProbs",
    "TProbs",
    "TRANSITION_FIELDS",
    "ResidueRangeError",
]
