"""Ordered residue alphabets."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator, Tuple

import numpy as np

NOT_PRESENT = -1
GAP = "-"


def _check_residue(residue: str) -> None:
    if not isinstance(residue, str) or len(residue) != 1 or ord(residue) > 255:
        raise ValueError(f"Residues must be single-byte characters, got {residue!r}")


@dataclass(frozen=True)
class Alphabet:
    """Ordered set of residues.

    The order is significant: indices in an alphabet correspond to indices in
    emission tables and substitution matrices built from it. Duplicate residues
    are not rejected; use ``has_duplicates`` when the source is untrusted.
    """

    residues: Tuple[str, ...]
    _index: np.ndarray = field(init=False, repr=False, compare=False)

    def __init__(self, residues: Iterable[str]) -> None:
        residues = tuple(residues)
        for residue in residues:
            _check_residue(residue)
        object.__setattr__(self, "residues", residues)

        index = np.full(256, NOT_PRESENT, dtype=np.int64)
        for pos, residue in enumerate(residues):
            index[ord(residue)] = pos
        index.setflags(write=False)
        object.__setattr__(self, "_index", index)

    def __len__(self) -> int:
        return len(self.residues)

    def __iter__(self) -> Iterator[str]:
        return iter(self.residues)

    def __getitem__(self, pos: int) -> str:
        return self.residues[pos]

    def __contains__(self, residue: object) -> bool:
        return isinstance(residue, str) and self.position(residue) != NOT_PRESENT

    def __str__(self) -> str:
        return "".join(self.residues)

    def index(self) -> np.ndarray:
        """Return the 256-entry byte -> position map.

        Bytes that are not in the alphabet map to ``NOT_PRESENT``. The array is
        read-only and shared by every caller.
        """
        return self._index

    def position(self, residue: str) -> int:
        """Return the position of ``residue`` or ``NOT_PRESENT``."""
        code = ord(residue)
        if code > 255:
            return NOT_PRESENT
        return int(self._index[code])

    def equals(self, other: "Alphabet") -> bool:
        return self.residues == other.residues

    def has_duplicates(self) -> bool:
        return len(set(self.residues)) != len(self.residues)


ALPHA_BLOSUM62 = Alphabet("ABCDEFGHIKLMNPQRSTVWXYZ-")
ALPHA_DNA = Alphabet("ACGTN-")
ALPHA_RNA = Alphabet("ACGUN-")


__all__ = [
    "Alphabet",
    "NOT_PRESENT",
    "GAP",
    "ALPHA_BLOSUM62",
    "ALPHA_DNA",
    "ALPHA_RNA",
]
