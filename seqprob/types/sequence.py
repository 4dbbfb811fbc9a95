"""Sequence types."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional, Tuple

from .parameters import HMMState


@dataclass(frozen=True)
class Sequence:
    """Generic biological sequence: DNA, RNA, amino acid, secondary structure, etc."""

    identifier: str
    residues: Tuple[str, ...]
    description: Optional[str] = None

    def __post_init__(self) -> None:
        residues = tuple(self.residues)
        bad = sorted({r for r in residues if len(r) != 1 or ord(r) > 255})
        if bad:
            raise ValueError(f"Residues must be single-byte characters, got {bad}")
        object.__setattr__(self, "residues", residues)

    @classmethod
    def from_string(
        cls, identifier: str, text: str, description: Optional[str] = None
    ) -> "Sequence":
        return cls(identifier=identifier, residues=tuple(text), description=description)

    def __len__(self) -> int:
        return len(self.residues)

    def __iter__(self) -> Iterator[str]:
        return iter(self.residues)

    def __getitem__(self, pos: int) -> str:
        return self.residues[pos]

    def __str__(self) -> str:
        return "".join(self.residues)

    def copy(self) -> "Sequence":
        return Sequence(self.identifier, self.residues, self.description)

    def slice(self, start: int, end: int) -> "Sequence":
        """Return residues ``[start, end)`` under the same identifier."""
        return Sequence(self.identifier, self.residues[start:end], self.description)

    def to_bytes(self) -> bytes:
        return "".join(self.residues).encode("latin-1")

    def is_null(self) -> bool:
        """True if the sequence has neither an identifier nor residues."""
        return not self.identifier and not self.residues


def residue_hmm_state(residue: str) -> HMMState:
    """Classify a residue from an A2M-formatted alignment row.

    ``-`` is a deletion, ``.`` and lowercase letters are insertions, and
    everything else is treated as a match.
    """
    if residue == "-":
        return HMMState.DELETION
    if residue == "." or "a" <= residue <= "z":
        return HMMState.INSERTION
    return HMMState.MATCH


__all__ = ["Sequence", "residue_hmm_state"]
