"""Alignment types."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Tuple

from .alphabet import GAP

SubstFunc = Callable[[str, str], int]


@dataclass(frozen=True)
class Alignment:
    """Global alignment of a reference and a query, gaps included."""

    reference: Tuple[str, ...]
    query: Tuple[str, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "reference", tuple(self.reference))
        object.__setattr__(self, "query", tuple(self.query))
        if len(self.reference) != len(self.query):
            raise ValueError(
                "reference and query must have the same length, got "
                f"{len(self.reference)} and {len(self.query)}."
            )

    @property
    def columns(self) -> int:
        """Number of columns in the alignment."""
        return len(self.reference)

    def __len__(self) -> int:
        return self.columns

    def __str__(self) -> str:
        return f"{''.join(self.reference)}\n{''.join(self.query)}"

    def gaps(self) -> int:
        """Number of columns with a gap in either row."""
        return sum(1 for a, b in zip(self.reference, self.query) if GAP in (a, b))

    def score(self, subst: SubstFunc) -> int:
        """Sum of column scores, charging ``subst('-', '-')`` for every gap column.

        This matches the aligner's score only when neither input sequence
        contains ``-``. The aligner scores an input ``-`` paired with a
        residue ``x`` as ``subst('-', x)``, and an aligned row does not record
        which gaps came from the input.
        """
        gap_penalty = subst(GAP, GAP)
        total = 0
        for a, b in zip(self.reference, self.query):
            if a == GAP or b == GAP:
                total += gap_penalty
            else:
                total += subst(a, b)
        return total

    def transpose(self) -> "Alignment":
        """Swap reference and query."""
        return Alignment(reference=self.query, query=self.reference)


@dataclass(frozen=True)
class AlignmentResult:
    """Result of a pairwise alignment algorithm.

    Attributes:
        alignment: The pairwise alignment of two sequences
        score: The optimal score found by the dynamic program
    """

    alignment: Alignment
    score: int


__all__ = ["Alignment", "AlignmentResult", "SubstFunc"]
