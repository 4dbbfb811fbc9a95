"""Needleman-Wunsch global alignment with a linear gap penalty."""

from __future__ import annotations

import logging
from typing import Dict, List, Sequence as SequenceLike, Tuple

import numpy as np

from seqprob.algorithms.base import PairwiseAligner
from seqprob.types import Alignment, AlignmentResult
from seqprob.types.alignment import SubstFunc
from seqprob.types.alphabet import GAP

logger = logging.getLogger(__name__)


class TracebackError(RuntimeError):
    """Raised when traceback reaches a cell with no optimal predecessor.

    This can only happen if the score matrix was built inconsistently with the
    scoring function, so it signals a bug rather than bad input.
    """

    def __init__(self, row: int, col: int) -> None:
        super().__init__(f"BUG in Needleman-Wunsch: no path at ({row}, {col})")
        self.row = row
        self.col = col


def _residue_codes(residues: SequenceLike[str]) -> Tuple[Dict[str, int], np.ndarray]:
    """Map each distinct residue to a code, in order of first appearance."""
    codes: Dict[str, int] = {}
    for residue in residues:
        codes.setdefault(residue, len(codes))
    return codes, np.fromiter(
        (codes[r] for r in residues), dtype=np.int64, count=len(residues)
    )


class NeedlemanWunschAligner(PairwiseAligner):
    """Optimal global alignment of a query against a reference.

    Rows of the score matrix correspond to reference residues, columns to
    query residues. The gap penalty is ``subst('-', '-')`` and is charged
    uniformly for every gap column.
    """

    def __init__(self, subst: SubstFunc) -> None:
        self.subst = subst
        self.gap_penalty = int(subst(GAP, GAP))

    def _substitution_scores(
        self, ref: SequenceLike[str], query: SequenceLike[str]
    ) -> np.ndarray:
        """Return ``S[i, j] = subst(ref[i], query[j])``.

        The substitution function is called once per distinct residue pair.
        """
        ref_codes, ref_idx = _residue_codes(ref)
        query_codes, query_idx = _residue_codes(query)
        pair_scores = np.array(
            [[int(self.subst(a, b)) for b in query_codes] for a in ref_codes],
            dtype=np.int64,
        ).reshape(len(ref_codes), len(query_codes))
        return pair_scores[np.ix_(ref_idx, query_idx)]

    def _fill_matrix(self, sub: np.ndarray) -> np.ndarray:
        """Fill the (n+1) x (m+1) score matrix one row at a time."""
        n, m = sub.shape
        gap = self.gap_penalty
        matrix = np.empty((n + 1, m + 1), dtype=np.int64)
        matrix[:, 0] = gap * np.arange(n + 1)
        matrix[0, :] = gap * np.arange(m + 1)

        # Horizontal gaps run along a row: M[i, j] is the best of
        # row[k] + (j - k) * gap over k <= j, so a running maximum of
        # row[k] - k * gap gives every cell of the row at once.
        steps = gap * np.arange(m + 1)
        row = np.empty(m + 1, dtype=np.int64)
        for i in range(1, n + 1):
            prev = matrix[i - 1]
            row[0] = matrix[i, 0]
            np.maximum(prev[:-1] + sub[i - 1], prev[1:] + gap, out=row[1:])
            matrix[i] = np.maximum.accumulate(row - steps) + steps
        return matrix

    def _traceback(
        self,
        matrix: np.ndarray,
        sub: np.ndarray,
        ref: SequenceLike[str],
        query: SequenceLike[str],
    ) -> Alignment:
        """Trace an optimal path from the bottom-right corner back to the origin.

        Ties are broken in a fixed order: diagonal, then a gap in the query
        (consume the reference), then a gap in the reference.
        """
        scores: List[List[int]] = matrix.tolist()
        subs: List[List[int]] = sub.tolist()
        gap = self.gap_penalty
        aligned_ref: List[str] = []
        aligned_query: List[str] = []

        i, j = len(ref), len(query)
        while i > 0 or j > 0:
            here = scores[i][j]
            if i > 0 and j > 0 and here == scores[i - 1][j - 1] + subs[i - 1][j - 1]:
                aligned_ref.append(ref[i - 1])
                aligned_query.append(query[j - 1])
                i -= 1
                j -= 1
            elif i > 0 and here == scores[i - 1][j] + gap:
                aligned_ref.append(ref[i - 1])
                aligned_query.append(GAP)
                i -= 1
            elif j > 0 and here == scores[i][j - 1] + gap:
                aligned_ref.append(GAP)
                aligned_query.append(query[j - 1])
                j -= 1
            else:
                raise TracebackError(i, j)

        aligned_ref.reverse()
        aligned_query.reverse()
        return Alignment(reference=aligned_ref, query=aligned_query)

    def align(
        self,
        reference: SequenceLike[str],
        query: SequenceLike[str],
    ) -> AlignmentResult:
        """Compute an optimal global alignment and its score."""
        sub = self._substitution_scores(reference, query)
        matrix = self._fill_matrix(sub)
        alignment = self._traceback(matrix, sub, reference, query)
        score = int(matrix[-1, -1])
        logger.debug(
            "Aligned %d x %d residues: %d columns, score %d",
            len(reference),
            len(query),
            alignment.columns,
            score,
        )
        return AlignmentResult(alignment=alignment, score=score)


def needleman_wunsch(
    reference: SequenceLike[str], query: SequenceLike[str], subst: SubstFunc
) -> Alignment:
    """Globally align ``query`` against ``reference`` under ``subst``."""
    return NeedlemanWunschAligner(subst).align(reference, query).alignment


__all__ = ["NeedlemanWunschAligner", "TracebackError", "needleman_wunsch"]
