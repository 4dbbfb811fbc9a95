"""Integer substitution matrices usable as alignment scoring functions."""

from __future__ import annotations

from typing import Dict, List, Optional, Sequence

import numpy as np

from .alphabet import ALPHA_BLOSUM62, ALPHA_DNA, ALPHA_RNA, GAP, NOT_PRESENT, Alphabet


class SubstMatrix:
    """Scores for aligning one residue against another.

    Instances are callable with a pair of residues, which makes them valid
    substitution functions for ``needleman_wunsch``. The gap penalty is the
    score of ``('-', '-')``.
    """

    def __init__(self, alphabet: Alphabet, scores: Sequence[Sequence[int]]) -> None:
        matrix = np.asarray(scores, dtype=np.int64)
        if matrix.shape != (len(alphabet), len(alphabet)):
            raise ValueError(
                f"Score matrix shape {matrix.shape} does not match alphabet "
                f"of size {len(alphabet)}"
            )
        matrix.setflags(write=False)
        self.alphabet = alphabet
        self.scores = matrix

    def __call__(self, a: str, b: str) -> int:
        i, j = self.alphabet.position(a), self.alphabet.position(b)
        if i == NOT_PRESENT or j == NOT_PRESENT:
            missing = a if i == NOT_PRESENT else b
            raise ValueError(
                f"Residue {missing!r} is not in alphabet '{self.alphabet}'"
            )
        return int(self.scores[i, j])

    def __repr__(self) -> str:
        return f"SubstMatrix(alphabet='{self.alphabet}')"

    @property
    def gap_penalty(self) -> int:
        return self(GAP, GAP)

    def is_symmetric(self) -> bool:
        return bool(np.array_equal(self.scores, self.scores.T))

    def reorder(self, alphabet: Alphabet) -> "SubstMatrix":
        """Return the same scores laid out in the order of ``alphabet``."""
        return SubstMatrix(
            alphabet, [[self(a, b) for b in alphabet] for a in alphabet]
        )


def parse_subst_matrix(
    text: str, aliases: Optional[Dict[str, str]] = None
) -> SubstMatrix:
    """Parse an NCBI-style labelled matrix.

    Lines starting with ``#`` are comments. The first remaining line holds the
    column residues; each following line starts with its row residue. Rows may
    come in any order but must cover the column residues. ``aliases`` renames
    residues while parsing, e.g. ``{"*": "-"}``.
    """
    aliases = aliases or {}
    lines: List[List[str]] = [
        line.split()
        for line in text.splitlines()
        if line.strip() and not line.lstrip().startswith("#")
    ]
    if not lines:
        raise ValueError("Substitution matrix text is empty")

    columns = [aliases.get(r, r) for r in lines[0]]
    rows: Dict[str, List[int]] = {}
    for fields in lines[1:]:
        residue = aliases.get(fields[0], fields[0])
        values = fields[1:]
        if len(values) != len(columns):
            raise ValueError(
                f"Row {residue!r} has {len(values)} scores, expected {len(columns)}"
            )
        try:
            rows[residue] = [int(v) for v in values]
        except ValueError as exc:
            raise ValueError(f"Row {residue!r} has a non-integer score") from exc

    missing = [r for r in columns if r not in rows]
    if missing:
        raise ValueError(f"Substitution matrix missing rows: {missing}")

    alphabet = Alphabet(columns)
    return SubstMatrix(alphabet, [rows[r] for r in columns])


def load_subst_matrix(path, aliases: Optional[Dict[str, str]] = None) -> SubstMatrix:
    """Read ``parse_subst_matrix`` text from a file."""
    with open(path, "r", encoding="utf-8") as handle:
        return parse_subst_matrix(handle.read(), aliases=aliases)


# '*' is read as the gap residue; its self-score is -4 so it doubles as the
# linear gap penalty.
_BLOSUM62 = """
#  Matrix made by matblas from blosum62.iij
   A  R  N  D  C  Q  E  G  H  I  L  K  M  F  P  S  T  W  Y  V  B  Z  X  *
A  4 -1 -2 -2  0 -1 -1  0 -2 -1 -1 -1 -1 -2 -1  1  0 -3 -2  0 -2 -1  0 -4
R -1  5  0 -2 -3  1  0 -2  0 -3 -2  2 -1 -3 -2 -1 -1 -3 -2 -3 -1  0 -1 -4
N -2  0  6  1 -3  0  0  0  1 -3 -3  0 -2 -3 -2  1  0 -4 -2 -3  3  0 -1 -4
D -2 -2  1  6 -3  0  2 -1 -1 -3 -4 -1 -3 -3 -1  0 -1 -4 -3 -3  4  1 -1 -4
C  0 -3 -3 -3  9 -3 -4 -3 -3 -1 -1 -3 -1 -2 -3 -1 -1 -2 -2 -1 -3 -3 -2 -4
Q -1  1  0  0 -3  5  2 -2  0 -3 -2  1  0 -3 -1  0 -1 -2 -1 -2  0  3 -1 -4
E -1  0  0  2 -4  2  5 -2  0 -3 -3  1 -2 -3 -1  0 -1 -3 -2 -2  1  4 -1 -4
G  0 -2  0 -1 -3 -2 -2  6 -2 -4 -4 -2 -3 -3 -2  0 -2 -2 -3 -3 -1 -2 -1 -4
H -2  0  1 -1 -3  0  0 -2  8 -3 -3 -1 -2 -1 -2 -1 -2 -2  2 -3  0  0 -1 -4
I -1 -3 -3 -3 -1 -3 -3 -4 -3  4  2 -3  1  0 -3 -2 -1 -3 -1  3 -3 -3 -1 -4
L -1 -2 -3 -4 -1 -2 -3 -4 -3  2  4 -2  2  0 -3 -2 -1 -2 -1  1 -4 -3 -1 -4
K -1  2  0 -1 -3  1  1 -2 -1 -3 -2  5 -1 -3 -1  0 -1 -3 -2 -2  0  1 -1 -4
M -1 -1 -2 -3 -1  0 -2 -3 -2  1  2 -1  5  0 -2 -1 -1 -1 -1  1 -3 -1 -1 -4
F -2 -3 -3 -3 -2 -3 -3 -3 -1  0  0 -3  0  6 -4 -2 -2  1  3 -1 -3 -3 -1 -4
P -1 -2 -2 -1 -3 -1 -1 -2 -2 -3 -3 -1 -2 -4  7 -1 -1 -4 -3 -2 -2 -1 -2 -4
S  1 -1  1  0 -1  0  0  0 -1 -2 -2  0 -1 -2 -1  4  1 -3 -2 -2  0  0  0 -4
T  0 -1  0 -1 -1 -1 -1 -2 -2 -1 -1 -1 -1 -2 -1  1  5 -2 -2  0 -1 -1  0 -4
W -3 -3 -4 -4 -2 -2 -3 -2 -2 -3 -2 -3 -1  1 -4 -3 -2 11  2 -3 -4 -3 -2 -4
Y -2 -2 -2 -3 -2 -1 -2 -3  2 -1 -1 -2 -1  3 -3 -2 -2  2  7 -1 -3 -2 -1 -4
V  0 -3 -3 -3 -1 -2 -2 -3 -3  3  1 -2  1 -1 -2 -2  0 -3 -1  4 -3 -2 -1 -4
B -2 -1  3  4 -3  0  1 -1  0 -3 -4  0 -3 -3 -2  0 -1 -4 -3 -3  4  1 -1 -4
Z -1  0  0  1 -3  3  4 -2  0 -3 -3  1 -1 -3 -1  0 -1 -3 -2 -2  1  4 -1 -4
X  0 -1 -1 -1 -2 -1 -1 -1 -1 -1 -1 -1 -1 -1 -2  0  0 -2 -1 -1 -1 -1 -1 -4
* -4 -4 -4 -4 -4 -4 -4 -4 -4 -4 -4 -4 -4 -4 -4 -4 -4 -4 -4 -4 -4 -4 -4 -4
"""

# Match +5, mismatch -4, N scores -2 against anything, gaps -8.
_NUCLEOTIDE = """
   {0}  {1}  {2}  {3}  N  -
{0}  5 -4 -4 -4 -2 -8
{1} -4  5 -4 -4 -2 -8
{2} -4 -4  5 -4 -2 -8
{3} -4 -4 -4  5 -2 -8
N -2 -2 -2 -2 -2 -8
- -8 -8 -8 -8 -8 -8
"""

MAT_BLOSUM62 = parse_subst_matrix(_BLOSUM62, aliases={"*": GAP}).reorder(ALPHA_BLOSUM62)
MAT_DNA = parse_subst_matrix(_NUCLEOTIDE.format(*"ACGT")).reorder(ALPHA_DNA)
MAT_RNA = parse_subst_matrix(_NUCLEOTIDE.format(*"ACGU")).reorder(ALPHA_RNA)

MATRICES: Dict[str, SubstMatrix] = {
    "blosum62": MAT_BLOSUM62,
    "dna": MAT_DNA,
    "rna": MAT_RNA,
}


__all__ = [
    "SubstMatrix",
    "parse_subst_matrix",
    "load_subst_matrix",
    "MAT_BLOSUM62",
    "MAT_DNA",
    "MAT_RNA",
    "MATRICES",
]
