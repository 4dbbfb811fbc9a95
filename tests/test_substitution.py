"""Unit tests for substitution matrices."""

from __future__ import annotations

import pytest

from seqprob.types.alphabet import ALPHA_BLOSUM62, ALPHA_DNA, ALPHA_RNA, Alphabet
from seqprob.types.substitution import (
    MAT_BLOSUM62,
    MAT_DNA,
    MAT_RNA,
    SubstMatrix,
    load_subst_matrix,
    parse_subst_matrix,
)

SMALL = """
# toy matrix
   A  B  -
A  2 -1 -3
B -1  2 -3
- -3 -3 -3
"""


def test_blosum62_known_scores():
    """Spot-check well-known BLOSUM62 entries."""
    assert MAT_BLOSUM62.alphabet == ALPHA_BLOSUM62
    assert MAT_BLOSUM62("A", "A") == 4
    assert MAT_BLOSUM62("W", "W") == 11
    assert MAT_BLOSUM62("C", "C") == 9
    assert MAT_BLOSUM62("W", "F") == 1
    assert MAT_BLOSUM62("D", "E") == 2
    assert MAT_BLOSUM62("B", "D") == 4
    assert MAT_BLOSUM62("I", "V") == 3
    assert MAT_BLOSUM62("A", "-") == -4
    assert MAT_BLOSUM62.gap_penalty == -4
    assert MAT_BLOSUM62.is_symmetric()


def test_nucleotide_matrices():
    """DNA and RNA matrices share scores over their own alphabets."""
    assert MAT_DNA.alphabet == ALPHA_DNA
    assert MAT_RNA.alphabet == ALPHA_RNA
    assert MAT_DNA("A", "A") == 5
    assert MAT_DNA("A", "G") == -4
    assert MAT_DNA("N", "T") == -2
    assert MAT_RNA("U", "U") == 5
    assert MAT_DNA.gap_penalty == MAT_RNA.gap_penalty == -8
    assert MAT_DNA.is_symmetric() and MAT_RNA.is_symmetric()


def test_unknown_residue_raises():
    """Residues outside the alphabet are an error, not the first row."""
    with pytest.raises(ValueError):
        MAT_DNA("A", "U")
    with pytest.raises(ValueError):
        MAT_BLOSUM62("J", "A")


def test_scores_are_read_only():
    """Predefined matrices are shared and cannot be changed in place."""
    with pytest.raises(ValueError):
        MAT_DNA.scores[0, 0] = 100


def test_shape_must_match_alphabet():
    """The score matrix must be square over the alphabet."""
    with pytest.raises(ValueError):
        SubstMatrix(Alphabet("AB"), [[1, 2, 3], [4, 5, 6]])


def test_parse_and_reorder():
    """Parsed matrices can be laid out in any residue order."""
    matrix = parse_subst_matrix(SMALL)
    assert str(matrix.alphabet) == "AB-"
    assert matrix("A", "B") == -1
    assert matrix.gap_penalty == -3

    reordered = matrix.reorder(Alphabet("-BA"))
    assert reordered.scores.tolist() == [[-3, -3, -3], [-3, 2, -1], [-3, -1, 2]]
    assert reordered("A", "B") == matrix("A", "B")


def test_parse_aliases():
    """Aliases rename residues while parsing."""
    text = "   A  *\nA  2 -3\n* -3 -5\n"
    matrix = parse_subst_matrix(text, aliases={"*": "-"})
    assert str(matrix.alphabet) == "A-"
    assert matrix("-", "-") == -5


@pytest.mark.parametrize(
    "text",
    [
        "",
        "   A  B\nA  1  2\n",
        "   A  B\nA  1\nB  1  2\n",
        "   A  B\nA  1  x\nB  1  2\n",
    ],
)
def test_parse_rejects_malformed_matrices(text):
    """Missing rows, short rows and non-integers are rejected."""
    with pytest.raises(ValueError):
        parse_subst_matrix(text)


def test_load_from_file(tmp_path):
    """Matrices can be read from NCBI-format files."""
    path = tmp_path / "toy.mat"
    path.write_text(SMALL, encoding="utf-8")
    matrix = load_subst_matrix(path)
    assert matrix("B", "B") == 2
