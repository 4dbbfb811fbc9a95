"""Tests for the command-line tools."""

from __future__ import annotations

from pathlib import Path

import pytest

from scripts import align_pair, score_hmm
from seqprob.algorithms.hmm import HMM, HMMNode
from seqprob.types.alphabet import Alphabet
from seqprob.types.parameters import EProbs, TProbs
from seqprob.types.substitution import MAT_BLOSUM62
from seqprob.utils.serialization import save_hmm


def _perfect_hmm(num_nodes: int) -> HMM:
    alpha = Alphabet("X")
    nodes = []
    for n in range(num_nodes):
        match = EProbs(alpha)
        match.set("X", 0.0)
        nodes.append(
            HMMNode(
                residue="X",
                node_num=n + 1,
                ins_emit=EProbs(alpha),
                mat_emit=match,
                transitions=TProbs(mm=0.0, im=0.0, dm=0.0),
            )
        )
    return HMM(nodes, alpha)


def test_score_hmm_prints_scores(tmp_path, capsys):
    """Each sequence gets a score line; impossible ones print '*'."""
    model = tmp_path / "model.yaml"
    save_hmm(_perfect_hmm(2), model)
    fasta = tmp_path / "seqs.fa"
    fasta.write_text(">good\nXX\n>bad\nXXX\n>short\nX\n", encoding="utf-8")

    assert score_hmm.main([str(model), str(fasta)]) == 0
    lines = capsys.readouterr().out.strip().splitlines()
    scores = dict(line.split("\t") for line in lines)
    assert {k.strip(): v for k, v in scores.items()} == {
        "good": "0.000000",
        "bad": "*",
        "short": "*",
    }


def test_score_hmm_missing_model(tmp_path):
    """A missing model file is reported."""
    fasta = tmp_path / "seqs.fa"
    fasta.write_text(">a\nX\n", encoding="utf-8")
    with pytest.raises(FileNotFoundError):
        score_hmm.main([str(tmp_path / "absent.yaml"), str(fasta)])


def test_align_pair_prints_alignment(tmp_path, capsys):
    """The first two records are aligned with the chosen matrix."""
    fasta = tmp_path / "pair.fa"
    fasta.write_text(">ref\nACGTTGCA\n>qry\nACGTGCA\n", encoding="utf-8")

    assert align_pair.main([str(fasta), "--matrix", "dna"]) == 0
    out = capsys.readouterr().out
    assert "ref: " in out and "qry: " in out
    assert "Score: " in out


def test_align_pair_needs_two_sequences(tmp_path):
    """A single record cannot be aligned."""
    fasta = tmp_path / "one.fa"
    fasta.write_text(">only\nACGT\n", encoding="utf-8")
    with pytest.raises(ValueError):
        align_pair.main([str(fasta)])


def test_resolve_matrix(tmp_path):
    """Matrices resolve by name or from a file."""
    assert align_pair.resolve_matrix("BLOSUM62") is MAT_BLOSUM62

    path = tmp_path / "toy.mat"
    path.write_text("   A  *\nA  1 -2\n* -2 -2\n", encoding="utf-8")
    matrix = align_pair.resolve_matrix(str(path))
    assert matrix.gap_penalty == -2

    with pytest.raises(FileNotFoundError):
        align_pair.resolve_matrix(str(tmp_path / "missing.mat"))


def test_constants_are_all_used_by_the_tools():
    """Every shared constant is consumed by at least one command-line tool."""
    from scripts import constants

    public = {name for name in vars(constants) if name.isupper()}
    used = set(vars(align_pair)) | set(vars(score_hmm))
    assert public
    assert public <= used


def test_pyproject_does_not_publish_design_notes():
    """The package metadata carries no long description from the design ledger."""
    pyproject = Path(__file__).resolve().parent.parent / "pyproject.toml"
    assert "DESIGN.md" not in pyproject.read_text(encoding="utf-8")
