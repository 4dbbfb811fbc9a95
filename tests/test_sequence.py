"""Unit tests for the Sequence container."""

from __future__ import annotations

import pytest

from seqprob.types.parameters import HMMState
from seqprob.types.sequence import Sequence, residue_hmm_state


def test_sequence_from_string():
    """Sequences expose their residues like a read-only list."""
    seq = Sequence.from_string("s1", "ACGT", description="demo")
    assert len(seq) == 4
    assert seq[1] == "C"
    assert list(seq) == ["A", "C", "G", "T"]
    assert str(seq) == "ACGT"
    assert seq.to_bytes() == b"ACGT"
    assert seq.description == "demo"


def test_copy_and_slice():
    """Slices keep the identifier and cover [start, end)."""
    seq = Sequence.from_string("s1", "ACGTAC")
    part = seq.slice(1, 4)
    assert str(part) == "CGT"
    assert part.identifier == "s1"
    assert seq.copy() == seq


def test_is_null():
    """Only a sequence with no identifier and no residues is null."""
    assert Sequence("", ()).is_null()
    assert not Sequence("x", ()).is_null()
    assert not Sequence.from_string("", "A").is_null()


def test_rejects_non_byte_residues():
    """Residues must be single-byte characters."""
    with pytest.raises(ValueError):
        Sequence("bad", ("AC",))


@pytest.mark.parametrize(
    "residue, state",
    [
        ("A", HMMState.MATCH),
        ("Z", HMMState.MATCH),
        ("-", HMMState.DELETION),
        (".", HMMState.INSERTION),
        ("a", HMMState.INSERTION),
        ("z", HMMState.INSERTION),
    ],
)
def test_residue_hmm_state(residue, state):
    """A2M residues map onto HMM states."""
    assert residue_hmm_state(residue) is state
