"""Functions for working with FASTA files."""

from typing import List, Optional

import skbio
import skbio.io

from seqprob.types import Sequence


def sequence_from_skbio(record: skbio.Sequence) -> Sequence:
    """Convert a scikit-bio record to a Sequence."""
    metadata = getattr(record, "metadata", {}) or {}
    identifier = metadata.get("id") or ""
    description = metadata.get("description") or None

    return Sequence.from_string(identifier, str(record), description=description)


def read_fasta(file_path: str, ids: Optional[List[str]] = None) -> List[Sequence]:
    """Read a FASTA file and return its records as Sequences.

    When ``ids`` is given, only records with those identifiers are kept.
    """
    sequences: List[Sequence] = []
    for record in skbio.io.read(
        str(file_path), format="fasta", constructor=skbio.Sequence
    ):
        if ids and record.metadata["id"] not in ids:
            continue
        sequences.append(sequence_from_skbio(record))
    return sequences


__all__ = ["read_fasta", "sequence_from_skbio"]
