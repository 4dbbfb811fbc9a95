#!/usr/bin/env python3
"""Globally align the first two sequences of a FASTA file and print the result."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

# Ensure repository modules are importable when invoked as a script
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from scripts.constants import (  # pylint: disable=C0413
    DEFAULT_MATRIX,
    LOG_FORMAT,
    MATRIX_ALIASES,
    NAME_WIDTH,
)
from seqprob.algorithms import NeedlemanWunschAligner  # pylint: disable=C0413
from seqprob.types.substitution import (  # pylint: disable=C0413
    MATRICES,
    SubstMatrix,
    load_subst_matrix,
)
from seqprob.utils import read_fasta  # pylint: disable=C0413

logger = logging.getLogger("seqprob.scripts.align_pair")


def resolve_matrix(name: str) -> SubstMatrix:
    """Return a built-in matrix by name, or load one from an NCBI-format file."""
    if name.lower() in MATRICES:
        return MATRICES[name.lower()]
    path = Path(name)
    if not path.exists():
        raise FileNotFoundError(
            f"Unknown matrix '{name}'; expected one of {sorted(MATRICES)} or a file"
        )
    return load_subst_matrix(path, aliases=MATRIX_ALIASES)


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Needleman-Wunsch alignment of two sequences from a FASTA file."
    )
    parser.add_argument("fasta", type=Path, help="FASTA file with reference and query.")
    parser.add_argument(
        "-m",
        "--matrix",
        default=DEFAULT_MATRIX,
        help=f"Built-in matrix ({', '.join(sorted(MATRICES))}) or matrix file.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging.")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO, format=LOG_FORMAT
    )

    if not args.fasta.exists():
        raise FileNotFoundError(f"FASTA file not found: {args.fasta}")

    sequences = read_fasta(str(args.fasta))
    if len(sequences) < 2:
        raise ValueError(
            f"Expected at least two sequences; found {len(sequences)} in {args.fasta}"
        )
    if len(sequences) > 2:
        logger.warning("Aligning the first two of %d sequences", len(sequences))

    subst = resolve_matrix(args.matrix)
    reference, query = sequences[0], sequences[1]
    result = NeedlemanWunschAligner(subst).align(reference, query)

    print(f"{reference.identifier:>{NAME_WIDTH}}: {''.join(result.alignment.reference)}")
    print(f"{query.identifier:>{NAME_WIDTH}}: {''.join(result.alignment.query)}")
    print(f"\nScore: {result.score}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
