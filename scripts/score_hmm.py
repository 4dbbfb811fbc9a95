#!/usr/bin/env python3
"""Score every sequence in a FASTA file against a profile HMM stored as YAML."""

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

from scripts.constants import LOG_FORMAT, NAME_WIDTH, PRECISION  # pylint: disable=C0413
from seqprob.algorithms.viterbi import (  # pylint: disable=C0413
    alloc_table,
    viterbi_score_mem,
)
from seqprob.types.prob import is_min  # pylint: disable=C0413
from seqprob.utils import load_hmm, read_fasta  # pylint: disable=C0413

logger = logging.getLogger("seqprob.scripts.score_hmm")


def format_score(score: float) -> str:
    """Render a score, keeping the zero-probability sentinel readable."""
    if is_min(score):
        return "*"
    return f"{score:.{PRECISION}f}"


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Compute Viterbi scores of sequences against a profile HMM."
    )
    parser.add_argument("hmm", type=Path, help="YAML file holding the HMM.")
    parser.add_argument("fasta", type=Path, help="FASTA file of sequences to score.")
    parser.add_argument(
        "--ids", nargs="+", default=None, help="Only score these sequence ids."
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging.")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO, format=LOG_FORMAT
    )

    if not args.hmm.exists():
        raise FileNotFoundError(f"HMM file not found: {args.hmm}")
    if not args.fasta.exists():
        raise FileNotFoundError(f"FASTA file not found: {args.fasta}")

    hmm = load_hmm(args.hmm)
    sequences = read_fasta(str(args.fasta), ids=args.ids)
    logger.info("Scoring %d sequences against %d nodes", len(sequences), len(hmm))

    # One table sized for the longest sequence is reused for every call.
    longest = max((len(seq) for seq in sequences), default=0)
    table = alloc_table(len(hmm), longest)
    for seq in sequences:
        score = viterbi_score_mem(hmm, seq, table)
        print(f"{seq.identifier:>{NAME_WIDTH}}\t{format_score(score)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
