"""Scoring and alignment of biological sequences against probabilistic models.

Two dynamic programs form the core: Viterbi scoring of a sequence against a
Plan7 profile HMM, and Needleman-Wunsch global alignment of two sequences.
"""

from .algorithms import (
    HMM,
    DynamicTable,
    HMMNode,
    NeedlemanWunschAligner,
    alloc_table,
    hmm_cat,
    needleman_wunsch,
    viterbi_score,
    viterbi_score_mem,
)
from .types import Alignment, Alphabet, EProbs, MIN_PROB, Prob, Sequence, TProbs

__version__ = "0.1.0"

__all__ = [
    "HMM",
    "HMMNode",
    "DynamicTable",
    "NeedlemanWunschAligner",
    "alloc_table",
    "hmm_cat",
    "needleman_wunsch",
    "viterbi_score",
    "viterbi_score_mem",
    "Alignment",
    "Alphabet",
    "EProbs",
    "MIN_PROB",
    "Prob",
    "Sequence",
    "TProbs",
]
