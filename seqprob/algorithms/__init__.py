"""Algorithms for the project."""

from .base import PairwiseAligner
from .hmm import HMM, HMMNode, hmm_cat
from .needleman_wunsch import NeedlemanWunschAligner, TracebackError, needleman_wunsch
from .viterbi import DynamicTable, alloc_table, viterbi_score, viterbi_score_mem


__all__ = [
    "PairwiseAligner",
    "HMM",
    "HMMNode",
    "hmm_cat",
    "NeedlemanWunschAligner",
    "TracebackError",
    "needleman_wunsch",
    "DynamicTable",
    "alloc_table",
    "viterbi_score",
    "viterbi_score_mem",
]
