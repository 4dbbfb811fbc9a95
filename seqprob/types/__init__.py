"""Types for the project."""

from .prob import Prob, MIN_PROB, ParseError, parse_prob, format_prob
from .alphabet import Alphabet, ALPHA_BLOSUM62, ALPHA_DNA, ALPHA_RNA, NOT_PRESENT
from .parameters import EProbs, TProbs, HMMState, HMM_STATES, ResidueRangeError
from .sequence import Sequence, residue_hmm_state
from .alignment import Alignment, AlignmentResult
from .substitution import SubstMatrix, MAT_BLOSUM62, MAT_DNA, MAT_RNA


__all__ = [
    "Prob",
    "MIN_PROB",
    "ParseError",
    "parse_prob",
    "format_prob",
    "Alphabet",
    "ALPHA_BLOSUM62",
    "ALPHA_DNA",
    "ALPHA_RNA",
    "NOT_PRESENT",
    "EProbs",
    "TProbs",
    "HMMState",
    "HMM_STATES",
    "ResidueRangeError",
    "Sequence",
    "residue_hmm_state",
    "Alignment",
    "AlignmentResult",
    "SubstMatrix",
    "MAT_BLOSUM62",
    "MAT_DNA",
    "MAT_RNA",
]
