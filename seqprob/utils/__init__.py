"""Utility functions for the project."""

from .fasta import read_fasta
from .serialization import (
    decode_alphabet,
    decode_eprobs,
    decode_prob,
    encode_alphabet,
    encode_eprobs,
    encode_prob,
    hmm_from_dict,
    hmm_to_dict,
    load_hmm,
    save_hmm,
)

__all__ = [
    "read_fasta",
    "decode_alphabet",
    "decode_eprobs",
    "decode_prob",
    "encode_alphabet",
    "encode_eprobs",
    "encode_prob",
    "hmm_from_dict",
    "hmm_to_dict",
    "load_hmm",
    "save_hmm",
]
