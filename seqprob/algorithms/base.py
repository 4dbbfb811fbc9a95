"""Shared interfaces for pairwise alignment algorithms."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Sequence as SequenceLike

from seqprob.types import AlignmentResult


class PairwiseAligner(ABC):
    """Abstract base class for pairwise alignment algorithms."""

    @abstractmethod
    def align(
        self,
        reference: SequenceLike[str],
        query: SequenceLike[str],
    ) -> AlignmentResult:
        """Align a query against a reference."""
        raise NotImplementedError


__all__ = ["PairwiseAligner"]
