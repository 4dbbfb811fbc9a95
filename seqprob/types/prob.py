"""Probabilities expressed as negative natural-log scores.

A ``Prob`` holds ``-log(p)``. Smaller values are more probable, so composing
two probabilities is an addition and the "best" of two scores is the minimum.
The largest finite float is reserved as the sentinel for probability zero and
is written as ``"*"`` in text form.
"""

from __future__ import annotations

import math
import sys


class ParseError(ValueError):
    """Raised when text cannot be converted to a log probability."""

    def __init__(self, text: str, reason: str = "") -> None:
        message = f"Could not convert '{text}' to a log probability"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
        self.text = text


MIN_PROB_TEXT = "*"


class Prob(float):
    """A transition or emission probability stored as ``-log(p)``."""

    __slots__ = ()

    @classmethod
    def parse(cls, text: str) -> "Prob":
        """Parse ``"*"`` or a float literal into a ``Prob``."""
        if text == MIN_PROB_TEXT:
            return MIN_PROB
        try:
            return cls(float(text))
        except (TypeError, ValueError) as exc:
            raise ParseError(str(text), str(exc)) from exc

    def less(self, other: float) -> bool:
        """Return True if ``self`` represents a smaller probability than ``other``."""
        return less(self, other)

    def is_min(self) -> bool:
        return is_min(self)

    def ratio(self) -> float:
        return ratio(self)

    def distance(self, other: float) -> float:
        return distance(self, other)

    def __str__(self) -> str:
        return format_prob(self)

    def __repr__(self) -> str:
        return f"Prob({format_prob(self)})"


# Remember, max in negative log space is minimum probability.
MIN_PROB = Prob(sys.float_info.max)


def less(p1: float, p2: float) -> bool:
    """Return True if ``p1`` represents a smaller probability than ``p2``."""
    return p1 > p2


def is_min(p: float) -> bool:
    """Return True if ``p`` is the zero-probability sentinel."""
    return p == MIN_PROB


def ratio(p: float) -> float:
    """Return the probability as a ratio in ``[0, 1]``."""
    if is_min(p):
        return 0.0
    return math.exp(-float(p))


def distance(p1: float, p2: float) -> float:
    """Absolute difference between two scores."""
    return abs(float(p1) - float(p2))


def parse_prob(text: str) -> Prob:
    """Parse the text form of a probability (usually read from a model file)."""
    return Prob.parse(text)


def format_prob(p: float) -> str:
    """Format a probability; the sentinel becomes ``"*"``."""
    if is_min(p):
        return MIN_PROB_TEXT
    return repr(float(p))


__all__ = [
    "Prob",
    "MIN_PROB",
    "MIN_PROB_TEXT",
    "ParseError",
    "less",
    "is_min",
    "ratio",
    "distance",
    "parse_prob",
    "format_prob",
]
