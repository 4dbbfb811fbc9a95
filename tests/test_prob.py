"""Unit tests for the negative-log probability algebra."""

from __future__ import annotations

import math
import sys

import pytest

from seqprob.types.prob import (
    MIN_PROB,
    ParseError,
    Prob,
    distance,
    format_prob,
    is_min,
    less,
    parse_prob,
    ratio,
)


def test_sentinel_is_largest_finite_float():
    """The zero-probability sentinel is the largest finite float."""
    assert MIN_PROB == sys.float_info.max
    assert math.isfinite(MIN_PROB)
    assert is_min(MIN_PROB)
    assert not is_min(Prob(0.0))


def test_less_is_inverted_numeric_order():
    """A larger negative-log score means a smaller probability."""
    assert less(2.0, 1.0)
    assert not less(1.0, 2.0)
    assert not less(1.0, 1.0)
    assert Prob(0.5).less(MIN_PROB) is False
    assert MIN_PROB.less(Prob(0.5)) is True


def test_ratio_and_distance():
    """Ratios leave log-space and the sentinel maps to zero."""
    assert math.isclose(ratio(Prob(-math.log(0.25))), 0.25)
    assert ratio(Prob(0.0)) == 1.0
    assert ratio(MIN_PROB) == 0.0
    assert Prob(1.5).distance(Prob(4.0)) == 2.5
    assert distance(4.0, 1.5) == 2.5


def test_parse_star_and_literals():
    """``*`` parses to the sentinel; everything else is a float literal."""
    assert parse_prob("*") is MIN_PROB
    assert parse_prob("0.25") == 0.25
    assert parse_prob("-1.5e3") == -1500.0
    assert isinstance(parse_prob("3"), Prob)


@pytest.mark.parametrize("text", ["", "abc", "1.2.3", "**"])
def test_parse_rejects_malformed_text(text):
    """Malformed text raises a ParseError carrying the offending text."""
    with pytest.raises(ParseError) as excinfo:
        parse_prob(text)
    assert excinfo.value.text == text
    assert f"'{text}'" in str(excinfo.value)


def test_parse_error_is_a_value_error():
    """Callers catching ValueError also catch parse failures."""
    with pytest.raises(ValueError):
        Prob.parse("not-a-number")


def test_format_is_inverse_of_parse():
    """Formatting and parsing round-trip, including the sentinel."""
    assert format_prob(MIN_PROB) == "*"
    assert str(MIN_PROB) == "*"
    for value in (0.0, 0.1, 1.0 / 3.0, 2.5e-300, 123456.789, -7.25, 1e300):
        p = Prob(value)
        assert parse_prob(format_prob(p)) == p
    assert parse_prob(format_prob(MIN_PROB)) == MIN_PROB


def test_prob_behaves_like_float():
    """Probabilities compose by plain addition."""
    total = Prob(0.5) + Prob(0.25)
    assert total == 0.75
    assert repr(Prob(0.5)) == "Prob(0.5)"
