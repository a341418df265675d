"""Tests for formatting, bitmap and validation utilities."""

from __future__ import annotations

import numpy as np
import pytest

from seqmine import (
    Itemset,
    SequentialPattern,
    SequenceBitmap,
    InvalidParameterError,
    InvalidSequenceCountError,
    SupportNotComputedError,
    format_relative_support,
    format_pattern_line,
    format_patterns,
    patterns_to_dataframe,
)
from seqmine.utils.validators import validate_sequence_count, validate_sequence_ids


class TestFormatRelativeSupport:
    """Tests for format_relative_support."""

    @pytest.mark.parametrize("support, count, expected", [
        (3, 10, "0.3"),
        (1, 3, "0.33333"),
        (2, 4, "0.5"),
        (4, 4, "1"),
        (0, 4, "0"),
        (1, 64, "0.01562"),
        (1, 200000, "0.00001"),
        (1, 40000, "0.00003"),
        (3, 200000, "0.00002"),
        (1, 160000, "0.00001"),
        (1, 2000000, "0"),
        (5, 2, "2.5"),
    ])
    def test_values(self, support, count, expected):
        assert format_relative_support(support, count) == expected

    def test_custom_fraction_digits(self):
        assert format_relative_support(1, 3, max_fraction_digits=2) == "0.33"
        assert format_relative_support(1, 3, max_fraction_digits=0) == "0"
        assert format_relative_support(20, 2, max_fraction_digits=0) == "10"

    @pytest.mark.parametrize("count", [0, -1])
    def test_non_positive_count(self, count):
        with pytest.raises(InvalidSequenceCountError):
            format_relative_support(1, count)

    def test_non_integer_count(self):
        with pytest.raises(InvalidParameterError):
            format_relative_support(1, 2.5)


class TestPatternFormatting:
    """Tests for pattern lines and DataFrames."""

    def test_pattern_line(self, supported_pattern):
        assert format_pattern_line(supported_pattern) == "{1 2 }{3 }     #SUP: 3"
        assert format_pattern_line(supported_pattern, 10) == "{1 2 }{3 }     #SUP: 3 #REL: 0.3"

    def test_pattern_line_requires_support(self, pattern):
        with pytest.raises(SupportNotComputedError):
            format_pattern_line(pattern)

    def test_format_patterns(self, supported_pattern):
        other = SequentialPattern()
        other.add_itemset(Itemset([4]))
        other.set_sequence_ids([0])
        assert format_patterns([supported_pattern, other]) == [
            "{1 2 }{3 }     #SUP: 3",
            "{4 }     #SUP: 1",
        ]

    def test_dataframe(self, supported_pattern):
        df = patterns_to_dataframe([supported_pattern], sequence_count=10)
        assert list(df.columns) == ['pattern', 'support', 'relative_support', 'length', 'items']
        row = df.iloc[0]
        assert row['pattern'] == "{1 2 }{3 }"
        assert row['support'] == 3
        assert row['relative_support'] == pytest.approx(0.3)
        assert row['length'] == 2
        assert row['items'] == 3

    def test_empty_dataframe(self):
        df = patterns_to_dataframe([])
        assert df.empty
        assert 'support' in df.columns


class TestSequenceBitmap:
    """Tests for SequenceBitmap."""

    def test_round_trip_ids(self):
        bitmap = SequenceBitmap.from_ids({2, 5, 9}, 10)
        assert bitmap.dtype == bool
        assert bitmap.shape == (10,)
        assert SequenceBitmap.to_ids(bitmap) == frozenset({2, 5, 9})

    def test_intersect_and_support(self):
        a = SequenceBitmap.from_ids([0, 1, 2, 3], 5)
        b = SequenceBitmap.from_ids([2, 3, 4], 5)
        both = SequenceBitmap.intersect(a, b)
        assert SequenceBitmap.support(both) == 2
        assert SequenceBitmap.to_ids(both) == frozenset({2, 3})

    def test_intersect_shape_mismatch(self):
        with pytest.raises(InvalidParameterError):
            SequenceBitmap.intersect(np.zeros(3, dtype=bool), np.zeros(4, dtype=bool))

    @pytest.mark.parametrize("ids", [[-1], [5]])
    def test_ids_outside_database(self, ids):
        with pytest.raises(InvalidParameterError):
            SequenceBitmap.from_ids(ids, 5)

    def test_empty_ids(self):
        assert SequenceBitmap.support(SequenceBitmap.from_ids([], 4)) == 0

    def test_feeds_pattern_support(self, pattern):
        a = SequenceBitmap.from_ids([1, 2, 3], 4)
        b = SequenceBitmap.from_ids([2, 3], 4)
        pattern.set_sequence_ids(SequenceBitmap.to_ids(SequenceBitmap.intersect(a, b)))
        assert pattern.get_relative_support_formatted(4) == "0.5"


class TestValidators:
    """Tests for validation helpers."""

    def test_validate_sequence_ids(self):
        assert validate_sequence_ids([1, 1, np.int64(2)]) == frozenset({1, 2})

    @pytest.mark.parametrize("value", [None, "12", 5, [1.5]])
    def test_validate_sequence_ids_rejects(self, value):
        with pytest.raises(InvalidParameterError):
            validate_sequence_ids(value)

    def test_validate_sequence_count(self):
        assert validate_sequence_count(np.int32(3)) == 3
        with pytest.raises(InvalidSequenceCountError):
            validate_sequence_count(0)
