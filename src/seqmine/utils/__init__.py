"""Utility functions for sequential patterns."""

from .bitmap import SequenceBitmap
from .validators import validate_item, validate_sequence_ids, validate_sequence_count
from .formatters import format_relative_support, format_pattern_line, format_patterns, patterns_to_dataframe

__all__ = [
    'SequenceBitmap',
    'validate_item',
    'validate_sequence_ids',
    'validate_sequence_count',
    'format_relative_support',
    'format_pattern_line',
    'format_patterns',
    'patterns_to_dataframe',
]
