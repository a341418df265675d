"""Sequential Pattern Mining - pattern representation

Itemsets and sequential patterns as produced by PrefixSpan/BIDE-style
mining algorithms, with support queries and SPMF-compatible rendering.

Example:
    >>> from seqmine import Itemset, SequentialPattern
    >>> pattern = SequentialPattern()
    >>> pattern.add_itemset(Itemset([1, 2]))
    >>> pattern.add_itemset(Itemset([3]))
    >>> pattern.set_sequence_ids({2, 5, 9})
    >>> print(f"{pattern.itemsets_to_string()}#SUP: {pattern.get_absolute_support()}")
    {1 2 }{3 }    #SUP: 3
"""

__version__ = '0.1.0'
__author__ = 'Sequential Mining Team'

from .core.itemset import Itemset
from .core.sequential_pattern import SequentialPattern

from .utils.bitmap import SequenceBitmap
from .utils.formatters import format_relative_support, format_pattern_line, format_patterns, patterns_to_dataframe

from .config import config

from .exceptions import (
    SequentialMiningError,
    InvalidParameterError,
    InvalidSequenceCountError,
    SupportNotComputedError,
)

__all__ = [
    'Itemset',
    'SequentialPattern',
    'SequenceBitmap',
    'format_relative_support',
    'format_pattern_line',
    'format_patterns',
    'patterns_to_dataframe',
    'config',
    'SequentialMiningError',
    'InvalidParameterError',
    'InvalidSequenceCountError',
    'SupportNotComputedError',
]
