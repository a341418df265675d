"""Core components for sequential patterns."""

from .itemset import Itemset
from .sequential_pattern import SequentialPattern

__all__ = [
    'Itemset',
    'SequentialPattern',
]
