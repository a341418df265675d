"""Output formatting utilities."""
from decimal import Decimal, ROUND_HALF_EVEN
from typing import List, Optional, TYPE_CHECKING
import pandas as pd

from .validators import validate_sequence_count
from ..config import config

if TYPE_CHECKING:
    from ..core.sequential_pattern import SequentialPattern


def format_relative_support(support: int, sequence_count: int,
                            max_fraction_digits: Optional[int] = None) -> str:
    """Format ``support / sequence_count`` as a decimal string.

    The ratio is computed as a float and the exact binary value of that
    float is rounded half-even to at most ``max_fraction_digits`` fraction
    digits, with trailing zeros trimmed: 1/3 gives ``'0.33333'``, 2/4 gives
    ``'0.5'``, 3/3 gives ``'1'`` and 1/200000 gives ``'0.00001'``.

    Args:
        support: Absolute support (number of sequences containing a pattern)
        sequence_count: Number of sequences in the database
        max_fraction_digits: Maximum fraction digits (defaults to config)

    Returns:
        Formatted relative support

    Raises:
        InvalidSequenceCountError: If sequence_count is not positive
    """
    sequence_count = validate_sequence_count(sequence_count)

    if max_fraction_digits is None:
        max_fraction_digits = config.max_fraction_digits

    ratio = Decimal(int(support) / sequence_count)
    text = format(ratio.quantize(Decimal(1).scaleb(-max_fraction_digits), rounding=ROUND_HALF_EVEN), 'f')

    if '.' in text:
        text = text.rstrip('0').rstrip('.')
    return text


def format_pattern_line(pattern: 'SequentialPattern', sequence_count: Optional[int] = None) -> str:
    """Format a single pattern as an SPMF output line.

    Args:
        pattern: SequentialPattern with its sequence IDs assigned
        sequence_count: Number of sequences, to also show the relative support

    Returns:
        Formatted string, e.g. ``'{1 2 }{3 }     #SUP: 3'``
    """
    line = f"{pattern.itemsets_to_string()} #SUP: {pattern.get_absolute_support()}"
    if sequence_count is not None:
        line += f" #REL: {pattern.get_relative_support_formatted(sequence_count)}"
    return line


def format_patterns(patterns: List['SequentialPattern'], sequence_count: Optional[int] = None) -> List[str]:
    """Format patterns as list of SPMF output lines."""
    return [format_pattern_line(p, sequence_count) for p in patterns]


def patterns_to_dataframe(patterns: List['SequentialPattern'],
                          sequence_count: Optional[int] = None) -> pd.DataFrame:
    """Convert patterns to a pandas DataFrame.

    Args:
        patterns: Patterns with their sequence IDs assigned
        sequence_count: Number of sequences, to fill the relative_support column

    Returns:
        DataFrame with pattern, support, relative_support, length and items columns
    """
    columns = ['pattern', 'support', 'relative_support', 'length', 'items']
    data = []
    for pattern in patterns:
        row = {
            'pattern': pattern.itemsets_to_string().rstrip(),
            'support': pattern.get_absolute_support(),
            'relative_support': None,
            'length': len(pattern),
            'items': pattern.get_item_occurences_total_count(),
        }

        if sequence_count is not None:
            row['relative_support'] = pattern.get_relative_support(sequence_count)

        data.append(row)

    return pd.DataFrame(data, columns=columns)
