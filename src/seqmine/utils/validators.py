"""Validation utilities for sequential patterns."""
from typing import FrozenSet, Iterable
import numpy as np

from ..exceptions import InvalidParameterError, InvalidSequenceCountError


def validate_item(item, param_name: str = "item") -> int:
    """Validate an item identifier.

    Args:
        item: Item to validate (Python or numpy integer)
        param_name: Name of parameter (for error messages)

    Returns:
        The item as a Python int

    Raises:
        InvalidParameterError: If item is not an integer
    """
    if isinstance(item, (bool, np.bool_)) or not isinstance(item, (int, np.integer)):
        raise InvalidParameterError(f"{param_name} must be an integer, got {type(item)}")

    return int(item)


def validate_sequence_ids(sequence_ids: Iterable[int]) -> FrozenSet[int]:
    """Validate and freeze a collection of sequence IDs.

    Args:
        sequence_ids: Iterable of sequence identifiers

    Returns:
        Frozen set of Python ints

    Raises:
        InvalidParameterError: If sequence_ids is not iterable or holds non-integers
    """
    if sequence_ids is None or isinstance(sequence_ids, (str, bytes)):
        raise InvalidParameterError(f"sequence_ids must be an iterable of integers, got {type(sequence_ids)}")

    try:
        iterator = iter(sequence_ids)
    except TypeError:
        raise InvalidParameterError(f"sequence_ids must be an iterable of integers, got {type(sequence_ids)}")

    return frozenset(validate_item(sid, "sequence ID") for sid in iterator)


def validate_sequence_count(sequence_count) -> int:
    """Validate the number of sequences of a database.

    Args:
        sequence_count: Number of sequences in the mined database

    Returns:
        The count as a Python int

    Raises:
        InvalidParameterError: If sequence_count is not an integer
        InvalidSequenceCountError: If sequence_count is not positive
    """
    sequence_count = validate_item(sequence_count, "sequence_count")

    if sequence_count <= 0:
        raise InvalidSequenceCountError(f"sequence_count must be positive, got {sequence_count}")

    return sequence_count
