"""Bitmap operations on sequence-ID sets."""
import numpy as np
from typing import FrozenSet, Iterable

from .validators import validate_sequence_count, validate_sequence_ids
from ..exceptions import InvalidParameterError


class SequenceBitmap:
    """Helper class for sequence-ID bitmaps.

    A bitmap is a boolean vector with one entry per sequence of the
    database; entry ``i`` is True when sequence ``i`` contains the pattern.
    Mining engines intersect bitmaps while growing a pattern and convert
    the result back to IDs for ``SequentialPattern.set_sequence_ids``.
    """

    @staticmethod
    def from_ids(sequence_ids: Iterable[int], sequence_count: int) -> np.ndarray:
        """Build a bitmap from sequence IDs.

        Args:
            sequence_ids: IDs in ``[0, sequence_count)``
            sequence_count: Number of sequences in the database

        Returns:
            Boolean vector of length sequence_count

        Raises:
            InvalidParameterError: If an ID is outside the database
        """
        sequence_count = validate_sequence_count(sequence_count)
        ids = validate_sequence_ids(sequence_ids)

        bitmap = np.zeros(sequence_count, dtype=bool)
        if ids:
            index = np.fromiter(ids, dtype=np.int64, count=len(ids))
            if index.min() < 0 or index.max() >= sequence_count:
                raise InvalidParameterError(
                    f"Sequence IDs must be in [0, {sequence_count}), got {sorted(ids)}"
                )
            bitmap[index] = True
        return bitmap

    @staticmethod
    def to_ids(bitmap: np.ndarray) -> FrozenSet[int]:
        """Convert a bitmap back to a frozen set of sequence IDs."""
        return frozenset(int(i) for i in np.flatnonzero(bitmap))

    @staticmethod
    def intersect(bitmap1: np.ndarray, bitmap2: np.ndarray) -> np.ndarray:
        """Compute intersection of two bitmaps.

        Args:
            bitmap1: First bitmap
            bitmap2: Second bitmap

        Returns:
            Intersection bitmap

        Raises:
            InvalidParameterError: If the bitmaps have different lengths
        """
        if bitmap1.shape != bitmap2.shape:
            raise InvalidParameterError(
                f"Bitmaps must have the same shape, got {bitmap1.shape} and {bitmap2.shape}"
            )
        return np.logical_and(bitmap1, bitmap2)

    @staticmethod
    def support(bitmap: np.ndarray) -> int:
        """Absolute support of a bitmap (number of set entries)."""
        return int(np.count_nonzero(bitmap))
