"""Sequential pattern representation shared by sequential pattern mining algorithms.

A sequential pattern is an ordered list of itemsets, built by a mining
engine (PrefixSpan, BIDE+, ...) one itemset at a time, together with the
IDs of the database sequences that contain it. Supports are derived from
those IDs; the total number of sequences is always supplied by the caller.
"""
import logging
from typing import Any, Dict, FrozenSet, Iterable, Iterator, List, Optional, Tuple, Union

from .itemset import Itemset
from ..config import config
from ..exceptions import InvalidParameterError, SupportNotComputedError
from ..utils.formatters import format_relative_support
from ..utils.validators import validate_sequence_count, validate_sequence_ids

logger = logging.getLogger(__name__)


class SequentialPattern:
    """Represents a sequential pattern (ordered list of itemsets).

    The sequence IDs are unset until ``set_sequence_ids`` is called. Unset
    means "support not computed yet" and is different from an empty set:
    support queries on a pattern without sequence IDs raise
    ``SupportNotComputedError`` instead of answering 0.

    Example:
        >>> pattern = SequentialPattern()
        >>> pattern.add_itemset(Itemset([1, 2]))
        >>> pattern.add_itemset(Itemset([3]))
        >>> pattern.set_sequence_ids({2, 5, 9})
        >>> pattern.to_string()
        '(1 2 )(3 )    '
        >>> pattern.get_relative_support_formatted(10)
        '0.3'

    Attributes:
        itemsets: Itemsets in sequence order (read-only view)
        sequence_ids: IDs of the sequences containing the pattern, or None
    """

    __slots__ = ('_itemsets', '_sequence_ids')

    def __init__(self):
        """Initialize an empty sequential pattern."""
        self._itemsets: List[Itemset] = []
        self._sequence_ids: Optional[FrozenSet[int]] = None

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    def add_itemset(self, itemset: Union[Itemset, Iterable[int]]):
        """Append an itemset at the end of the pattern.

        The pattern keeps its own copy, so later changes to ``itemset`` by
        the caller are not visible through the pattern.

        Args:
            itemset: Itemset, or an iterable of items to build one from

        Raises:
            InvalidParameterError: If itemset holds duplicates or non-integers
        """
        if isinstance(itemset, Itemset):
            self._itemsets.append(itemset.clone_itemset())
        elif isinstance(itemset, (str, bytes)) or not hasattr(itemset, '__iter__'):
            raise InvalidParameterError(f"itemset must be an Itemset or an iterable of items, got {type(itemset)}")
        else:
            self._itemsets.append(Itemset(itemset))

    def set_sequence_ids(self, sequence_ids: Iterable[int]):
        """Set the IDs of the sequences containing this pattern.

        Args:
            sequence_ids: Iterable of sequence IDs (frozen on assignment)

        Raises:
            InvalidParameterError: If an ID is not an integer
        """
        frozen = validate_sequence_ids(sequence_ids)
        if self._sequence_ids is not None:
            logger.debug(f"Overwriting sequence IDs of {self.itemsets_to_string().rstrip()}: "
                         f"support {len(self._sequence_ids)} -> {len(frozen)}")
        self._sequence_ids = frozen

    def clone_sequence(self) -> 'SequentialPattern':
        """Make a copy of this pattern to seed a new candidate.

        Every itemset is copied. The sequence IDs are not: the copy starts
        with its support unset and must get new IDs before support queries.

        Returns:
            New SequentialPattern
        """
        clone = SequentialPattern()
        clone._itemsets = [itemset.clone_itemset() for itemset in self._itemsets]
        logger.debug(f"Cloned {self.itemsets_to_string().rstrip()} without its sequence IDs")
        return clone

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def itemsets(self) -> Tuple[Itemset, ...]:
        return self.get_itemsets()

    @property
    def sequence_ids(self) -> Optional[FrozenSet[int]]:
        return self._sequence_ids

    def size(self) -> int:
        """Number of itemsets in the pattern."""
        return len(self._itemsets)

    def get_itemsets(self) -> Tuple[Itemset, ...]:
        """Get the itemsets in sequence order as a read-only tuple."""
        return tuple(self._itemsets)

    def get(self, index: int) -> Itemset:
        """Get the itemset at a 0-based position.

        Raises:
            IndexError: If index is outside [0, size())
        """
        if not 0 <= index < len(self._itemsets):
            raise IndexError(f"Itemset index {index} out of range for pattern of size {len(self._itemsets)}")
        return self._itemsets[index]

    def get_ith_item(self, i: int) -> Optional[int]:
        """Get the item at flat position i, counting across all itemsets.

        Args:
            i: 0-based position among all items of the pattern

        Returns:
            The item, or None if the position does not exist
        """
        if i < 0:
            return None
        for itemset in self._itemsets:
            if i < itemset.size():
                return itemset.get(i)
            i -= itemset.size()
        return None

    def get_item_occurences_total_count(self) -> int:
        """Number of items in the pattern; an item in two itemsets counts twice."""
        return sum(itemset.size() for itemset in self._itemsets)

    def has_sequence_ids(self) -> bool:
        return self._sequence_ids is not None

    def get_sequence_ids(self) -> Optional[FrozenSet[int]]:
        """Get the sequence IDs, or None if they were never assigned."""
        return self._sequence_ids

    def _require_sequence_ids(self) -> FrozenSet[int]:
        if self._sequence_ids is None:
            raise SupportNotComputedError(
                f"Support of {self.itemsets_to_string().rstrip() or 'empty pattern'} is not computed. "
                "Call set_sequence_ids() first."
            )
        return self._sequence_ids

    def get_absolute_support(self) -> int:
        """Get the number of sequences containing this pattern.

        Raises:
            SupportNotComputedError: If the sequence IDs were never assigned
        """
        return len(self._require_sequence_ids())

    def get_relative_support(self, sequence_count: int) -> float:
        """Get the support as a fraction of the database size.

        Args:
            sequence_count: Number of sequences in the database

        Raises:
            SupportNotComputedError: If the sequence IDs were never assigned
            InvalidSequenceCountError: If sequence_count is not positive
        """
        support = len(self._require_sequence_ids())
        return support / validate_sequence_count(sequence_count)

    def get_relative_support_formatted(self, sequence_count: int) -> str:
        """Get the relative support as a string with at most 5 fraction digits.

        Args:
            sequence_count: Number of sequences in the database

        Returns:
            The support, e.g. '0.3' or '0.33333'

        Raises:
            SupportNotComputedError: If the sequence IDs were never assigned
            InvalidSequenceCountError: If sequence_count is not positive
        """
        support = len(self._require_sequence_ids())
        return format_relative_support(support, sequence_count)

    # Historical spelling kept for callers ported from SPMF.
    get_relative_support_formated = get_relative_support_formatted

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def _render(self, opening: str, closing: str) -> str:
        return ''.join(f"{opening}{itemset.to_string()}{closing}" for itemset in self._itemsets)

    def to_string(self, show_sequence_ids: Optional[bool] = None) -> str:
        """Render the pattern with each itemset in parentheses, e.g. '(1 2 )(3 )    '.

        Args:
            show_sequence_ids: Also list the sequence IDs when they are set
                (defaults to config.show_sequence_ids)
        """
        if show_sequence_ids is None:
            show_sequence_ids = config.show_sequence_ids

        rendered = self._render('(', ')')
        if show_sequence_ids and self._sequence_ids is not None:
            rendered += "  Sequence ID: " + ''.join(f"{sid} " for sid in sorted(self._sequence_ids))
        return rendered + "    "

    def itemsets_to_string(self) -> str:
        """Render the pattern with each itemset in braces, e.g. '{1 2 }{3 }    '."""
        return self._render('{', '}') + "    "

    def print_pattern(self, file=None):
        """Write to_string() to stdout (or file) without a newline."""
        print(self.to_string(), end='', file=file)

    def to_dict(self, sequence_count: Optional[int] = None) -> Dict[str, Any]:
        """Convert pattern to dictionary.

        Args:
            sequence_count: Number of sequences, to include the relative support

        Returns:
            Dictionary with itemsets, sequence_ids, support and, when
            sequence_count is given and support known, relative_support
        """
        result = {
            'itemsets': [list(itemset.items) for itemset in self._itemsets],
            'sequence_ids': sorted(self._sequence_ids) if self._sequence_ids is not None else None,
            'support': len(self._sequence_ids) if self._sequence_ids is not None else None,
        }
        if sequence_count is not None and self._sequence_ids is not None:
            result['relative_support'] = self.get_relative_support_formatted(sequence_count)
        return result

    def __len__(self) -> int:
        return len(self._itemsets)

    def __iter__(self) -> Iterator[Itemset]:
        return iter(tuple(self._itemsets))

    def __getitem__(self, index: int) -> Itemset:
        return self.get(index)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        support = len(self._sequence_ids) if self._sequence_ids is not None else None
        return f"SequentialPattern(itemsets={[itemset.items for itemset in self._itemsets]}, support={support})"
