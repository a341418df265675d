"""Itemset: one event of a sequence."""
from typing import Iterable, Iterator, List, Optional, Tuple

from ..exceptions import InvalidParameterError
from ..utils.validators import validate_item


class Itemset:
    """An ordered group of distinct items occurring at one position of a sequence.

    Items keep their insertion order and an item appears at most once.

    Example:
        >>> itemset = Itemset([1, 2])
        >>> itemset.add_item(5)
        >>> print(itemset.to_string())
        1 2 5

    Attributes:
        items: Items in insertion order
    """

    __slots__ = ('items',)

    def __init__(self, items: Optional[Iterable[int]] = None):
        """Initialize an itemset.

        Args:
            items: Initial items, in order

        Raises:
            InvalidParameterError: If an item is not an integer or is repeated
        """
        self.items: List[int] = []
        if items is not None:
            for item in items:
                self.add_item(item)

    def add_item(self, item: int):
        """Append an item.

        Args:
            item: Item identifier

        Raises:
            InvalidParameterError: If the item is already in the itemset
        """
        item = validate_item(item)
        if item in self.items:
            raise InvalidParameterError(f"Item {item} is already in itemset ({self.to_string()})")
        self.items.append(item)

    def get(self, index: int) -> int:
        """Get the item at a 0-based position.

        Raises:
            IndexError: If index is outside [0, size())
        """
        if not 0 <= index < len(self.items):
            raise IndexError(f"Item index {index} out of range for itemset of size {len(self.items)}")
        return self.items[index]

    def get_items(self) -> Tuple[int, ...]:
        """Get the items as a read-only tuple."""
        return tuple(self.items)

    def size(self) -> int:
        return len(self.items)

    def contains(self, item: int) -> bool:
        return item in self.items

    def contains_all(self, other: 'Itemset') -> bool:
        """Check whether every item of another itemset is in this one."""
        return all(item in self.items for item in other)

    def clone_itemset(self) -> 'Itemset':
        """Make an independent copy of this itemset."""
        clone = Itemset()
        clone.items = list(self.items)
        return clone

    def clone_itemset_minus_items(self, items_to_remove: Iterable[int]) -> 'Itemset':
        """Copy this itemset without some items.

        Args:
            items_to_remove: Items to leave out of the copy

        Returns:
            New Itemset keeping the order of the remaining items
        """
        removed = set(items_to_remove)
        clone = Itemset()
        clone.items = [item for item in self.items if item not in removed]
        return clone

    def to_string(self) -> str:
        """Return items separated by spaces, each followed by a space (e.g. '1 2 ')."""
        return ''.join(f"{item} " for item in self.items)

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[int]:
        return iter(self.items)

    def __contains__(self, item) -> bool:
        return item in self.items

    def __eq__(self, other) -> bool:
        if not isinstance(other, Itemset):
            return False
        return self.items == other.items

    # Unhashable: items may change after construction.
    __hash__ = None

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"Itemset({self.items})"
