"""
Inventory - The items the player has gathered.

A multiset of items. Iteration follows item declaration order, so the
order a UI cursor walks through never depends on when things were picked
up.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Iterator

from .items import Item, ITEM_ORDER


class HasNone(Exception):
    """Raised when removing an item the inventory does not hold."""

    def __init__(self, item: Item):
        super().__init__(f"No {item.display_name} in the inventory")
        self.item = item


@dataclass
class Inventory:
    """
    Item counts. Every stored count is > 0; an entry whose count drops
    to zero is removed immediately.
    """
    counts: dict[Item, int] = field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.counts)

    def __contains__(self, item: Item) -> bool:
        return item in self.counts

    @property
    def is_empty(self) -> bool:
        return not self.counts

    def count_of(self, item: Item) -> int:
        return self.counts.get(item, 0)

    def insert(self, item: Item) -> None:
        self.counts[item] = self.counts.get(item, 0) + 1

    def remove(self, item: Item) -> None:
        """Remove one unit of `item`. Raises HasNone if there is none."""
        count = self.counts.get(item, 0)
        if count <= 0:
            raise HasNone(item)
        if count == 1:
            del self.counts[item]
        else:
            self.counts[item] = count - 1

    def keys(self) -> list[Item]:
        return sorted(self.counts, key=ITEM_ORDER.__getitem__)

    def items(self) -> Iterator[tuple[Item, int]]:
        for item in self.keys():
            yield item, self.counts[item]

    def first(self) -> Item | None:
        keys = self.keys()
        return keys[0] if keys else None

    def next(self, item: Item) -> Item:
        """
        The item after `item`, wrapping to the first one.

        NOTE: `item` must be in the inventory.
        """
        keys = self._keys_containing(item)
        return keys[(keys.index(item) + 1) % len(keys)]

    def prev(self, item: Item) -> Item:
        """The item before `item`, wrapping to the last one. See `next`."""
        keys = self._keys_containing(item)
        return keys[keys.index(item) - 1]

    def _keys_containing(self, item: Item) -> list[Item]:
        if item not in self.counts:
            raise KeyError(f"{item.display_name} is not in the inventory")
        return self.keys()

    def to_counts(self) -> dict[str, int]:
        """Serializable form: item value -> count."""
        return {item.value: count for item, count in self.items()}

    @classmethod
    def from_counts(cls, counts: dict[str, int]) -> Inventory:
        """Rebuild from `to_counts` output. Non-positive counts are dropped."""
        inventory = cls()
        for name, count in counts.items():
            try:
                item = Item(name)
            except ValueError:
                raise ValueError(f"Unknown item: {name!r}") from None
            if count > 0:
                inventory.counts[item] = count
        return inventory
