"""Shopping cart."""
from typing import Iterable, List

from pydantic import BaseModel

from miniapp.services.ordering.models import LineItem


def cart_total(items: Iterable[LineItem]) -> int:
    """Sum of line prices."""
    return sum(item.price for item in items)


class Cart(BaseModel):
    """Cart entries in insertion order."""

    items: List[LineItem] = []

    def add(self, item: LineItem) -> None:
        """Append an entry."""
        self.items.append(item)

    def remove(self, uid: str) -> bool:
        """Remove the entry with ``uid``. Unknown ids are ignored.

        Returns:
            True if an entry was removed
        """
        remaining = [item for item in self.items if item.uid != uid]
        removed = len(remaining) != len(self.items)
        self.items = remaining
        return removed

    def clear(self) -> None:
        self.items = []

    @property
    def total(self) -> int:
        return cart_total(self.items)

    def __len__(self) -> int:
        return len(self.items)
