from __future__ import annotations

from collections import OrderedDict
from typing import Iterator

from config import MAX_RECENT


class RecentSignatures:
    """
    Bounded set of recently issued question signatures.

    Insertion order is recency order. Once more than ``max_size`` signatures
    are held the oldest inserted one is dropped (FIFO; lookups do not refresh).
    """

    def __init__(self, max_size: int = MAX_RECENT) -> None:
        if max_size < 1:
            raise ValueError("max_size must be at least 1")
        self.max_size = max_size
        self._items: "OrderedDict[str, None]" = OrderedDict()

    def __contains__(self, signature: object) -> bool:
        return signature in self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[str]:
        return iter(self._items)

    def add(self, signature: str) -> None:
        if signature in self._items:
            return
        self._items[signature] = None
        while len(self._items) > self.max_size:
            self._items.popitem(last=False)

    def clear(self) -> None:
        self._items.clear()
