from typing import Any, Callable, Dict, Iterable, Iterator, List, Optional

from . import sequence
from .sequence import _MISSING
from .models import ChunkStrategy, ZipStrategy


class EagerCollection:
    """
    A chainable, eager collection. The source is materialized once, when the
    collection is built, and every transformation runs immediately and
    returns a new collection over its result.
    """
    def __init__(self, source: Iterable[Any] = ()):
        self._items = list(source)

    # --------- chainable operators (eager) ----------
    def map(self, mapping: Callable[..., Any]) -> "EagerCollection":
        return self._wrap(sequence.map(self._items, mapping))

    def filter(self, predicate: Callable[..., Any]) -> "EagerCollection":
        return self._wrap(sequence.filter(self._items, predicate))

    def flat_map(self, mapping: Callable[..., Iterable[Any]]) -> "EagerCollection":
        return self._wrap(sequence.flat_map(self._items, mapping))

    def take(self, limit: int) -> "EagerCollection":
        return self._wrap(sequence.take(self._items, limit))

    def drop(self, limit: int) -> "EagerCollection":
        return self._wrap(sequence.drop(self._items, limit))

    def take_while(self, predicate: Callable[..., Any]) -> "EagerCollection":
        return self._wrap(sequence.take_while(self._items, predicate))

    def drop_while(self, predicate: Callable[..., Any]) -> "EagerCollection":
        return self._wrap(sequence.drop_while(self._items, predicate))

    def scan(self, accumulator: Callable[..., Any], initial: Any = _MISSING) -> "EagerCollection":
        """Running fold; ``initial`` seeds it without being emitted"""
        return self._wrap(sequence.scan(self._items, accumulator, initial))

    def reverse(self) -> "EagerCollection":
        return self._wrap(sequence.reverse(self._items))

    def chunk(self, size: int, strategy: ChunkStrategy = ChunkStrategy.DROP_END,
              fill_value: Any = None) -> "EagerCollection":
        """Group items into lists of ``size``; see sequence.chunk for strategies"""
        return self._wrap(sequence.chunk(self._items, size, strategy, fill_value))

    def window(self, size: int) -> "EagerCollection":
        return self._wrap(sequence.window(self._items, size))

    def dedup(self, eq: Optional[Callable[[Any, Any], Any]] = None) -> "EagerCollection":
        if eq is None:
            return self._wrap(sequence.dedup(self._items))
        return self._wrap(sequence.dedup(self._items, eq))

    def chain(self, *iterables: Iterable[Any]) -> "EagerCollection":
        """Append the given iterables after this collection's items"""
        return self._wrap(sequence.chain(self._items, *iterables))

    def zip(self, *iterables: Iterable[Any], strategy: ZipStrategy = ZipStrategy.SHORTEST,
            fill_value: Any = None) -> "EagerCollection":
        """Zip this collection (first) with the given iterables"""
        return self._wrap(
            sequence.zip(self._items, *iterables, strategy=strategy, fill_value=fill_value)
        )

    # --------- terminal operations ----------
    def to_list(self) -> List[Any]:
        return list(self._items)

    def all(self, predicate: Optional[Callable[..., Any]] = None) -> bool:
        return sequence.all(self._items, predicate)

    def any(self, predicate: Optional[Callable[..., Any]] = None) -> bool:
        return sequence.any(self._items, predicate)

    def find(self, predicate: Callable[..., Any]) -> Any:
        return sequence.find(self._items, predicate)

    def find_index(self, predicate: Callable[..., Any]) -> int:
        return sequence.find_index(self._items, predicate)

    def for_each(self, consumer: Callable[..., Any]) -> None:
        sequence.for_each(self._items, consumer)

    def consume(self) -> None:
        sequence.consume(self._items)

    def length(self) -> int:
        return sequence.length(self._items)

    def reduce(self, reducer: Callable[..., Any], initial: Any = _MISSING) -> Any:
        """Fold the items; ``initial`` seeds the accumulator when given"""
        return sequence.reduce(self._items, reducer, initial)

    def sum(self, start=0):
        """Return the sum of all items"""
        return sequence.reduce(self._items, lambda acc, e: acc + e, start)

    def min(self, default=None):
        """Return the smallest item, or default if empty"""
        return min(self._items, default=default)

    def max(self, default=None):
        """Return the largest item, or default if empty"""
        return max(self._items, default=default)

    def first(self, default=None):
        """Return the first item, or default if empty"""
        return self._items[0] if self._items else default

    def last(self, default=None):
        """Return the last item, or default if empty"""
        return self._items[-1] if self._items else default

    def group_by(self, key: Callable[..., Any]) -> Dict[Any, List[Any]]:
        """Group items by the result of key, keeping first-seen key order"""
        groups = {}
        sequence.for_each(self._items, lambda e, i: groups.setdefault(key(e), []).append(e))
        return groups

    # --------- container protocol ----------
    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __eq__(self, other):
        if isinstance(other, EagerCollection):
            return self._items == other._items
        return NotImplemented

    def __repr__(self):
        return f"EagerCollection({self._items!r})"

    # --------- helpers ----------
    @classmethod
    def _wrap(cls, items: List[Any]) -> "EagerCollection":
        collection = cls.__new__(cls)
        collection._items = items
        return collection
