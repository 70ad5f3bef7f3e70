"""
Eager operations over iterables.

Every function consumes its input once, left to right, and returns a freshly
built list, a scalar or nothing. Callbacks are called as ``callback(element,
index)``; a callback that only takes the element is called without the index.
``all``, ``any``, ``find``, ``find_index``, ``take`` and ``take_while`` stop
pulling from the input as soon as their result is known; everything else
drains it.
"""

import logging
import operator
from collections import deque
from itertools import islice
from typing import Any, Callable, Iterable, List, Optional, Tuple, TypeVar

from .models import ChunkOptions, ChunkStrategy, ZipOptions, ZipStrategy
from .utils import (
    EmptySequenceError,
    IncompleteChunkError,
    UnequalLengthError,
    validate_count,
    with_index,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")
R = TypeVar("R")

# Marks an exhausted cursor and an omitted initial value
_EXHAUSTED = object()
_MISSING = object()


# --------- predicates & traversal ----------

def all(iterable: Iterable[T], predicate: Optional[Callable[..., Any]] = None) -> bool:
    """Return True if every element satisfies the predicate (True when empty)"""
    test = with_index(predicate or bool)
    for i, e in enumerate(iterable):
        if not test(e, i):
            return False
    return True


def any(iterable: Iterable[T], predicate: Optional[Callable[..., Any]] = None) -> bool:
    """Return True if some element satisfies the predicate (False when empty)"""
    test = with_index(predicate or bool)
    for i, e in enumerate(iterable):
        if test(e, i):
            return True
    return False


def find(iterable: Iterable[T], predicate: Callable[..., Any]) -> Optional[T]:
    """Return the first element satisfying the predicate, or None"""
    test = with_index(predicate)
    for i, e in enumerate(iterable):
        if test(e, i):
            return e
    return None


def find_index(iterable: Iterable[T], predicate: Callable[..., Any]) -> int:
    """Return the index of the first element satisfying the predicate, or -1"""
    test = with_index(predicate)
    for i, e in enumerate(iterable):
        if test(e, i):
            return i
    return -1


def consume(iterable: Iterable[T]) -> None:
    """Exhaust the iterable, discarding its elements"""
    deque(iterable, maxlen=0)


def for_each(iterable: Iterable[T], consumer: Callable[..., Any]) -> None:
    """Call the consumer with every element and its index"""
    call = with_index(consumer)
    for i, e in enumerate(iterable):
        call(e, i)


def length(iterable: Iterable[T]) -> int:
    """Count the elements of the iterable, exhausting it"""
    count = 0
    for _ in iterable:
        count += 1
    return count


# --------- transformations ----------

def map(iterable: Iterable[T], mapping: Callable[..., R]) -> List[R]:
    """Apply the mapping to every element"""
    call = with_index(mapping)
    return [call(e, i) for i, e in enumerate(iterable)]


def filter(iterable: Iterable[T], predicate: Callable[..., Any]) -> List[T]:
    """Keep the elements satisfying the predicate, in order"""
    test = with_index(predicate)
    return [e for i, e in enumerate(iterable) if test(e, i)]


def flat_map(iterable: Iterable[T], mapping: Callable[..., Iterable[R]]) -> List[R]:
    """Map every element to an iterable and concatenate the results"""
    call = with_index(mapping)
    result = []
    for i, e in enumerate(iterable):
        result.extend(call(e, i))
    return result


# --------- positional slicing ----------

def take(iterable: Iterable[T], limit: int) -> List[T]:
    """Return the first ``limit`` elements, pulling no further"""
    limit = validate_count("limit", limit)
    return list(islice(iterable, limit))


def drop(iterable: Iterable[T], limit: int) -> List[T]:
    """Discard the first ``limit`` elements and return the rest"""
    limit = validate_count("limit", limit)
    it = iter(iterable)
    next(islice(it, limit, limit), None)
    return list(it)


def take_while(iterable: Iterable[T], predicate: Callable[..., Any]) -> List[T]:
    """Return the longest prefix whose elements satisfy the predicate"""
    test = with_index(predicate)
    result = []
    for i, e in enumerate(iterable):
        if not test(e, i):
            break
        result.append(e)
    return result


def drop_while(iterable: Iterable[T], predicate: Callable[..., Any]) -> List[T]:
    """Discard the prefix satisfying the predicate and return everything after it"""
    test = with_index(predicate)
    it = iter(iterable)
    for i, e in enumerate(it):
        if not test(e, i):
            return [e, *it]
    return []


# --------- aggregation ----------

def reduce(iterable: Iterable[T], reducer: Callable[..., Any], initial: Any = _MISSING) -> Any:
    """
    Fold the iterable into a single value.

    Without ``initial`` the first element seeds the accumulator and the
    reducer is first called for the second element, with index 1. Reducing
    an empty iterable without ``initial`` raises EmptySequenceError.
    """
    call = with_index(reducer, arity=2)
    it = iter(iterable)
    if initial is _MISSING:
        acc = next(it, _EXHAUSTED)
        if acc is _EXHAUSTED:
            logger.debug("reduce called on an empty iterable without an initial value")
            raise EmptySequenceError("No elements to reduce and no initial value given")
        start = 1
    else:
        acc = initial
        start = 0

    for i, e in enumerate(it, start):
        acc = call(acc, e, i)
    return acc


def scan(iterable: Iterable[T], accumulator: Callable[..., Any], initial: Any = _MISSING) -> List[Any]:
    """
    Return every intermediate value of a fold.

    Without ``initial`` the first element is emitted unchanged and seeds the
    accumulator. With ``initial`` the seed itself is not emitted.
    """
    call = with_index(accumulator, arity=2)
    it = iter(iterable)
    result = []
    if initial is _MISSING:
        acc = next(it, _EXHAUSTED)
        if acc is _EXHAUSTED:
            return result
        result.append(acc)
        start = 1
    else:
        acc = initial
        start = 0

    for i, e in enumerate(it, start):
        acc = call(acc, e, i)
        result.append(acc)
    return result


# --------- structural reshaping ----------

def reverse(iterable: Iterable[T]) -> List[T]:
    """Return the elements in reverse order"""
    result = list(iterable)
    result.reverse()
    return result


def chunk(
    iterable: Iterable[T],
    size: int,
    strategy: ChunkStrategy = ChunkStrategy.DROP_END,
    fill_value: Any = None,
) -> List[List[T]]:
    """
    Split the iterable into consecutive lists of ``size`` elements.

    ``strategy`` decides what happens to a trailing partial chunk:

    * ``dropEnd`` discards it (default)
    * ``keepEnd`` keeps it as a shorter chunk
    * ``padEnd`` fills its missing slots with ``fill_value``
    * ``strict`` raises IncompleteChunkError
    """
    size = validate_count("size", size, minimum=1)
    options = ChunkOptions.resolve(strategy, fill_value)

    result = []
    current = []
    for e in iterable:
        current.append(e)
        if len(current) == size:
            result.append(current)
            current = []

    if not current or options.strategy == ChunkStrategy.DROP_END:
        return result
    if options.strategy == ChunkStrategy.KEEP_END:
        result.append(current)
    elif options.strategy == ChunkStrategy.PAD_END:
        current.extend([options.fill_value] * (size - len(current)))
        result.append(current)
    else:
        logger.debug(f"chunk found {len(current)} trailing element(s) with size {size}")
        raise IncompleteChunkError(
            f"Incomplete chunk: {len(current)} trailing element(s) for chunk size {size}"
        )
    return result


def window(iterable: Iterable[T], size: int) -> List[List[T]]:
    """Return every run of ``size`` consecutive elements, advancing by one"""
    size = validate_count("size", size, minimum=1)
    it = iter(iterable)
    buffer = deque(islice(it, size), maxlen=size)
    if len(buffer) < size:
        return []

    result = [list(buffer)]
    for e in it:
        buffer.append(e)
        result.append(list(buffer))
    return result


def dedup(iterable: Iterable[T], eq: Callable[[T, T], Any] = operator.eq) -> List[T]:
    """
    Collapse runs of consecutive equal elements into their first element.

    Only adjacent duplicates are removed: ``[1, 2, 2, 1]`` becomes
    ``[1, 2, 1]``.
    """
    it = iter(iterable)
    first = next(it, _EXHAUSTED)
    if first is _EXHAUSTED:
        return []

    result = [first]
    for e in it:
        if not eq(result[-1], e):
            result.append(e)
    return result


def chain(*iterables: Iterable[T]) -> List[T]:
    """Concatenate the iterables in order"""
    result = []
    for iterable in iterables:
        result.extend(iterable)
    return result


def repeat(value: T, times: int) -> List[T]:
    """Return a list holding ``value`` ``times`` times (not copied)"""
    times = validate_count("times", times)
    return [value] * times


# --------- zipping ----------

def zip(
    *iterables: Iterable[Any],
    strategy: ZipStrategy = ZipStrategy.SHORTEST,
    fill_value: Any = None,
) -> List[Tuple[Any, ...]]:
    """
    Combine iterables position-wise into tuples.

    ``strategy`` and ``fill_value`` are keyword-only, so no positional
    argument is ever taken for options:

    * ``shortest`` stops as soon as any iterable runs out (default)
    * ``longest`` runs until all are exhausted, using ``fill_value`` for
      the ones that ran out
    * ``strict`` raises UnequalLengthError if the lengths differ
    """
    options = ZipOptions.resolve(strategy, fill_value)
    cursors = [iter(iterable) for iterable in iterables]
    if not cursors:
        return []

    if options.strategy == ZipStrategy.SHORTEST:
        return _zip_shortest(cursors)
    if options.strategy == ZipStrategy.LONGEST:
        return _zip_longest(cursors, options.fill_value)
    return _zip_strict(cursors)


def _zip_shortest(cursors):
    result = []
    while True:
        row = []
        for cursor in cursors:
            e = next(cursor, _EXHAUSTED)
            if e is _EXHAUSTED:
                return result
            row.append(e)
        result.append(tuple(row))


def _zip_longest(cursors, fill_value):
    result = []
    while True:
        row = []
        exhausted = 0
        for cursor in cursors:
            e = next(cursor, _EXHAUSTED)
            if e is _EXHAUSTED:
                exhausted += 1
                e = fill_value
            row.append(e)
        if exhausted == len(cursors):
            return result
        result.append(tuple(row))


def _zip_strict(cursors):
    result = []
    while True:
        row = [next(cursor, _EXHAUSTED) for cursor in cursors]
        exhausted = sum(1 for e in row if e is _EXHAUSTED)
        if exhausted == len(cursors):
            return result
        if exhausted:
            logger.debug(f"zip found {exhausted} of {len(cursors)} iterables exhausted at row {len(result)}")
            raise UnequalLengthError(
                f"Zipped iterables of unequal length with strategy strict "
                f"(first shorter iterable ended after {len(result)} element(s))"
            )
        result.append(tuple(row))
