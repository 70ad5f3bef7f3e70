"""Eager, general-purpose operations over iterables."""

from .collection import EagerCollection
from .models import (
    ChunkOptions,
    ChunkStrategy,
    OperationMetrics,
    ZipOptions,
    ZipStrategy,
)
from .sequence import (
    all,
    any,
    chain,
    chunk,
    consume,
    dedup,
    drop,
    drop_while,
    filter,
    find,
    find_index,
    flat_map,
    for_each,
    length,
    map,
    reduce,
    repeat,
    reverse,
    scan,
    take,
    take_while,
    window,
    zip,
)
from .utils import (
    EmptySequenceError,
    IncompleteChunkError,
    InvalidArgumentError,
    InvalidStrategyError,
    SequenceError,
    StrictModeError,
    UnequalLengthError,
    measure_operation,
)

__version__ = "1.0.0"

# all, any, filter, map and zip stay out of star-imports so they never
# shadow the builtins of the importing module
__all__ = [
    "EagerCollection",
    "ChunkOptions",
    "ChunkStrategy",
    "OperationMetrics",
    "ZipOptions",
    "ZipStrategy",
    "chain",
    "chunk",
    "consume",
    "dedup",
    "drop",
    "drop_while",
    "find",
    "find_index",
    "flat_map",
    "for_each",
    "length",
    "reduce",
    "repeat",
    "reverse",
    "scan",
    "take",
    "take_while",
    "window",
    "EmptySequenceError",
    "IncompleteChunkError",
    "InvalidArgumentError",
    "InvalidStrategyError",
    "SequenceError",
    "StrictModeError",
    "UnequalLengthError",
    "measure_operation",
]
