"""Errors, argument checks and small helpers shared by the sequence operations."""

import inspect
import logging
import operator
import time
import tracemalloc
from typing import Any, Callable, Optional, Tuple

logger = logging.getLogger(__name__)


class SequenceError(Exception):
    """Base class for every error raised by eagerseq."""
    pass


class InvalidArgumentError(SequenceError, ValueError):
    """Raised when a size, count or limit argument is out of range."""
    pass


class InvalidStrategyError(InvalidArgumentError):
    """Raised when a strategy name is not recognised."""

    def __init__(self, strategy: Any, accepted=()):
        self.strategy = strategy
        self.accepted = tuple(accepted)
        message = f"Unrecognised strategy: {strategy!r}"
        if self.accepted:
            message += f" (expected one of: {', '.join(self.accepted)})"
        super().__init__(message)


class EmptySequenceError(SequenceError, ValueError):
    """Raised when reducing an empty sequence without an initial value."""
    pass


class StrictModeError(SequenceError, ValueError):
    """Raised when a strict strategy finds mismatched input."""
    pass


class IncompleteChunkError(StrictModeError):
    """Raised by chunk(strategy="strict") on a trailing partial group."""
    pass


class UnequalLengthError(StrictModeError):
    """Raised by zip(strategy="strict") on iterables of unequal length."""
    pass


def validate_count(name: str, value: Any, minimum: int = 0) -> int:
    """Return ``value`` as an int, or raise if it is not an integer >= minimum."""
    if isinstance(value, bool):
        logger.debug(f"Rejected boolean {name}: {value!r}")
        raise InvalidArgumentError(f"{name} must be an integer, got {value!r}")
    try:
        count = operator.index(value)
    except TypeError as e:
        logger.debug(f"Rejected non-integer {name}: {value!r}")
        raise InvalidArgumentError(f"{name} must be an integer, got {value!r}") from e
    if count < minimum:
        logger.debug(f"Rejected {name}={count} (minimum {minimum})")
        raise InvalidArgumentError(f"{name} must be >= {minimum}, got {count}")
    return count


def _requires_positional(func: Callable, count: int) -> bool:
    try:
        signature = inspect.signature(func)
    except (TypeError, ValueError):
        # builtins such as str or int expose no signature
        return False

    # optional parameters such as round's ndigits never receive the index
    required = 0
    for param in signature.parameters.values():
        if param.kind == inspect.Parameter.VAR_POSITIONAL:
            return True
        if param.kind in (inspect.Parameter.POSITIONAL_ONLY,
                          inspect.Parameter.POSITIONAL_OR_KEYWORD) \
                and param.default is inspect.Parameter.empty:
            required += 1
    return required >= count


def with_index(func: Callable, arity: int = 1) -> Callable:
    """
    Adapt a callback to the ``(*args, index)`` calling convention.

    ``arity`` is the number of arguments the callback always receives
    (1 for predicates and mappings, 2 for reducers). When the callback
    requires one more positional argument it is called with the traversal index
    appended; otherwise the index is dropped.
    """
    if _requires_positional(func, arity + 1):
        return func

    def call(*args):
        return func(*args[:arity])

    return call


def measure_operation(operation_name: str, func: Callable, *args, **kwargs) -> Tuple[Any, "OperationMetrics"]:
    """Run one operation and return its result with timing and memory metrics"""
    from .models import OperationMetrics

    already_tracing = tracemalloc.is_tracing()
    if not already_tracing:
        tracemalloc.start()
    tracemalloc.reset_peak()
    start_time = time.perf_counter()

    try:
        result = func(*args, **kwargs)
        execution_time_ms = (time.perf_counter() - start_time) * 1000
        _, peak = tracemalloc.get_traced_memory()
    except Exception as e:
        execution_time_ms = (time.perf_counter() - start_time) * 1000
        _, peak = tracemalloc.get_traced_memory()
        metrics = OperationMetrics(
            operation=operation_name,
            execution_time_ms=execution_time_ms,
            peak_memory_bytes=peak,
            success=False,
            error=str(e),
        )
        logger.error(f"{operation_name} failed: {metrics.model_dump()}")
        raise
    finally:
        if not already_tracing:
            tracemalloc.stop()

    metrics = OperationMetrics(
        operation=operation_name,
        execution_time_ms=execution_time_ms,
        peak_memory_bytes=peak,
        success=True,
        result_size=_result_size(result),
    )
    logger.info(
        f"{operation_name} completed in {execution_time_ms:.3f}ms "
        f"(peak {peak} bytes, size {metrics.result_size})"
    )
    return result, metrics


def _result_size(result: Any) -> Optional[int]:
    if hasattr(result, "__len__"):
        return len(result)
    return None
