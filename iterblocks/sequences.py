# iterblocks/sequences.py
"""Lazy integer ranges and index pairing.

Both functions shadow the builtins of the same name; import them
qualified (``iterblocks.range``) or alias them when the builtin is needed in
the same scope.
"""

from __future__ import annotations

import operator
from collections.abc import Iterable, Iterator
from typing import Any, TypeVar

from loguru import logger

from iterblocks.errors import InvalidArgument

T = TypeVar("T")


def _as_int(argument: str, value: Any) -> int:
    try:
        return operator.index(value)
    except TypeError:
        raise InvalidArgument(argument, value, "expected an integer") from None


def range(start_or_stop: int, stop: int | None = None, step: int = 1) -> Iterator[int]:
    """Create a lazy iterator over the half-open interval [start, stop).

    Args:
        start_or_stop: The exclusive stop bound when ``stop`` is omitted
            (start then defaults to 0), otherwise the inclusive start bound.
        stop: Exclusive stop bound.
        step: Increment between values; may be negative but never zero.

    Returns:
        A fresh generator of integers. Empty when start is already past stop
        in the direction of ``step``.

    Raises:
        InvalidArgument: If ``step`` is 0 or any bound is not an integer.
            Raised at call time, before any value is produced.
    """
    if stop is None:
        start, stop = 0, _as_int("stop", start_or_stop)
    else:
        start, stop = _as_int("start", start_or_stop), _as_int("stop", stop)
    step = _as_int("step", step)
    if step == 0:
        raise InvalidArgument("step", step)

    logger.debug(f"Ranging over [{start}, {stop}) with step {step}")
    return _range(start, stop, step)


def _range(start: int, stop: int, step: int) -> Iterator[int]:
    i = start
    if step > 0:
        while i < stop:
            yield i
            i += step
    else:
        while i > stop:
            yield i
            i += step


def enumerate(iterable: Iterable[T]) -> Iterator[tuple[int, T]]:
    """Pair each item with its zero-based position, lazily."""
    index = 0
    for item in iterable:
        yield index, item
        index += 1
