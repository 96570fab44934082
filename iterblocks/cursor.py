# iterblocks/cursor.py
"""Explicit pull cursors over sync and async iterables.

A cursor turns an iterable into a "try get next" interface: each call to
``try_next`` returns ``Some(item)`` or ``NOTHING`` once the source is
exhausted. Stopping early is simply not calling ``try_next`` again.
"""

from __future__ import annotations

from collections.abc import AsyncIterable, AsyncIterator, Iterable, Iterator
from typing import Generic, TypeVar

from iterblocks.types import NOTHING, Option, Some

T = TypeVar("T")


class Cursor(Generic[T]):
    """Pull items one at a time from a synchronous iterable."""

    def __init__(self, iterable: Iterable[T]):
        self._iterator: Iterator[T] = iter(iterable)
        self._exhausted = False

    @property
    def exhausted(self) -> bool:
        return self._exhausted

    def try_next(self) -> Option[T]:
        """Return the next item wrapped in ``Some``, or ``NOTHING`` at the end."""
        if self._exhausted:
            return NOTHING
        try:
            item = next(self._iterator)
        except StopIteration:
            self._exhausted = True
            return NOTHING
        return Some(item)

    def __iter__(self) -> Iterator[T]:
        while True:
            step = self.try_next()
            if step.is_nothing():
                return
            yield step.unwrap()


class AsyncCursor(Generic[T]):
    """Pull items one at a time from an async iterable."""

    def __init__(self, aiterable: AsyncIterable[T]):
        self._iterator: AsyncIterator[T] = aiter(aiterable)
        self._exhausted = False

    @property
    def exhausted(self) -> bool:
        return self._exhausted

    async def try_next(self) -> Option[T]:
        """Await the next item wrapped in ``Some``, or ``NOTHING`` at the end."""
        if self._exhausted:
            return NOTHING
        try:
            item = await anext(self._iterator)
        except StopAsyncIteration:
            self._exhausted = True
            return NOTHING
        return Some(item)

    async def __aiter__(self) -> AsyncIterator[T]:
        while True:
            step = await self.try_next()
            if step.is_nothing():
                return
            yield step.unwrap()
