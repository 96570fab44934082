# iterblocks/aio.py
"""Consumers and filters over async iterables.

Every function here awaits one element at a time from its source; no two
retrievals are ever in flight together. Predicates may be plain callables or
return an awaitable, which is awaited before the next element is pulled.
"""

from __future__ import annotations

import inspect
from collections.abc import AsyncIterable, AsyncIterator
from typing import TypeVar

from loguru import logger

from iterblocks.types import NOTHING, AsyncPredicate, Option, Some

T = TypeVar("T")


async def _accepts(predicate: AsyncPredicate[T], item: T) -> bool:
    result = predicate(item)
    if inspect.isawaitable(result):
        result = await result
    return bool(result)


async def async_array_collect(aiterable: AsyncIterable[T]) -> list[T]:
    """Collect the async iterable into a list.

    If the source fails part way through, the error propagates and nothing
    collected so far is returned.
    """
    result: list[T] = []
    async for item in aiterable:
        result.append(item)
    return result


async def async_filter(aiterable: AsyncIterable[T], predicate: AsyncPredicate[T]) -> AsyncIterator[T]:
    """Lazily yield the items of ``aiterable`` for which ``predicate`` is true.

    The predicate is called exactly once per item, in source order. Rejected
    items are consumed from the source but never yielded.
    """
    async for item in aiterable:
        if await _accepts(predicate, item):
            yield item


async def async_find(aiterable: AsyncIterable[T], predicate: AsyncPredicate[T]) -> Option[T]:
    """Eagerly find the first item for which ``predicate`` is true.

    Returns:
        ``Some(item)`` for the first match, or ``NOTHING`` once the source is
        exhausted without one. No item is retrieved after the match.
    """
    async for item in aiterable:
        if await _accepts(predicate, item):
            logger.trace("async_find matched an item")
            return Some(item)
    return NOTHING
