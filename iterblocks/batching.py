# iterblocks/batching.py
from __future__ import annotations

from collections.abc import AsyncIterable, AsyncIterator, Iterable, Iterator
from typing import Any, TypeVar

from loguru import logger

from iterblocks.config import get_settings
from iterblocks.errors import InvalidArgument

T = TypeVar('T')


def _resolve_batch_size(batch_size: Any) -> int:
    """Validate batch_size, falling back to the configured default when None."""
    if batch_size is None:
        batch_size = get_settings().batching.default_batch_size
    if isinstance(batch_size, bool) or not isinstance(batch_size, int):
        raise InvalidArgument("batch_size", batch_size, "expected an integer")
    if batch_size <= 0:
        raise InvalidArgument("batch_size", batch_size, "must be positive")
    logger.debug(f"Batching with batch_size={batch_size}")
    return batch_size


def batches(iterable: Iterable[T], batch_size: int | None = None) -> Iterator[list[T]]:
    """Batch data into chunks of a specified size.

    The last batch holds the remainder and is never empty; an empty source
    yields no batches at all.

    Raises:
        InvalidArgument: If batch_size is not a positive integer.
    """
    return _batches(iterable, _resolve_batch_size(batch_size))


def _batches(iterable: Iterable[T], batch_size: int) -> Iterator[list[T]]:
    batch: list[T] = []
    for item in iterable:
        batch.append(item)
        if len(batch) == batch_size:
            logger.trace(f"Flushing full batch of {batch_size}")
            yield batch
            batch = []
    if batch:
        logger.trace(f"Flushing final batch of {len(batch)}")
        yield batch


def async_batches(
    aiterable: AsyncIterable[T], batch_size: int | None = None
) -> AsyncIterator[list[T]]:
    """The async equivalent to :func:`batches`, over an async source."""
    return _async_batches(aiterable, _resolve_batch_size(batch_size))


async def _async_batches(aiterable: AsyncIterable[T], batch_size: int) -> AsyncIterator[list[T]]:
    batch: list[T] = []
    async for item in aiterable:
        batch.append(item)
        if len(batch) == batch_size:
            logger.trace(f"Flushing full batch of {batch_size}")
            yield batch
            batch = []
    if batch:
        logger.trace(f"Flushing final batch of {len(batch)}")
        yield batch
