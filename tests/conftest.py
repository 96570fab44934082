# tests/conftest.py

from __future__ import annotations

import asyncio
from collections.abc import AsyncIterator, Callable, Iterable, Iterator
from typing import Any

import pytest
from loguru import logger

from iterblocks.config import reset_settings


class PullRecorder:
    """Async source over fixed items that records how many items were pulled."""

    def __init__(self, items: Iterable[Any], *, fail_at: int | None = None):
        self.items = list(items)
        self.fail_at = fail_at
        self.pulled = 0
        self.in_flight = 0
        self.max_in_flight = 0

    async def __aiter__(self) -> AsyncIterator[Any]:
        for index, item in enumerate(self.items):
            self.in_flight += 1
            self.max_in_flight = max(self.max_in_flight, self.in_flight)
            await asyncio.sleep(0)
            self.in_flight -= 1
            if self.fail_at is not None and index == self.fail_at:
                raise RuntimeError(f"source failed at {index}")
            self.pulled += 1
            yield item


@pytest.fixture()
def async_source() -> Callable[..., PullRecorder]:
    """Factory for async sources that suspend before every item."""

    def factory(items: Iterable[Any], *, fail_at: int | None = None) -> PullRecorder:
        return PullRecorder(items, fail_at=fail_at)

    return factory


@pytest.fixture(autouse=True)
def fresh_settings() -> Iterator[None]:
    """Keep environment-driven settings scoped to each test."""
    reset_settings()
    try:
        yield
    finally:
        reset_settings()


@pytest.fixture()
def log_messages() -> Iterator[list[str]]:
    """Capture every iterblocks log message emitted during a test."""
    messages: list[str] = []
    logger.enable("iterblocks")
    sink_id = logger.add(lambda message: messages.append(message.record["message"]), level="TRACE")
    try:
        yield messages
    finally:
        logger.remove(sink_id)
        logger.disable("iterblocks")
