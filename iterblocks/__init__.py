# iterblocks/__init__.py
from loguru import logger

from iterblocks.aio import async_array_collect, async_filter, async_find
from iterblocks.batching import async_batches, batches
from iterblocks.config import IterblocksSettings, configure_logging, get_settings
from iterblocks.cursor import AsyncCursor, Cursor
from iterblocks.errors import InvalidArgument, IterblocksError
from iterblocks.sequences import enumerate, range
from iterblocks.types import NOTHING, Nothing, Option, Some

logger.disable("iterblocks")

__version__ = "0.1.0"

__all__ = [
    "range",
    "enumerate",
    "batches",
    "async_batches",
    "async_array_collect",
    "async_filter",
    "async_find",
    "Cursor",
    "AsyncCursor",
    "Some",
    "Nothing",
    "NOTHING",
    "Option",
    "InvalidArgument",
    "IterblocksError",
    "IterblocksSettings",
    "get_settings",
    "configure_logging",
]
