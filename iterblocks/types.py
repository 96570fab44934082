"""Type definitions shared by the iteration utilities.

This module provides the predicate aliases accepted by the filtering
functions and a small ``Option`` type used to report "maybe a value"
results without reserving an in-band sentinel such as ``None``.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar, Union

T = TypeVar("T")

Predicate = Callable[[T], bool]
AsyncPredicate = Callable[[T], Union[bool, Awaitable[bool]]]


@dataclass(frozen=True, slots=True)
class Some(Generic[T]):
    """A present value. Always truthy, even when wrapping a falsy value."""

    value: T

    def __bool__(self) -> bool:
        return True

    def is_some(self) -> bool:
        return True

    def is_nothing(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value

    def unwrap_or(self, default: Any) -> T:
        return self.value


class Nothing:
    """The absence of a value. Use the ``NOTHING`` singleton."""

    __slots__ = ()
    _instance: Nothing | None = None

    def __new__(cls) -> Nothing:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "NOTHING"

    def __reduce__(self) -> str:
        return "NOTHING"

    def is_some(self) -> bool:
        return False

    def is_nothing(self) -> bool:
        return True

    def unwrap(self) -> Any:
        raise ValueError("Called unwrap() on NOTHING.")

    def unwrap_or(self, default: T) -> T:
        return default


NOTHING = Nothing()

Option = Union[Some[T], Nothing]

# Public API
__all__ = [
    "AsyncPredicate",
    "NOTHING",
    "Nothing",
    "Option",
    "Predicate",
    "Some",
]
