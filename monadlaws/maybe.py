"""The Maybe sum type.

A Maybe[T] is exactly one of two variants:

- Just(value): holds one value of type T
- Nothing():   holds no value

Both variants are immutable. Dispatch happens by structural pattern matching
in the module-level ``bind`` and ``extract``; the methods on each variant
delegate to them so that binds can be chained left to right:

    just(10).bind(increment).bind(double)   # Just(22)
    nothing().bind(increment)               # Nothing(), increment never called
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar

from .result import Err, Ok, Result

T = TypeVar("T")


class NoValueError(LookupError):
    """Extraction was attempted on Nothing."""

    def __init__(self, message: str = "no value for this type") -> None:
        super().__init__(message)


@dataclass(frozen=True)
class Just(Generic[T]):
    value: T

    def bind(self, f: Callable[[T], Maybe[T]]) -> Maybe[T]:
        return bind(self, f)

    def extract(self) -> Result[T, NoValueError]:
        return extract(self)


@dataclass(frozen=True)
class Nothing(Generic[T]):
    def bind(self, f: Callable[[T], Maybe[T]]) -> Maybe[T]:
        return bind(self, f)

    def extract(self) -> Result[T, NoValueError]:
        return extract(self)


type Maybe[T] = Just[T] | Nothing[T]

type Transform[T] = Callable[[T], Maybe[T]]


def just(value: T) -> Maybe[T]:
    """Wrap a value (the monadic unit)."""
    return Just(value)


def nothing() -> Maybe[T]:
    return Nothing()


def bind(m: Maybe[T], f: Callable[[T], Maybe[T]]) -> Maybe[T]:
    """Apply ``f`` to the held value, or pass Nothing through untouched.

    The result of ``f`` is returned as is. ``f`` is never called on Nothing.
    """
    match m:
        case Just(value):
            return f(value)
        case Nothing():
            return m
        case _:
            raise TypeError(f"Expected Just or Nothing, got {type(m).__name__}")


def extract(m: Maybe[T]) -> Result[T, NoValueError]:
    """Ok(value) for Just, Err(NoValueError) for Nothing."""
    match m:
        case Just(value):
            return Ok(value)
        case Nothing():
            return Err(NoValueError())
        case _:
            raise TypeError(f"Expected Just or Nothing, got {type(m).__name__}")
