"""Result type for operations that can fail without raising."""

from dataclasses import dataclass
from typing import TypeVar, Generic

T = TypeVar("T")
E = TypeVar("E", bound=Exception)


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful outcome carrying a value."""

    value: T


@dataclass(frozen=True)
class Err(Generic[E]):
    """Failed outcome carrying the reason, never a placeholder value."""

    error: E


type Result[T, E] = Ok[T] | Err[E]
