"""Monad law checkers for Maybe.

Each checker builds the two sides of one law and compares their outcomes:

  left identity:   just(a).bind(f)      ==  f(a)
  right identity:  m.bind(just)         ==  m
  associativity:   m.bind(f).bind(g)    ==  m.bind(λx. f(x).bind(g))

Two outcomes agree when both are Nothing, or both hold equal values.
Absence is absorbed into the verdict here and never surfaces to callers.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import TypeVar

from .maybe import Maybe, Transform, just
from .result import Err, Ok

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Law(Enum):
    LEFT_IDENTITY = "Left Identity Law"
    RIGHT_IDENTITY = "Right Identity Law"
    ASSOCIATIVITY = "Associativity Law"


@dataclass(frozen=True)
class LawVerdict:
    """Outcome of checking one law on one input case ("Just" or "Nothing")."""

    law: Law
    case: str
    holds: bool


@dataclass(frozen=True)
class LawReport:
    verdicts: tuple[LawVerdict, ...]

    @property
    def failures(self) -> tuple[LawVerdict, ...]:
        return tuple(v for v in self.verdicts if not v.holds)

    @property
    def all_hold(self) -> bool:
        return len(self.failures) == 0


def same_outcome(left: Maybe[T], right: Maybe[T]) -> bool:
    """Compare two sides of a law.

    Both absent agrees, exactly one absent disagrees, otherwise the held
    values must be equal.
    """
    match (left.extract(), right.extract()):
        case (Err(), Err()):
            return True
        case (Ok(lv), Ok(rv)):
            return lv == rv
        case _:
            return False


def check_left_identity(value: T, f: Transform[T]) -> bool:
    left = just(value).bind(f)
    right = f(value)
    holds = same_outcome(left, right)
    logger.debug("%s: %r vs %r -> %s", Law.LEFT_IDENTITY.value, left, right, holds)
    return holds


def check_right_identity(m: Maybe[T]) -> bool:
    left = m.bind(just)
    holds = same_outcome(left, m)
    logger.debug("%s: %r vs %r -> %s", Law.RIGHT_IDENTITY.value, left, m, holds)
    return holds


def check_associativity(m: Maybe[T], f: Transform[T], g: Transform[T]) -> bool:
    left = m.bind(f).bind(g)
    right = m.bind(lambda x: f(x).bind(g))
    holds = same_outcome(left, right)
    logger.debug("%s: %r vs %r -> %s", Law.ASSOCIATIVITY.value, left, right, holds)
    return holds
