"""Sample transformations and the fixed law scenarios run by the CLI."""

from __future__ import annotations

from .laws import (
    Law,
    LawReport,
    LawVerdict,
    check_associativity,
    check_left_identity,
    check_right_identity,
)
from .maybe import Maybe, just, nothing


def increment(x: int) -> Maybe[int]:
    return just(x + 1)


def double(x: int) -> Maybe[int]:
    return just(x * 2)


def fail(x: int) -> Maybe[int]:
    return nothing()


def run_demo() -> LawReport:
    """Check each law once on a value-producing path and once on an absent one."""
    return LawReport(
        verdicts=(
            LawVerdict(Law.LEFT_IDENTITY, "Just", check_left_identity(10, increment)),
            LawVerdict(Law.LEFT_IDENTITY, "Nothing", check_left_identity(10, fail)),
            LawVerdict(Law.RIGHT_IDENTITY, "Just", check_right_identity(just(10))),
            LawVerdict(Law.RIGHT_IDENTITY, "Nothing", check_right_identity(nothing())),
            LawVerdict(
                Law.ASSOCIATIVITY,
                "Just",
                check_associativity(just(10), increment, double),
            ),
            LawVerdict(
                Law.ASSOCIATIVITY,
                "Nothing",
                check_associativity(nothing(), increment, double),
            ),
        )
    )
