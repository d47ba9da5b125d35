"""monadlaws: the Maybe monad and checkers for the three monad laws."""

from .result import Ok, Err, Result
from .maybe import (
    Just,
    Maybe,
    NoValueError,
    Nothing,
    Transform,
    bind,
    extract,
    just,
    nothing,
)
from .laws import (
    Law,
    LawReport,
    LawVerdict,
    check_associativity,
    check_left_identity,
    check_right_identity,
    same_outcome,
)
from .demo import double, fail, increment, run_demo
from .report import format_markdown, format_report, report_json

__all__ = [
    # Result
    "Ok", "Err", "Result",
    # Maybe
    "Just", "Nothing", "Maybe", "Transform", "NoValueError",
    "just", "nothing", "bind", "extract",
    # Laws
    "Law", "LawVerdict", "LawReport", "same_outcome",
    "check_left_identity", "check_right_identity", "check_associativity",
    # Demo
    "increment", "double", "fail", "run_demo",
    # Report
    "format_report", "format_markdown", "report_json",
]
