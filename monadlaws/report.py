from __future__ import annotations

from typing import Any

from .laws import LawReport, LawVerdict
from .render import bool_str, render_report


def format_verdict(verdict: LawVerdict) -> str:
    return f"{verdict.law.value} ({verdict.case}): {bool_str(verdict.holds)}"


def format_report(report: LawReport) -> str:
    """Human-readable report for terminal output, one line per verdict."""
    return "\n".join(format_verdict(v) for v in report.verdicts)


def format_markdown(report: LawReport) -> str:
    return render_report(report)


def report_json(report: LawReport) -> dict[str, Any]:
    """Machine-readable report for pipeline integration."""
    return {
        "all_hold": report.all_hold,
        "verdicts": [
            {
                "law": v.law.value,
                "case": v.case,
                "holds": v.holds,
            }
            for v in report.verdicts
        ],
    }
