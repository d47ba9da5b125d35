"""Template rendering for law reports.

Templates live in ``monadlaws/templates`` and receive the verdict rows plus
summary counts, so they never compute anything themselves.
"""

from __future__ import annotations

import os
from typing import Any

import jinja2

from .laws import LawReport

_TEMPLATE_DIR = os.path.join(os.path.dirname(__file__), "templates")
_ENV = jinja2.Environment(
    loader=jinja2.FileSystemLoader(_TEMPLATE_DIR),
    autoescape=False,
    keep_trailing_newline=True,
    trim_blocks=True,
    lstrip_blocks=True,
    undefined=jinja2.StrictUndefined,
)


def bool_str(value: bool) -> str:
    return "true" if value else "false"


_ENV.filters["bool_str"] = bool_str

MARKDOWN_TEMPLATE = "report.md.j2"


def report_context(report: LawReport) -> dict[str, Any]:
    return {
        "rows": [
            {"law": v.law.value, "case": v.case, "holds": v.holds}
            for v in report.verdicts
        ],
        "total": len(report.verdicts),
        "failed": len(report.failures),
        "all_hold": report.all_hold,
    }


def render_report(report: LawReport, template_name: str = MARKDOWN_TEMPLATE) -> str:
    """Render ``report`` through one of the package templates."""
    return _ENV.get_template(template_name).render(**report_context(report))
