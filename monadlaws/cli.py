import argparse
import json
import logging
import os
import sys
from collections.abc import Sequence

from dotenv import load_dotenv

from monadlaws.demo import run_demo
from monadlaws.report import format_markdown, format_report, report_json

logger = logging.getLogger(__name__)

LOG_LEVEL_ENV = "MONADLAWS_LOG_LEVEL"


def configure_logging(verbose: bool) -> int:
    """Send log records to stderr; stdout carries only the report.

    An unknown MONADLAWS_LOG_LEVEL falls back to WARNING with a warning
    instead of aborting the run. Returns the level applied to the root logger.
    """
    requested = os.environ.get(LOG_LEVEL_ENV, "WARNING").strip().upper()
    known = logging.getLevelNamesMapping().get(requested)

    if verbose:
        level = logging.DEBUG
    elif known is None:
        level = logging.WARNING
    else:
        level = known

    logging.basicConfig(
        level=level,
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
        force=True,
    )
    if known is None:
        logger.warning(
            "Ignoring unknown %s=%r; using %s",
            LOG_LEVEL_ENV,
            requested,
            logging.getLevelName(level),
        )
    return level


def handle_check(output_format: str, *, strict: bool) -> int:
    """Run the law scenarios and print them in the requested format."""
    report = run_demo()

    match output_format:
        case "text":
            print(format_report(report))
        case "json":
            print(json.dumps(report_json(report), indent=2))
        case "markdown":
            print(format_markdown(report), end="")

    if not report.all_hold:
        for verdict in report.failures:
            logger.warning("%s (%s) does not hold", verdict.law.value, verdict.case)
        if strict:
            return 1
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="monadlaws",
        description="Check the monad laws for Maybe on a fixed set of scenarios",
    )
    parser.add_argument(
        "--format",
        choices=["text", "json", "markdown"],
        default="text",
        help="Output format (default: text, one line per check).",
    )
    parser.add_argument(
        "--strict",
        action=argparse.BooleanOptionalAction,
        default=False,
        help="Exit with status 1 when any law does not hold.",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        default=False,
        help="Log both sides of every check to stderr.",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Synchronous entry point for the console script."""
    load_dotenv()
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)
    try:
        return handle_check(args.format, strict=args.strict)
    except KeyboardInterrupt:
        print("\nOperation cancelled by user.", file=sys.stderr)
        return 130


if __name__ == "__main__":
    sys.exit(main())
