"""Command-line entry point for the index.html check suite."""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path
from typing import TextIO

from htmlcheck.options import SuiteOptions
from htmlcheck.pipeline import SuiteRunResult, run_suite


def configure_logging(level_name: str) -> None:
    level = logging.getLevelNamesMapping().get(level_name.upper(), logging.WARNING)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="htmlcheck",
        description="Check that index.html exists, validates, follows best practices and is indented.",
    )
    parser.add_argument("--root", type=Path, default=None, help="Directory containing index.html.")
    parser.add_argument("--validator-url", type=str, default=None, help="Nu HTML Checker endpoint.")
    parser.add_argument("--timeout", type=float, default=None, help="Validator timeout in seconds.")
    parser.add_argument("--log-level", type=str, default="WARNING", help="Logging level.")
    return parser.parse_args(argv)


def render_report(result: SuiteRunResult, out: TextIO) -> None:
    """Write a mocha-style summary: one mark per check, then failure details."""
    print(result.suite, file=out)
    for check in result.checks:
        mark = "✓" if check.passed else "✗"
        print(f"  {mark} {check.name}", file=out)

    failures = result.failures
    print(file=out)
    print(f"  {len(result.checks) - len(failures)} passing", file=out)
    if not failures:
        return
    print(f"  {len(failures)} failing", file=out)

    for index, check in enumerate(failures, start=1):
        if check.error is None:
            continue
        print(file=out)
        print(f"  {index}) {result.suite} {check.name}:", file=out)
        print(f"     {check.error.title}", file=out)
        for detail in check.error.details:
            print(f"       {detail}", file=out)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(sys.argv[1:] if argv is None else argv)
    configure_logging(args.log_level)

    try:
        options = SuiteOptions.from_env(args.root)
        if args.validator_url is not None:
            options = replace(options, validator_url=args.validator_url)
        if args.timeout is not None:
            options = replace(options, timeout=args.timeout)
    except ValueError as exc:
        print(f"htmlcheck: {exc}", file=sys.stderr)
        return 2

    result = run_suite(options)
    render_report(result, sys.stdout)
    return 0 if result.passed else 1


if __name__ == "__main__":
    raise SystemExit(main())
