"""
Command-line driver: compile a route list file into CSV.

    route-csv INPUT OUTPUT [--no-header] [--no-end-comma] [--summary]

INPUT and OUTPUT must be the first two positional arguments; the switches
follow them in any order. The `-noHeader` / `-noEndComma` spellings are
accepted too. Switches must be spelled out in full; prefixes are ignored like
any other unknown switch. File names starting with `-` go after a `--`
separator, e.g. `route-csv -- -routes.txt -routes.csv`.
"""
from __future__ import annotations

import argparse
import logging
from dataclasses import replace
from typing import List, Optional, Sequence

from .compiler import CompilationReport, compile_lines
from .config import CompilerOptions
from .errors import MissingArgumentError, RouteCsvError
from .io_utils import read_route_lines, write_output
from .logging_setup import setup_logging
from .summary import carrier_summary

logger = logging.getLogger(__name__)

FAILURE_HEADER = "The following lines could not be compiled:"
SUCCESS_MESSAGE = "Compilation successful."
UNSUCCESSFUL_MESSAGE = "Compilation unsuccessful. No files were modified."


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="route-csv",
        allow_abbrev=False,
        description="Compile a list of flight routes, one per line, into a CSV file."
    )
    parser.add_argument(
        "input",
        nargs="?",
        help="File containing the routes to compile, e.g. 'UAN000/001 KDEN Denver to KBOI Boise'."
    )
    parser.add_argument(
        "output",
        nargs="?",
        help="File to write the compiled CSV to. Replaced only when compilation succeeds."
    )
    parser.add_argument(
        "--no-header",
        "-noHeader",
        action="store_true",
        help="Omit the 'csgn,csgn_out,csgn_ret,dep,arr,comment' header row."
    )
    parser.add_argument(
        "--no-end-comma",
        "-noEndComma",
        action="store_true",
        help="Drop the trailing comma on rows without a comment (not standard CSV)."
    )
    parser.add_argument(
        "--summary",
        action="store_true",
        help="Print route and codeshare counts per carrier after writing the output."
    )
    return parser


def resolve_options(args: argparse.Namespace) -> CompilerOptions:
    """Environment defaults, with command-line switches layered on top."""
    options = CompilerOptions.from_env()
    return replace(
        options,
        suppress_header=options.suppress_header or args.no_header,
        suppress_trailing_comma=options.suppress_trailing_comma or args.no_end_comma,
    )


def check_required(args: argparse.Namespace) -> None:
    missing: List[str] = []
    if not args.input:
        missing.append("Input filename")
    if not args.output:
        missing.append("Output filename")
    if missing:
        raise MissingArgumentError(missing)


def report_failures(report: CompilationReport) -> None:
    if not report.has_failures:
        return
    print(FAILURE_HEADER)
    for failure in report.failures:
        print(f"- {failure.line}")


def run(args: argparse.Namespace) -> CompilationReport:
    check_required(args)
    options = resolve_options(args)

    lines = read_route_lines(args.input)
    report = compile_lines(lines, options)
    report_failures(report)

    write_output(args.output, report.render(), encoding=options.encoding)
    logger.info(
        "Compilation finished",
        extra={
            "input_path": args.input,
            "output_path": args.output,
            "rows": len(report.rows),
            "failures": len(report.failures),
        },
    )
    return report


def main(argv: Optional[Sequence[str]] = None) -> int:
    setup_logging()
    args, extras = build_parser().parse_known_args(argv)
    if extras:
        # Unknown switches are ignored rather than rejected.
        logger.warning("Ignoring unrecognized arguments: %s", " ".join(extras))
    try:
        report = run(args)
    except MissingArgumentError as exc:
        for name in exc.names:
            print(f"Missing argument: {name}")
        print(UNSUCCESSFUL_MESSAGE)
        return 1
    except RouteCsvError as exc:
        logger.debug("Compilation aborted", exc_info=True)
        print(exc)
        print(UNSUCCESSFUL_MESSAGE)
        return 1

    print(SUCCESS_MESSAGE)
    if args.summary:
        summary = carrier_summary(report)
        if summary.empty:
            print("No routes compiled.")
        else:
            print(summary.to_string(index=False))
    return 0
