"""
Compile route description lines into CSV rows.

Each line must match the whole pattern below, for example:

    UAN069/070 ABCD Not a real airport to WXYZ Also not a real airport with Air Seattle codeshare

compiles to

    UAN,069,070,ABCD,WXYZ,Air Seattle codeshare

Lines that do not match are returned as ParseFailure values and never abort
the batch.
"""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Union

from .config import CompilerOptions

logger = logging.getLogger(__name__)

COMMENT_FIELD = "comment"
COMMENT_SEPARATOR = " with "

HEADER_FIELDS = ("csgn", "csgn_out", "csgn_ret", "dep", "arr", COMMENT_FIELD)
HEADER = ",".join(HEADER_FIELDS)

# The skip before "to " is greedy: the last arrival candidate that still lets
# the whole line match wins.
ROUTE_PATTERN = re.compile(
    r"(?P<csgn>[A-Z]{3})(?P<csgn_out>[0-9]{3,4})/(?P<csgn_ret>[0-9]{3,4}) "
    r"(?P<dep>[A-Z]{4}) .*to (?P<arr>[A-Z]{4})(?P<comment>.*)"
)


@dataclass(frozen=True)
class ParsedRoute:
    carrier: str
    outbound_number: str
    return_number: str
    departure: str
    arrival: str
    comment_raw: str = ""

    @property
    def comment(self) -> Optional[str]:
        """Text after the last ' with ' in the trailing description, if any."""
        if COMMENT_SEPARATOR not in self.comment_raw:
            return None
        return self.comment_raw.rpartition(COMMENT_SEPARATOR)[2]


@dataclass(frozen=True)
class ParseFailure:
    line: str
    line_no: int = 0


CompileResult = Union[ParsedRoute, ParseFailure]


def compile_line(line: str, line_no: int = 0) -> CompileResult:
    match = ROUTE_PATTERN.fullmatch(line)
    if match is None:
        return ParseFailure(line=line, line_no=line_no)
    return ParsedRoute(
        carrier=match.group("csgn"),
        outbound_number=match.group("csgn_out"),
        return_number=match.group("csgn_ret"),
        departure=match.group("dep"),
        arrival=match.group("arr"),
        comment_raw=match.group("comment"),
    )


def format_row(route: ParsedRoute, suppress_trailing_comma: bool = False) -> str:
    fields = [
        route.carrier,
        route.outbound_number,
        route.return_number,
        route.departure,
        route.arrival,
    ]
    comment = route.comment
    if comment is not None:
        fields.append(comment)
    elif not suppress_trailing_comma:
        # Empty comment column.
        fields.append("")
    return ",".join(fields)


@dataclass
class CompilationReport:
    """Rows and failures collected by one compilation run, in input order."""

    options: CompilerOptions
    routes: List[ParsedRoute] = field(default_factory=list)
    rows: List[str] = field(default_factory=list)
    failures: List[ParseFailure] = field(default_factory=list)

    @property
    def has_failures(self) -> bool:
        return bool(self.failures)

    def add(self, result: CompileResult) -> None:
        if isinstance(result, ParseFailure):
            self.failures.append(result)
            return
        self.routes.append(result)
        self.rows.append(format_row(result, self.options.suppress_trailing_comma))

    def render(self) -> str:
        lines = list(self.rows)
        if not self.options.suppress_header:
            lines.insert(0, HEADER)
        separator = self.options.line_separator
        return "".join(line + separator for line in lines)


def compile_lines(lines: Iterable[str], options: CompilerOptions | None = None) -> CompilationReport:
    report = CompilationReport(options=options or CompilerOptions())
    for line_no, line in enumerate(lines, start=1):
        result = compile_line(line, line_no=line_no)
        if isinstance(result, ParseFailure):
            logger.debug("Skipping unparseable line", extra={"line_no": line_no})
        report.add(result)
    logger.info(
        "Compiled route lines",
        extra={"rows": len(report.rows), "failures": len(report.failures)},
    )
    return report
