"""
Compiler options and their environment-variable defaults.
"""
from __future__ import annotations

import os
from dataclasses import dataclass, field

TRUTHY_VALUES = ("1", "true", "yes", "on")
FALSY_VALUES = ("0", "false", "no", "off")

DEFAULT_ENCODING = "utf-8"


def _env_flag(name: str, default: bool = False) -> bool:
    raw_value = os.environ.get(name)
    if raw_value is None:
        return default
    value = raw_value.strip().lower()
    if value in TRUTHY_VALUES:
        return True
    if value in FALSY_VALUES:
        return False
    # Blank or unrecognised values keep the default.
    return default


@dataclass
class CompilerOptions:
    suppress_header: bool = False
    suppress_trailing_comma: bool = False
    line_separator: str = field(default_factory=lambda: os.linesep)
    encoding: str = DEFAULT_ENCODING

    @classmethod
    def from_env(cls) -> "CompilerOptions":
        """
        Build options from the environment:

        * ROUTE_CSV_NO_HEADER drops the header row.
        * ROUTE_CSV_NO_END_COMMA drops the trailing comma of comment-less rows.
        * ROUTE_CSV_ENCODING sets the output encoding (blank means utf-8).
        """
        encoding = (os.environ.get("ROUTE_CSV_ENCODING") or "").strip() or DEFAULT_ENCODING
        return cls(
            suppress_header=_env_flag("ROUTE_CSV_NO_HEADER"),
            suppress_trailing_comma=_env_flag("ROUTE_CSV_NO_END_COMMA"),
            encoding=encoding,
        )
