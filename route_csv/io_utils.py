"""Reading route files and writing compiled CSV output."""

from __future__ import annotations

import logging
import os
import re
import shutil
import tempfile
from pathlib import Path
from typing import List

from .errors import InputNotFoundError, InputUnreadableError, OutputUnwritableError

logger = logging.getLogger(__name__)

LINE_BREAK = re.compile(r"\r\n|\r|\n")


def split_lines(text: str) -> List[str]:
    """Split on CRLF, LF or CR; a trailing terminator does not add an empty line."""
    if not text:
        return []
    lines = LINE_BREAK.split(text)
    if lines[-1] == "":
        lines.pop()
    return lines


def read_route_lines(path: str | os.PathLike) -> List[str]:
    data_path = Path(path)
    try:
        # utf-8-sig drops a leading byte order mark if the editor wrote one
        text = data_path.read_text(encoding="utf-8-sig")
    except FileNotFoundError as exc:
        raise InputNotFoundError(str(path)) from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise InputUnreadableError(str(path)) from exc
    lines = split_lines(text)
    logger.debug("Read route file", extra={"input_path": str(path), "rows": len(lines)})
    return lines


def write_output(path: str | os.PathLike, text: str, encoding: str = "utf-8") -> None:
    """
    Replace `path` with `text` in one step.

    The data goes to a temporary file next to the destination which is then
    moved over it, so the destination is either fully written or untouched.
    """
    output_path = Path(path)
    tmp_name = None
    try:
        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{output_path.name}.", suffix=".tmp", dir=output_path.parent
        )
        with os.fdopen(fd, "w", encoding=encoding, newline="") as fh:
            fh.write(text)
        # mkstemp creates 0600 files; keep the permissions a plain write would give
        if output_path.is_file():
            shutil.copymode(output_path, tmp_name)
        else:
            os.chmod(tmp_name, 0o644)
        os.replace(tmp_name, output_path)
    except (OSError, LookupError, UnicodeEncodeError) as exc:
        if tmp_name is not None and os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise OutputUnwritableError(str(path)) from exc
    logger.debug("Wrote compiled output", extra={"output_path": str(path)})
