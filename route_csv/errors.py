"""Fatal error kinds raised while compiling a route file."""

from __future__ import annotations

from typing import Sequence


class RouteCsvError(Exception):
    """Base class for errors that abort a compilation run."""

    def __init__(self, message: str, path: str | None = None):
        super().__init__(message)
        self.path = path


class MissingArgumentError(RouteCsvError):
    def __init__(self, names: Sequence[str]):
        self.names = list(names)
        super().__init__("Missing argument: " + ", ".join(self.names))


class InputNotFoundError(RouteCsvError):
    def __init__(self, path: str):
        super().__init__(f"Error: {path} does not exist.", path)


class InputUnreadableError(RouteCsvError):
    def __init__(self, path: str):
        super().__init__(f"Something went wrong while trying to read {path}", path)


class OutputUnwritableError(RouteCsvError):
    def __init__(self, path: str):
        super().__init__(f"Something went wrong while writing to {path}.", path)
