"""Error types shared by the scope engine and the bundler."""

from __future__ import annotations


class CSSScopeError(Exception):
    """Base class for all cssscope errors."""


class ParseError(CSSScopeError):
    """Raised when SCOPE/END markers cannot be matched up."""

    def __init__(
        self, message: str, line: int | None = None, column: int | None = None
    ):
        self.line = line
        self.column = column
        super().__init__(message)


class BundleError(CSSScopeError):
    """Raised when a bundling run has to abort."""

    def __init__(self, message: str, path: str | None = None):
        self.path = path
        super().__init__(message)
