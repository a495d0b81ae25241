"""Error taxonomy for user section capture and emission.

Scanner errors carry the 1-based line number where the violation was
detected. Nothing here is logged; callers decide what to do.
"""

from __future__ import annotations

from pathlib import Path


class UserCodeError(Exception):
    """Base class for every error raised by usercode_engine."""


class ScanError(UserCodeError):
    """A marker stream that is not well formed."""

    def __init__(self, line: int, message: str, path: Path | str | None = None):
        self.line = line
        self.path = str(path) if path is not None else None
        prefix = f"{self.path}: " if self.path else ""
        super().__init__(f"{prefix}{message}")


class NestedSectionError(ScanError):
    def __init__(self, line: int, section: str, path: Path | str | None = None):
        self.section = section
        super().__init__(
            line,
            f"Nested user section at line {line}: already in section '{section}'",
            path,
        )


class MismatchedSectionError(ScanError):
    def __init__(
        self,
        line: int,
        expected: str,
        found: str,
        path: Path | str | None = None,
    ):
        self.expected = expected
        self.found = found
        super().__init__(
            line,
            f"Mismatched user section at line {line}: "
            f"expected '{expected}', found '{found}'",
            path,
        )


class InvalidSectionError(ScanError):
    """An end marker with no open region."""

    def __init__(self, line: int, found: str, path: Path | str | None = None):
        self.found = found
        super().__init__(
            line,
            f"Unexpected user section end at line {line}: "
            f"no matching begin for '{found}'",
            path,
        )


class UnclosedSectionError(ScanError):
    def __init__(self, section: str, line: int, path: Path | str | None = None):
        self.section = section
        super().__init__(
            line,
            f"Unclosed user section at end of file: '{section}'",
            path,
        )


class UnknownSectionError(UserCodeError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown user section: '{name}'")


class CaptureFailedError(UserCodeError):
    """Reading a previous output file failed. The cause is chained."""

    def __init__(self, path: Path | str):
        self.path = Path(path)
        super().__init__(f"Failed to capture user section from file: {self.path}")
