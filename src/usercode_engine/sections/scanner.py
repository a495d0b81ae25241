"""Single-pass marker scanner.

Reads a previously generated file line by line and collects the text
between begin/end marker pairs. At most one region is open at a time;
the first malformed marker aborts the whole scan so a broken file never
yields a partial capture.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from usercode_engine.errors import (
    CaptureFailedError,
    InvalidSectionError,
    MismatchedSectionError,
    NestedSectionError,
    UnclosedSectionError,
)
from usercode_engine.sections import (
    NAMED_BEGIN_RE,
    NAMED_END_RE,
    PARTIAL_BEGIN_RE,
    PARTIAL_END_RE,
)
from usercode_engine.writer import split_lines

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NamedRegion:
    name: str

    @property
    def identity(self) -> str:
        return self.name

    @property
    def label(self) -> str:
        return self.name


@dataclass(frozen=True)
class PartialRegion:
    id: int

    @property
    def identity(self) -> str:
        return str(self.id)

    @property
    def label(self) -> str:
        return f"partial section {self.id}"


OpenRegion = NamedRegion | PartialRegion


@dataclass
class CapturedSections:
    """Text captured by one scan, keyed by region identity."""

    named: dict[str, str] = field(default_factory=dict)
    partial: dict[int, str] = field(default_factory=dict)


def _mismatch(line: int, current: OpenRegion, found: OpenRegion, path) -> MismatchedSectionError:
    # same-kind mismatches report bare identities ("1" vs "2"); cross-kind
    # ones need the labels to be readable
    if type(current) is type(found):
        return MismatchedSectionError(line, current.identity, found.identity, path)
    return MismatchedSectionError(line, current.label, found.label, path)


def scan_text(content: str, path: Path | str | None = None) -> CapturedSections:
    """Capture every named and partial region in ``content``.

    Args:
        content: Full text of a previously generated file.
        path: Source of the text, used only in error messages.

    Returns:
        CapturedSections with each region's lines, newline-terminated,
        excluding the marker lines.

    Raises:
        NestedSectionError: A begin marker while a region is open.
        MismatchedSectionError: An end marker for a region other than the open one.
        InvalidSectionError: An end marker with no open region.
        UnclosedSectionError: Input ended inside a region.
    """
    captured = CapturedSections()
    current: OpenRegion | None = None
    buffer: list[str] = []
    line_number = 0

    for line_number, line in enumerate(split_lines(content), start=1):
        begin = None
        m = PARTIAL_BEGIN_RE.fullmatch(line)
        if m:
            begin = PartialRegion(int(m.group(1)))
        else:
            m = NAMED_BEGIN_RE.fullmatch(line)
            if m:
                begin = NamedRegion(m.group(1))

        if begin is not None:
            if current is not None:
                raise NestedSectionError(line_number, current.label, path)
            current = begin
            buffer = []
            continue

        end = None
        m = PARTIAL_END_RE.fullmatch(line)
        if m:
            end = PartialRegion(int(m.group(1)))
        else:
            m = NAMED_END_RE.fullmatch(line)
            if m:
                end = NamedRegion(m.group(1))

        if end is not None:
            if current is None:
                raise InvalidSectionError(line_number, end.label, path)
            if current != end:
                raise _mismatch(line_number, current, end, path)
            text = "".join(buffer)
            if isinstance(current, PartialRegion):
                captured.partial[current.id] = text
            else:
                captured.named[current.name] = text
            current = None
            continue

        if current is not None:
            buffer.append(line + "\n")

    if current is not None:
        raise UnclosedSectionError(current.label, line_number, path)

    logger.debug(
        "Captured %d named and %d partial sections%s",
        len(captured.named),
        len(captured.partial),
        f" from {path}" if path else "",
    )
    return captured


def scan_file(path: Path | str) -> CapturedSections:
    """Capture regions from a file on disk.

    A file that does not exist yields an empty capture: generating a
    brand-new file is not an error.

    Raises:
        CaptureFailedError: The file exists but could not be read.
        ScanError: The file's markers are malformed.
    """
    source = Path(path)
    if not source.exists():
        logger.debug("No previous output at %s, nothing to capture", source)
        return CapturedSections()

    try:
        content = source.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise CaptureFailedError(source) from e

    return scan_text(content, source)
