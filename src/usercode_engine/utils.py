"""Small string and path helpers shared by the writer and generators."""

from __future__ import annotations

from pathlib import Path


def file_exists(path: Path | str) -> bool:
    p = Path(path)
    return p.exists() and p.is_file()


def get_file_name(path: Path | str) -> str | None:
    name = Path(path).name
    return name or None


def join_strings(strings, separator: str) -> str:
    return separator.join(str(s) for s in strings)


def repeat_str(s: str, n: int) -> str:
    return s * n


def to_valid_identifier(s: str) -> str:
    """Convert arbitrary text into a C-style identifier.

    The first character must be a letter or underscore; every other
    character outside ``[A-Za-z0-9_]`` (unicode letters allowed) becomes
    an underscore.
    """
    if not s:
        return ""
    first = s[0] if (s[0].isalpha() or s[0] == "_") else "_"
    rest = "".join(c if (c.isalnum() or c == "_") else "_" for c in s[1:])
    return first + rest


def ensure_ends_with_newline(s: str) -> str:
    """Return ``s`` terminated by a newline. Empty input becomes ``"\\n"``."""
    return s if s.endswith("\n") else s + "\n"
