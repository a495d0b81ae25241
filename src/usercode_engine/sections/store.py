"""Captured section content, with registry defaults as fallback."""

from __future__ import annotations

from usercode_engine.sections.registry import SectionRegistry
from usercode_engine.sections.scanner import CapturedSections


class ContentStore:
    """Lookup surface consulted while emitting a generation pass.

    Named regions resolve captured text -> registry default -> "".
    Partial regions have no registry default; ``resolve_partial``
    returns None when nothing was captured.
    """

    def __init__(self, registry: SectionRegistry):
        self.registry = registry
        self._named: dict[str, str] = {}
        self._partial: dict[int, str] = {}

    def ingest(self, captured: CapturedSections) -> None:
        """Merge a completed scan. Later captures replace earlier ones per key."""
        self._named.update(captured.named)
        self._partial.update(captured.partial)

    def resolve(self, name: str) -> str:
        if name in self._named:
            return self._named[name]
        default = self.registry.default_for(name)
        return default if default is not None else ""

    def lookup(self, name: str) -> str | None:
        """Captured text, else the registry default, else None."""
        if name in self._named:
            return self._named[name]
        return self.registry.default_for(name)

    def resolve_partial(self, section_id: int) -> str | None:
        return self._partial.get(section_id)

    def has_captured(self, name: str) -> bool:
        return name in self._named

    def has_partial(self, section_id: int) -> bool:
        return section_id in self._partial

    def captured_names(self) -> list[str]:
        return list(self._named)

    def partial_ids(self) -> list[int]:
        return list(self._partial)

    @property
    def named(self) -> dict[str, str]:
        return dict(self._named)

    @property
    def partial(self) -> dict[int, str]:
        return dict(self._partial)

    def clear(self) -> None:
        self._named.clear()
        self._partial.clear()
