"""UserSectionManager: the surface a generator drives.

Typical pass:

    manager = UserSectionManager()
    manager.define_section_with_default("Includes", None, "#include <stdio.h>\\n")
    manager.capture_from_file(output_path)      # previous output, may not exist
    writer = CodeWriter(buffer)
    manager.write_section(writer, "Includes")
    ...
    output_path.write_text(buffer.getvalue())

Call ``reset_written()`` before reusing one manager for another pass.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from pathlib import Path

from usercode_engine.sections.emitter import SectionEmitter
from usercode_engine.sections.registry import (
    SectionDefinition,
    SectionRegistry,
    ValidationResult,
)
from usercode_engine.sections.scanner import scan_file, scan_text
from usercode_engine.sections.store import ContentStore
from usercode_engine.writer import CodeWriter


@dataclass
class SectionStats:
    defined_count: int = 0
    captured_count: int = 0
    partial_count: int = 0
    with_default_count: int = 0

    def to_dict(self) -> dict[str, int]:
        return asdict(self)


class UserSectionManager:
    def __init__(self, registry: SectionRegistry | None = None):
        self.registry = registry if registry is not None else SectionRegistry()
        self.store = ContentStore(self.registry)
        self.emitter = SectionEmitter(self.store)

    # ── definitions ───────────────────────────────────────────────

    def define_section(self, name: str) -> SectionDefinition:
        return self.registry.define(name)

    def define_section_with_description(self, name: str, description: str) -> SectionDefinition:
        return self.registry.define_with_description(name, description)

    def define_section_with_default(
        self,
        name: str,
        description: str | None,
        default_content: str,
    ) -> SectionDefinition:
        return self.registry.define_with_default(name, description, default_content)

    def has_section(self, name: str) -> bool:
        return name in self.registry

    def section_names(self) -> list[str]:
        return self.registry.names()

    # ── capture ───────────────────────────────────────────────────

    def capture_from_file(self, path: Path | str) -> None:
        """Capture regions from a previous output file; a missing file is a no-op."""
        self.store.ingest(scan_file(path))

    def capture_from_string(self, content: str, path: Path | str | None = None) -> None:
        self.store.ingest(scan_text(content, path))

    def get_section_content(self, name: str) -> str | None:
        return self.store.lookup(name)

    def has_partial_section(self, section_id: int) -> bool:
        return self.store.has_partial(section_id)

    def get_partial_section_content(self, section_id: int) -> str | None:
        return self.store.resolve_partial(section_id)

    def captured_section_names(self) -> list[str]:
        return self.store.captured_names()

    def clear_captured_content(self) -> None:
        """Drop every capture and forget what this pass has written."""
        self.store.clear()
        self.emitter.reset()

    # ── emission ──────────────────────────────────────────────────

    def write_section(self, writer: CodeWriter, name: str) -> bool:
        return self.emitter.emit_named(writer, name)

    def write_section_no_description(self, writer: CodeWriter, name: str) -> bool:
        return self.emitter.emit_named(writer, name, with_description=False)

    def write_section_content_only(self, writer: CodeWriter, name: str) -> bool:
        return self.emitter.emit_named(writer, name, with_markers=False)

    def write_partial_section(
        self,
        writer: CodeWriter,
        section_id: int,
        default_content: str | None = None,
    ) -> None:
        self.emitter.emit_partial(writer, section_id, default_content)

    def reset_written(self) -> None:
        self.emitter.reset()

    # ── reporting ─────────────────────────────────────────────────

    def stats(self) -> SectionStats:
        return SectionStats(
            defined_count=len(self.registry),
            captured_count=len(self.store.captured_names()),
            partial_count=len(self.store.partial_ids()),
            with_default_count=self.registry.with_default_count(),
        )

    def validate(self) -> None:
        """Raise UnknownSectionError if any captured name is undefined."""
        self.registry.validate(self.store.captured_names())

    def check_captured(self) -> ValidationResult:
        return self.registry.check(self.store.captured_names())
