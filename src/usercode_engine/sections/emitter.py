"""Write resolved section content back out during a generation pass."""

from __future__ import annotations

import logging

from usercode_engine.sections import NAMED_BEGIN, NAMED_END, PARTIAL_BEGIN, PARTIAL_END
from usercode_engine.sections.store import ContentStore
from usercode_engine.utils import ensure_ends_with_newline
from usercode_engine.writer import CodeWriter

logger = logging.getLogger(__name__)


class SectionEmitter:
    """Emits named and partial regions through a CodeWriter.

    Owns the set of named regions already written in the current pass.
    A second request for the same name is skipped until ``reset()``.
    Not safe to share across concurrent passes.
    """

    def __init__(self, store: ContentStore):
        self.store = store
        self.written: set[str] = set()

    def reset(self) -> None:
        self.written.clear()

    def emit_named(
        self,
        writer: CodeWriter,
        name: str,
        *,
        with_description: bool = True,
        with_markers: bool = True,
    ) -> bool:
        """Write a named region once per pass.

        Args:
            writer: Destination formatter.
            name: Registered section name.
            with_description: Precede the region with its description comment.
            with_markers: Frame the content with begin/end markers and a
                trailing blank line. Without markers only the content is
                written.

        Returns:
            True if the region was written, False if it was already
            written in this pass.

        Raises:
            UnknownSectionError: ``name`` was never defined.
        """
        definition = self.store.registry.require(name)
        if name in self.written:
            logger.debug("Section '%s' already written this pass, skipping", name)
            return False

        content = self.store.resolve(name)

        if not with_markers:
            if content:
                writer.write_raw(ensure_ends_with_newline(content))
            self.written.add(name)
            return True

        if with_description and definition.description:
            writer.write_separator(definition.description)
        writer.writeln(NAMED_BEGIN.format(name=name))
        writer.write_raw(ensure_ends_with_newline(content))
        writer.writeln(NAMED_END.format(name=name))
        writer.newline()

        self.written.add(name)
        return True

    def emit_partial(
        self,
        writer: CodeWriter,
        section_id: int,
        default_content: str | None = None,
    ) -> None:
        """Write a partial region: captured text if any, else ``default_content``."""
        if isinstance(section_id, bool) or not isinstance(section_id, int) or section_id < 0:
            raise ValueError(f"Partial section id must be a non-negative integer, got {section_id!r}")

        content = self.store.resolve_partial(section_id)
        if content is None:
            content = default_content or ""

        writer.writeln(PARTIAL_BEGIN.format(id=section_id))
        writer.write_raw(ensure_ends_with_newline(content))
        writer.writeln(PARTIAL_END.format(id=section_id))
