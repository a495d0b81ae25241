"""Generated-block splicer: keeps tool output current inside hand-written files.

The inverse of user sections: the file belongs to the developer and
only the blocks between GENERATED CODE markers are owned by a tool.

    /* GENERATED CODE BEGIN <tool> <purpose> */
    ...
    /* GENERATED CODE END <tool> <purpose> */

Anything outside these markers is preserved untouched.
"""

from __future__ import annotations

import logging
from pathlib import Path

from usercode_engine.utils import ensure_ends_with_newline

logger = logging.getLogger(__name__)

GENERATED_BEGIN = "/* GENERATED CODE BEGIN {tool} {purpose} */"
GENERATED_END = "/* GENERATED CODE END {tool} {purpose} */"


def _block(tool: str, purpose: str, content: str) -> str:
    return (
        GENERATED_BEGIN.format(tool=tool, purpose=purpose) + "\n"
        + ensure_ends_with_newline(content)
        + GENERATED_END.format(tool=tool, purpose=purpose) + "\n"
    )


class GeneratedCodeManager:
    """Collects (tool, purpose) -> content blocks and embeds them into a file."""

    def __init__(self) -> None:
        self.sections: dict[tuple[str, str], str] = {}

    def set_section(self, tool_name: str, purpose: str, content: str) -> None:
        self.sections[(tool_name, purpose)] = content

    def render(self, content: str | None) -> str:
        """Return ``content`` with every registered block spliced in.

        ``None`` means there is no existing file; the result is then just
        the blocks, each followed by a blank line.
        """
        if content is None:
            return "".join(
                _block(tool, purpose, code) + "\n"
                for (tool, purpose), code in self.sections.items()
            )

        for (tool, purpose), code in self.sections.items():
            begin = GENERATED_BEGIN.format(tool=tool, purpose=purpose)
            end = GENERATED_END.format(tool=tool, purpose=purpose)
            begin_pos = content.find(begin)
            end_pos = content.rfind(end)

            if begin_pos != -1 and end_pos > begin_pos:
                # Replace from the first begin to the last end, both markers kept
                content = (
                    content[:begin_pos]
                    + begin + "\n" + ensure_ends_with_newline(code)
                    + content[end_pos:]
                )
            else:
                if content and not content.endswith("\n"):
                    content += "\n"
                content += "\n" + _block(tool, purpose, code)
        return content

    def embed_to_file(self, file_path: Path | str, dry_run: bool = False) -> str:
        """Inject or replace every block in ``file_path``.

        Returns:
            "created", "updated", or "unchanged".
        """
        path = Path(file_path)
        if not path.exists():
            if not dry_run:
                path.write_text(self.render(None), encoding="utf-8")
            logger.debug("Created %s with %d generated blocks", path, len(self.sections))
            return "created"

        content = path.read_text(encoding="utf-8")
        new_content = self.render(content)
        if new_content == content:
            return "unchanged"
        if not dry_run:
            path.write_text(new_content, encoding="utf-8")
        logger.debug("Updated generated blocks in %s", path)
        return "updated"

