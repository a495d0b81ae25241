"""Indentation-aware writer for generated C-family source.

Wraps any text stream (an open file, ``io.StringIO``). Each ``write``
call indents every non-empty line of the given text by the current
level; blank lines stay empty so regenerated output carries no
trailing whitespace. Region bodies go through ``write_raw`` instead,
since captured user text already carries its own indentation.
"""

from __future__ import annotations

from typing import TextIO

from usercode_engine.utils import join_strings, repeat_str


def split_lines(text: str) -> list[str]:
    """Split on ``\\n`` only, dropping a final empty line and trailing ``\\r``.

    ``str.splitlines`` also breaks on form feeds and unicode separators,
    which would rewrite user text, so it is not used here.
    """
    if not text:
        return []
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def _format_args(args) -> str:
    if not args:
        return "(void)"
    return "(" + join_strings((f"{type_name} {arg_name}" for type_name, arg_name in args), ", ") + ")"


class CodeWriter:
    """Writes indented lines to a text stream."""

    def __init__(self, stream: TextIO, indent_size: int = 4, with_newline: bool = True):
        self.stream = stream
        self.indent_level = 0
        self.indent_size = indent_size
        self.with_newline = with_newline

    # ── indentation ───────────────────────────────────────────────

    def indent(self) -> None:
        self.indent_level += 1

    def dedent(self) -> None:
        if self.indent_level > 0:
            self.indent_level -= 1

    @property
    def indent_prefix(self) -> str:
        return repeat_str(" ", self.indent_level * self.indent_size)

    # ── primitives ────────────────────────────────────────────────

    def write(self, content: str) -> None:
        """Write ``content`` with the current indentation applied.

        A trailing newline is added when ``with_newline`` is set or the
        content already ends with one. Empty content writes a bare
        newline when ``with_newline`` is set and nothing otherwise.
        """
        if not content:
            if self.with_newline:
                self.stream.write("\n")
            return

        prefix = self.indent_prefix
        body = "\n".join(prefix + line if line else "" for line in split_lines(content))
        if self.with_newline or content.endswith("\n"):
            body += "\n"
        self.stream.write(body)

    def writeln(self, content: str) -> None:
        previous = self.with_newline
        self.with_newline = True
        try:
            self.write(content)
        finally:
            self.with_newline = previous

    def write_raw(self, content: str) -> None:
        """Write ``content`` verbatim: no indentation, no added newline."""
        self.stream.write(content)

    def newline(self) -> None:
        self.stream.write("\n")

    def flush(self) -> None:
        self.stream.flush()

    # ── comments ──────────────────────────────────────────────────

    def write_comment(self, comment: str) -> None:
        if "\n" in comment:
            self.writeln("/*")
            for line in split_lines(comment):
                self.writeln(f" * {line}")
            self.writeln(" */")
        else:
            self.writeln(f"// {comment}")

    def write_separator(self, title: str, width: int = 80) -> None:
        """Write a one-line ``/* title */`` comment.

        ``width`` is kept for API parity with banner-style separators and
        does not affect the output.
        """
        self.writeln(f"/* {title} */")

    # ── declarations ──────────────────────────────────────────────

    def begin_struct(self, name: str) -> None:
        self.writeln(f"struct {name} {{")

    def end_struct(self) -> None:
        self.writeln("};")

    def begin_enum(self, name: str) -> None:
        self.writeln(f"enum {name} {{")

    def end_enum(self) -> None:
        self.writeln("};")

    def write_enum_member(self, name: str, value: str | None = None) -> None:
        if value is not None:
            self.writeln(f"    {name} = {value},")
        else:
            self.writeln(f"    {name},")

    def begin_function(self, ret_type: str, name: str, args=()) -> None:
        self.writeln(f"{ret_type} {name}{_format_args(args)} {{")

    def end_function(self) -> None:
        self.writeln("}")

    def write_function_declaration(self, ret_type: str, name: str, args=()) -> None:
        self.writeln(f"{ret_type} {name}{_format_args(args)};")

    def write_variable(self, type_name: str, var_name: str, comment: str | None = None) -> None:
        if comment:
            self.write_comment(comment)
        self.writeln(f"{type_name} {var_name};")

    def write_typedef_struct(self, name: str) -> None:
        self.writeln(f"typedef struct {name} {name};")

    # ── preprocessor ──────────────────────────────────────────────

    def write_include(self, header: str, is_system: bool = False) -> None:
        if is_system:
            self.writeln(f"#include <{header}>")
        else:
            self.writeln(f'#include "{header}"')

    def write_define(self, name: str, value: str | None = None) -> None:
        if value is not None:
            self.writeln(f"#define {name} {value}")
        else:
            self.writeln(f"#define {name}")

    def write_ifdef(self, name: str) -> None:
        self.writeln(f"#ifdef {name}")

    def write_ifndef(self, name: str) -> None:
        self.writeln(f"#ifndef {name}")

    def write_endif(self, comment: str | None = None) -> None:
        if comment:
            self.writeln(f"#endif // {comment}")
        else:
            self.writeln("#endif")
