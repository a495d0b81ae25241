"""Example generators: a C header and source pair with user sections.

Each generator renders into memory and writes the output file once at
the end, so a capture or emission failure leaves any previous output
untouched.
"""

from __future__ import annotations

import io
from pathlib import Path

from usercode_engine import config
from usercode_engine.sections.manager import UserSectionManager
from usercode_engine.utils import get_file_name, to_valid_identifier
from usercode_engine.writer import CodeWriter

DEFAULT_GUARD = "EXAMPLE_H"

PROCESS_DEFAULT = """\
    // Process the data
    if (data == NULL || size == 0) {
        return -1;
    }

    // Copy data to global storage
    if (g_count < MAX_BUFFER_SIZE) {
        g_examples[g_count++] = *data;
        return 0;
    }

    return -1;
"""


def header_sections() -> UserSectionManager:
    sections = UserSectionManager()
    sections.define_section_with_description("Header", "File header comment")
    sections.define_section_with_default(
        "Includes", "Additional includes",
        "#include <stdio.h>\n#include <stdlib.h>\n",
    )
    sections.define_section_with_default(
        "Typedefs", "User-defined types",
        "typedef unsigned int uint32_t;\ntypedef unsigned char uint8_t;\n",
    )
    sections.define_section_with_default(
        "Constants", "User-defined constants",
        '#define MAX_BUFFER_SIZE 1024\n#define VERSION "1.0.0"\n',
    )
    sections.define_section("Functions")
    return sections


def source_sections() -> UserSectionManager:
    sections = UserSectionManager()
    sections.define_section_with_description("Header", "File header comment")
    sections.define_section_with_default("Includes", "Additional includes", "")
    sections.define_section_with_default(
        "Globals", "Global variables",
        "static ExampleStruct g_examples[MAX_BUFFER_SIZE];\nstatic int g_count = 0;\n",
    )
    sections.define_section_with_default(
        "InitFunction", "Initialization function implementation",
        "    // Initialize the example system\n"
        "    g_count = 0;\n"
        "    memset(g_examples, 0, sizeof(g_examples));\n",
    )
    sections.define_section_with_default(
        "ProcessFunction", "Processing function implementation", PROCESS_DEFAULT,
    )
    sections.define_section_with_default(
        "CleanupFunction", "Cleanup function implementation",
        "    // Clean up resources\n    g_count = 0;\n",
    )
    return sections


def include_guard(output_path: Path | str) -> str:
    """Derive an include guard from the output file name: example.h -> EXAMPLE_H."""
    name = get_file_name(output_path)
    return to_valid_identifier(name).upper() if name else DEFAULT_GUARD


def render_example_header(sections: UserSectionManager, guard: str = DEFAULT_GUARD) -> str:
    buf = io.StringIO()
    writer = CodeWriter(buf, indent_size=config.indent_size())

    sections.write_section(writer, "Header")

    writer.write_ifndef(guard)
    writer.write_define(guard)
    writer.newline()

    for name in ("Includes", "Typedefs", "Constants"):
        sections.write_section(writer, name)
        writer.newline()

    writer.write_separator("Struct definitions")
    writer.write_typedef_struct("ExampleStruct")
    writer.begin_struct("ExampleStruct")
    writer.indent()
    writer.write_variable("int", "id", "Unique identifier")
    writer.write_variable("char*", "name", "Name string")
    writer.write_variable("uint32_t", "flags", "Bit flags")
    writer.dedent()
    writer.end_struct()
    writer.newline()

    writer.write_separator("Function declarations")
    writer.write_function_declaration("void", "example_init")
    writer.write_function_declaration(
        "int", "example_process", [("ExampleStruct*", "data"), ("uint32_t", "size")],
    )
    writer.write_function_declaration("void", "example_cleanup")
    writer.newline()

    sections.write_section(writer, "Functions")
    writer.write_endif(guard)
    return buf.getvalue()


def render_example_source(sections: UserSectionManager, header_name: str) -> str:
    buf = io.StringIO()
    writer = CodeWriter(buf, indent_size=config.indent_size())

    sections.write_section(writer, "Header")
    writer.write_include(header_name, is_system=False)
    writer.write_include("string.h", is_system=True)

    sections.write_section(writer, "Includes")
    writer.newline()
    sections.write_section(writer, "Globals")
    writer.newline()

    writer.write_separator("Function implementations")

    writer.begin_function("void", "example_init")
    sections.write_section(writer, "InitFunction")
    writer.end_function()
    writer.newline()

    writer.begin_function(
        "int", "example_process", [("ExampleStruct*", "data"), ("uint32_t", "size")],
    )
    sections.write_section(writer, "ProcessFunction")
    writer.end_function()
    writer.newline()

    writer.begin_function("void", "example_cleanup")
    sections.write_section(writer, "CleanupFunction")
    writer.end_function()
    return buf.getvalue()


def generate_example_header(output_path: Path | str, capture_path: Path | str | None = None) -> str:
    """Generate the example header, preserving sections captured from ``capture_path``.

    Returns:
        The rendered text that was written.
    """
    sections = header_sections()
    if capture_path:
        sections.capture_from_file(capture_path)
    text = render_example_header(sections, include_guard(output_path))
    Path(output_path).write_text(text, encoding="utf-8")
    return text


def generate_example_source(
    output_path: Path | str,
    header_name: str = "example.h",
    capture_path: Path | str | None = None,
) -> str:
    """Generate the example source file. See generate_example_header."""
    sections = source_sections()
    if capture_path:
        sections.capture_from_file(capture_path)
    text = render_example_source(sections, header_name)
    Path(output_path).write_text(text, encoding="utf-8")
    return text
