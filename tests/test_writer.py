"""Tests for CodeWriter."""

import io

import pytest

from usercode_engine.writer import CodeWriter, split_lines


class TestBasicWriting:
    def test_indent_and_dedent(self, writer, buffer):
        writer.writeln("// This is a test")
        writer.writeln("int main() {")
        writer.indent()
        writer.writeln('printf("Hello, World!\\n");')
        writer.writeln("return 0;")
        writer.dedent()
        writer.writeln("}")
        assert buffer.getvalue() == (
            "// This is a test\n"
            "int main() {\n"
            '    printf("Hello, World!\\n");\n'
            "    return 0;\n"
            "}\n"
        )

    def test_dedent_stops_at_zero(self, writer):
        writer.dedent()
        assert writer.indent_level == 0

    def test_multiline_write_indents_each_line(self, writer, buffer):
        writer.indent()
        writer.write("a\n\nb")
        assert buffer.getvalue() == "    a\n\n    b\n"

    def test_without_newline(self, buffer):
        w = CodeWriter(buffer, with_newline=False)
        w.write("a")
        w.write("b\n")
        w.write("")
        assert buffer.getvalue() == "ab\n"

    def test_writeln_restores_flag(self, buffer):
        w = CodeWriter(buffer, with_newline=False)
        w.writeln("x")
        assert w.with_newline is False
        assert buffer.getvalue() == "x\n"

    def test_empty_write_is_newline(self, writer, buffer):
        writer.write("")
        assert buffer.getvalue() == "\n"

    def test_custom_indent_size(self, buffer):
        w = CodeWriter(buffer, indent_size=2)
        w.indent()
        w.indent()
        w.writeln("x")
        assert buffer.getvalue() == "    x\n"

    def test_write_raw_is_verbatim(self, writer, buffer):
        writer.indent()
        writer.write_raw("  keep\n")
        assert buffer.getvalue() == "  keep\n"


class TestCHelpers:
    def test_functions(self, writer, buffer):
        writer.write_include("stdio.h", True)
        writer.newline()
        writer.begin_function("int", "add", [("int", "a"), ("int", "b")])
        writer.indent()
        writer.writeln("return a + b;")
        writer.dedent()
        writer.end_function()
        assert buffer.getvalue() == (
            "#include <stdio.h>\n\nint add(int a, int b) {\n    return a + b;\n}\n"
        )

    def test_declaration_without_args(self, writer, buffer):
        writer.write_function_declaration("void", "init")
        assert buffer.getvalue() == "void init(void);\n"

    def test_local_include_and_defines(self, writer, buffer):
        writer.write_include("example.h")
        writer.write_define("X")
        writer.write_define("Y", "2")
        writer.write_ifndef("G")
        writer.write_ifdef("D")
        writer.write_endif()
        writer.write_endif("G")
        assert buffer.getvalue() == (
            '#include "example.h"\n#define X\n#define Y 2\n'
            "#ifndef G\n#ifdef D\n#endif\n#endif // G\n"
        )

    def test_comments(self, writer, buffer):
        writer.write_comment("single")
        writer.write_comment("line one\nline two")
        writer.write_separator("Section", width=20)
        assert buffer.getvalue() == (
            "// single\n/*\n * line one\n * line two\n */\n/* Section */\n"
        )

    def test_struct_and_enum(self, writer, buffer):
        writer.write_typedef_struct("S")
        writer.begin_struct("S")
        writer.indent()
        writer.write_variable("int", "id", "Identifier")
        writer.dedent()
        writer.end_struct()
        writer.begin_enum("E")
        writer.write_enum_member("A", "1")
        writer.write_enum_member("B")
        writer.end_enum()
        assert buffer.getvalue() == (
            "typedef struct S S;\nstruct S {\n    // Identifier\n    int id;\n};\n"
            "enum E {\n    A = 1,\n    B,\n};\n"
        )

    def test_stream_errors_propagate(self):
        stream = io.StringIO()
        stream.close()
        with pytest.raises(ValueError):
            CodeWriter(stream).writeln("x")


class TestSplitLines:
    @pytest.mark.parametrize("text,expected", [
        ("", []),
        ("a", ["a"]),
        ("a\n", ["a"]),
        ("a\n\n", ["a", ""]),
        ("a\r\nb", ["a", "b"]),
        ("a\x0cb\n", ["a\x0cb"]),
    ])
    def test_split(self, text, expected):
        assert split_lines(text) == expected
