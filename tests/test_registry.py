"""Tests for the section registry and content store."""

import pytest

from usercode_engine.errors import UnknownSectionError
from usercode_engine.sections.registry import SectionDefinition, SectionRegistry
from usercode_engine.sections.scanner import CapturedSections
from usercode_engine.sections.store import ContentStore


class TestSectionRegistry:
    def test_define_variants(self):
        reg = SectionRegistry()
        reg.define("A")
        reg.define_with_description("B", "Bee")
        reg.define_with_default("C", None, "c\n")
        assert reg.get("A") == SectionDefinition("A")
        assert reg.get("B").description == "Bee"
        assert reg.get("C").default_content == "c\n"
        assert reg.names() == ["A", "B", "C"]
        assert reg.with_default_count() == 1

    def test_redefinition_replaces(self):
        reg = SectionRegistry()
        reg.define_with_default("A", "old", "old\n")
        reg.define("A")
        assert len(reg) == 1
        assert reg.get("A") == SectionDefinition("A")

    def test_definitions_are_immutable(self):
        definition = SectionRegistry().define("A")
        with pytest.raises(AttributeError):
            definition.name = "B"

    def test_require_unknown(self):
        with pytest.raises(UnknownSectionError) as exc_info:
            SectionRegistry().require("Nope")
        assert exc_info.value.name == "Nope"

    def test_validate_reports_first_undefined(self):
        reg = SectionRegistry()
        reg.define("A")
        with pytest.raises(UnknownSectionError) as exc_info:
            reg.validate(["A", "X", "Y"])
        assert exc_info.value.name == "X"

    def test_validate_passes(self):
        reg = SectionRegistry()
        reg.define("A")
        reg.validate(["A"])

    def test_check_collects_all(self):
        reg = SectionRegistry()
        reg.define("A")
        result = reg.check(["A", "X", "Y"])
        assert not result.passed
        assert result.checked == 3
        assert len(result.errors) == 2
        assert "X" in result.summary()

    @pytest.mark.parametrize("name", ["my-name", "My Section", "", "caf\u00e9", "a.b"])
    def test_rejects_names_the_scanner_cannot_match(self, name):
        reg = SectionRegistry()
        with pytest.raises(ValueError, match="must match"):
            reg.define(name)
        with pytest.raises(ValueError):
            reg.define_with_default(name, None, "user edit;\n")
        assert len(reg) == 0

    def test_get_and_iteration(self):
        reg = SectionRegistry()
        reg.define("Alpha_1")
        reg.define_with_description("beta", "Beta")
        assert reg.get("Alpha_1") == SectionDefinition("Alpha_1")
        assert reg.get("missing") is None
        assert [d.name for d in reg] == ["Alpha_1", "beta"]
        assert "beta" in reg

    def test_check_summary_when_clean(self):
        result = SectionRegistry().check([])
        assert result.passed
        assert "All checks passed." in result.summary()


class TestContentStore:
    @pytest.fixture
    def store(self):
        reg = SectionRegistry()
        reg.define_with_default("Includes", None, "#include <stdio.h>\n")
        reg.define("Empty")
        return ContentStore(reg)

    def test_resolve_falls_back_to_default(self, store):
        assert store.resolve("Includes") == "#include <stdio.h>\n"

    def test_resolve_empty_without_default(self, store):
        assert store.resolve("Empty") == ""
        assert store.resolve("Undefined") == ""

    def test_captured_wins_over_default(self, store):
        store.ingest(CapturedSections(named={"Includes": "#include <math.h>\n"}))
        assert store.resolve("Includes") == "#include <math.h>\n"

    def test_lookup_distinguishes_missing(self, store):
        assert store.lookup("Empty") is None
        assert store.lookup("Includes") == "#include <stdio.h>\n"

    def test_resolve_partial(self, store):
        store.ingest(CapturedSections(partial={1: "int counter = 0;\n"}))
        assert store.resolve_partial(1) == "int counter = 0;\n"
        assert store.resolve_partial(2) is None
        assert store.has_partial(1)
        assert not store.has_partial(2)

    def test_capture_of_undefined_name_is_kept(self, store):
        store.ingest(CapturedSections(named={"Stray": "x\n"}))
        assert store.has_captured("Stray")
        assert store.captured_names() == ["Stray"]

    def test_clear(self, store):
        store.ingest(CapturedSections(named={"Includes": "x\n"}, partial={1: "y\n"}))
        store.clear()
        assert store.captured_names() == []
        assert store.partial_ids() == []
        assert store.resolve("Includes") == "#include <stdio.h>\n"

    def test_maps_are_copies(self, store):
        store.ingest(CapturedSections(named={"Includes": "x\n"}))
        store.named["Includes"] = "changed"
        assert store.resolve("Includes") == "x\n"
