"""Shared test fixtures for usercode-engine."""

import io
from pathlib import Path

import pytest

from usercode_engine.config import load_section_config
from usercode_engine.sections.manager import UserSectionManager
from usercode_engine.writer import CodeWriter

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch, tmp_path):
    monkeypatch.setenv("USERCODE_CONFIG", str(tmp_path / "no-such-usercode.yaml"))
    monkeypatch.delenv("USERCODE_INDENT_SIZE", raising=False)


@pytest.fixture
def registry():
    return load_section_config(FIXTURES / "sections.yaml")


@pytest.fixture
def manager(registry):
    return UserSectionManager(registry)


@pytest.fixture
def buffer():
    return io.StringIO()


@pytest.fixture
def writer(buffer):
    return CodeWriter(buffer)
