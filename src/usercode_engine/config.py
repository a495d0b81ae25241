"""Configuration: section definition files and environment defaults.

Environment variables:
    USERCODE_CONFIG: section definition file (default: ./usercode.yaml)
    USERCODE_INDENT_SIZE: spaces per indent level for CodeWriter (default: 4)
"""

from __future__ import annotations

import os
from pathlib import Path

import yaml

from usercode_engine.sections import NAMED_NAME_RE
from usercode_engine.sections.registry import SectionRegistry

DEFAULT_CONFIG_NAME = "usercode.yaml"
DEFAULT_INDENT_SIZE = 4


def config_path() -> Path:
    """Return the section definition file path."""
    return Path(os.environ.get("USERCODE_CONFIG", DEFAULT_CONFIG_NAME))


def indent_size() -> int:
    """Return the writer indent size, ignoring unusable values."""
    raw = os.environ.get("USERCODE_INDENT_SIZE")
    if raw is None:
        return DEFAULT_INDENT_SIZE
    try:
        value = int(raw)
    except ValueError:
        return DEFAULT_INDENT_SIZE
    return value if value >= 0 else DEFAULT_INDENT_SIZE


def read_section_config(path: Path | str) -> dict:
    """Read and parse a section definition file.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        yaml.YAMLError: If the YAML is malformed.
        ValueError: If the document is not a mapping with a ``sections`` list.
    """
    cfg_path = Path(path)
    with open(cfg_path) as f:
        data = yaml.safe_load(f)

    if not isinstance(data, dict):
        raise ValueError(f"Section config at {cfg_path} is not a YAML mapping")

    sections = data.get("sections")
    if not isinstance(sections, list):
        raise ValueError(f"Section config at {cfg_path} has no 'sections' list")

    return data


def load_section_config(path: Path | str | None = None) -> SectionRegistry:
    """Build a SectionRegistry from a section definition file.

    Each entry needs a ``name`` matching ``[A-Za-z0-9_]+``; ``description``
    and ``default`` are optional. Later entries override earlier ones.
    """
    cfg_path = Path(path) if path else config_path()
    data = read_section_config(cfg_path)
    registry = SectionRegistry()

    for i, entry in enumerate(data["sections"]):
        if not isinstance(entry, dict):
            raise ValueError(f"{cfg_path}: sections[{i}] is not a mapping")
        name = entry.get("name")
        if not isinstance(name, str) or not NAMED_NAME_RE.fullmatch(name):
            raise ValueError(f"{cfg_path}: sections[{i}] has invalid name {name!r}")

        description = entry.get("description")
        default = entry.get("default")
        if default is not None:
            registry.define_with_default(name, description, str(default))
        elif description is not None:
            registry.define_with_description(name, str(description))
        else:
            registry.define(name)

    return registry
