"""usercode-engine: keep developer-written code alive across code regeneration."""

from usercode_engine.errors import (
    CaptureFailedError,
    InvalidSectionError,
    MismatchedSectionError,
    NestedSectionError,
    ScanError,
    UnclosedSectionError,
    UnknownSectionError,
    UserCodeError,
)
from usercode_engine.sections.manager import SectionStats, UserSectionManager
from usercode_engine.sections.registry import SectionDefinition, SectionRegistry
from usercode_engine.splice import GeneratedCodeManager
from usercode_engine.writer import CodeWriter

__all__ = [
    "CaptureFailedError",
    "CodeWriter",
    "GeneratedCodeManager",
    "InvalidSectionError",
    "MismatchedSectionError",
    "NestedSectionError",
    "ScanError",
    "SectionDefinition",
    "SectionRegistry",
    "SectionStats",
    "UnclosedSectionError",
    "UnknownSectionError",
    "UserCodeError",
    "UserSectionManager",
]
