"""Caller-declared user sections."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from usercode_engine.errors import UnknownSectionError
from usercode_engine.sections import NAMED_NAME_RE


@dataclass(frozen=True)
class SectionDefinition:
    """A named region a generator may emit."""

    name: str
    description: str | None = None
    default_content: str | None = None


@dataclass
class ValidationResult:
    """Result of checking captured names against the registry."""

    errors: list[str] = field(default_factory=list)
    checked: int = 0

    @property
    def passed(self) -> bool:
        return len(self.errors) == 0

    def summary(self) -> str:
        lines = [f"Section Validation: {self.checked} captured sections checked"]
        if self.errors:
            lines.append(f"ERRORS ({len(self.errors)}):")
            for e in self.errors:
                lines.append(f"  {e}")
        else:
            lines.append("All checks passed.")
        return "\n".join(lines)


class SectionRegistry:
    """Name -> SectionDefinition. Redefining a name replaces the old entry."""

    def __init__(self) -> None:
        self._sections: dict[str, SectionDefinition] = {}

    def define(self, name: str) -> SectionDefinition:
        return self._put(SectionDefinition(name))

    def define_with_description(self, name: str, description: str) -> SectionDefinition:
        return self._put(SectionDefinition(name, description=description))

    def define_with_default(
        self,
        name: str,
        description: str | None,
        default_content: str,
    ) -> SectionDefinition:
        return self._put(SectionDefinition(name, description, default_content))

    def _put(self, definition: SectionDefinition) -> SectionDefinition:
        if not isinstance(definition.name, str) or not NAMED_NAME_RE.fullmatch(definition.name):
            raise ValueError(
                f"Section name {definition.name!r} must match [A-Za-z0-9_]+"
            )
        self._sections[definition.name] = definition
        return definition

    def get(self, name: str) -> SectionDefinition | None:
        return self._sections.get(name)

    def require(self, name: str) -> SectionDefinition:
        definition = self._sections.get(name)
        if definition is None:
            raise UnknownSectionError(name)
        return definition

    def default_for(self, name: str) -> str | None:
        definition = self._sections.get(name)
        return definition.default_content if definition else None

    def names(self) -> list[str]:
        return list(self._sections)

    def with_default_count(self) -> int:
        return sum(1 for d in self._sections.values() if d.default_content is not None)

    def check(self, captured_names: Iterable[str]) -> ValidationResult:
        """Report every captured name with no definition."""
        result = ValidationResult()
        for name in captured_names:
            result.checked += 1
            if name not in self._sections:
                result.errors.append(f"Captured section '{name}' is not defined")
        return result

    def validate(self, captured_names: Iterable[str]) -> None:
        """Raise UnknownSectionError for the first captured name with no definition."""
        for name in captured_names:
            if name not in self._sections:
                raise UnknownSectionError(name)

    def __contains__(self, name: object) -> bool:
        return name in self._sections

    def __len__(self) -> int:
        return len(self._sections)

    def __iter__(self):
        return iter(self._sections.values())
