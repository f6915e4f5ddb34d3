"""Exception hierarchy for the scaffolder core.

Configuration-level and catalog-level errors are fatal to a whole run.
``EmptyComposition`` is isolated to the file being composed.  Patch outcomes
such as "anchor not found" are *not* exceptions -- they are reported through
``PatchResult`` -- so only a malformed anchor definition raises here.
"""

from __future__ import annotations

from typing import Any


class ScaffoldError(Exception):
    """Base class for every error raised by the scaffolder."""


class InvalidConfiguration(ScaffoldError):
    """An axis value is outside its declared enumeration, or a field is invalid."""

    def __init__(self, message: str, fields: list[str] | None = None) -> None:
        self.fields = fields or []
        super().__init__(message)


class CatalogError(ScaffoldError):
    """A catalog entry is malformed -- a defect in the generator, not user error."""


class DuplicateFragment(CatalogError):
    """Two catalog entries share the same ``(axis, key, target)`` identity."""

    def __init__(self, axis: Any, key: str, target: Any) -> None:
        self.axis = axis
        self.key = key
        self.target = target
        super().__init__(
            f"Duplicate fragment in catalog: axis={_label(axis)}, "
            f"key={key!r}, target={_label(target)}"
        )


class AmbiguousSelection(ScaffoldError):
    """More than one exclusive fragment was selected for the same slot."""

    def __init__(self, target: Any, slot: str, identities: list[tuple[Any, str, Any]]) -> None:
        self.target = target
        self.slot = slot
        self.identities = identities
        clashing = ", ".join(f"{_label(a)}:{k}" for a, k, _ in identities)
        super().__init__(
            f"Slot '{slot}' of {_label(target)} has {len(identities)} exclusive "
            f"fragments selected ({clashing})"
        )


class EmptyComposition(ScaffoldError):
    """A mandatory section of a file would render with no content."""

    def __init__(self, target: Any, section: Any) -> None:
        self.target = target
        self.section = section
        super().__init__(
            f"{_label(target)} would render without any '{_label(section)}' content"
        )


class MalformedAnchor(ScaffoldError):
    """An anchor definition cannot be evaluated (bad pattern or unsafe insertion)."""

    def __init__(self, rule: str, message: str) -> None:
        self.rule = rule
        super().__init__(f"Anchor '{rule}': {message}")


def _label(value: Any) -> str:
    return str(getattr(value, "value", value))
