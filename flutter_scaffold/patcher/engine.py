"""Idempotent patch engine.

``patch`` applies one ``AnchorPattern`` to existing file text:

1. the presence guard is searched first -- a match means the insertion is
   already there and the text is returned untouched;
2. otherwise the anchor's matcher locates the insertion point -- no match
   means the file's structure diverged and the user must finish by hand;
3. otherwise the rendered insertion is spliced in.

Because the guard always matches the patched text (checked on every apply),
applying the same anchor twice is the same as applying it once.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any

from ..catalog.models import FileKind
from ..config import ScaffoldConfig
from ..errors import MalformedAnchor
from ..templates import TemplateRenderer, default_renderer
from .matchers import Location, Matcher, compile_pattern


class PatchReason(str, Enum):
    APPLIED = "applied"
    ALREADY_PRESENT = "already_present"
    ANCHOR_NOT_FOUND = "anchor_not_found"


@dataclass(frozen=True)
class AnchorPattern:
    """A declarative insertion into an existing file.

    Attributes:
        name: Rule id used in reports.
        target: File the anchor applies to.
        search: Structural matcher locating the insertion point.
        insertion: Jinja2 text rendered against the configuration.  Lines are
            written relative to the indentation the matcher reports.
        guard: Regex (Jinja2 rendered, multiline) that matches once the
            insertion is present.
        hint: Manual follow-up instruction shown when the anchor is missing.
    """

    name: str
    target: FileKind
    search: Matcher
    insertion: str
    guard: str
    hint: str = ""


@dataclass(frozen=True)
class PatchResult:
    target: FileKind
    rule: str
    applied: bool
    reason: PatchReason
    text: str
    hint: str = ""

    @property
    def needs_manual_followup(self) -> bool:
        return self.reason is PatchReason.ANCHOR_NOT_FOUND


def patch(
    text: str,
    anchor: AnchorPattern,
    config: ScaffoldConfig,
    renderer: TemplateRenderer | None = None,
) -> PatchResult:
    """Apply *anchor* to *text*.

    Raises:
        MalformedAnchor: The guard does not compile, or the patched text does
            not satisfy the guard (the anchor could never be idempotent).
    """
    return patch_any(text, [anchor], config, renderer)


def patch_any(
    text: str,
    anchors: Sequence[AnchorPattern],
    config: ScaffoldConfig,
    renderer: TemplateRenderer | None = None,
) -> PatchResult:
    """Apply the first of several alternative anchors that locates.

    The alternatives describe the same insertion for different file shapes
    (a routes map, a GetX pages list, an ``onGenerateRoute`` switch).  Any
    alternative's guard matching means the insertion is already present.
    """
    if not anchors:
        raise ValueError("patch_any() needs at least one anchor")
    renderer = renderer or default_renderer()
    context = config.render_context()
    primary = anchors[0]

    guards = [_guard(a, context, renderer) for a in anchors]
    for anchor, guard in zip(anchors, guards):
        if guard.search(text):
            return PatchResult(
                anchor.target, anchor.name, False, PatchReason.ALREADY_PRESENT, text
            )

    for anchor, guard in zip(anchors, guards):
        location = anchor.search.locate(text)
        if location is None:
            continue
        insertion = _indent(renderer.render_string(anchor.insertion, context), location)
        patched = text[: location.offset] + insertion + text[location.offset:]
        if not guard.search(patched):
            raise MalformedAnchor(
                anchor.name, "the inserted text does not satisfy the presence guard"
            )
        return PatchResult(anchor.target, anchor.name, True, PatchReason.APPLIED, patched)

    return PatchResult(
        primary.target,
        primary.name,
        False,
        PatchReason.ANCHOR_NOT_FOUND,
        text,
        hint=renderer.render_string(primary.hint, context)
        or f"Could not find {primary.search.describe()} in {primary.target.path}",
    )


def missing_target(
    anchors: Sequence[AnchorPattern],
    config: ScaffoldConfig,
    renderer: TemplateRenderer | None = None,
) -> PatchResult:
    """Result for a patch whose target file does not exist."""
    renderer = renderer or default_renderer()
    primary = anchors[0]
    hint = renderer.render_string(primary.hint, config.render_context())
    hint = hint or f"Create {primary.target.path} and re-run"
    return PatchResult(
        primary.target,
        primary.name,
        False,
        PatchReason.ANCHOR_NOT_FOUND,
        "",
        hint=f"{primary.target.path} does not exist. {hint}",
    )


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _guard(anchor: AnchorPattern, context: dict[str, Any], renderer: TemplateRenderer):
    return compile_pattern(renderer.render_string(anchor.guard, context), anchor.name)


def _indent(insertion: str, location: Location) -> str:
    if not location.indent:
        return insertion
    return "\n".join(
        location.indent + line if line.strip() else line
        for line in insertion.split("\n")
    )

