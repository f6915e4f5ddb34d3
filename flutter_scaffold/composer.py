"""File composer -- joins selected fragments into complete file text.

``compose`` is a pure function of its ``FileSpec``: the same selection always
yields byte-identical text.  The steps are

1. assert slot exclusivity (``AmbiguousSelection`` on a clash),
2. render every part against the configuration context,
3. drop blank parts,
4. group parts into the layout's blocks and order them,
5. remove duplicates according to the block's policy,
6. render wrapper parts with the other blocks as variables,
7. render the frame and normalise blank lines.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Optional

from .catalog.layouts import Block, Dedupe, Layout
from .catalog.models import FileKind, Fragment, Identity, Part, Section
from .errors import AmbiguousSelection, EmptyComposition
from .templates import TemplateRenderer, default_renderer

if TYPE_CHECKING:
    from .resolver import SelectionSet


# ---------------------------------------------------------------------------
# Data model
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class FileSpec:
    """Everything needed to compose one target file.

    Attributes:
        target: File being composed.
        fragments: Selected fragments in resolver precedence order.
        join_rule: Layout describing blocks, ordering and dedupe policy.
        context: Jinja2 context built from the configuration.
        positions: Catalog position per fragment identity, used to break ties
            between parts of equal order.  Selection order is used when empty.
    """

    target: FileKind
    fragments: tuple[Fragment, ...]
    join_rule: Layout
    context: dict[str, Any] = field(default_factory=dict)
    positions: dict[Identity, int] = field(default_factory=dict)

    @property
    def path(self) -> str:
        return self.target.path


@dataclass
class Composition:
    """Outcome of composing one file: text on success, the error otherwise."""

    target: FileKind
    text: Optional[str] = None
    error: Optional[EmptyComposition] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def path(self) -> str:
        return self.target.path


@dataclass(frozen=True)
class _Rendered:
    section: Section
    text: str
    order: int
    rank: int


# ---------------------------------------------------------------------------
# Composition
# ---------------------------------------------------------------------------


def compose(spec: FileSpec, renderer: TemplateRenderer | None = None) -> str:
    """Compose the complete text of ``spec.target``.

    Raises:
        AmbiguousSelection: Two selected fragments claim the same slot.
        EmptyComposition: A required section of the layout renders empty.
    """
    renderer = renderer or default_renderer()
    layout = spec.join_rule
    _check_slots(spec)

    rendered = _render_parts(spec, renderer)

    for section in layout.required:
        if not any(r.section is section for r in rendered):
            raise EmptyComposition(spec.target, section)

    blocks: dict[str, str] = {}
    for block in layout.blocks:
        if block.is_wrapper:
            continue
        blocks[block.name] = _join_block(block, rendered)

    wrapper_context = {**spec.context, **blocks}
    for block in layout.blocks:
        if not block.is_wrapper:
            continue
        members = [
            _Rendered(
                r.section,
                renderer.render_string(r.text, wrapper_context).strip("\n"),
                r.order,
                r.rank,
            )
            for r in rendered
            if r.section in block.sections
        ]
        blocks[block.name] = _join_block(block, members)

    text = renderer.render(layout.frame, {**spec.context, **blocks})
    return normalise(text)


def compose_all(
    selection: "SelectionSet", renderer: TemplateRenderer | None = None
) -> list[Composition]:
    """Compose every file of *selection*.

    ``EmptyComposition`` is confined to the failing file; ``AmbiguousSelection``
    signals a resolver defect and propagates.
    """
    results: list[Composition] = []
    for target, spec in selection.files.items():
        try:
            results.append(Composition(target, text=compose(spec, renderer)))
        except EmptyComposition as exc:
            results.append(Composition(target, error=exc))
    return results


def normalise(text: str) -> str:
    """Strip trailing whitespace, collapse blank-line runs, end with one newline."""
    lines = [line.rstrip() for line in text.splitlines()]
    collapsed = re.sub(r"\n{3,}", "\n\n", "\n".join(lines))
    return collapsed.strip("\n") + "\n"


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _check_slots(spec: FileSpec) -> None:
    claims: dict[str, list[Fragment]] = {}
    for frag in spec.fragments:
        if frag.slot is not None:
            claims.setdefault(frag.slot, []).append(frag)
    for slot, frags in claims.items():
        if len(frags) > 1:
            raise AmbiguousSelection(spec.target, slot, [f.identity for f in frags])


def _render_parts(spec: FileSpec, renderer: TemplateRenderer) -> list[_Rendered]:
    rendered: list[_Rendered] = []
    for index, frag in enumerate(spec.fragments):
        rank = spec.positions.get(frag.identity, index)
        for part in frag.parts:
            text = _render_part(part, spec, renderer)
            if not text.strip():
                continue
            rendered.append(_Rendered(part.section, text, frag.order_of(part), rank))
    return rendered


def _render_part(part: Part, spec: FileSpec, renderer: TemplateRenderer) -> str:
    # Wrapper text needs the joined blocks, so it is rendered later.
    if part.section is Section.WRAPPER:
        return part.text
    return renderer.render_string(part.text, spec.context).strip("\n")


def _join_block(block: Block, rendered: list[_Rendered]) -> str:
    members = [r for r in rendered if r.section in block.sections]
    if block.ordered:
        # sorted() is stable, so equal (order, rank) keep selection order.
        members = sorted(members, key=lambda r: (r.order, r.rank))
    texts = [r.text for r in members]
    if block.dedupe is Dedupe.LINE:
        texts = _dedupe_lines(texts)
    elif block.dedupe is Dedupe.KEY:
        texts = _dedupe_keys(texts)
    return block.separator.join(t for t in texts if t.strip())


def _dedupe_lines(texts: list[str]) -> list[str]:
    seen: set[str] = set()
    result: list[str] = []
    for text in texts:
        kept = []
        for line in text.splitlines():
            if line.strip():
                if line in seen:
                    continue
                seen.add(line)
            kept.append(line)
        result.append("\n".join(kept).strip("\n"))
    return result


_ENTRY_KEY_RE = re.compile(r"^  ([A-Za-z0-9_]+):")


def _dedupe_keys(texts: list[str]) -> list[str]:
    """Drop YAML map entries whose package name was already emitted.

    An entry starts on a line indented by exactly two spaces and owns the
    deeper-indented lines that follow it.  Comment lines are kept as is.
    """
    seen: set[str] = set()
    result: list[str] = []
    for text in texts:
        kept: list[str] = []
        skipping = False
        for line in text.splitlines():
            match = _ENTRY_KEY_RE.match(line)
            if match:
                key = match.group(1)
                skipping = key in seen
                seen.add(key)
            elif not line.startswith("   "):
                skipping = False
            if not skipping:
                kept.append(line)
        result.append("\n".join(kept))
    return result
