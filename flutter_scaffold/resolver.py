"""Axis resolver -- decides which catalog fragments a configuration selects.

Selection precedence, per target file:

    core -> active compound rules -> architecture -> state management
         -> features (declared order) -> modules (declared order)

Compound rules are evaluated first so that they can suppress fragments the
single-axis rules would otherwise select.  A fragment reached twice is kept
at its first position.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from .catalog.layouts import layout_for
from .catalog.models import AxisKind, FileKind, Fragment, Identity, Term
from .catalog.registry import FragmentCatalog, default_catalog
from .composer import FileSpec
from .config import ScaffoldConfig


@dataclass(frozen=True)
class SelectionSet:
    """Per-file fragment selection for one configuration.

    Attributes:
        config: The validated configuration the selection was made for.
        files: Ordered mapping of target file to its ``FileSpec``.  Only
            mandatory files and files with at least one selected fragment
            appear.
        active_rules: Keys of the compound rules whose predicate matched.
        suppressed: Identities removed by active compound rules.
    """

    config: ScaffoldConfig
    files: dict[FileKind, FileSpec] = field(default_factory=dict)
    active_rules: tuple[str, ...] = ()
    suppressed: frozenset[Identity] = frozenset()

    def __getitem__(self, target: FileKind) -> FileSpec:
        return self.files[target]

    def __contains__(self, target: object) -> bool:
        return target in self.files

    def targets(self) -> list[FileKind]:
        return list(self.files)

    def fragments(self, target: FileKind) -> tuple[Fragment, ...]:
        spec = self.files.get(target)
        return spec.fragments if spec else ()


def resolve(
    config: ScaffoldConfig | Mapping[str, Any],
    catalog: FragmentCatalog | None = None,
) -> SelectionSet:
    """Select the fragments for every target file.

    Raises:
        InvalidConfiguration: An axis value is outside its enumeration.
    """
    config = _coerce(config)
    catalog = catalog or default_catalog()

    terms = active_terms(config)
    compounds = [
        frag for frag in catalog.compound_fragments()
        if all(term in terms for term in frag.requires)
    ]
    suppressed = frozenset(ident for frag in compounds for ident in frag.suppresses)

    candidates: list[Fragment] = [*catalog.core_fragments(), *compounds]
    candidates += catalog.fragments_for(AxisKind.ARCHITECTURE, config.architecture.value)
    candidates += catalog.fragments_for(AxisKind.STATE_MANAGEMENT, config.state_management.value)
    for feature in config.features:
        candidates += catalog.fragments_for(AxisKind.FEATURE, feature.value)
    for module in config.modules:
        candidates += catalog.fragments_for(AxisKind.MODULE, module.value)

    per_target: dict[FileKind, list[Fragment]] = {}
    seen: set[Identity] = set()
    for frag in candidates:
        if frag.identity in suppressed or frag.identity in seen:
            continue
        seen.add(frag.identity)
        per_target.setdefault(frag.target, []).append(frag)

    context = config.render_context()
    files: dict[FileKind, FileSpec] = {}
    for target in FileKind:
        selected = per_target.get(target, [])
        layout = layout_for(target)
        if not selected and not layout.mandatory:
            continue
        files[target] = FileSpec(
            target=target,
            fragments=tuple(selected),
            join_rule=layout,
            context=context,
            positions={f.identity: catalog.position(f) for f in selected},
        )

    return SelectionSet(
        config=config,
        files=files,
        active_rules=tuple(dict.fromkeys(f.key for f in compounds)),
        suppressed=suppressed,
    )


def active_terms(config: ScaffoldConfig) -> set[Term]:
    """Every ``(axis, value)`` pair the configuration turns on."""
    terms: set[Term] = {
        (AxisKind.ARCHITECTURE, config.architecture.value),
        (AxisKind.STATE_MANAGEMENT, config.state_management.value),
    }
    terms.update((AxisKind.FEATURE, f.value) for f in config.features)
    terms.update((AxisKind.MODULE, m.value) for m in config.modules)
    return terms


def _coerce(config: ScaffoldConfig | Mapping[str, Any]) -> ScaffoldConfig:
    # Re-validate: a config built with model_construct() or a raw mapping may
    # carry values outside the axis enumerations.
    if isinstance(config, ScaffoldConfig):
        data = {name: getattr(config, name) for name in ScaffoldConfig.model_fields}
    else:
        data = dict(config)
    return ScaffoldConfig.create(**data)
