"""Main scaffolding orchestrator.

Takes a ``ScaffoldConfig`` and produces a Flutter project directory:

1. resolve the configuration into per-file fragment selections,
2. compose every file in memory (fatal errors surface before any write),
3. hand ``create`` operations to the materializer,
4. run the re-entrant patch pass over the files now on disk.

``extend`` runs step 4 against a project generated earlier, optionally
creating the files it lacks first.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from .catalog.models import FileKind
from .catalog.registry import FragmentCatalog, default_catalog
from .composer import Composition, compose_all
from .config import ScaffoldConfig
from .materializer import Materializer, WriteKind, WriteOp, WriteOutcome, WriteStatus
from .patcher.engine import PatchReason, PatchResult, missing_target, patch_any
from .patcher.recipes import plan_patches
from .resolver import SelectionSet, resolve
from .templates import TemplateRenderer, default_renderer


# ---------------------------------------------------------------------------
# Report
# ---------------------------------------------------------------------------


@dataclass
class GenerationReport:
    """Structured outcome of a generate or extend run."""

    project_root: Path
    active_rules: tuple[str, ...] = ()
    compositions: list[Composition] = field(default_factory=list)
    writes: list[WriteOutcome] = field(default_factory=list)
    patches: list[PatchResult] = field(default_factory=list)

    @property
    def failed_compositions(self) -> list[Composition]:
        return [c for c in self.compositions if not c.ok]

    @property
    def applied_patches(self) -> list[PatchResult]:
        return [p for p in self.patches if p.applied]

    @property
    def manual_followups(self) -> list[PatchResult]:
        return [p for p in self.patches if p.needs_manual_followup]

    @property
    def written(self) -> list[WriteOutcome]:
        return [w for w in self.writes if w.status is WriteStatus.WRITTEN]

    @property
    def ok(self) -> bool:
        return not self.failed_compositions and not self.manual_followups


# ---------------------------------------------------------------------------
# Main generator
# ---------------------------------------------------------------------------


class ScaffoldGenerator:
    """Generates or extends a Flutter project for one configuration."""

    def __init__(
        self,
        config: ScaffoldConfig,
        catalog: FragmentCatalog | None = None,
        materializer: Materializer | None = None,
        renderer: TemplateRenderer | None = None,
    ) -> None:
        self.config = config
        self.catalog = catalog or default_catalog()
        self.materializer = materializer or Materializer()
        self.renderer = renderer or default_renderer()

    # -- Public API --------------------------------------------------------

    def plan(self) -> list[Composition]:
        """Resolve and compose every file without touching the disk.

        Raises:
            InvalidConfiguration: The configuration is outside the axes.
            AmbiguousSelection: The catalog selects two exclusive fragments.
        """
        return self._plan()[1]

    async def generate(
        self, output_dir: str | Path, *, run_patches: bool = True
    ) -> GenerationReport:
        """Generate the project under ``<output_dir>/<project_name>``.

        Args:
            output_dir: Parent directory; a folder named after the project is
                created inside it.
            run_patches: Run the patch pass after writing the files.

        Returns:
            The ``GenerationReport`` of the run.
        """
        selection, compositions = self._plan()
        project_root = Path(output_dir) / self.config.project_name

        ops = [
            WriteOp(project_root / c.path, c.text, WriteKind.CREATE)
            for c in compositions
            if c.ok and c.text is not None
        ]
        report = GenerationReport(
            project_root=project_root,
            active_rules=selection.active_rules,
            compositions=compositions,
            writes=await self.materializer.write_all(ops),
        )

        if run_patches:
            patches, writes = await self._patch_pass(project_root)
            report.patches.extend(patches)
            report.writes.extend(writes)
        return report

    async def extend(
        self, project_root: str | Path, *, create_missing: bool = False
    ) -> GenerationReport:
        """Bring an existing project up to date with the configuration.

        Existing files are only ever patched.  With *create_missing*, files
        the configuration produces but the project lacks (e.g. the network
        module of a newly enabled layer) are composed and created first;
        otherwise a missing target file is reported as needing manual
        follow-up.
        """
        root = Path(project_root)
        report = GenerationReport(project_root=root)
        if create_missing:
            selection, compositions = self._plan()
            report.active_rules = selection.active_rules
            report.compositions = compositions
            ops = []
            for comp in compositions:
                if not comp.ok or comp.text is None:
                    continue
                if await self.materializer.read_text(root / comp.path) is None:
                    ops.append(WriteOp(root / comp.path, comp.text, WriteKind.CREATE))
            report.writes.extend(await self.materializer.write_all(ops))

        patches, writes = await self._patch_pass(root)
        report.patches.extend(patches)
        report.writes.extend(writes)
        return report

    def _plan(self) -> tuple[SelectionSet, list[Composition]]:
        selection = resolve(self.config, self.catalog)
        return selection, compose_all(selection, self.renderer)

    # -- Patch pass --------------------------------------------------------

    async def _patch_pass(
        self, root: Path
    ) -> tuple[list[PatchResult], list[WriteOutcome]]:
        steps = plan_patches(self.config)
        targets = list(dict.fromkeys(step.target for step in steps))

        originals: dict[FileKind, str | None] = {}
        for target in targets:
            originals[target] = await self.materializer.read_text(root / target.path)
        texts = dict(originals)

        results: list[PatchResult] = []
        for step in steps:
            current = texts[step.target]
            if current is None:
                results.append(missing_target(step.anchors, self.config, self.renderer))
                continue
            result = patch_any(current, step.anchors, self.config, self.renderer)
            if result.reason is PatchReason.APPLIED:
                texts[step.target] = result.text
            results.append(result)

        ops = [
            WriteOp(root / target.path, texts[target], WriteKind.PATCH)
            for target in targets
            if texts[target] is not None and texts[target] != originals[target]
        ]
        writes = await self.materializer.write_all(ops)
        return results, writes
