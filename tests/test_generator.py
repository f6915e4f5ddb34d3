"""Tests for the scaffolding orchestrator (flutter_scaffold.generator).

Covers:
- Full project generation into a temporary directory
- Report contents: writes, patches, active rules
- Re-running generation against the same directory
- Extending an existing project and missing target files
"""

from __future__ import annotations

from pathlib import Path
from unittest.mock import AsyncMock

import pytest

from flutter_scaffold.catalog import FileKind
from flutter_scaffold.config import ScaffoldConfig
from flutter_scaffold.errors import AmbiguousSelection
from flutter_scaffold.generator import GenerationReport, ScaffoldGenerator
from flutter_scaffold.materializer import Materializer, WriteKind, WriteStatus
from flutter_scaffold.patcher.engine import PatchReason

pytestmark = pytest.mark.unit

_MANDATORY = [
    "lib/main.dart",
    "pubspec.yaml",
    "lib/app/app.dart",
    "lib/app/app_showcase.dart",
    "lib/core/utils/state_management_observability.dart",
    "lib/core/routes/route_constants.dart",
]


class TestPlan:
    def test_plan_touches_nothing(self, minimal_config, tmp_path: Path):
        materializer = Materializer()
        materializer.write_all = AsyncMock()
        compositions = ScaffoldGenerator(minimal_config, materializer=materializer).plan()
        assert {c.path for c in compositions} >= set(_MANDATORY)
        assert all(c.ok for c in compositions)
        materializer.write_all.assert_not_called()
        assert list(tmp_path.iterdir()) == []


class TestGenerate:
    @pytest.mark.asyncio
    async def test_writes_project(self, minimal_config, output_dir: Path):
        report = await ScaffoldGenerator(minimal_config).generate(output_dir)

        root = output_dir / "demo_app"
        assert report.project_root == root
        for rel in _MANDATORY:
            assert (root / rel).is_file(), rel
        assert (root / "lib/core/di/injection.dart").is_file()
        assert not (root / "lib/core/di/network_module.dart").exists()
        assert report.ok

    @pytest.mark.asyncio
    async def test_patch_pass_registers_showcase(self, minimal_config, output_dir: Path):
        report = await ScaffoldGenerator(minimal_config).generate(output_dir)
        applied = {p.rule for p in report.applied_patches}
        assert applied == {"showcase_route", "showcase_route_constant"}

        app = (report.project_root / "lib/app/app.dart").read_text(encoding="utf-8")
        assert "'/showcase': (context) => const ShowcaseScreen()," in app
        patch_writes = [w for w in report.writes if w.op.kind is WriteKind.PATCH]
        assert {w.path.name for w in patch_writes} == {"app.dart", "route_constants.dart"}

    @pytest.mark.asyncio
    async def test_skip_patches(self, minimal_config, output_dir: Path):
        report = await ScaffoldGenerator(minimal_config).generate(output_dir, run_patches=False)
        assert report.patches == []
        app = (report.project_root / "lib/app/app.dart").read_text(encoding="utf-8")
        assert "'/showcase'" not in app

    @pytest.mark.asyncio
    async def test_active_rules_reported(self, full_config, output_dir: Path):
        report = await ScaffoldGenerator(full_config).generate(output_dir)
        assert "Authentication+Push Notification" in report.active_rules
        assert "Clean Architecture+Network Layer" in report.active_rules
        assert (report.project_root / "lib/core/di/network_module.dart").is_file()

    @pytest.mark.asyncio
    async def test_second_run_changes_nothing(self, full_config, output_dir: Path):
        first = await ScaffoldGenerator(full_config).generate(output_dir)
        snapshot = {
            p: p.read_text(encoding="utf-8")
            for p in first.project_root.rglob("*") if p.is_file()
        }

        second = await ScaffoldGenerator(full_config).generate(output_dir)
        assert second.applied_patches == []
        assert all(p.reason is PatchReason.ALREADY_PRESENT for p in second.patches)
        assert {w.status for w in second.writes} <= {WriteStatus.SKIPPED, WriteStatus.UNCHANGED}
        assert {
            p: p.read_text(encoding="utf-8")
            for p in second.project_root.rglob("*") if p.is_file()
        } == snapshot

    @pytest.mark.asyncio
    async def test_overwrite_run_is_stable(self, minimal_config, output_dir: Path):
        first = await ScaffoldGenerator(minimal_config).generate(output_dir)
        main = (first.project_root / "lib/main.dart").read_text(encoding="utf-8")
        generator = ScaffoldGenerator(minimal_config, materializer=Materializer(overwrite=True))
        await generator.generate(output_dir)
        assert (first.project_root / "lib/main.dart").read_text(encoding="utf-8") == main

    @pytest.mark.asyncio
    async def test_fatal_error_writes_nothing(self, minimal_config, output_dir: Path, monkeypatch):
        def clash(*args, **kwargs):
            raise AmbiguousSelection(FileKind.ENTRYPOINT, "launch", [])

        monkeypatch.setattr("flutter_scaffold.generator.compose_all", clash)
        with pytest.raises(AmbiguousSelection):
            await ScaffoldGenerator(minimal_config).generate(output_dir)
        assert list(output_dir.iterdir()) == []


class TestExtend:
    @pytest.mark.asyncio
    async def test_adds_module_to_existing_project(self, minimal_config, output_dir: Path):
        first = await ScaffoldGenerator(minimal_config).generate(output_dir)
        later = ScaffoldConfig.create(
            project_name="demo_app",
            features=["Authentication"],
            modules=["Localization"],
        )
        report = await ScaffoldGenerator(later).extend(first.project_root)

        applied = {p.rule for p in report.applied_patches}
        assert applied == {"localization_dependency_easy"}
        pubspec = (first.project_root / "pubspec.yaml").read_text(encoding="utf-8")
        assert "  easy_localization: ^3.0.3\n" in pubspec
        assert [w.path.name for w in report.written] == ["pubspec.yaml"]

        again = await ScaffoldGenerator(later).extend(first.project_root)
        assert again.applied_patches == []
        assert again.writes == []

    @pytest.mark.asyncio
    async def test_create_missing_adds_new_files_only(self, minimal_config, output_dir: Path):
        first = await ScaffoldGenerator(minimal_config).generate(output_dir)
        root = first.project_root
        app_before = (root / "lib/app/app.dart").read_text(encoding="utf-8")
        later = ScaffoldConfig.create(
            project_name="demo_app",
            features=["Authentication"],
            modules=["Network Layer"],
        )
        report = await ScaffoldGenerator(later).extend(root, create_missing=True)

        created = [w.path.name for w in report.writes if w.op.kind is WriteKind.CREATE]
        assert sorted(created) == [
            "connectivity_service.dart",
            "network_info.dart",
            "network_module.dart",
        ]
        assert "Clean Architecture+Network Layer" in report.active_rules
        assert (root / "lib/app/app.dart").read_text(encoding="utf-8") == app_before
        injection = (root / "lib/core/di/injection.dart").read_text(encoding="utf-8")
        assert injection.count("registerNetworkDependencies(sl);") == 1
        assert report.ok

    @pytest.mark.asyncio
    async def test_missing_files_reported(self, minimal_config, tmp_path: Path):
        report = await ScaffoldGenerator(minimal_config).extend(tmp_path)
        assert report.applied_patches == []
        assert report.manual_followups
        assert all("does not exist" in p.hint for p in report.manual_followups)
        assert not report.ok
        assert list(tmp_path.iterdir()) == []


class TestReport:
    def test_ok_with_nothing(self, tmp_path: Path):
        assert GenerationReport(project_root=tmp_path).ok
