"""Unit tests for utility functions (flutter_scaffold.utils).

Tests cover:
- sanitize_name (various inputs)
- format_duration
- Rich output helpers (print_header, print_summary_table, etc.)
- print_report / print_catalog rendering
"""

from __future__ import annotations

from pathlib import Path

import pytest
from rich.console import Console

from flutter_scaffold import utils
from flutter_scaffold.catalog import FileKind, Section, default_catalog
from flutter_scaffold.composer import Composition
from flutter_scaffold.errors import EmptyComposition
from flutter_scaffold.generator import GenerationReport
from flutter_scaffold.materializer import WriteKind, WriteOp, WriteOutcome, WriteStatus
from flutter_scaffold.patcher.engine import PatchReason, PatchResult
from flutter_scaffold.utils import (
    format_duration,
    print_error,
    print_header,
    print_success,
    print_summary_table,
    print_warning,
    sanitize_name,
)


@pytest.fixture
def recorded(monkeypatch) -> Console:
    """Swap the module console for one that records output."""
    console = Console(record=True, width=200)
    monkeypatch.setattr(utils, "console", console)
    return console


# ---------------------------------------------------------------------------
# sanitize_name
# ---------------------------------------------------------------------------


class TestSanitizeName:
    @pytest.mark.unit
    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("My Shop App", "my_shop_app"),
            ("my-shop", "my_shop"),
            ("  2FA-demo ", "_2fa_demo"),
            ("already_ok", "already_ok"),
            ("a--b__c", "a_b_c"),
            ("Café!", "caf"),
        ],
    )
    def test_sanitize(self, raw, expected):
        assert sanitize_name(raw) == expected

    @pytest.mark.unit
    def test_empty(self):
        assert sanitize_name("") == ""


# ---------------------------------------------------------------------------
# format_duration
# ---------------------------------------------------------------------------


class TestFormatDuration:
    @pytest.mark.unit
    def test_seconds(self):
        assert format_duration(0.42) == "0.4s"

    @pytest.mark.unit
    def test_minutes(self):
        assert format_duration(65.2) == "1m 5s"

    @pytest.mark.unit
    def test_negative(self):
        assert format_duration(-3) == "0.0s"


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


class TestRichOutputHelpers:
    @pytest.mark.unit
    def test_print_header(self):
        # Should not raise
        print_header("Creating demo")

    @pytest.mark.unit
    def test_print_summary_table(self):
        print_summary_table({"Key1": "Value1", "Key2": "Value2"}, title="Test Summary")

    @pytest.mark.unit
    def test_print_success(self):
        print_success("Generation completed")

    @pytest.mark.unit
    def test_print_error(self):
        print_error("Something failed")

    @pytest.mark.unit
    def test_print_warning(self):
        print_warning("Check your routes")


class TestPrintReport:
    @pytest.mark.unit
    def test_files_patches_and_followups(self, recorded, tmp_path: Path):
        root = tmp_path / "demo"
        report = GenerationReport(
            project_root=root,
            compositions=[
                Composition(FileKind.ENTRYPOINT, text="x\n"),
                Composition(
                    FileKind.NETWORK_DI,
                    error=EmptyComposition(FileKind.NETWORK_DI, Section.BODY),
                ),
            ],
            writes=[
                WriteOutcome(
                    WriteOp(root / "lib/main.dart", "x\n", WriteKind.CREATE),
                    WriteStatus.WRITTEN,
                ),
            ],
            patches=[
                PatchResult(FileKind.APP_WIDGET, "showcase_route", False,
                            PatchReason.ANCHOR_NOT_FOUND, "", hint="Add the route by hand"),
            ],
        )
        utils.print_report(report)
        out = recorded.export_text()
        assert "lib/main.dart" in out
        assert "written" in out
        assert "lib/core/di/network_module.dart" in out
        assert "failed" in out
        assert "showcase_route" in out
        assert "Manual follow-up (showcase_route): Add the route by hand" in out

    @pytest.mark.unit
    def test_empty_report_prints_nothing(self, recorded, tmp_path: Path):
        utils.print_report(GenerationReport(project_root=tmp_path))
        assert recorded.export_text().strip() == ""


class TestPrintCatalog:
    @pytest.mark.unit
    def test_lists_axes_and_files(self, recorded):
        utils.print_catalog(default_catalog(), {"modules": ["Localization", "Theme Manager"]})
        out = recorded.export_text()
        assert "Localization, Theme Manager" in out
        assert "pubspec.yaml" in out
        assert f"Catalog ({len(default_catalog())} fragments)" in out
