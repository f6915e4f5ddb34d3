"""Tests for the materializer (flutter_scaffold.materializer)."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

import pytest

from flutter_scaffold.materializer import (
    Materializer,
    WriteKind,
    WriteOp,
    WriteStatus,
)

pytestmark = pytest.mark.unit


class TestWrite:
    @pytest.mark.asyncio
    async def test_creates_parent_directories(self, tmp_path: Path):
        target = tmp_path / "lib" / "core" / "routes" / "route_constants.dart"
        outcome = await Materializer().write(WriteOp(target, "class RouteConstants {}\n"))
        assert outcome.status is WriteStatus.WRITTEN
        assert target.read_text(encoding="utf-8") == "class RouteConstants {}\n"

    @pytest.mark.asyncio
    async def test_identical_text_unchanged(self, tmp_path: Path):
        target = tmp_path / "pubspec.yaml"
        target.write_text("name: demo\n", encoding="utf-8")
        outcome = await Materializer().write(WriteOp(target, "name: demo\n"))
        assert outcome.status is WriteStatus.UNCHANGED

    @pytest.mark.asyncio
    async def test_create_does_not_clobber(self, tmp_path: Path):
        target = tmp_path / "pubspec.yaml"
        target.write_text("name: hand_edited\n", encoding="utf-8")
        outcome = await Materializer().write(WriteOp(target, "name: demo\n"))
        assert outcome.status is WriteStatus.SKIPPED
        assert target.read_text(encoding="utf-8") == "name: hand_edited\n"

    @pytest.mark.asyncio
    async def test_create_with_overwrite(self, tmp_path: Path):
        target = tmp_path / "pubspec.yaml"
        target.write_text("name: old\n", encoding="utf-8")
        outcome = await Materializer(overwrite=True).write(WriteOp(target, "name: demo\n"))
        assert outcome.status is WriteStatus.WRITTEN
        assert target.read_text(encoding="utf-8") == "name: demo\n"

    @pytest.mark.asyncio
    async def test_patch_replaces_existing(self, tmp_path: Path):
        target = tmp_path / "main.dart"
        target.write_text("void main() {}\n", encoding="utf-8")
        op = WriteOp(target, "import 'a.dart';\nvoid main() {}\n", WriteKind.PATCH)
        outcome = await Materializer().write(op)
        assert outcome.status is WriteStatus.WRITTEN
        assert outcome.path == target

    @pytest.mark.asyncio
    async def test_no_temp_files_left_behind(self, tmp_path: Path):
        await Materializer().write(WriteOp(tmp_path / "a.txt", "a\n"))
        assert [p.name for p in tmp_path.iterdir()] == ["a.txt"]

    @pytest.mark.asyncio
    async def test_failed_replace_keeps_original(self, tmp_path: Path):
        target = tmp_path / "a.txt"
        target.write_text("original\n", encoding="utf-8")
        op = WriteOp(target, "new\n", WriteKind.PATCH)
        with patch("flutter_scaffold.materializer.os.replace", side_effect=OSError("disk full")):
            with pytest.raises(OSError):
                await Materializer().write(op)
        assert target.read_text(encoding="utf-8") == "original\n"
        assert [p.name for p in tmp_path.iterdir()] == ["a.txt"]

    @pytest.mark.asyncio
    async def test_newlines_written_verbatim(self, tmp_path: Path):
        target = tmp_path / "a.txt"
        await Materializer().write(WriteOp(target, "a\nb\n"))
        assert target.read_bytes() == b"a\nb\n"


class TestBatch:
    @pytest.mark.asyncio
    async def test_write_all_keeps_order(self, tmp_path: Path):
        ops = [WriteOp(tmp_path / f"f{i}.txt", f"{i}\n") for i in range(5)]
        outcomes = await Materializer().write_all(ops)
        assert [o.op for o in outcomes] == ops
        assert all(o.status is WriteStatus.WRITTEN for o in outcomes)

    @pytest.mark.asyncio
    async def test_read_text(self, tmp_path: Path):
        m = Materializer()
        assert await m.read_text(tmp_path / "missing.dart") is None
        (tmp_path / "present.dart").write_text("x\n", encoding="utf-8")
        assert await m.read_text(tmp_path / "present.dart") == "x\n"
