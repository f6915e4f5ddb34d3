"""Writes composed and patched text to disk.

All file-system work runs in a worker thread (``asyncio.to_thread``) so the
generator can await many writes together.  Each write goes to a temporary
file in the destination directory and is moved into place with
``os.replace``, so a file is never observed half-written.
"""

from __future__ import annotations

import asyncio
import os
import tempfile
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional


class WriteKind(str, Enum):
    CREATE = "create"
    PATCH = "patch"


class WriteStatus(str, Enum):
    WRITTEN = "written"
    SKIPPED = "skipped"       # create over an existing file without overwrite
    UNCHANGED = "unchanged"   # file already holds exactly this text


@dataclass(frozen=True)
class WriteOp:
    """A pending write: ``create`` for new files, ``patch`` for edits."""

    path: Path
    text: str
    kind: WriteKind = WriteKind.CREATE


@dataclass(frozen=True)
class WriteOutcome:
    op: WriteOp
    status: WriteStatus

    @property
    def path(self) -> Path:
        return self.op.path


class Materializer:
    """Applies ``WriteOp`` objects to the file system.

    Args:
        overwrite: Replace existing files on ``create``.  Without it an
            existing file is left alone and reported as skipped; the patch
            pass is then responsible for bringing it up to date.
    """

    def __init__(self, overwrite: bool = False) -> None:
        self.overwrite = overwrite

    async def read_text(self, path: str | Path) -> Optional[str]:
        """Return the file's text, or ``None`` when it does not exist."""
        return await asyncio.to_thread(_read_file, Path(path))

    async def write(self, op: WriteOp) -> WriteOutcome:
        return await asyncio.to_thread(self._write_sync, op)

    async def write_all(self, ops: list[WriteOp]) -> list[WriteOutcome]:
        """Perform *ops* concurrently; outcomes keep the order of *ops*."""
        return list(await asyncio.gather(*[self.write(op) for op in ops]))

    def _write_sync(self, op: WriteOp) -> WriteOutcome:
        current = _read_file(op.path)
        if current is not None:
            if current == op.text:
                return WriteOutcome(op, WriteStatus.UNCHANGED)
            if op.kind is WriteKind.CREATE and not self.overwrite:
                return WriteOutcome(op, WriteStatus.SKIPPED)
        _atomic_write(op.path, op.text)
        return WriteOutcome(op, WriteStatus.WRITTEN)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _read_file(path: Path) -> Optional[str]:
    try:
        return path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return None


def _atomic_write(path: Path, content: str) -> None:
    """Synchronous helper: create parent dirs, write a temp file, move it in place."""
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as handle:
            handle.write(content)
        os.replace(tmp_name, path)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise
