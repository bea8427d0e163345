"""Whole-file reads and crash-safe whole-file writes for catalogs."""

from __future__ import annotations

import os
import shutil
import tempfile
from collections.abc import Sequence
from pathlib import Path

from ..catalog.parser import split_lines

__all__ = ["read_lines", "write_lines"]

_NEW_FILE_MODE = 0o644


def read_lines(path: Path) -> list[str]:
    """Return the lines of ``path`` with line endings left untouched."""
    with path.open("r", encoding="utf-8", newline="") as fh:
        return split_lines(fh.read())


def write_lines(path: Path, lines: Sequence[str]) -> None:
    """Replace ``path`` with ``lines`` joined by ``\\n``.

    The content is written to a temporary file next to ``path`` and renamed
    over it, so an interrupted write never leaves a truncated catalog.
    """
    with tempfile.NamedTemporaryFile(
        "w",
        encoding="utf-8",
        newline="",
        delete=False,
        dir=str(path.parent),
        prefix=f".{path.name}.",
        suffix=".tmp",
    ) as handle:
        temp_path = Path(handle.name)
        handle.write("\n".join(lines))
    try:
        if path.exists():
            shutil.copymode(path, temp_path)
        else:
            os.chmod(temp_path, _NEW_FILE_MODE)
        os.replace(temp_path, path)
    except OSError:
        temp_path.unlink(missing_ok=True)
        raise
