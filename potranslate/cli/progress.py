"""Terminal progress bars for translation passes."""

from __future__ import annotations

import contextlib
from collections.abc import Iterator
from pathlib import Path

from tqdm import tqdm

from ..translation.orchestrator import ProgressCallback


@contextlib.contextmanager
def tqdm_progress(path: Path, total: int) -> Iterator[ProgressCallback | None]:
    """Show a bar named after ``path`` advancing once per attempted key."""
    if total <= 0:
        yield None
        return
    with tqdm(total=total, desc=path.name, unit="str", leave=True, dynamic_ncols=True) as bar:
        yield bar.update
