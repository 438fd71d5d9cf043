"""Recursive discovery of note files under a vault root."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Callable, Iterator

NOTE_SUFFIX = ".md"
HIDDEN_PREFIX = "."


def is_hidden(name: str) -> bool:
    """Hidden entries (and for directories, their whole subtree) are skipped."""
    return name.startswith(HIDDEN_PREFIX)


def is_markdown(path: Path) -> bool:
    return path.suffix == NOTE_SUFFIX


def walk_notes(
    root: Path,
    on_error: Callable[[OSError], None] | None = None,
) -> Iterator[Path]:
    """Yield every visible markdown file below `root`.

    Entries are visited in name order so repeated walks are stable. Errors
    raised while listing a directory go to `on_error` and do not stop the walk.
    """
    for dirpath, dirnames, filenames in os.walk(root, onerror=on_error):
        # Pruning in place keeps os.walk out of hidden subtrees
        dirnames[:] = sorted(d for d in dirnames if not is_hidden(d))

        for name in sorted(filenames):
            if is_hidden(name):
                continue
            path = Path(dirpath) / name
            if is_markdown(path):
                yield path
