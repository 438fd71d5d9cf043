"""Vault opening and note enumeration."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator

from ..models import NoteHandle
from .walker import walk_notes

logger = logging.getLogger(__name__)


def _log_walk_error(error: OSError) -> None:
    logger.debug(f"Skipping unreadable entry {error.filename}: {error}")


@dataclass(frozen=True)
class Vault:
    """A vault rooted at one directory."""

    root: Path

    @classmethod
    def open(cls, root: str | Path) -> "Vault":
        return cls(Path(root))

    def notes(self) -> Iterator[NoteHandle]:
        """Lazily yield a handle for every visible markdown note.

        Each call starts a fresh walk of the directory tree.
        """
        for path in walk_notes(self.root, on_error=_log_walk_error):
            yield NoteHandle(path)

    def note(self, relative_path: str | Path) -> NoteHandle:
        """Handle for a note addressed relative to the vault root."""
        return NoteHandle(self.root / relative_path)
