"""Joined notes: notes that mirror an object living outside the vault.

A joined note carries the id of its external object, freshly computed metadata
and body, and a default path. Writing it either replaces the note already
found for that id or creates a new file at the default path.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Generic, TypeVar

from ..errors import MalformedVault, VaultIOError
from ..models import NoteHandle, write_note_text
from ..vault.codec import YamlCodec
from ..vault.parser import render_note

logger = logging.getLogger(__name__)

K = TypeVar("K")
T = TypeVar("T")


class WriteOutcome(Enum):
    CREATED = "created"
    UPDATED = "updated"


@dataclass
class JoinedNote(Generic[K, T]):
    note_id: K
    default_path: Path
    metadata: T
    contents: str

    def __post_init__(self) -> None:
        self.default_path = Path(self.default_path)

    @property
    def key(self) -> K:
        return self.note_id

    def render(self, codec: YamlCodec | None = None) -> str:
        return render_note(self.metadata, self.contents, codec=codec)

    def write(
        self,
        existing: NoteHandle | Path | str | None = None,
        codec: YamlCodec | None = None,
    ) -> WriteOutcome:
        """Write the note, replacing its whole frontmatter and body.

        Args:
            existing: Note already joined to this id, if the index found one
            codec: Codec override

        Returns:
            UPDATED when `existing` was given, CREATED otherwise

        Raises:
            MalformedVault: A new note's default path has no parent directory
            MetadataParseError: The metadata could not be serialized
            VaultIOError: Creating the parent directory or writing failed
        """
        if existing is not None:
            outcome = WriteOutcome.UPDATED
            path = existing.path if isinstance(existing, NoteHandle) else Path(existing)
        else:
            outcome = WriteOutcome.CREATED
            path = self.default_path
            if path.parent == Path("."):
                raise MalformedVault("Invalid note location, lacks meaningful parent")

        text = self.render(codec=codec)

        if outcome is WriteOutcome.CREATED:
            try:
                path.parent.mkdir(parents=True, exist_ok=True)
            except OSError as e:
                raise VaultIOError(path.parent, e) from e

        logger.debug(f"Writing note to {path}")
        write_note_text(path, text)
        return outcome
