"""Data models for vault notes."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Generic, TypeVar

from .errors import MissingMetadata, VaultIOError
from .vault.codec import YamlCodec
from .vault.parser import render_note, split_frontmatter

T = TypeVar("T")


def write_note_text(path: Path, text: str) -> None:
    """Replace the file at `path` with `text`."""
    try:
        path.write_text(text, encoding="utf-8")
    except OSError as e:
        raise VaultIOError(path, e) from e


@dataclass(frozen=True)
class NoteHandle:
    """Reference to a note file.

    Holds only the path. Every accessor reads the file again, and the file is
    not required to exist until it is read.
    """

    path: Path

    def __post_init__(self) -> None:
        object.__setattr__(self, "path", Path(self.path))

    @classmethod
    def from_path(cls, path: str | Path) -> "NoteHandle":
        return cls(Path(path))

    def to_path(self) -> Path:
        return self.path

    def raw_content(self) -> str:
        """Full file text without frontmatter interpretation."""
        try:
            return self.path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise VaultIOError(self.path, e) from e

    def parts(self, into: Any = None, codec: YamlCodec | None = None) -> tuple[Any | None, str]:
        """Split the note into (metadata, body).

        Args:
            into: Type to decode the metadata into; None for the raw YAML value
            codec: Codec override

        Returns:
            (metadata, body); metadata is None when the note has no frontmatter
        """
        return split_frontmatter(self.raw_content(), into, codec=codec)

    def metadata(self, into: Any = None, codec: YamlCodec | None = None) -> Any:
        """Decoded metadata, raising MissingMetadata if there is no block."""
        metadata, _ = self.parts(into, codec=codec)
        if metadata is None:
            raise MissingMetadata()
        return metadata

    def parse(self, into: Any = None, codec: YamlCodec | None = None) -> "VaultNote":
        """Load the note as a VaultNote. Metadata is required."""
        metadata, content = self.parts(into, codec=codec)
        if metadata is None:
            raise MissingMetadata()
        return VaultNote(path=self.path, metadata=metadata, content=content)


@dataclass
class VaultNote(Generic[T]):
    """A fully loaded note: metadata plus body, bound to its file."""

    path: Path
    metadata: T
    content: str

    def render(self, codec: YamlCodec | None = None) -> str:
        return render_note(self.metadata, self.content, codec=codec)

    def write(self, codec: YamlCodec | None = None) -> None:
        """Write the note back to its own path, replacing the file."""
        write_note_text(self.path, self.render(codec=codec))
