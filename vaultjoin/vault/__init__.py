"""Vault parsing and enumeration utilities."""

from .codec import DEFAULT_CODEC, YamlCodec
from .parser import FRONTMATTER_DELIMITER, render_note, split_frontmatter
from .walker import NOTE_SUFFIX, is_hidden, is_markdown, walk_notes

__all__ = [
    "DEFAULT_CODEC",
    "YamlCodec",
    "FRONTMATTER_DELIMITER",
    "render_note",
    "split_frontmatter",
    "NOTE_SUFFIX",
    "is_hidden",
    "is_markdown",
    "walk_notes",
]
