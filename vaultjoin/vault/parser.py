"""Frontmatter splitting and rendering for note text."""

from __future__ import annotations

from typing import Any

from ..errors import UnclosedMetadata
from .codec import DEFAULT_CODEC, YamlCodec

FRONTMATTER_DELIMITER = "---"


def split_lines(content: str) -> list[str]:
    """Split text into lines.

    A trailing newline does not produce an extra empty line, and a trailing
    carriage return is dropped from each line.
    """
    if not content:
        return []
    lines = content.split("\n")
    if content.endswith("\n"):
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def split_frontmatter(
    content: str,
    into: Any = None,
    codec: YamlCodec | None = None,
) -> tuple[Any | None, str]:
    """Split note text into (metadata, body).

    Only a first line that is exactly the delimiter opens a metadata block;
    otherwise the whole text is returned as the body with no metadata.

    Args:
        content: Full note text
        into: Type to decode the metadata block into (None for raw YAML)
        codec: Codec used for the metadata block

    Returns:
        (metadata, body) where metadata is None if no block was present

    Raises:
        MetadataParseError: The block could not be decoded into `into`
        UnclosedMetadata: The block was opened but never closed
    """
    codec = codec or DEFAULT_CODEC
    lines = split_lines(content)

    if not lines:
        return None, ""

    if lines[0] != FRONTMATTER_DELIMITER:
        return None, content

    rest = iter(lines[1:])
    block: list[str] = []
    closed = False
    for line in rest:
        if line == FRONTMATTER_DELIMITER:
            closed = True
            break
        block.append(line)

    # Decoding happens before the closure check; a truncated block that still
    # decodes is reported as unclosed, not as a parse error.
    metadata = codec.load("\n".join(block), into)

    if not closed:
        raise UnclosedMetadata()

    return metadata, "\n".join(rest)


def render_note(metadata: Any, body: str, codec: YamlCodec | None = None) -> str:
    """Render metadata and body as note text with a fresh frontmatter block."""
    codec = codec or DEFAULT_CODEC
    return f"{FRONTMATTER_DELIMITER}\n{codec.dump(metadata)}{FRONTMATTER_DELIMITER}\n{body}"
