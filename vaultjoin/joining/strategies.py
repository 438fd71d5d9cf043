"""Strategies that pull a typed key out of a note's frontmatter.

A strategy is a filter, not a validator: any problem reading or decoding a
note means the note does not match.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Protocol, TypeVar

from ..errors import VaultError
from ..models import NoteHandle
from ..vault.codec import DEFAULT_CODEC, YamlCodec

logger = logging.getLogger(__name__)

K_co = TypeVar("K_co", covariant=True)


class Strategy(Protocol[K_co]):
    """Maps a note to (key, note), or None if the note does not match."""

    def extract(self, note: NoteHandle) -> tuple[K_co, NoteHandle] | None:
        ...


def _metadata_mapping(note: NoteHandle, codec: YamlCodec) -> dict | None:
    try:
        return note.metadata(dict, codec=codec)
    except VaultError as e:
        logger.debug(f"No usable metadata in {note.path}: {e}")
        return None


def _convert_key(value: Any, key_type: Any, note: NoteHandle, codec: YamlCodec) -> Any | None:
    try:
        return codec.convert(value, key_type, strict=True)
    except VaultError as e:
        logger.debug(f"Key in {note.path} is not a {key_type!r}: {e}")
        return None


@dataclass(frozen=True)
class Branded:
    """Key lives under one fixed field, whatever kind of note it is."""

    brand_key: str
    key_type: Any = str
    codec: YamlCodec = DEFAULT_CODEC

    def extract(self, note: NoteHandle) -> tuple[Any, NoteHandle] | None:
        metadata = _metadata_mapping(note, self.codec)
        if metadata is None or self.brand_key not in metadata:
            return None

        key = _convert_key(metadata[self.brand_key], self.key_type, note, self.codec)
        if key is None:
            return None
        return key, note


@dataclass(frozen=True)
class TypeAndKey:
    """Key lives under `id_key`, but only on notes whose `type_key` equals `note_type`.

    Use this when one vault holds several kinds of domain notes sharing an id
    field.
    """

    type_key: str
    note_type: str
    id_key: str
    key_type: Any = str
    codec: YamlCodec = DEFAULT_CODEC

    def extract(self, note: NoteHandle) -> tuple[Any, NoteHandle] | None:
        metadata = _metadata_mapping(note, self.codec)
        if metadata is None:
            return None

        note_type = metadata.get(self.type_key)
        if not isinstance(note_type, str) or note_type != self.note_type:
            return None

        if self.id_key not in metadata:
            return None

        key = _convert_key(metadata[self.id_key], self.key_type, note, self.codec)
        if key is None:
            return None
        return key, note
