"""Index every note in a vault by the key a strategy extracts."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TypeVar

from ..models import NoteHandle
from ..vault.loader import Vault
from .strategies import Strategy

logger = logging.getLogger(__name__)

K = TypeVar("K")


def find_by(vault: Vault | str | Path, strategy: Strategy[K]) -> dict[K, NoteHandle]:
    """Scan the vault and map each extracted key to its note.

    Notes the strategy rejects are left out. When two notes yield the same
    key, the one visited later in the walk wins; the collision is logged.
    Every call performs a full fresh scan.

    Args:
        vault: Vault or path to its root
        strategy: Key extraction strategy

    Returns:
        Dict of key -> NoteHandle
    """
    if not isinstance(vault, Vault):
        vault = Vault.open(vault)

    found: dict[K, NoteHandle] = {}
    for note in vault.notes():
        match = strategy.extract(note)
        if match is None:
            continue

        key, handle = match
        previous = found.get(key)
        if previous is not None:
            logger.warning(f"Duplicate key {key!r}: {handle.path} replaces {previous.path}")
        found[key] = handle

    logger.debug(f"Indexed {len(found)} notes under {vault.root}")
    return found
