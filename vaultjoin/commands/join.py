"""Join command implementation - create or update the note for one key."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from rich.console import Console

from ..errors import VaultError
from ..joining.index import find_by
from ..joining.note import JoinedNote
from ..joining.strategies import Strategy
from ..models import NoteHandle
from ..vault.codec import DEFAULT_CODEC
from ..vault.loader import Vault


def _read_metadata(path: Path) -> Any:
    text = NoteHandle(path).raw_content()
    return DEFAULT_CODEC.load(text)


def run_join(
    vault_path: Path,
    strategy: Strategy,
    key: Any,
    default_path: str,
    *,
    metadata_file: Path,
    body_file: Path | None = None,
) -> int:
    """Write the note joined to `key`.

    The vault is indexed with `strategy`; if a note already carries `key` it is
    replaced, otherwise a new note is created at `default_path` (relative to
    the vault root).
    """
    err = Console(stderr=True)
    console = Console()
    vault = Vault.open(vault_path)

    try:
        metadata = _read_metadata(metadata_file)
        body = NoteHandle(body_file).raw_content() if body_file else ""
    except VaultError as e:
        err.print(f"Cannot load note input: {e}", style="bold red")
        return 1

    existing = find_by(vault, strategy).get(key)
    joined = JoinedNote(
        note_id=key,
        default_path=vault.root / default_path,
        metadata=metadata,
        contents=body,
    )

    try:
        outcome = joined.write(existing)
    except VaultError as e:
        err.print(f"Cannot write note for {key!r}: {e}", style="bold red")
        return 1

    target = existing.path if existing is not None else joined.default_path
    if target.is_relative_to(vault.root):
        target = target.relative_to(vault.root)
    console.print(f"{outcome.value} {target}", markup=False, highlight=False, soft_wrap=True)
    return 0
