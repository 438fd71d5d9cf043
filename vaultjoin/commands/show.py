"""Show command implementation - print one note's frontmatter and body."""

from __future__ import annotations

import json
from pathlib import Path

from rich.console import Console
from rich.syntax import Syntax

from ..errors import VaultError
from ..vault.codec import DEFAULT_CODEC
from ..vault.loader import Vault


def run_show(vault_path: Path, note: str, *, output_json: bool = False) -> int:
    err = Console(stderr=True)
    handle = Vault.open(vault_path).note(note)

    try:
        metadata, body = handle.parts()
    except VaultError as e:
        err.print(f"Cannot read {note}: {e}", style="bold red")
        return 1

    if output_json:
        print(json.dumps({"metadata": metadata, "body": body}, indent=2, default=str))
        return 0

    console = Console()
    if metadata is None:
        console.print("(no frontmatter)", style="dim")
    else:
        console.print(Syntax(DEFAULT_CODEC.dump(metadata), "yaml"))
    console.print(body, markup=False, highlight=False)
    return 0
