"""Index command implementation - list notes by extracted key."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.table import Table

from ..joining.index import find_by
from ..joining.strategies import Strategy
from ..vault.loader import Vault


def _sort_key(item: tuple[Any, Any]) -> tuple[str, str]:
    key, _ = item
    return (type(key).__name__, str(key))


def run_index(vault_path: Path, strategy: Strategy, *, output_json: bool = False) -> int:
    """Print the key -> note mapping for a vault."""
    vault = Vault.open(vault_path)
    found = find_by(vault, strategy)
    rows = sorted(found.items(), key=_sort_key)

    if output_json:
        data = {str(key): str(handle.path.relative_to(vault.root)) for key, handle in rows}
        print(json.dumps(data, indent=2, sort_keys=True))
        return 0

    console = Console()
    table = Table(title=f"Joined notes ({len(rows)})")
    table.add_column("key", style="cyan", no_wrap=True)
    table.add_column("path")
    for key, handle in rows:
        table.add_row(str(key), str(handle.path.relative_to(vault.root)))

    console.print(table)
    return 0
