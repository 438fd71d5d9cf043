"""Pytest configuration and fixtures."""

from pathlib import Path

import pytest

from vaultjoin.vault.loader import Vault


@pytest.fixture
def vault_path(tmp_path: Path) -> Path:
    """A vault with one keyed note and one note without frontmatter."""
    root = tmp_path / "vault"
    root.mkdir()
    (root / "a.md").write_text("---\nid: 7\n---\nhello", encoding="utf-8")
    (root / "b.md").write_text("no frontmatter at all", encoding="utf-8")
    return root


@pytest.fixture
def vault(vault_path: Path) -> Vault:
    return Vault.open(vault_path)
