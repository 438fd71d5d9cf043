"""vaultjoin - frontmatter parsing and note joining for Markdown vaults."""

__version__ = "0.1.0"

from .errors import (
    MalformedVault,
    MetadataParseError,
    MissingMetadata,
    UnclosedMetadata,
    VaultError,
    VaultIOError,
)
from .models import NoteHandle, VaultNote
from .vault.loader import Vault
from .joining import Branded, JoinedNote, Strategy, TypeAndKey, WriteOutcome, find_by

__all__ = [
    "__version__",
    "MalformedVault",
    "MetadataParseError",
    "MissingMetadata",
    "UnclosedMetadata",
    "VaultError",
    "VaultIOError",
    "NoteHandle",
    "VaultNote",
    "Vault",
    "Branded",
    "JoinedNote",
    "Strategy",
    "TypeAndKey",
    "WriteOutcome",
    "find_by",
]
