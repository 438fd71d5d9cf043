"""Error types raised by vault parsing and note writing."""

from pathlib import Path


class VaultError(Exception):
    """Base class for all vaultjoin errors."""


class VaultIOError(VaultError):
    """A filesystem read, write, or directory creation failed."""

    def __init__(self, path: Path, reason: object):
        super().__init__(f"IO error on {path}: {reason}")
        self.path = path


class MissingMetadata(VaultError):
    """Metadata was required but the note has no frontmatter block."""

    def __init__(self, message: str = "No metadata found"):
        super().__init__(message)


class UnclosedMetadata(VaultError):
    """The opening --- was found but the block was never closed."""

    def __init__(self, message: str = "No closing --- for metadata found"):
        super().__init__(message)


class MetadataParseError(VaultError):
    """The codec rejected a metadata block or a value to serialize."""


class MalformedVault(VaultError):
    """A structural precondition on the vault layout was violated."""
