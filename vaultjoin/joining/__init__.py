"""Joining notes to objects that live outside the vault."""

from .index import find_by
from .note import JoinedNote, WriteOutcome
from .strategies import Branded, Strategy, TypeAndKey

__all__ = [
    "find_by",
    "JoinedNote",
    "WriteOutcome",
    "Branded",
    "Strategy",
    "TypeAndKey",
]
