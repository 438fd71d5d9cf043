from dataclasses import dataclass
from pathlib import Path

import pytest

from vaultjoin.errors import MalformedVault, MetadataParseError, VaultIOError
from vaultjoin.joining.index import find_by
from vaultjoin.joining.note import JoinedNote, WriteOutcome
from vaultjoin.joining.strategies import Branded
from vaultjoin.models import NoteHandle


@dataclass
class Person:
    id: int
    name: str


def test_write_creates_note_and_parent_dirs(tmp_path: Path) -> None:
    target = tmp_path / "people" / "staff" / "7.md"
    joined = JoinedNote(note_id=7, default_path=target, metadata={"id": 7}, contents="hello")

    assert joined.write() is WriteOutcome.CREATED
    assert target.read_text(encoding="utf-8") == "---\nid: 7\n---\nhello"


def test_write_into_existing_directory(tmp_path: Path) -> None:
    (tmp_path / "people").mkdir()
    joined = JoinedNote(7, tmp_path / "people" / "7.md", {"id": 7}, "")

    assert joined.write(None) is WriteOutcome.CREATED
    assert NoteHandle(tmp_path / "people" / "7.md").parts() == ({"id": 7}, "")


def test_write_updates_existing_path(tmp_path: Path) -> None:
    existing = tmp_path / "elsewhere.md"
    existing.write_text("---\nid: 7\nold_field: keep?\n---\nold body\n", encoding="utf-8")
    default = tmp_path / "people" / "7.md"
    joined = JoinedNote(7, default, Person(id=7, name="Ada"), "new body")

    assert joined.write(existing) is WriteOutcome.UPDATED
    assert existing.read_text(encoding="utf-8") == "---\nid: 7\nname: Ada\n---\nnew body"
    assert not default.exists()
    assert not default.parent.exists()


def test_write_accepts_handle_and_str(tmp_path: Path) -> None:
    existing = tmp_path / "a.md"
    existing.write_text("x", encoding="utf-8")
    joined = JoinedNote("k", tmp_path / "new" / "k.md", {"id": "k"}, "body")

    assert joined.write(NoteHandle(existing)) is WriteOutcome.UPDATED
    assert joined.write(str(existing)) is WriteOutcome.UPDATED
    assert existing.read_text(encoding="utf-8") == "---\nid: k\n---\nbody"


def test_bare_filename_is_malformed(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)
    joined = JoinedNote(7, "7.md", {"id": 7}, "hello")

    with pytest.raises(MalformedVault):
        joined.write()
    assert list(tmp_path.iterdir()) == []


def test_relative_default_path_with_parent(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)
    joined = JoinedNote(7, "people/7.md", {"id": 7}, "hello")

    assert joined.write() is WriteOutcome.CREATED
    assert (tmp_path / "people" / "7.md").exists()


def test_unserializable_metadata_writes_nothing(tmp_path: Path) -> None:
    target = tmp_path / "people" / "7.md"
    joined = JoinedNote(7, target, {"handle": object()}, "hello")

    with pytest.raises(MetadataParseError):
        joined.write()
    assert not target.parent.exists()


def test_key_alias() -> None:
    assert JoinedNote(7, Path("p/7.md"), {}, "").key == 7


def test_join_updates_indexed_note(vault_path: Path) -> None:
    index = find_by(vault_path, Branded("id", key_type=int))
    joined = JoinedNote(7, vault_path / "people" / "7.md", {"id": 7, "name": "Ada"}, "updated")

    existing = index.get(7)
    assert joined.write(existing.path if existing else None) is WriteOutcome.UPDATED

    assert (vault_path / "a.md").read_text(encoding="utf-8") == "---\nid: 7\nname: Ada\n---\nupdated"
    assert not (vault_path / "people" / "7.md").exists()
    assert find_by(vault_path, Branded("id", key_type=int)) == {7: NoteHandle(vault_path / "a.md")}


def test_join_creates_unindexed_note(vault_path: Path) -> None:
    index = find_by(vault_path, Branded("id", key_type=int))
    joined = JoinedNote(8, vault_path / "people" / "8.md", {"id": 8}, "new")

    assert joined.write(index.get(8)) is WriteOutcome.CREATED
    assert set(find_by(vault_path, Branded("id", key_type=int))) == {7, 8}


def test_parent_is_a_file_is_io_error(tmp_path: Path) -> None:
    blocker = tmp_path / "people"
    blocker.write_text("not a directory", encoding="utf-8")
    joined = JoinedNote(7, blocker / "7.md", {"id": 7}, "hello")

    with pytest.raises(VaultIOError) as exc:
        joined.write()
    assert exc.value.path == blocker
    assert blocker.read_text(encoding="utf-8") == "not a directory"


def test_existing_path_is_a_directory_is_io_error(tmp_path: Path) -> None:
    folder = tmp_path / "folder.md"
    folder.mkdir()
    joined = JoinedNote(7, tmp_path / "people" / "7.md", {"id": 7}, "hello")

    with pytest.raises(VaultIOError) as exc:
        joined.write(folder)
    assert exc.value.path == folder
    assert isinstance(exc.value.__cause__, OSError)


def test_none_metadata_round_trips(tmp_path: Path) -> None:
    target = tmp_path / "people" / "7.md"
    JoinedNote(7, target, None, "b").write()

    assert target.read_text(encoding="utf-8").startswith("---\nnull\n")
    assert NoteHandle(target).parts() == (None, "b")
