"""Tests for loading a whole Serato library from disk."""

from pathlib import Path

import pytest

from serato_library.core.config import LibraryConfig
from serato_library.domain.library.loader import (
    find_crate_files,
    library_from_database,
    load_library,
)
from serato_library.domain.library.models import Crate
from serato_library.domain.records.exceptions import FileOpenError, TruncatedInputError
from serato_library.domain.records.models import DatabaseFile, Track


class TestFindCrateFiles:
    """Tests for find_crate_files."""

    def test_only_crate_files_sorted(self, tmp_path: Path) -> None:
        for name in ["b.crate", "a.crate", "notes.txt", ".DS_Store", "c.crate.bak", "D.CRATE"]:
            (tmp_path / name).write_bytes(b"")
        (tmp_path / "folder.crate").mkdir()

        found = find_crate_files(tmp_path)

        assert [p.name for p in found] == ["a.crate", "b.crate"]

    def test_missing_directory(self, tmp_path: Path) -> None:
        assert find_crate_files(tmp_path / "Subcrates") == []

    def test_custom_extension(self, tmp_path: Path) -> None:
        (tmp_path / "a.crate").write_bytes(b"")
        (tmp_path / "b.scrate").write_bytes(b"")

        assert [p.name for p in find_crate_files(tmp_path, ".scrate")] == ["b.scrate"]

    def test_unlistable_directory(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """A directory that cannot be listed is reported like an unopenable file."""

        def denied(self):
            raise PermissionError(13, "Permission denied", str(self))

        monkeypatch.setattr(Path, "iterdir", denied)

        with pytest.raises(FileOpenError) as exc_info:
            find_crate_files(tmp_path)

        assert exc_info.value.path == str(tmp_path)
        assert isinstance(exc_info.value.__cause__, PermissionError)


class TestLibraryFromDatabase:
    """Tests for library_from_database."""

    def test_copies_version_and_tracks(self) -> None:
        tracks = [Track("/a.mp3")]
        crates = [Crate(name="Mix")]

        library = library_from_database(DatabaseFile(version="2.0", tracks=tracks), crates)

        assert library.version == "2.0"
        assert library.tracks is tracks
        assert library.crates is crates


class TestLoadLibrary:
    """Tests for load_library."""

    def test_full_library(self, serato_root) -> None:
        root = serato_root(
            ["/a.mp3", "/b.mp3", "/c.mp3"],
            {
                "Top": ["/a.mp3"],
                "Top%%Mid": ["/b.mp3", "/missing.mp3"],
                "Top%%Mid%%Leaf": ["/c.mp3", "/a.mp3"],
                "Orphan%%Child": ["/a.mp3"],
                "Solo": [],
            },
        )

        library = load_library(root)

        assert library.version == "2.0/Serato Scratch LIVE Database"
        assert [t.path for t in library.tracks] == ["/a.mp3", "/b.mp3", "/c.mp3"]
        assert [c.name for c in library.crates] == ["Solo", "Top"]

        top = library.crates[1]
        mid = top.subcrates[0]
        leaf = mid.subcrates[0]
        assert (top.name, mid.name, leaf.name) == ("Top", "Mid", "Leaf")
        assert [t.path for t in mid.tracks] == ["/b.mp3"]
        assert [t.path for t in leaf.tracks] == ["/c.mp3", "/a.mp3"]
        assert top.version == "1.0/Serato ScratchLive Crate"

    def test_crates_share_library_tracks(self, serato_root) -> None:
        root = serato_root(["/a.mp3"], {"One": ["/a.mp3"], "Two": ["/a.mp3"]})

        library = load_library(root)

        track = library.tracks[0]
        assert all(crate.tracks[0] is track for crate in library.crates)

    def test_accepts_string_root(self, serato_root) -> None:
        root = serato_root(["/a.mp3"], {})

        assert len(load_library(str(root)).tracks) == 1

    def test_missing_database(self, tmp_path: Path) -> None:
        with pytest.raises(FileOpenError, match="database V2"):
            load_library(tmp_path)

    def test_missing_subcrates_directory(self, serato_root) -> None:
        library = load_library(serato_root(["/a.mp3"]))

        assert library.crates == []
        assert len(library.tracks) == 1

    def test_empty_subcrates_directory(self, serato_root) -> None:
        assert load_library(serato_root(["/a.mp3"], {})).crates == []

    def test_non_crate_entries_skipped(self, serato_root) -> None:
        root = serato_root(["/a.mp3"], {"Mix": ["/a.mp3"]})
        subcrates = root / "_Serato_" / "Subcrates"
        (subcrates / "neworder.pref").write_bytes(b"garbage that is not a record")
        (subcrates / "Backup").mkdir()

        library = load_library(root)

        assert [c.name for c in library.crates] == ["Mix"]

    def test_truncated_crate_fails_whole_load(self, serato_root) -> None:
        root = serato_root(["/a.mp3"], {"Good": ["/a.mp3"], "Bad": ["/a.mp3"]})
        bad = root / "_Serato_" / "Subcrates" / "Bad.crate"
        bad.write_bytes(bad.read_bytes()[:-1])

        with pytest.raises(TruncatedInputError):
            load_library(root)

    def test_flat_crates(self, serato_root) -> None:
        root = serato_root([], {"Top": [], "Top%%Mid": [], "Orphan%%Child": []})

        library = load_library(root, nest_crates=False)

        assert [c.name for c in library.crates] == ["Orphan%%Child", "Top%%Mid", "Top"]
        assert all(c.subcrates == [] for c in library.crates)

    def test_custom_layout(self, tmp_path: Path, database_bytes, crate_bytes) -> None:
        serato_dir = tmp_path / "Serato"
        (serato_dir / "Crates").mkdir(parents=True)
        (serato_dir / "db").write_bytes(database_bytes(["/a.mp3"]))
        (serato_dir / "Crates" / "A.crate").write_bytes(crate_bytes(["/a.mp3"]))
        (serato_dir / "Crates" / "A__B.crate").write_bytes(crate_bytes([]))
        layout = LibraryConfig(
            serato_dir="Serato",
            database_filename="db",
            subcrates_dir="Crates",
            subcrate_delimiter="__",
        )

        library = load_library(tmp_path, layout)

        assert [c.name for c in library.crates] == ["A"]
        assert [c.name for c in library.crates[0].subcrates] == ["B"]
