"""Shared fixtures for building Serato files in memory and on disk."""

import struct
from pathlib import Path
from typing import Callable, Optional

import pytest

DATABASE_VERSION = "2.0/Serato Scratch LIVE Database"
CRATE_VERSION = "1.0/Serato ScratchLive Crate"


def _text(value: str) -> bytes:
    return value.encode("utf-16-be")


def _record(tag: str, payload: bytes) -> bytes:
    return tag.encode("ascii") + struct.pack(">I", len(payload)) + payload


def _database_bytes(paths: list[str], version: str = DATABASE_VERSION) -> bytes:
    body = _record("vrsn", _text(version))
    for path in paths:
        body += _record("otrk", _record("pfil", _text(path)))
    return body


def _crate_bytes(paths: list[str], version: str = CRATE_VERSION) -> bytes:
    body = _record("vrsn", _text(version))
    for path in paths:
        body += _record("otrk", _record("ptrk", _text(path)))
    return body


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep config, data and .env lookups inside tmp_path."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg-config"))
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path / "xdg-data"))
    monkeypatch.delenv("SERATO_LIBRARY_ROOT", raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def text() -> Callable[[str], bytes]:
    """Encode a string as a UTF-16BE text payload."""
    return _text


@pytest.fixture
def record() -> Callable[[str, bytes], bytes]:
    """Frame a payload as tag + big-endian length + payload."""
    return _record


@pytest.fixture
def database_bytes() -> Callable[..., bytes]:
    """Build the contents of a "database V2" file from track paths."""
    return _database_bytes


@pytest.fixture
def crate_bytes() -> Callable[..., bytes]:
    """Build the contents of a .crate file from track paths."""
    return _crate_bytes


@pytest.fixture
def serato_root(tmp_path: Path) -> Callable[..., Path]:
    """Return a function that writes a Serato library and returns its root.

    crates maps encoded crate names (e.g. "Top%%Mid") to track paths. If
    crates is None no Subcrates folder is created.
    """

    def write(tracks: list[str], crates: Optional[dict[str, list[str]]] = None) -> Path:
        root = tmp_path / "library"
        serato_dir = root / "_Serato_"
        serato_dir.mkdir(parents=True, exist_ok=True)
        (serato_dir / "database V2").write_bytes(_database_bytes(tracks))

        if crates is not None:
            subcrates = serato_dir / "Subcrates"
            subcrates.mkdir(exist_ok=True)
            for name, paths in crates.items():
                (subcrates / f"{name}.crate").write_bytes(_crate_bytes(paths))

        return root

    return write
