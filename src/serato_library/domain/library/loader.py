"""
Loading a whole Serato library from disk.

Handles locating the database file and crate files under a library root,
reading them, and assembling the resolved Library.
"""

from pathlib import Path
from typing import Optional, Union

from loguru import logger

from serato_library.core.config import LibraryConfig
from serato_library.domain.records.exceptions import FileOpenError
from serato_library.domain.records.models import DatabaseFile
from serato_library.domain.records.reader import read_crate_file, read_database_file

from .models import Crate, Library
from .nesting import reconstruct_crate_tree
from .resolver import build_track_index, resolve_crate


def find_crate_files(directory: Path, extension: str = ".crate") -> list[Path]:
    """List crate files in a directory, sorted by file name.

    Entries with another extension, and anything that is not a regular
    file, are skipped. A missing directory yields an empty list.

    Raises:
        FileOpenError: If the directory exists but cannot be listed
    """
    if not directory.is_dir():
        logger.debug(f"No crate directory at {directory}")
        return []

    try:
        entries = list(directory.iterdir())
    except OSError as e:
        raise FileOpenError(str(directory)) from e

    crate_files = []
    for entry in entries:
        if entry.suffix != extension or not entry.is_file():
            logger.debug(f"Skipping non-crate entry {entry.name!r}")
            continue
        crate_files.append(entry)

    return sorted(crate_files, key=lambda p: p.name)


def library_from_database(database: DatabaseFile, crates: list[Crate]) -> Library:
    """Build a Library from the database file's version and tracks plus a crate forest."""
    return Library(version=database.version, tracks=database.tracks, crates=crates)


def load_library(
    root: Union[str, Path],
    layout: Optional[LibraryConfig] = None,
    nest_crates: bool = True,
) -> Library:
    """Load the Serato library under root.

    root is the directory containing the _Serato_ folder, not the _Serato_
    folder itself.

    Args:
        root: Library root directory
        layout: File names and delimiter to use (defaults match Serato)
        nest_crates: If False, return every crate at the top level under its
            encoded name (e.g. "House%%Deep") instead of rebuilding the tree

    Returns:
        Library with every database track and the reconstructed crate forest

    Raises:
        FileOpenError: If the database file, the crate directory or a listed
            crate file cannot be read
        TruncatedInputError: If any file is cut short
        MalformedTextError: If any text field is not valid UTF-16BE
    """
    layout = layout or LibraryConfig()
    serato_dir = Path(root) / layout.serato_dir

    database = read_database_file(serato_dir / layout.database_filename)
    index = build_track_index(database.tracks)

    flat_crates = [
        resolve_crate(read_crate_file(path), index)
        for path in find_crate_files(serato_dir / layout.subcrates_dir, layout.crate_extension)
    ]
    if nest_crates:
        crates = reconstruct_crate_tree(flat_crates, layout.subcrate_delimiter)
    else:
        crates = flat_crates

    logger.info(
        f"Loaded Serato library at {root}: {len(database.tracks)} tracks, "
        f"{len(flat_crates)} crate files, {len(crates)} top-level crates"
    )
    return library_from_database(database, crates)
