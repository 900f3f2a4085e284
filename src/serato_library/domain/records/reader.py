"""
Whole-file readers for the Serato "database V2" file and .crate files.
"""

import os
from pathlib import Path
from typing import TypeVar, Union

from loguru import logger

from .codec import decode_object
from .exceptions import FileOpenError
from .models import CrateFile, DatabaseFile
from .schema import CRATE_SCHEMA, DATABASE_SCHEMA, Schema

T = TypeVar("T")

PathLike = Union[str, os.PathLike]


def read_records(path: PathLike, schema: Schema[T]) -> T:
    """Decode a whole file as one root record of the given schema.

    The file is read into memory whole and closed before decoding; its
    size is the decoding budget. A declared length larger than the rest of
    the file is reported as truncation without allocating that length.

    Raises:
        FileOpenError: If the file cannot be opened or read
        TruncatedInputError: If the file is cut short at any nesting depth
        MalformedTextError: If a text field is not valid UTF-16BE
    """
    try:
        with open(path, "rb") as f:
            data = f.read()
    except OSError as e:
        raise FileOpenError(os.fspath(path)) from e

    logger.debug(f"Reading {schema.name} file {os.fspath(path)!r} ({len(data)} bytes)")
    return decode_object(data, schema)


def read_database_file(path: PathLike) -> DatabaseFile:
    """Read the "database V2" file: version plus every known track."""
    database = read_records(path, DATABASE_SCHEMA)
    logger.debug(f"Database version {database.version!r} with {len(database.tracks)} tracks")
    return database


def read_crate_file(path: PathLike) -> CrateFile:
    """Read a .crate file.

    The crate's name is not stored in the file; it is the file name with the
    extension stripped.
    """
    crate = read_records(path, CRATE_SCHEMA)
    crate.name = Path(path).stem
    return crate
