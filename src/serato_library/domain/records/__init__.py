"""Records domain - the Serato binary record format.

This domain handles:
- Tag/length framed record decoding
- UTF-16BE text payloads
- Per-record-type tag tables
- Reading whole database and crate files
"""

# Models
from .models import CrateFile, CrateTrackRef, DatabaseFile, Track

# Errors
from .exceptions import (
    FileOpenError,
    MalformedTextError,
    SeratoLibraryError,
    TruncatedInputError,
)

# Decoding
from .codec import decode_object, decode_records, decode_text

# Tag tables
from .schema import (
    CRATE_SCHEMA,
    CRATE_TRACK_SCHEMA,
    DATABASE_SCHEMA,
    DATABASE_TRACK_SCHEMA,
    Field,
    Schema,
    object_field,
    repeated_field,
    text_field,
)

# File readers
from .reader import read_crate_file, read_database_file, read_records

__all__ = [
    # Models
    "CrateFile",
    "CrateTrackRef",
    "DatabaseFile",
    "Track",
    # Errors
    "FileOpenError",
    "MalformedTextError",
    "SeratoLibraryError",
    "TruncatedInputError",
    # Decoding
    "decode_object",
    "decode_records",
    "decode_text",
    # Tag tables
    "CRATE_SCHEMA",
    "CRATE_TRACK_SCHEMA",
    "DATABASE_SCHEMA",
    "DATABASE_TRACK_SCHEMA",
    "Field",
    "Schema",
    "object_field",
    "repeated_field",
    "text_field",
    # File readers
    "read_crate_file",
    "read_database_file",
    "read_records",
]
