"""Library domain - resolved Serato library object graph.

This domain handles:
- Track, Crate and Library models
- Resolving crate track references against the database
- Rebuilding nested crates from encoded crate names
- Loading a whole library from a root directory
"""

# Models
from .models import Crate, Library, Track

# Track resolution
from .resolver import TrackIndex, build_track_index, resolve_crate

# Crate nesting
from .nesting import SUBCRATE_DELIMITER, reconstruct_crate_tree, split_crate_name

# Loading
from .loader import find_crate_files, library_from_database, load_library

__all__ = [
    # Models
    "Crate",
    "Library",
    "Track",
    # Track resolution
    "TrackIndex",
    "build_track_index",
    "resolve_crate",
    # Crate nesting
    "SUBCRATE_DELIMITER",
    "reconstruct_crate_tree",
    "split_crate_name",
    # Loading
    "find_crate_files",
    "library_from_database",
    "load_library",
]
