"""
Resolving crate track references against the database's tracks.
"""

from typing import Iterable

from loguru import logger

from serato_library.domain.records.models import CrateFile, Track

from .models import Crate

TrackIndex = dict[str, Track]


def build_track_index(tracks: Iterable[Track]) -> TrackIndex:
    """Build a path -> Track lookup for resolving crates.

    Build it once per database and reuse it for every crate file. If the
    database lists the same path twice, the first track wins.
    """
    index: TrackIndex = {}
    for track in tracks:
        if track.path in index:
            logger.debug(f"Duplicate database track path {track.path!r}, keeping first")
            continue
        index[track.path] = track
    return index


def resolve_crate(record: CrateFile, index: TrackIndex) -> Crate:
    """Convert a raw crate file into a Crate with shared track references.

    Populates name, version and tracks. Paths are matched exactly, with no
    normalization; paths missing from the database are dropped. Subcrates
    are left empty for the nesting pass.

    Args:
        record: Crate file as read from disk
        index: Lookup built by build_track_index

    Returns:
        Crate whose tracks keep the crate file's order
    """
    tracks = []
    for ref in record.tracks:
        track = index.get(ref.path)
        if track is None:
            logger.debug(f"Crate {record.name!r}: dropping unknown track {ref.path!r}")
            continue
        tracks.append(track)

    return Crate(name=record.name, version=record.version, tracks=tracks)
