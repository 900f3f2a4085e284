"""
On-disk record shapes for Serato database and crate files.

These mirror what the files contain. CrateFile and CrateTrackRef only live
for the duration of a library load; Track objects are created once from the
database file and then shared by the resolved library.
"""

from dataclasses import dataclass, field


@dataclass(eq=False)
class Track:
    """A track from the database file, identified by its path.

    Crates and the library share references to the same Track objects, so
    equality is left as identity.
    """

    path: str = ""


@dataclass
class CrateTrackRef:
    """A track reference inside a crate file. Only the path is stored."""

    path: str = ""


@dataclass
class CrateFile:
    """Raw contents of one .crate file.

    The name is not part of the file body; it is set from the file name.
    """

    name: str = ""
    version: str = ""
    tracks: list[CrateTrackRef] = field(default_factory=list)


@dataclass
class DatabaseFile:
    """Raw contents of the "database V2" file."""

    version: str = ""
    tracks: list[Track] = field(default_factory=list)
