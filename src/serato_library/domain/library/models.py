"""
Serato library domain models.

Contains the resolved object graph: a Library owning every Track and a
forest of Crates that share references to those tracks.
"""

from dataclasses import dataclass, field

from serato_library.domain.records.models import Track


@dataclass
class Crate:
    """A resolved crate with shared track references and owned subcrates."""

    name: str
    version: str = ""
    tracks: list[Track] = field(default_factory=list)
    subcrates: list["Crate"] = field(default_factory=list)


@dataclass
class Library:
    """A whole Serato library: every known track plus the crate forest."""

    version: str = ""
    tracks: list[Track] = field(default_factory=list)
    crates: list[Crate] = field(default_factory=list)
