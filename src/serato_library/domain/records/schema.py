"""
Field tables for each Serato record type.

A Schema maps 4-character tags to Field descriptors. Each Field knows how to
decode its payload and where the decoded value goes on the record being
built. Tables are keyed per record type: the same logical field can be
spelled differently in different files (a track path is "pfil" in the
database file but "ptrk" in a crate file).
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Callable, Generic, Iterable, Mapping, TypeVar

from .codec import TAG_SIZE, decode_object, decode_text
from .models import CrateFile, CrateTrackRef, DatabaseFile, Track

T = TypeVar("T")
V = TypeVar("V")


@dataclass(frozen=True)
class Field(Generic[T]):
    """One tag of a record type and how to apply its payload to a target."""

    tag: str
    apply: Callable[[T, bytes], None]


class Schema(Generic[T]):
    """Tag table for one record type.

    Args:
        name: Record type name, used in log messages
        factory: Builds an empty target object
        fields: Field descriptors; each tag may appear only once

    Raises:
        ValueError: If a tag is not 4 characters or appears twice
    """

    def __init__(self, name: str, factory: Callable[[], T], fields: Iterable[Field[T]]):
        self.name = name
        self.factory = factory

        by_tag: dict[str, Field[T]] = {}
        for field in fields:
            if len(field.tag) != TAG_SIZE:
                raise ValueError(f"{name} tag {field.tag!r} must be {TAG_SIZE} characters")
            if field.tag in by_tag:
                raise ValueError(f"Duplicate {name} tag {field.tag!r}")
            by_tag[field.tag] = field
        self.fields: Mapping[str, Field[T]] = MappingProxyType(by_tag)

    @property
    def tags(self) -> tuple[str, ...]:
        return tuple(self.fields)

    def __repr__(self) -> str:
        return f"Schema({self.name!r}, tags={list(self.fields)})"


def text_field(tag: str, assign: Callable[[T, str], None]) -> Field[T]:
    """Singular text field. A repeated tag overwrites the earlier value."""

    def apply(target: T, payload: bytes) -> None:
        assign(target, decode_text(payload))

    return Field(tag, apply)


def object_field(tag: str, schema: Schema[V], assign: Callable[[T, V], None]) -> Field[T]:
    """Singular nested-record field. A repeated tag overwrites the earlier value."""

    def apply(target: T, payload: bytes) -> None:
        assign(target, decode_object(payload, schema))

    return Field(tag, apply)


def repeated_field(tag: str, schema: Schema[V], getter: Callable[[T], list[V]]) -> Field[T]:
    """Repeated nested-record field. Each occurrence is appended in order."""

    def apply(target: T, payload: bytes) -> None:
        getter(target).append(decode_object(payload, schema))

    return Field(tag, apply)


def _set_path(record, value: str) -> None:
    record.path = value


def _set_version(record, value: str) -> None:
    record.version = value


DATABASE_TRACK_SCHEMA: Schema[Track] = Schema(
    "database track",
    Track,
    [text_field("pfil", _set_path)],
)

CRATE_TRACK_SCHEMA: Schema[CrateTrackRef] = Schema(
    "crate track",
    CrateTrackRef,
    [text_field("ptrk", _set_path)],
)

DATABASE_SCHEMA: Schema[DatabaseFile] = Schema(
    "database",
    DatabaseFile,
    [
        text_field("vrsn", _set_version),
        repeated_field("otrk", DATABASE_TRACK_SCHEMA, lambda db: db.tracks),
    ],
)

CRATE_SCHEMA: Schema[CrateFile] = Schema(
    "crate",
    CrateFile,
    [
        text_field("vrsn", _set_version),
        repeated_field("otrk", CRATE_TRACK_SCHEMA, lambda crate: crate.tracks),
    ],
)
