"""
Tagged-record decoding for Serato database and crate files.

Every Serato file is a flat run of records. Each record is a 4-byte ASCII
tag, a 4-byte big-endian unsigned payload length, then the payload. What a
payload means depends on the schema of the enclosing record type: it may be
UTF-16BE text or another run of records. Tags the schema does not know are
skipped.
"""

import io
import struct
from typing import TYPE_CHECKING, BinaryIO, TypeVar

from loguru import logger

from .exceptions import MalformedTextError, TruncatedInputError

if TYPE_CHECKING:
    from .schema import Schema

T = TypeVar("T")

TAG_SIZE = 4
LENGTH_SIZE = 4
HEADER_SIZE = TAG_SIZE + LENGTH_SIZE

_LENGTH = struct.Struct(">I")


def read_exact(stream: BinaryIO, size: int, what: str) -> bytes:
    """Read exactly size bytes from stream.

    Raises:
        TruncatedInputError: If the stream ends before size bytes are read
    """
    offset = stream.tell()
    data = stream.read(size)
    if len(data) != size:
        raise TruncatedInputError(what, offset, size, len(data))
    return data


def read_header(stream: BinaryIO) -> tuple[str, int]:
    """Read one record header and return (tag, payload_length)."""
    tag = read_exact(stream, TAG_SIZE, "tag").decode("latin-1")
    (length,) = _LENGTH.unpack(read_exact(stream, LENGTH_SIZE, "field size"))
    return tag, length


def decode_records(stream: BinaryIO, budget: int, schema: "Schema[T]", target: T) -> T:
    """Decode records from stream into target until budget bytes are consumed.

    The loop stops once the running total of header and payload bytes
    reaches or passes budget; the last record is not checked against it.
    Each payload is read in full before its field decoder runs, so a nested
    record can never read past the payload that contains it.

    Args:
        stream: Binary stream positioned at the first record
        budget: Number of bytes the records occupy
        schema: Field table for the record type being decoded
        target: Object the schema's fields write into

    Returns:
        target, populated

    Raises:
        TruncatedInputError: If a tag, length or payload is cut short
        MalformedTextError: If a text field is not valid UTF-16BE
    """
    consumed = 0
    while consumed < budget:
        tag, length = read_header(stream)
        consumed += HEADER_SIZE + length
        payload = read_exact(stream, length, f"payload of {tag!r}")

        field = schema.fields.get(tag)
        if field is None:
            logger.debug(f"Skipping unknown {schema.name} tag {tag!r} ({length} bytes)")
            continue
        field.apply(target, payload)

    return target


def decode_object(payload: bytes, schema: "Schema[T]") -> T:
    """Decode a payload of nested records into a fresh schema object."""
    return decode_records(io.BytesIO(payload), len(payload), schema, schema.factory())


def decode_text(payload: bytes) -> str:
    """Decode a UTF-16BE text payload (no byte-order mark).

    Decoding is strict: unpaired surrogates are rejected, not replaced.

    Raises:
        MalformedTextError: If the payload has odd length or is not valid UTF-16BE
    """
    if len(payload) % 2:
        raise MalformedTextError(f"Text payload has odd length ({len(payload)} bytes)")
    try:
        return payload.decode("utf-16-be")
    except UnicodeDecodeError as e:
        raise MalformedTextError(f"Invalid UTF-16BE text: {e.reason}") from e
