"""Serato record format exceptions for error handling."""


class SeratoLibraryError(Exception):
    """Base exception for Serato library reading."""

    pass


class FileOpenError(SeratoLibraryError):
    """Raised when a database or crate file cannot be opened for reading."""

    def __init__(self, path: str, message: str = None):
        self.path = path
        super().__init__(message or f"Could not open file at path {path!r}")


class TruncatedInputError(SeratoLibraryError):
    """Raised when fewer bytes are available than a tag or length field promises."""

    def __init__(self, what: str, offset: int, expected: int, available: int):
        self.offset = offset
        self.expected = expected
        self.available = available
        super().__init__(
            f"Input was truncated when reading {what} at offset {offset} "
            f"(expected {expected} bytes, got {available})"
        )


class MalformedTextError(SeratoLibraryError):
    """Raised when a text payload is not valid UTF-16BE."""

    pass
