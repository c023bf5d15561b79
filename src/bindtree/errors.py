"""
Custom exceptions for parsing, decoding and encoding bindtree documents.
"""


class BindtreeError(Exception):
    """Base exception for all bindtree errors."""

    pass


class ParseError(BindtreeError):
    """Raised when text does not match the binding grammar."""

    def __init__(
        self,
        message: str,
        offset: int,
        line: int | None = None,
        column: int | None = None,
        expected: str | None = None,
        found: str | None = None,
    ):
        self.offset = offset
        self.line = line
        self.column = column
        self.expected = expected
        self.found = found
        location = f" at offset {offset}"
        if line is not None:
            location = f" at line {line}"
            if column is not None:
                location += f", column {column}"
        super().__init__(f"{message}{location}")


class DecodeError(BindtreeError):
    """Raised when an untyped tree does not match a schema."""

    def __init__(self, message: str, path: tuple[str, ...] = ()):
        self.path = path
        self.reason = message
        location = f" at {'.'.join(path)}" if path else ""
        super().__init__(f"{message}{location}")


class EncodeError(BindtreeError):
    """Raised when a typed value cannot be written as text."""

    pass


class SchemaError(BindtreeError, ValueError):
    """Raised when a schema is constructed with invalid names."""

    pass
