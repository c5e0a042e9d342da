"""Custom exceptions for WKB decoding.

Every low-level failure raised while scanning or interpreting a payload
derives from WKBError. Parser.parse() wraps whichever error aborted the
decode into a single ParseFailedError that keeps the original as its cause.
"""

from __future__ import annotations

from wkbread.wkb.types import Dimension, GeometryKind


class WKBError(Exception):
    """Base exception for all WKB-related errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class InvalidHexError(WKBError):
    """Raised when hex-text input cannot be converted to bytes."""


class InsufficientDataError(WKBError):
    """Raised when the buffer is exhausted in the middle of a read.

    Attributes:
        required_bytes: Size of the primitive that could not be read.
        primitive_kind: Name of the primitive ("byte", "integer", "double").
    """

    def __init__(self, required_bytes: int, primitive_kind: str) -> None:
        self.required_bytes = required_bytes
        self.primitive_kind = primitive_kind
        super().__init__(f"Not enough bytes left to fulfill 1 {primitive_kind}.")


class InvalidByteOrderError(WKBError):
    """Raised when the byte-order marker is neither 0 (XDR) nor 1 (NDR)."""

    def __init__(self, value: int) -> None:
        self.value = value
        super().__init__(f"Bad endian byte value {value}.")


class UnexpectedTypeError(WKBError):
    """Raised when an element of a homogeneous collection has the wrong shape."""

    def __init__(self, actual: int, expected: GeometryKind) -> None:
        self.actual = actual
        self.expected = expected
        super().__init__(
            f"Unexpected geometry type {actual}, expected {int(expected)}."
        )


class UnknownGeometryTypeError(WKBError):
    """Raised when a type word resolves to a shape code outside 1..7."""

    def __init__(self, code: int) -> None:
        self.code = code
        super().__init__(f"Unknown geometry type {code}.")


class SridMismatchError(WKBError):
    """Raised when a nested SRID contradicts the one inherited from its parent."""

    def __init__(self, actual: int, expected: int) -> None:
        self.actual = actual
        self.expected = expected
        super().__init__(f"SRID mismatch between {actual} and expected {expected}.")


class DimensionMismatchError(WKBError):
    """Raised when a nested dimension contradicts the inherited one."""

    def __init__(self, actual: Dimension, expected: Dimension) -> None:
        self.actual = actual
        self.expected = expected
        super().__init__(
            f"Dimension mismatch between {actual.value} "
            f"and expected {expected.value}."
        )


class NestingTooDeepError(WKBError):
    """Raised when geometries are nested deeper than the configured limit."""

    def __init__(self, depth: int, limit: int) -> None:
        self.depth = depth
        self.limit = limit
        super().__init__(f"Geometry nesting depth {depth} exceeds limit {limit}.")


class ParseFailedError(WKBError):
    """Raised by Parser.parse() when decoding a payload fails for any reason.

    Attributes:
        cause: The error that aborted the decode.
    """

    def __init__(self, cause: Exception) -> None:
        self.cause = cause
        super().__init__(f"Parsing failed: {cause}")
