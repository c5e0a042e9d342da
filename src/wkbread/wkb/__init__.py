"""WKB decoding layer for wkbread.

This package decodes canonical WKB, PostGIS EWKB (Z/M flag bits and
embedded SRID) and ISO SQL/MM WKB 1.2 (Z/M encoded as +1000/+2000/+3000
type-code bands). Input may be raw bytes or the same bytes as hex text.

Key Components:
    - Parser: Recursive-descent decoder driving a GeometryBuilder
    - Scanner: Bounded, byte-order aware primitive reads
    - GeometryBuilder: Protocol for plugging in a geometry representation
    - Exceptions: WKBError hierarchy, ParseFailedError at the top level

Example:
    from wkbread.geometry import GeometryFactory
    from wkbread.wkb import Parser, ParseFailedError

    parser = Parser(GeometryFactory())
    try:
        geometry = parser.parse(payload)
    except ParseFailedError as e:
        print(f"Bad payload: {e.cause}")
"""

from wkbread.wkb.exceptions import (
    DimensionMismatchError,
    InsufficientDataError,
    InvalidByteOrderError,
    InvalidHexError,
    NestingTooDeepError,
    ParseFailedError,
    SridMismatchError,
    UnexpectedTypeError,
    UnknownGeometryTypeError,
    WKBError,
)
from wkbread.wkb.parser import GeometryHeader, Parser
from wkbread.wkb.scanner import Scanner, WKBInput, normalize_input
from wkbread.wkb.types import (
    ByteOrder,
    Coordinates,
    Dimension,
    GeometryBuilder,
    GeometryKind,
    ParseContext,
)

__all__ = [
    "ByteOrder",
    "Coordinates",
    "Dimension",
    "DimensionMismatchError",
    "GeometryBuilder",
    "GeometryHeader",
    "GeometryKind",
    "InsufficientDataError",
    "InvalidByteOrderError",
    "InvalidHexError",
    "NestingTooDeepError",
    "ParseContext",
    "ParseFailedError",
    "Parser",
    "Scanner",
    "SridMismatchError",
    "UnexpectedTypeError",
    "UnknownGeometryTypeError",
    "WKBError",
    "WKBInput",
    "normalize_input",
]
