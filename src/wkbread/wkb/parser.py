"""Recursive-descent decoder for WKB, EWKB and ISO SQL/MM WKB payloads.

Every geometry starts with its own header (byte-order marker, type word and,
for EWKB, an optional SRID). The header is resolved into a shape, a dimension
and an effective SRID, then the body is decoded and handed to a
GeometryBuilder. Composite shapes recurse with a ParseContext carrying the
dimension and SRID their elements must agree with.

Type word layout:
    EWKB:    0x80000000 (Z) | 0x40000000 (M) | 0x20000000 (SRID) | code
    ISO 1.2: code + 1000 (Z), + 2000 (M), + 3000 (ZM)
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Generic, TypeVar

from wkbread.config import settings
from wkbread.utils.logging import get_logger
from wkbread.wkb.exceptions import (
    DimensionMismatchError,
    NestingTooDeepError,
    ParseFailedError,
    SridMismatchError,
    UnexpectedTypeError,
    UnknownGeometryTypeError,
)
from wkbread.wkb.scanner import Scanner, WKBInput
from wkbread.wkb.types import (
    Coordinates,
    Dimension,
    GeometryBuilder,
    GeometryKind,
    ParseContext,
)

T = TypeVar("T")

MASK_SRID = 0x20000000
MASK_Z = 0x80000000
MASK_M = 0x40000000

# ISO SQL/MM type codes are offset by multiples of this band
ISO_BAND = 1000

logger = get_logger(__name__)


@dataclass(frozen=True)
class GeometryHeader:
    """Resolved header of a single geometry."""

    kind: GeometryKind
    dimension: Dimension
    srid: int | None


class Parser(Generic[T]):
    """Decoder turning WKB payloads into geometry values.

    The parser keeps no per-parse state on the instance, so one parser can
    decode any number of payloads one after another.

    Usage:
        parser = Parser(GeometryFactory())
        point = parser.parse("0101000000000000000000f03f0000000000000040")
    """

    def __init__(
        self,
        builder: GeometryBuilder[T],
        *,
        max_depth: int | None = None,
    ) -> None:
        """Initialize the parser.

        Args:
            builder: Builder invoked for every decoded geometry.
            max_depth: Deepest nesting level accepted. Defaults to
                settings.WKB_MAX_DEPTH.
        """
        self._builder = builder
        self._max_depth = settings.WKB_MAX_DEPTH if max_depth is None else max_depth

    def parse(self, data: WKBInput) -> T:
        """Decode a complete WKB payload.

        Args:
            data: Raw WKB bytes, or the same bytes as hex text.

        Returns:
            The value returned by the builder for the top-level geometry.

        Raises:
            ParseFailedError: If the payload is malformed or inconsistent.
                The original error is available as ``cause``.
        """
        try:
            scanner = Scanner(data)
            logger.debug("Parsing WKB payload", size=scanner.remaining)
            result = self._parse_geometry(scanner, ParseContext())
        except Exception as e:
            logger.debug(
                "WKB parsing failed",
                error=str(e),
                error_type=type(e).__name__,
            )
            raise ParseFailedError(e) from e

        logger.debug("Parsed WKB payload", trailing_bytes=scanner.remaining)
        return result

    def _parse_geometry(self, scanner: Scanner, context: ParseContext) -> T:
        if context.depth > self._max_depth:
            raise NestingTooDeepError(context.depth, self._max_depth)

        header = self._read_header(scanner, context)
        return self._parse_body(scanner, header, context)

    def _read_header(self, scanner: Scanner, context: ParseContext) -> GeometryHeader:
        scanner.select_byte_order()
        type_word = scanner.integer()

        srid: int | None = None
        has_z = False
        has_m = False

        if type_word & MASK_SRID:
            srid = scanner.integer()
            type_word &= ~MASK_SRID

        if type_word & MASK_Z:
            has_z = True
            type_word &= ~MASK_Z

        if type_word & MASK_M:
            has_m = True
            type_word &= ~MASK_M

        band = type_word // ISO_BAND
        if band & 1:
            has_z = True
        if band & 2:
            has_m = True
        if band & 3:
            type_word %= ISO_BAND

        dimension = Dimension.from_flags(has_z, has_m)

        if context.expected is not None and type_word != context.expected:
            raise UnexpectedTypeError(type_word, context.expected)

        if srid is not None and context.srid is not None and srid != context.srid:
            raise SridMismatchError(srid, context.srid)

        if context.dimension is not None and dimension != context.dimension:
            raise DimensionMismatchError(dimension, context.dimension)

        try:
            kind = GeometryKind(type_word)
        except ValueError:
            raise UnknownGeometryTypeError(type_word) from None

        return GeometryHeader(
            kind=kind,
            dimension=dimension,
            srid=srid if srid is not None else context.srid,
        )

    def _parse_body(
        self,
        scanner: Scanner,
        header: GeometryHeader,
        context: ParseContext,
    ) -> T:
        dimension, srid = header.dimension, header.srid
        builder = self._builder

        if header.kind is GeometryKind.POINT:
            return self._point(scanner, dimension, srid)
        if header.kind is GeometryKind.LINESTRING:
            return self._line_string(scanner, dimension, srid)
        if header.kind is GeometryKind.POLYGON:
            rings = [
                self._line_string(scanner, dimension, srid, ring=True)
                for _ in range(scanner.integer())
            ]
            return builder.create_polygon(dimension, srid, rings)
        if header.kind is GeometryKind.MULTIPOINT:
            points = self._elements(
                scanner, header, context, GeometryKind.POINT
            )
            return builder.create_multi_point(dimension, srid, points)
        if header.kind is GeometryKind.MULTILINESTRING:
            line_strings = self._elements(
                scanner, header, context, GeometryKind.LINESTRING
            )
            return builder.create_multi_line_string(dimension, srid, line_strings)
        if header.kind is GeometryKind.MULTIPOLYGON:
            polygons = self._elements(
                scanner, header, context, GeometryKind.POLYGON
            )
            return builder.create_multi_polygon(dimension, srid, polygons)

        geometries = self._elements(scanner, header, context, None)
        return builder.create_geometry_collection(dimension, srid, geometries)

    def _elements(
        self,
        scanner: Scanner,
        header: GeometryHeader,
        context: ParseContext,
        expected: GeometryKind | None,
    ) -> Sequence[T]:
        """Decode the counted, self-describing members of a collection."""
        count = scanner.integer()
        child_context = context.child(header.dimension, header.srid, expected)
        return [self._parse_geometry(scanner, child_context) for _ in range(count)]

    def _line_string(
        self,
        scanner: Scanner,
        dimension: Dimension,
        srid: int | None,
        *,
        ring: bool = False,
    ) -> T:
        points = [
            self._point(scanner, dimension, srid) for _ in range(scanner.integer())
        ]
        if ring:
            return self._builder.create_linear_ring(dimension, srid, points)
        return self._builder.create_line_string(dimension, srid, points)

    def _point(self, scanner: Scanner, dimension: Dimension, srid: int | None) -> T:
        x = scanner.double()
        y = scanner.double()
        z = scanner.double() if dimension.has_z else None
        m = scanner.double() if dimension.has_m else None
        return self._builder.create_point(
            dimension, srid, Coordinates(x=x, y=y, z=z, m=m)
        )
