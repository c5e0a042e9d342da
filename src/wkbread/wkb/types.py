"""Type definitions for the WKB decoder.

Contains the value types exchanged between the scanner, the parser and
geometry builders, plus the GeometryBuilder protocol that lets callers plug
in their own geometry representation.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, replace
from enum import Enum, IntEnum
from typing import Protocol, TypeVar

T = TypeVar("T")


class Dimension(str, Enum):
    """Coordinate dimensionality of a geometry."""

    XY = "2D"
    XYZ = "3DZ"
    XYM = "3DM"
    XYZM = "4D"

    @property
    def has_z(self) -> bool:
        return self in (Dimension.XYZ, Dimension.XYZM)

    @property
    def has_m(self) -> bool:
        return self in (Dimension.XYM, Dimension.XYZM)

    @classmethod
    def from_flags(cls, has_z: bool, has_m: bool) -> Dimension:
        if has_z and has_m:
            return cls.XYZM
        if has_m:
            return cls.XYM
        if has_z:
            return cls.XYZ
        return cls.XY


class GeometryKind(IntEnum):
    """Base WKB shape codes (after Z/M/SRID information is stripped)."""

    POINT = 1
    LINESTRING = 2
    POLYGON = 3
    MULTIPOINT = 4
    MULTILINESTRING = 5
    MULTIPOLYGON = 6
    GEOMETRYCOLLECTION = 7


class ByteOrder(IntEnum):
    """Byte-order marker values found at the start of every WKB geometry."""

    XDR = 0  # big-endian
    NDR = 1  # little-endian

    @property
    def struct_prefix(self) -> str:
        return ">" if self is ByteOrder.XDR else "<"


@dataclass(frozen=True)
class Coordinates:
    """Ordinates of a single position.

    z and m are None when the dimension does not carry them.
    """

    x: float
    y: float
    z: float | None = None
    m: float | None = None


@dataclass(frozen=True)
class ParseContext:
    """Constraints a geometry inherits from its enclosing geometry.

    A fresh context is derived for every nesting level with child(); the
    parser never stores one on itself.

    Attributes:
        dimension: Dimension every nested geometry must share, if any.
        srid: SRID established by an ancestor, if any.
        expected: Shape code the next header must resolve to, if restricted.
        depth: Nesting level, 0 for the top-level geometry.
    """

    dimension: Dimension | None = None
    srid: int | None = None
    expected: GeometryKind | None = None
    depth: int = 0

    def child(
        self,
        dimension: Dimension,
        srid: int | None,
        expected: GeometryKind | None,
    ) -> ParseContext:
        return replace(
            self,
            dimension=dimension,
            srid=srid,
            expected=expected,
            depth=self.depth + 1,
        )


class GeometryBuilder(Protocol[T]):
    """Protocol for turning decoded WKB parts into geometry values.

    The parser calls exactly one method per decoded geometry, always after
    every child of that geometry has been built. Implementations decide what
    the resulting values look like; see wkbread.geometry.GeometryFactory for
    the default one.
    """

    def create_point(
        self, dimension: Dimension, srid: int | None, coordinates: Coordinates
    ) -> T: ...

    def create_line_string(
        self, dimension: Dimension, srid: int | None, points: Sequence[T]
    ) -> T: ...

    def create_linear_ring(
        self, dimension: Dimension, srid: int | None, points: Sequence[T]
    ) -> T: ...

    def create_polygon(
        self, dimension: Dimension, srid: int | None, rings: Sequence[T]
    ) -> T: ...

    def create_multi_point(
        self, dimension: Dimension, srid: int | None, points: Sequence[T]
    ) -> T: ...

    def create_multi_line_string(
        self, dimension: Dimension, srid: int | None, line_strings: Sequence[T]
    ) -> T: ...

    def create_multi_polygon(
        self, dimension: Dimension, srid: int | None, polygons: Sequence[T]
    ) -> T: ...

    def create_geometry_collection(
        self, dimension: Dimension, srid: int | None, geometries: Sequence[T]
    ) -> T: ...
