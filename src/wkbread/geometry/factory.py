"""Default geometry builder.

GeometryFactory implements the GeometryBuilder protocol by producing the
immutable models from wkbread.geometry.primitives. Member geometries are
validated by Pydantic, so a builder call with the wrong member type fails
loudly instead of producing a malformed tree.
"""

from __future__ import annotations

from collections.abc import Sequence

from wkbread.geometry.primitives import (
    Geometry,
    GeometryCollection,
    LinearRing,
    LineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
)
from wkbread.wkb.types import Coordinates, Dimension


class GeometryFactory:
    """Builder producing wkbread.geometry models.

    The factory is stateless and can be shared between parsers.
    """

    def create_point(
        self, dimension: Dimension, srid: int | None, coordinates: Coordinates
    ) -> Geometry:
        return Point(
            dimension=dimension,
            srid=srid,
            x=coordinates.x,
            y=coordinates.y,
            z=coordinates.z,
            m=coordinates.m,
        )

    def create_line_string(
        self, dimension: Dimension, srid: int | None, points: Sequence[Geometry]
    ) -> Geometry:
        return LineString(dimension=dimension, srid=srid, points=tuple(points))

    def create_linear_ring(
        self, dimension: Dimension, srid: int | None, points: Sequence[Geometry]
    ) -> Geometry:
        return LinearRing(dimension=dimension, srid=srid, points=tuple(points))

    def create_polygon(
        self, dimension: Dimension, srid: int | None, rings: Sequence[Geometry]
    ) -> Geometry:
        return Polygon(dimension=dimension, srid=srid, rings=tuple(rings))

    def create_multi_point(
        self, dimension: Dimension, srid: int | None, points: Sequence[Geometry]
    ) -> Geometry:
        return MultiPoint(dimension=dimension, srid=srid, points=tuple(points))

    def create_multi_line_string(
        self, dimension: Dimension, srid: int | None, line_strings: Sequence[Geometry]
    ) -> Geometry:
        return MultiLineString(
            dimension=dimension, srid=srid, line_strings=tuple(line_strings)
        )

    def create_multi_polygon(
        self, dimension: Dimension, srid: int | None, polygons: Sequence[Geometry]
    ) -> Geometry:
        return MultiPolygon(dimension=dimension, srid=srid, polygons=tuple(polygons))

    def create_geometry_collection(
        self, dimension: Dimension, srid: int | None, geometries: Sequence[Geometry]
    ) -> Geometry:
        return GeometryCollection(
            dimension=dimension, srid=srid, geometries=tuple(geometries)
        )
