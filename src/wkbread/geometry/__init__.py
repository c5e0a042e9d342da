"""Geometry module for wkbread.

This package provides the default geometry representation produced when
decoding WKB payloads, and the builder that creates it.

Key Components:
    - Primitives: Point, LineString, LinearRing, Polygon, the Multi* models
      and GeometryCollection, all immutable Pydantic models
    - GeometryFactory: GeometryBuilder implementation producing those models

Example:
    from wkbread.geometry import GeometryFactory
    from wkbread.wkb import Parser

    parser = Parser(GeometryFactory())
    point = parser.parse("0101000000000000000000f03f0000000000000040")
    point.to_geojson()  # {"type": "Point", "coordinates": [1.0, 2.0]}
"""

from wkbread.geometry.factory import GeometryFactory
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

__all__ = [
    "Geometry",
    "GeometryCollection",
    "GeometryFactory",
    "LineString",
    "LinearRing",
    "MultiLineString",
    "MultiPoint",
    "MultiPolygon",
    "Point",
    "Polygon",
]
