"""Geometry primitives for wkbread.

This module provides immutable Pydantic models for the OGC simple-feature
geometries produced by the default builder. Every geometry carries its
coordinate dimension and optional SRID; container geometries hold their
members as ordered tuples.
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from typing import Any, ClassVar, Self

from pydantic import BaseModel, Field, model_validator

from wkbread.wkb.types import Dimension


class Geometry(BaseModel, ABC, frozen=True):
    """Base class for all geometry models.

    Attributes:
        dimension: Coordinate dimension shared by the geometry and its members.
        srid: Spatial reference identifier, None when unspecified.
    """

    geometry_type: ClassVar[str] = "Geometry"
    geojson_member: ClassVar[str] = "coordinates"

    dimension: Dimension = Field(default=Dimension.XY, description="Dimension")
    srid: int | None = Field(default=None, description="Spatial reference id")

    @property
    @abstractmethod
    def is_empty(self) -> bool:
        """Whether the geometry holds no positions."""

    def to_geojson(self) -> dict[str, Any]:
        """Return a GeoJSON-style mapping of this geometry."""
        return {"type": self.geometry_type, self.geojson_member: self._coordinates()}

    @abstractmethod
    def _coordinates(self) -> Any:
        """Value of the GeoJSON member named by geojson_member."""


class Point(Geometry):
    """A single position.

    z and m are present exactly when the dimension carries them. An empty
    point is encoded in WKB with NaN ordinates.
    """

    geometry_type: ClassVar[str] = "Point"

    x: float
    y: float
    z: float | None = None
    m: float | None = None

    @model_validator(mode="after")
    def _validate_ordinates(self) -> Self:
        """Ensure the optional ordinates agree with the dimension."""
        if (self.z is not None) != self.dimension.has_z:
            raise ValueError(
                f"Point z ordinate does not match dimension {self.dimension.value}"
            )
        if (self.m is not None) != self.dimension.has_m:
            raise ValueError(
                f"Point m ordinate does not match dimension {self.dimension.value}"
            )
        return self

    @property
    def is_empty(self) -> bool:
        return math.isnan(self.x) and math.isnan(self.y)

    def to_tuple(self) -> tuple[float, ...]:
        """Convert to (x, y[, z][, m]) tuple."""
        ordinates = [self.x, self.y]
        if self.z is not None:
            ordinates.append(self.z)
        if self.m is not None:
            ordinates.append(self.m)
        return tuple(ordinates)

    def _coordinates(self) -> list[float]:
        return list(self.to_tuple())


class LineString(Geometry):
    """An ordered sequence of points."""

    geometry_type: ClassVar[str] = "LineString"

    points: tuple[Point, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.points

    @property
    def is_closed(self) -> bool:
        """Check if the first and last points coincide."""
        return bool(self.points) and (
            self.points[0].to_tuple() == self.points[-1].to_tuple()
        )

    def _coordinates(self) -> list[list[float]]:
        return [point._coordinates() for point in self.points]


class LinearRing(LineString):
    """A line string used as the boundary of a polygon."""

    geometry_type: ClassVar[str] = "LinearRing"


class Polygon(Geometry):
    """A surface bounded by an exterior ring and optional interior rings."""

    geometry_type: ClassVar[str] = "Polygon"

    rings: tuple[LinearRing, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.rings

    @property
    def exterior(self) -> LinearRing | None:
        return self.rings[0] if self.rings else None

    @property
    def interiors(self) -> tuple[LinearRing, ...]:
        return self.rings[1:]

    def _coordinates(self) -> list[list[list[float]]]:
        return [ring._coordinates() for ring in self.rings]


class MultiPoint(Geometry):
    geometry_type: ClassVar[str] = "MultiPoint"

    points: tuple[Point, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.points

    def _coordinates(self) -> list[list[float]]:
        return [point._coordinates() for point in self.points]


class MultiLineString(Geometry):
    geometry_type: ClassVar[str] = "MultiLineString"

    line_strings: tuple[LineString, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.line_strings

    def _coordinates(self) -> list[list[list[float]]]:
        return [line._coordinates() for line in self.line_strings]


class MultiPolygon(Geometry):
    geometry_type: ClassVar[str] = "MultiPolygon"

    polygons: tuple[Polygon, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.polygons

    def _coordinates(self) -> list[list[list[list[float]]]]:
        return [polygon._coordinates() for polygon in self.polygons]


class GeometryCollection(Geometry):
    """A heterogeneous collection of geometries sharing one dimension."""

    geometry_type: ClassVar[str] = "GeometryCollection"
    geojson_member: ClassVar[str] = "geometries"

    geometries: tuple[Geometry, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.geometries

    def _coordinates(self) -> list[dict[str, Any]]:
        return [geometry.to_geojson() for geometry in self.geometries]
