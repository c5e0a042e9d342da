"""Unit tests for WKB type definitions."""

from __future__ import annotations

import dataclasses

import pytest

from wkbread.wkb.types import (
    ByteOrder,
    Coordinates,
    Dimension,
    GeometryKind,
    ParseContext,
)


class TestDimension:
    """Tests for the Dimension enum."""

    @pytest.mark.parametrize(
        ("has_z", "has_m", "expected"),
        [
            (False, False, Dimension.XY),
            (True, False, Dimension.XYZ),
            (False, True, Dimension.XYM),
            (True, True, Dimension.XYZM),
        ],
    )
    def test_from_flags(self, has_z: bool, has_m: bool, expected: Dimension) -> None:
        dimension = Dimension.from_flags(has_z, has_m)
        assert dimension is expected
        assert dimension.has_z is has_z
        assert dimension.has_m is has_m

    def test_values_are_labels(self) -> None:
        assert Dimension("3DZ") is Dimension.XYZ


class TestGeometryKind:
    def test_codes(self) -> None:
        assert GeometryKind(1) is GeometryKind.POINT
        assert GeometryKind(7) is GeometryKind.GEOMETRYCOLLECTION


class TestByteOrder:
    def test_struct_prefix(self) -> None:
        assert ByteOrder.XDR.struct_prefix == ">"
        assert ByteOrder.NDR.struct_prefix == "<"


class TestCoordinates:
    def test_optional_ordinates_default_to_none(self) -> None:
        coordinates = Coordinates(x=1.0, y=2.0)
        assert coordinates.z is None
        assert coordinates.m is None

    def test_frozen(self) -> None:
        coordinates = Coordinates(x=1.0, y=2.0)
        with pytest.raises(dataclasses.FrozenInstanceError):
            coordinates.x = 3.0  # type: ignore[misc]


class TestParseContext:
    """Tests for the immutable per-level parse context."""

    def test_top_level_context_is_unconstrained(self) -> None:
        context = ParseContext()
        assert context.dimension is None
        assert context.srid is None
        assert context.expected is None
        assert context.depth == 0

    def test_child_derives_new_context(self) -> None:
        parent = ParseContext()
        child = parent.child(Dimension.XYZ, 4326, GeometryKind.POINT)

        assert child == ParseContext(
            dimension=Dimension.XYZ,
            srid=4326,
            expected=GeometryKind.POINT,
            depth=1,
        )
        assert parent == ParseContext()
