"""Shared pytest fixtures and configuration."""

from collections.abc import Iterator, Sequence
from typing import Any

import pytest

from wkbread.config import Settings
from wkbread.geometry import Geometry, GeometryFactory
from wkbread.utils.logging import clear_correlation_context, configure_logging
from wkbread.wkb import Coordinates, Dimension, Parser


@pytest.fixture(autouse=True)
def reset_logging_context() -> Iterator[None]:
    """Reset correlation context between tests."""
    clear_correlation_context()
    yield
    clear_correlation_context()


@pytest.fixture
def test_settings() -> Settings:
    """Create a Settings instance with test-safe defaults."""
    return Settings(
        _env_file=None,  # type: ignore[call-arg]
        LOG_LEVEL="DEBUG",
        LOG_FORMAT="console",
    )


@pytest.fixture
def configure_test_logging() -> Iterator[None]:
    """Configure logging for tests with console output."""
    configure_logging(level="DEBUG", log_format="console")
    yield


@pytest.fixture
def parser() -> Parser[Geometry]:
    """Parser producing wkbread.geometry models."""
    return Parser(GeometryFactory())


class RecordingBuilder:
    """Builder returning plain tuples and recording every call in order.

    Each built value is (method, dimension, srid, payload) where payload is
    the Coordinates for points and a list of child values otherwise.
    """

    def __init__(self) -> None:
        self.calls: list[tuple[str, Dimension, int | None, Any]] = []

    def _record(
        self, method: str, dimension: Dimension, srid: int | None, payload: Any
    ) -> tuple[str, Dimension, int | None, Any]:
        value = (method, dimension, srid, payload)
        self.calls.append(value)
        return value

    def create_point(
        self, dimension: Dimension, srid: int | None, coordinates: Coordinates
    ) -> Any:
        return self._record("point", dimension, srid, coordinates)

    def create_line_string(
        self, dimension: Dimension, srid: int | None, points: Sequence[Any]
    ) -> Any:
        return self._record("line_string", dimension, srid, list(points))

    def create_linear_ring(
        self, dimension: Dimension, srid: int | None, points: Sequence[Any]
    ) -> Any:
        return self._record("linear_ring", dimension, srid, list(points))

    def create_polygon(
        self, dimension: Dimension, srid: int | None, rings: Sequence[Any]
    ) -> Any:
        return self._record("polygon", dimension, srid, list(rings))

    def create_multi_point(
        self, dimension: Dimension, srid: int | None, points: Sequence[Any]
    ) -> Any:
        return self._record("multi_point", dimension, srid, list(points))

    def create_multi_line_string(
        self, dimension: Dimension, srid: int | None, line_strings: Sequence[Any]
    ) -> Any:
        return self._record("multi_line_string", dimension, srid, list(line_strings))

    def create_multi_polygon(
        self, dimension: Dimension, srid: int | None, polygons: Sequence[Any]
    ) -> Any:
        return self._record("multi_polygon", dimension, srid, list(polygons))

    def create_geometry_collection(
        self, dimension: Dimension, srid: int | None, geometries: Sequence[Any]
    ) -> Any:
        return self._record("geometry_collection", dimension, srid, list(geometries))


@pytest.fixture
def recording_builder() -> RecordingBuilder:
    """Builder that records calls instead of creating models."""
    return RecordingBuilder()
