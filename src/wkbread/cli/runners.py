"""Runners backing the wkbread CLI commands.

Kept separate from the Typer wiring so the decode loop can be tested
without invoking the command line.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from wkbread.geometry import Geometry, GeometryFactory
from wkbread.utils.logging import get_logger, set_correlation_context
from wkbread.wkb import ParseFailedError, Parser, WKBInput
from wkbread.wkb.scanner import HEX_DIGITS

logger = get_logger(__name__)


@dataclass(frozen=True)
class DecodeResult:
    """Outcome of decoding one payload."""

    payload_id: str
    geometry: Geometry | None = None
    error: str | None = None

    @property
    def success(self) -> bool:
        return self.geometry is not None

    def summary(self) -> str:
        """One-line human readable description."""
        if self.geometry is None:
            return f"{self.payload_id}: Error: {self.error}"
        return (
            f"{self.payload_id}: {self.geometry.geometry_type} "
            f"dimension={self.geometry.dimension.value} srid={self.geometry.srid}"
        )

    def to_dict(self) -> dict[str, Any]:
        if self.geometry is None:
            return {"payload_id": self.payload_id, "success": False, "error": self.error}
        return {
            "payload_id": self.payload_id,
            "success": True,
            "dimension": self.geometry.dimension.value,
            "srid": self.geometry.srid,
            "geometry": self.geometry.to_geojson(),
        }


def load_payloads(
    payload: str | None = None,
    file: Path | None = None,
) -> list[tuple[str, WKBInput]]:
    """Collect (payload_id, payload) pairs from the CLI inputs.

    A file starting with a hex digit is read as one hex payload per line
    (blank lines skipped); any other file is a single raw WKB payload.

    Args:
        payload: Hex payload given on the command line.
        file: File holding hex lines or raw binary WKB.

    Returns:
        Payloads in input order.

    Raises:
        ValueError: If neither or both inputs are given.
    """
    if (payload is None) == (file is None):
        raise ValueError("Provide exactly one of a hex payload or --file")

    if payload is not None:
        return [("argument", payload)]

    assert file is not None
    raw = file.read_bytes()
    if not raw or raw[0] not in HEX_DIGITS:
        return [(file.name, raw)]

    lines = raw.decode("ascii", errors="replace").splitlines()
    return [
        (f"{file.name}:{lineno}", line.strip())
        for lineno, line in enumerate(lines, start=1)
        if line.strip()
    ]


def decode_payloads(
    payloads: Sequence[tuple[str, WKBInput]],
    *,
    source: str,
    parser: Parser[Geometry] | None = None,
) -> list[DecodeResult]:
    """Decode every payload, collecting failures instead of stopping.

    Args:
        payloads: (payload_id, payload) pairs as returned by load_payloads().
        source: Label for where the payloads came from, used in logs.
        parser: Parser to use. Defaults to one over GeometryFactory.

    Returns:
        One DecodeResult per payload, in input order.
    """
    parser = parser or Parser(GeometryFactory())
    results: list[DecodeResult] = []

    for payload_id, payload in payloads:
        set_correlation_context(payload_id=payload_id, source=source)
        try:
            geometry = parser.parse(payload)
        except ParseFailedError as e:
            logger.info("Payload rejected", error=str(e))
            results.append(DecodeResult(payload_id=payload_id, error=str(e)))
            continue

        logger.info(
            "Payload decoded",
            geometry_type=geometry.geometry_type,
            dimension=geometry.dimension.value,
            srid=geometry.srid,
        )
        results.append(DecodeResult(payload_id=payload_id, geometry=geometry))

    return results
