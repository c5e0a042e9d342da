"""wkbread: decoder for the Well-Known Binary geometry family.

Reads canonical WKB, PostGIS EWKB and ISO SQL/MM WKB 1.2 payloads, given
as raw bytes or hex text, into immutable geometry models or into any
representation supplied through a GeometryBuilder.

Example:
    import wkbread

    point = wkbread.parse("0101000000000000000000f03f0000000000000040")
    print(point.x, point.y)  # 1.0 2.0
"""

from __future__ import annotations

from wkbread.geometry import Geometry, GeometryFactory
from wkbread.wkb import ParseFailedError, Parser, WKBError, WKBInput

__version__ = "0.1.0"

_default_parser: Parser[Geometry] = Parser(GeometryFactory())


def parse(data: WKBInput) -> Geometry:
    """Decode a WKB payload into wkbread.geometry models.

    Raises:
        ParseFailedError: If the payload cannot be decoded.
    """
    return _default_parser.parse(data)


__all__ = [
    "Geometry",
    "GeometryFactory",
    "ParseFailedError",
    "Parser",
    "WKBError",
    "__version__",
    "parse",
]
