# -*- coding: utf-8 -*-
"""The fixed chain of geometry kinds.

Each kind has a depth (its position in the chain), the GeoJSON type name it serializes to, and a predecessor and
successor. The chain is

    POINT (0) -> MULTI_POINT (1) -> POLYGON (2) -> MULTI_POLYGON (3)

POINT is its own predecessor and MULTI_POLYGON is its own successor, so walking either end saturates.
"""

from enum import Enum

from .errors import UnsupportedGeometryType


class GeometryKind(Enum):
    """Tag of a concrete geometry kind. The value is the chain depth."""

    POINT = 0
    MULTI_POINT = 1
    POLYGON = 2
    MULTI_POLYGON = 3

    @property
    def depth(self):
        """Position of this kind in the chain, 0 (Point) to 3 (MultiPolygon)."""
        return self.value

    @property
    def geojson_type(self):
        """The GeoJSON geometry type name of this kind."""
        return _GEOJSON_TYPES[self]

    @property
    def predecessor(self):
        """The kind whose instances make up the elements of this kind."""
        return _CHAIN[max(self.value - 1, 0)]

    @property
    def successor(self):
        """The kind that wraps a sequence of this kind."""
        return _CHAIN[min(self.value + 1, len(_CHAIN) - 1)]

    @classmethod
    def from_geojson_type(cls, geojson_type):
        """Resolve a GeoJSON type name such as ``"MultiPoint"`` to its kind.

        Raises:
        -------
        UnsupportedGeometryType
            If no kind has the given GeoJSON type name.
        """
        for kind, name in _GEOJSON_TYPES.items():
            if name == geojson_type:
                return kind

        raise UnsupportedGeometryType(f"The given type is not supported: {geojson_type!r}")

    def can_reach(self, other):
        """Whether ``other`` is reachable from this kind by following successors (zero steps included)."""
        return other.value >= self.value


_CHAIN = (
    GeometryKind.POINT,
    GeometryKind.MULTI_POINT,
    GeometryKind.POLYGON,
    GeometryKind.MULTI_POLYGON,
)

_GEOJSON_TYPES = {
    GeometryKind.POINT: "Point",
    GeometryKind.MULTI_POINT: "MultiPoint",
    GeometryKind.POLYGON: "Polygon",
    GeometryKind.MULTI_POLYGON: "MultiPolygon",
}
