# -*- coding: utf-8 -*-
"""Errors raised by geomodels.

All of them derive from GeoModelError, which itself is a ValueError, so callers that already guard conversions
with ``except ValueError`` keep working.
"""


class GeoModelError(ValueError):
    """Base class for every error raised by geomodels."""


class MalformedGeoJSON(GeoModelError):
    """The given object is not a GeoJSON geometry (missing ``type`` or ``coordinates``)."""


class UnsupportedGeometryType(GeoModelError):
    """No registered geometry kind matches the requested GeoJSON type."""


class ShapeMismatch(GeoModelError):
    """The nesting depth or shape of a coordinate array disagrees with the target kind."""


class EmptyComposite(GeoModelError):
    """An operation that needs at least one element was given none."""


class InvalidPromotion(GeoModelError):
    """The target kind cannot be reached by following successors from the source kind."""


class InvalidSubElementKind(GeoModelError):
    """The requested kind is not nested inside the geometry that is being mapped."""
