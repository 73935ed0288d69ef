# -*- coding: utf-8 -*-
# geomodels/__init__.py

"""
GeoModels: geographic geometries as a strict containment hierarchy
==================================================================

GeoModels is a Python package that models points, multipoints, polygons and multipolygons as immutable value
objects, each kind composed of the previous one.

Key features:
- Conversion to and from nested coordinate arrays and GeoJSON
- Structural, reference-id aware equality and containment
- Promotion and flattening along the GeoPoint -> GeoMultiPoint -> GeoPolygon -> GeoMultiPolygon chain
- GeoJSON Features and FeatureCollections
- Integration with shapely, geopandas and vector files
"""

__version__ = "0.1.0"
__author__ = "Ramon Hagenaars"

from .core.errors import (
    EmptyComposite,
    GeoModelError,
    InvalidPromotion,
    InvalidSubElementKind,
    MalformedGeoJSON,
    ShapeMismatch,
    UnsupportedGeometryType,
)
from .core.feature import Feature, FeatureCollection
from .core.kinds import GeometryKind
from .core.models import (
    MODELS,
    GeoModel,
    GeoMultiModel,
    GeoMultiPoint,
    GeoMultiPolygon,
    GeoPoint,
    GeoPolygon,
    model_for,
)

from .io.vector import from_geodataframe, from_shapely, read_vector, to_geodataframe, to_shapely, write_vector

from .stats.basic import count_by_type, summarize

from .utils.helpers import coordinates_array, iter_points
