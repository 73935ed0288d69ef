# -*- coding: utf-8 -*-
"""GeoJSON Feature and FeatureCollection wrappers around geometry models.

A Feature pairs an optional geometry with an optional dict of properties. A FeatureCollection is an ordered,
immutable sequence of features. Both convert to and from their GeoJSON form.
"""

import json
import logging
from collections.abc import Mapping

from .errors import MalformedGeoJSON
from .models import DEFAULT_REFERENCE_ID, GeoModel

logger = logging.getLogger(__name__)

FEATURE_TYPE = "Feature"
FEATURE_COLLECTION_TYPE = "FeatureCollection"


def _load(geojson):
    if isinstance(geojson, str):
        try:
            geojson = json.loads(geojson)
        except json.JSONDecodeError as e:
            raise MalformedGeoJSON(f"The given text is no JSON: {str(e)}") from e

    if not isinstance(geojson, Mapping):
        raise MalformedGeoJSON(f"The given JSON object is no GeoJSON: {geojson!r}")

    return geojson


def _has_type(geojson, expected):
    geojson_type = geojson.get("type")
    return isinstance(geojson_type, str) and geojson_type.lower() == expected.lower()


class Feature:
    """A geometry with properties."""

    def __init__(self, geometry=None, properties=None):
        """Initialize a Feature.

        Parameters:
        -----------
        geometry : GeoModel, optional
            The geometry of this feature
        properties : dict, optional
            Arbitrary JSON-compatible properties
        """
        if geometry is not None and not isinstance(geometry, GeoModel):
            raise TypeError(f"geometry must be a GeoModel, got {type(geometry).__name__}")
        if geometry is not None and geometry.kind is None:
            raise TypeError(f"geometry must have a geometry kind, got a bare {type(geometry).__name__}")

        self._geometry = geometry
        self._properties = dict(properties) if properties else None

    @property
    def geometry(self):
        return self._geometry

    @property
    def properties(self):
        """A copy of the properties of this feature, or None."""
        return dict(self._properties) if self._properties is not None else None

    def to_json(self):
        """Return this feature as a GeoJSON Feature object. Absent parts are None."""
        return {
            "type": FEATURE_TYPE,
            "geometry": self._geometry.to_json() if self._geometry is not None else None,
            "properties": self.properties,
        }

    @property
    def __geo_interface__(self):
        return self.to_json()

    @classmethod
    def from_json(cls, geojson, reference_id=DEFAULT_REFERENCE_ID):
        """Create a Feature from a GeoJSON Feature object.

        The type is matched case-insensitively. A missing ``geometry`` or ``properties`` member becomes None.

        Parameters:
        -----------
        geojson : dict or str
            GeoJSON Feature object, or its JSON text
        reference_id : int, optional
            Spatial reference identifier given to the geometry

        Returns:
        --------
        feature : Feature
        """
        geojson = _load(geojson)
        if not _has_type(geojson, FEATURE_TYPE):
            raise MalformedGeoJSON(f"The given JSON object is no GeoJSON Feature: {geojson!r}")

        geometry = geojson.get("geometry")
        return cls(
            geometry=GeoModel.from_json(geometry, reference_id) if geometry is not None else None,
            properties=geojson.get("properties"),
        )

    def __eq__(self, other):
        if not isinstance(other, Feature):
            return NotImplemented
        return self._geometry == other._geometry and self._properties == other._properties

    def __repr__(self):
        return f"Feature(geometry={self._geometry!r}, properties={self._properties!r})"


class FeatureCollection:
    """An ordered collection of features."""

    def __init__(self, features=()):
        """Initialize a FeatureCollection.

        Parameters:
        -----------
        features : iterable of Feature
            Features of this collection
        """
        features = tuple(features)
        for feature in features:
            if not isinstance(feature, Feature):
                raise TypeError(f"features must be Feature instances, got {type(feature).__name__}")

        self._features = features

    @property
    def features(self):
        return self._features

    def geometries(self):
        """Return the geometries of all features that have one."""
        return [feature.geometry for feature in self._features if feature.geometry is not None]

    def to_json(self):
        """Return this collection as a GeoJSON FeatureCollection object."""
        return {
            "type": FEATURE_COLLECTION_TYPE,
            "features": [feature.to_json() for feature in self._features],
        }

    @property
    def __geo_interface__(self):
        return self.to_json()

    @classmethod
    def from_json(cls, geojson, reference_id=DEFAULT_REFERENCE_ID):
        """Create a FeatureCollection from a GeoJSON FeatureCollection object."""
        geojson = _load(geojson)
        features = geojson.get("features")
        if not _has_type(geojson, FEATURE_COLLECTION_TYPE) or not isinstance(features, list):
            raise MalformedGeoJSON(f"The given JSON object is no GeoJSON FeatureCollection: {geojson!r}")

        logger.debug("Loading FeatureCollection with %d features", len(features))
        return cls(Feature.from_json(feature, reference_id) for feature in features)

    def __len__(self):
        return len(self._features)

    def __iter__(self):
        return iter(self._features)

    def __getitem__(self, index):
        return self._features[index]

    def __eq__(self, other):
        if not isinstance(other, FeatureCollection):
            return NotImplemented
        return self._features == other._features

    def __repr__(self):
        return f"FeatureCollection({len(self._features)} features)"
