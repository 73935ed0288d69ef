# -*- coding: utf-8 -*-
"""Defines the geometry models and the hierarchy that ties them together.

Every geometry is a GeoModel. Geometries that consist of other geometries are GeoMultiModels, and each concrete
GeoMultiModel holds elements of exactly one kind: its predecessor. This gives the fixed chain

    GeoPoint -> GeoMultiPoint -> GeoPolygon -> GeoMultiPolygon

which drives the recursive array conversion, promotion and sub-element mapping below. All models are immutable
value objects: "mapping" operations always return new instances.

Example usage:

    polygon = GeoPolygon.from_array([[[1, 2], [3, 4]], [[5, 6], [7, 8]]], 4326)
    polygon.to_json()  # {"type": "Polygon", "coordinates": [[[1, 2], [3, 4]], [[5, 6], [7, 8]]]}
"""

import json
import logging
import numbers
from collections.abc import Mapping

import numpy as np

from .errors import (
    EmptyComposite,
    InvalidPromotion,
    InvalidSubElementKind,
    MalformedGeoJSON,
    ShapeMismatch,
    UnsupportedGeometryType,
)
from .kinds import GeometryKind

logger = logging.getLogger(__name__)

DEFAULT_REFERENCE_ID = 0


class GeoModel:
    """Base class for all geometry classes.

    A bare GeoModel has no geometry kind: it has a size of 1, an empty array form and cannot be serialized to
    GeoJSON. Concrete kinds set ``kind`` and get ``geojson_type``, ``predecessor`` and ``successor`` wired from
    the kind chain at the bottom of this module.
    """

    kind = None
    geojson_type = None
    predecessor = None
    successor = None

    def __init__(self, reference_id=DEFAULT_REFERENCE_ID):
        """Initialize a GeoModel.

        Parameters:
        -----------
        reference_id : int, optional
            Identifier of the spatial reference of this geometry, e.g. 4326 for WGS 84. It is carried and
            compared, never interpreted. 0 means unset.
        """
        self._reference_id = reference_id

    @property
    def size(self):
        """The number of atomic elements in this geometry."""
        return 1

    @property
    def reference_id(self):
        """The identifier of the spatial reference of this geometry, or 0 if unset."""
        return self._reference_id

    def to_array(self):
        """Return this geometry as a (nested) list of coordinates."""
        return []

    @classmethod
    def from_array(cls, array, reference_id=DEFAULT_REFERENCE_ID):
        """Create a geometry of this class from a (nested) coordinate array."""
        raise UnsupportedGeometryType(f"{cls.__name__} has no geometry kind and cannot be built from an array")

    def to_json(self):
        """Return this geometry as a GeoJSON geometry object (RFC 7946).

        Returns:
        --------
        geojson : dict
            ``{"type": <GeoJSON type>, "coordinates": <nested coordinates>}``
        """
        if self.kind is None:
            raise UnsupportedGeometryType(f"{type(self).__name__} has no GeoJSON type")

        return {"type": self.geojson_type, "coordinates": self.to_array()}

    @property
    def __geo_interface__(self):
        """GeoJSON mapping picked up by shapely, geopandas and friends."""
        return self.to_json()

    @classmethod
    def from_json(cls, geojson, reference_id=DEFAULT_REFERENCE_ID):
        """Create a geometry from the geometry part of a GeoJSON object.

        Called on GeoModel this dispatches on ``geojson["type"]``. Called on a concrete class, the type must also
        match that class.

        Parameters:
        -----------
        geojson : dict or str
            GeoJSON geometry object, or its JSON text
        reference_id : int, optional
            Spatial reference identifier given to the created geometry

        Returns:
        --------
        model : GeoModel
            Instance of the class that corresponds to the GeoJSON type

        Raises:
        -------
        MalformedGeoJSON
            If ``type`` or ``coordinates`` is missing
        UnsupportedGeometryType
            If no geometry kind matches ``type``
        """
        if isinstance(geojson, str):
            try:
                geojson = json.loads(geojson)
            except json.JSONDecodeError as e:
                raise MalformedGeoJSON(f"The given text is no JSON: {str(e)}") from e

        if not isinstance(geojson, Mapping) or not geojson.get("type") or geojson.get("coordinates") is None:
            raise MalformedGeoJSON(f"The given JSON object is no GeoJSON: {geojson!r}")

        model = model_for(geojson["type"])
        if cls.kind is not None and model is not cls:
            raise UnsupportedGeometryType(f"Expected GeoJSON type {cls.geojson_type!r}, got {geojson['type']!r}")

        logger.debug("Dispatching GeoJSON type %r to %s", geojson["type"], model.__name__)
        return model.from_array(geojson["coordinates"], reference_id)

    def promote_to(self, target):
        """Wrap this geometry in single-element composites until it is of the target kind.

        Example usage:

            GeoPoint(1, 2).promote_to(GeoPolygon).to_array()  # [[[1, 2]]]

        Parameters:
        -----------
        target : type, GeometryKind or str
            Model class, kind or GeoJSON type name to promote to

        Returns:
        --------
        model : GeoModel
            This instance when it already is of the target kind, otherwise a new instance
        """
        target_kind = _resolve_kind(target)
        if self.kind is None or target_kind is None or not self.kind.can_reach(target_kind):
            raise InvalidPromotion(f"Cannot promote {type(self).__name__} to {_describe(target)}")

        promoted = self
        while promoted.kind is not target_kind:
            promoted = promoted.successor.from_array([promoted.to_array()], promoted.reference_id)
            logger.debug("Promoted %s one step to %s", type(self).__name__, type(promoted).__name__)

        return promoted

    def contains(self, other):
        """Return whether this geometry has an attribute that is, or that contains, ``other``.

        This is a structural search by value (reference id included), not a point-in-polygon test.
        """
        if isinstance(other, (np.ndarray, np.generic)):
            other = other.tolist()

        return any(_matches(value, other) or _contains_deep(value, other) for value in self._fields())

    def equals(self, other):
        """Return whether this geometry and ``other`` are of the same kind and structurally equal."""
        if self is other:
            return True

        if not isinstance(other, GeoModel) or type(self) is not type(other):
            return False

        return self._fields() == other._fields()

    def _fields(self):
        """The attribute values compared by ``equals`` and searched by ``contains``."""
        return (self._reference_id,)

    def __eq__(self, other):
        if not isinstance(other, GeoModel):
            return NotImplemented
        return self.equals(other)

    def __hash__(self):
        return hash((type(self).__name__, self._fields()))

    def __contains__(self, other):
        return self.contains(other)

    def __repr__(self):
        return f"{type(self).__name__}(reference_id={self._reference_id!r})"


class GeoMultiModel(GeoModel):
    """Base class of geometry classes that consist of GeoModels."""

    def __init__(self, elements):
        """Initialize a GeoMultiModel.

        The reference id is taken from the first element.

        Parameters:
        -----------
        elements : iterable of GeoModel
            The elements of which this geometry consists. Must not be empty, and for concrete kinds every
            element must be an instance of the predecessor.
        """
        elements = tuple(elements)
        if not elements:
            raise EmptyComposite(f"{type(self).__name__} needs at least one element")

        expected = self.predecessor or GeoModel
        for element in elements:
            if not isinstance(element, expected):
                raise ShapeMismatch(f"{type(self).__name__} consists of {expected.__name__}s, got {element!r}")

        super().__init__(elements[0].reference_id)
        self._elements = elements

    @property
    def elements(self):
        """The elements of which this geometry consists."""
        return self._elements

    @property
    def size(self):
        """The number of atomic elements in this geometry, summed over all elements."""
        return sum(element.size for element in self._elements)

    def to_array(self):
        """Return the elements of this geometry as arrays, one nesting level per chain position."""
        return [element.to_array() for element in self._elements]

    @classmethod
    def from_array(cls, array, reference_id=DEFAULT_REFERENCE_ID):
        """Create a new instance from an array of arrays.

        Example usage:

            GeoMultiPoint.from_array([[1, 2], [3, 4], [5, 6]], 4326)

        Parameters:
        -----------
        array : sequence
            Array of sub-arrays, each of which is handed to ``predecessor.from_array``
        reference_id : int, optional
            Spatial reference identifier of every created geometry

        Returns:
        --------
        model : GeoMultiModel
            New instance of this class
        """
        if cls.kind is None:
            return super().from_array(array, reference_id)

        sub_arrays = _as_list(array, cls.geojson_type)
        if not sub_arrays:
            raise EmptyComposite(f"Cannot create a {cls.geojson_type} from an empty array")

        return cls([cls.predecessor.from_array(sub_array, reference_id) for sub_array in sub_arrays])

    def map_elements(self, function):
        """Map the elements of this geometry into a new instance of the same class.

        Example usage:

            multi_point.map_elements(lambda point: GeoPoint(point.x + 1, point.y + 1, point.reference_id))

        Parameters:
        -----------
        function : callable
            Receives each element and must return an element of the same kind

        Returns:
        --------
        model : GeoMultiModel
            New instance of the same class as this one
        """
        return type(self)([function(element) for element in self._elements])

    def map_sub_elements(self, target, function):
        """Map the geometries of the target kind that are nested anywhere inside this geometry.

        Example usage:

            multi_polygon.map_sub_elements(GeoPoint, lambda point: GeoPoint(point.x + 1, point.y, point.reference_id))

        Parameters:
        -----------
        target : type, GeometryKind or str
            Kind of the nested geometries that are passed to ``function``
        function : callable
            Receives each nested geometry of the target kind and must return one of the same kind

        Returns:
        --------
        model : GeoMultiModel
            New instance of the same class as this one
        """
        target_kind = _resolve_kind(target)
        if self.kind is None or target_kind is None or target_kind.depth >= self.kind.depth:
            raise InvalidSubElementKind(f"{_describe(target)} is not nested inside {type(self).__name__}")

        if self.kind.predecessor is target_kind:
            return self.map_elements(function)

        return self.map_elements(lambda element: element.map_sub_elements(target_kind, function))

    def flatten(self):
        """Return the first element of this geometry as a new instance of the predecessor kind.

        Only the first element survives, with the reference id of this geometry.
        """
        if not self._elements:
            raise EmptyComposite(f"Cannot flatten an empty {type(self).__name__}")
        if self.kind is None:
            raise UnsupportedGeometryType(f"{type(self).__name__} has no predecessor to flatten into")

        return self.predecessor.from_array(self._elements[0].to_array(), self.reference_id)

    def _fields(self):
        return (self._reference_id, self._elements)

    def __len__(self):
        return len(self._elements)

    def __iter__(self):
        return iter(self._elements)

    def __getitem__(self, index):
        return self._elements[index]

    def __repr__(self):
        return f"{type(self).__name__}([{', '.join(repr(element) for element in self._elements)}])"


class GeoPoint(GeoModel):
    """A single position."""

    kind = GeometryKind.POINT

    def __init__(self, x, y, reference_id=DEFAULT_REFERENCE_ID):
        """Initialize a GeoPoint.

        Parameters:
        -----------
        x : float
            First coordinate (e.g. longitude)
        y : float
            Second coordinate (e.g. latitude)
        reference_id : int, optional
            Spatial reference identifier
        """
        if not (_is_number(x) and _is_number(y)):
            raise ShapeMismatch(f"Point coordinates must be numbers, got {x!r} and {y!r}")

        super().__init__(reference_id)
        self._x = x
        self._y = y

    @property
    def x(self):
        return self._x

    @property
    def y(self):
        return self._y

    def to_array(self):
        """Return ``[x, y]``."""
        return [self._x, self._y]

    @classmethod
    def from_array(cls, array, reference_id=DEFAULT_REFERENCE_ID):
        """Create a GeoPoint from ``[x, y]``.

        Example usage:

            GeoPoint.from_array([1, 2], 4326)
        """
        coordinates = _as_list(array, cls.geojson_type)
        if len(coordinates) != 2 or not all(_is_number(value) for value in coordinates):
            raise ShapeMismatch(f"A {cls.geojson_type} needs exactly two numeric coordinates, got {array!r}")

        return cls(coordinates[0], coordinates[1], reference_id)

    def _fields(self):
        return (self._reference_id, self._x, self._y)

    def __repr__(self):
        return f"GeoPoint(x={self._x!r}, y={self._y!r}, reference_id={self._reference_id!r})"


class GeoMultiPoint(GeoMultiModel):
    """A collection of GeoPoints."""

    kind = GeometryKind.MULTI_POINT


class GeoPolygon(GeoMultiModel):
    """A polygon, stored as a collection of rings. Each ring is a GeoMultiPoint."""

    kind = GeometryKind.POLYGON


class GeoMultiPolygon(GeoMultiModel):
    """A collection of GeoPolygons."""

    kind = GeometryKind.MULTI_POLYGON


# All concrete models, ordered by chain depth.
MODELS = (GeoPoint, GeoMultiPoint, GeoPolygon, GeoMultiPolygon)

_MODELS_BY_KIND = {model.kind: model for model in MODELS}

for _model in MODELS:
    _model.geojson_type = _model.kind.geojson_type
    _model.predecessor = _MODELS_BY_KIND[_model.kind.predecessor]
    _model.successor = _MODELS_BY_KIND[_model.kind.successor]
del _model


def model_for(target):
    """Return the model class of a GeometryKind, GeoJSON type name or model class.

    Raises:
    -------
    UnsupportedGeometryType
        If the target does not resolve to a concrete kind
    """
    kind = _resolve_kind(target)
    if kind is None:
        raise UnsupportedGeometryType(f"The given type is not supported: {_describe(target)}")

    return _MODELS_BY_KIND[kind]


def _resolve_kind(target):
    if isinstance(target, GeometryKind):
        return target
    if isinstance(target, str):
        return GeometryKind.from_geojson_type(target)

    kind = getattr(target, "kind", None)
    return kind if isinstance(kind, GeometryKind) else None


def _describe(target):
    return getattr(target, "__name__", repr(target))


def _is_number(value):
    return isinstance(value, numbers.Real) and not isinstance(value, (bool, np.bool_))


def _as_list(array, geojson_type):
    if isinstance(array, np.ndarray):
        array = array.tolist()

    if not isinstance(array, (list, tuple)):
        raise ShapeMismatch(f"Expected a coordinate array for a {geojson_type}, got {array!r}")

    return list(array)


def _matches(value, other):
    if isinstance(value, GeoModel) or isinstance(other, GeoModel):
        return isinstance(value, GeoModel) and value.equals(other)

    if isinstance(value, (list, tuple)) and isinstance(other, (list, tuple)):
        return len(value) == len(other) and all(_matches(a, b) for a, b in zip(value, other))

    return value == other


def _contains_deep(value, other):
    if isinstance(value, GeoModel):
        return value.contains(other)

    if isinstance(value, (list, tuple)):
        return any(_matches(item, other) or _contains_deep(item, other) for item in value)

    return False
