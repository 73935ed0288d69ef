# -*- coding: utf-8 -*-
"""Helpers , Aren't they useful ?"""

import numpy as np

from ..core.models import GeoMultiModel, GeoPoint


def iter_points(model):
    """Yield every GeoPoint nested inside a geometry, depth first and in order.

    Parameters:
    -----------
    model : GeoModel
        Geometry to walk

    Returns:
    --------
    points : generator of GeoPoint
    """
    if isinstance(model, GeoPoint):
        yield model
    elif isinstance(model, GeoMultiModel):
        for element in model.elements:
            yield from iter_points(element)


def coordinates_array(model):
    """Collect the coordinates of every point in a geometry.

    Parameters:
    -----------
    model : GeoModel
        Geometry to collect the coordinates of

    Returns:
    --------
    coordinates : numpy.ndarray
        Array holding one (x, y) row per GeoPoint nested in the geometry. For the four concrete kinds its
        shape is (model.size, 2); bare GeoModels contribute no rows.
    """
    points = list(iter_points(model))
    coordinates = np.empty((len(points), 2), dtype=float)

    for i, point in enumerate(points):
        coordinates[i] = (point.x, point.y)

    return coordinates
