# -*- coding: utf-8 -*-
"""Bridges geometry models to the geospatial Python stack and to vector files.

Single geometries convert to and from shapely geometries, feature collections convert to and from geopandas
GeoDataFrames, and those in turn are read from and written to Shapefile and GeoJSON files.
The reference id of a geometry travels as the shapely SRID.
"""

import logging
import os

import geopandas as gpd
import numpy as np
import pandas as pd
import shapely
import shapely.errors
from shapely.geometry import mapping, shape
from shapely.geometry.base import BaseGeometry

from ..core.errors import ShapeMismatch
from ..core.feature import Feature, FeatureCollection
from ..core.models import DEFAULT_REFERENCE_ID, GeoModel

logger = logging.getLogger(__name__)

SUPPORTED_VECTOR_FORMATS = {".shp": "ESRI Shapefile", ".geojson": "GeoJSON"}


def to_shapely(model):
    """Convert a geometry model to a shapely geometry.

    Parameters:
    -----------
    model : GeoModel
        Geometry to convert

    Returns:
    --------
    geometry : shapely.geometry.base.BaseGeometry
        Equivalent shapely geometry with its SRID set to the reference id of the model

    Raises:
    -------
    ShapeMismatch
        If shapely rejects the coordinates, e.g. a polygon ring of fewer than four positions
    """
    try:
        geometry = shape(model.to_json())
    except (ValueError, shapely.errors.GEOSException) as e:
        raise ShapeMismatch(f"{type(model).__name__} is no valid shapely geometry: {str(e)}") from e

    return shapely.set_srid(geometry, model.reference_id)


def from_shapely(geometry, reference_id=None):
    """Convert a shapely geometry to a geometry model.

    Parameters:
    -----------
    geometry : shapely.geometry.base.BaseGeometry
        Point, MultiPoint, Polygon or MultiPolygon to convert
    reference_id : int, optional
        Reference id of the model. If None, the SRID of the geometry is used.

    Returns:
    --------
    model : GeoModel
        Equivalent geometry model
    """
    if reference_id is None:
        reference_id = int(shapely.get_srid(geometry))

    return GeoModel.from_json(mapping(geometry), reference_id)


def to_geodataframe(collection, crs=None):
    """Convert a feature collection to a GeoDataFrame.

    Parameters:
    -----------
    collection : FeatureCollection
        Features to convert. Properties become columns.
    crs : str or pyproj.CRS, optional
        Coordinate reference system assigned to the GeoDataFrame

    Returns:
    --------
    gdf : geopandas.GeoDataFrame
        One row per feature
    """
    records = [feature.properties or {} for feature in collection]
    geometries = [to_shapely(feature.geometry) if feature.geometry is not None else None for feature in collection]

    data = pd.DataFrame(records, index=range(len(records)))
    return gpd.GeoDataFrame(data, geometry=geometries, crs=crs)


def from_geodataframe(gdf, reference_id=None):
    """Convert a GeoDataFrame to a feature collection.

    Parameters:
    -----------
    gdf : geopandas.GeoDataFrame
        GeoDataFrame to convert. Every column but the geometry becomes a property.
    reference_id : int, optional
        Reference id of every geometry. If None, the EPSG code of the GeoDataFrame CRS is used, or 0 when
        there is none.

    Returns:
    --------
    collection : FeatureCollection
        One feature per row
    """
    if reference_id is None:
        reference_id = (gdf.crs.to_epsg() if gdf.crs is not None else None) or DEFAULT_REFERENCE_ID

    records = pd.DataFrame(gdf.drop(columns=gdf.geometry.name)).to_dict("records")
    features = []

    for geometry, record in zip(gdf.geometry, records):
        if not isinstance(geometry, BaseGeometry) or geometry.is_empty:
            model = None
        else:
            model = from_shapely(geometry, reference_id)

        properties = {column: _to_python(value) for column, value in record.items()}
        features.append(Feature(model, properties))

    logger.debug("Converted GeoDataFrame with %d rows (reference id %s)", len(features), reference_id)
    return FeatureCollection(features)


def read_vector(vector_path, reference_id=None):
    """Read a vector file into a feature collection.

    Parameters:
    -----------
    vector_path : str
        Path to the vector file
    reference_id : int, optional
        Reference id of every geometry. If None, the EPSG code of the file's CRS is used.

    Returns:
    --------
    collection : FeatureCollection
        Features read from the file
    """
    logger.info("Reading vector file %s", vector_path)
    return from_geodataframe(gpd.read_file(vector_path), reference_id)


def write_vector(collection, output_path, crs=None):
    """Write a feature collection to a vector file.

    Parameters:
    -----------
    collection : FeatureCollection
        Features to write
    output_path : str
        Path to the output vector file, ending in .shp or .geojson
    crs : str or pyproj.CRS, optional
        Coordinate reference system written to the file
    """
    file_extension = os.path.splitext(output_path)[1].lower()
    if file_extension not in SUPPORTED_VECTOR_FORMATS:
        raise ValueError(f"Unsupported vector format: {file_extension}")

    output_dir = os.path.dirname(output_path)
    if output_dir:
        os.makedirs(output_dir, exist_ok=True)

    gdf = to_geodataframe(collection, crs=crs)
    gdf.to_file(output_path, driver=SUPPORTED_VECTOR_FORMATS[file_extension])
    logger.info("Wrote %d features to %s", len(gdf), output_path)


def _to_python(value):
    if isinstance(value, np.generic):
        value = value.item()

    if pd.api.types.is_scalar(value) and pd.isna(value):
        return None

    return value
