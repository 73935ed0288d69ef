# -*- coding: utf-8 -*-
"""Basic statistics for feature collections in geomodels."""

import pandas as pd

SUMMARY_COLUMNS = ["type", "size", "reference_id", "element_count", "depth"]


def summarize(collection):
    """Summarize the geometries of a feature collection.

    Parameters:
    -----------
    collection : FeatureCollection
        Collection to summarize

    Returns:
    --------
    summary : pandas.DataFrame
        One row per feature with the columns type, size, reference_id, element_count and depth. Features
        without geometry get None for all of them.
    """
    rows = []

    for feature in collection:
        geometry = feature.geometry
        if geometry is None:
            rows.append(dict.fromkeys(SUMMARY_COLUMNS))
            continue

        rows.append(
            {
                "type": geometry.geojson_type,
                "size": geometry.size,
                "reference_id": geometry.reference_id,
                "element_count": len(geometry) if hasattr(geometry, "elements") else 1,
                "depth": geometry.kind.depth,
            }
        )

    return pd.DataFrame(rows, columns=SUMMARY_COLUMNS)


def count_by_type(collection):
    """Calculate the distribution of geometry types in a feature collection.

    Parameters:
    -----------
    collection : FeatureCollection
        Collection to analyze

    Returns:
    --------
    distribution : dict
        Dictionary with type counts and percentages, ignoring features without geometry
    """
    summary = summarize(collection).dropna(subset=["type"])
    if summary.empty:
        return {}

    type_counts = summary["type"].value_counts()
    total_count = len(summary)
    type_percentages = (type_counts / total_count * 100).round(2)

    distribution = {
        "counts": type_counts.to_dict(),
        "percentages": type_percentages.to_dict(),
        "total": total_count,
    }

    return distribution
