# -*- coding: utf-8 -*-
"""The io package connects geometry models to shapely, geopandas and vector files.

It keeps third-party geometry types and file formats out of the core hierarchy.
"""
