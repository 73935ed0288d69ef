# -*- coding: utf-8 -*-
"""The core package holds the geometry hierarchy of geomodels.

It defines the chain of geometry kinds, the models built on it, the errors they raise and the GeoJSON
Feature wrappers around them.
"""
