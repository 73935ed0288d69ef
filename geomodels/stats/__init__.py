# -*- coding: utf-8 -*-
"""The stats package summarizes feature collections as tables and distributions."""
