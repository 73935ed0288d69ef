# -*- coding: utf-8 -*-
"""Small helpers for walking geometry models."""
