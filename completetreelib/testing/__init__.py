"""Testing utilities for completetreelib.

This module provides test fixtures and utilities for testing
applications that use completetreelib.
"""

from .fixtures import TreeShapeHelper

__all__ = ["TreeShapeHelper"]
