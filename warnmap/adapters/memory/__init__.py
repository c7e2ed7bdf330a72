"""
In-memory data source adapter for warnmap.

This module provides the implementation of WarningDataSource
backed by a fixed list of warnings and sensors.
"""

from .source import InMemoryWarningSource

__all__ = ["InMemoryWarningSource"]
