"""
HTTP data source adapter for warnmap.

This module provides the implementation of WarningDataSource
backed by the warnings REST backend.
"""

from .client import HttpWarningSource

__all__ = ["HttpWarningSource"]
