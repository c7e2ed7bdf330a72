"""
Adapters for warnmap.

This module contains the concrete implementations of the data source port
that handle external I/O.
"""

from .http.client import HttpWarningSource
from .memory.source import InMemoryWarningSource

__all__ = ["HttpWarningSource", "InMemoryWarningSource"]
