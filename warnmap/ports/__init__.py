"""
Port interfaces for warnmap.

This module defines the port interfaces (Protocols) that define
the contracts between the core pipeline and external adapters.
"""

from .data_source import DataSourceError, WarningDataSource

__all__ = ["DataSourceError", "WarningDataSource"]
