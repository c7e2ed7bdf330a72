"""
Controllers for warnmap.

This module contains the stateful controller that coordinates
the query state, the data source and the map pipeline.
"""
from .query import FETCH_ERROR_MESSAGE, QueryController, QueryResult

__all__ = ["FETCH_ERROR_MESSAGE", "QueryController", "QueryResult"]
