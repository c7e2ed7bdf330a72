"""
Core domain models and pure functions for warnmap.

This module contains the domain models and the warning-to-map pipeline
that are independent of external I/O and infrastructure concerns.
"""

from .models import (
    AffectedArea, Event, FeatureSummary, QueryState, RenderFeature, RenderProperties,
    Sensor, SensorMarker, StyleDescriptor, Warning, WarningArea, WarningLevel,
)
from .style import resolve_polygon_style, resolve_sensor_color
from .features import MapModel, build_feature, build_feature_collection, build_map_model, to_geojson
from .describe import describe_feature, describe_sensor, summarize_feature
from .filtering import filter_and_paginate

__all__ = [
    "AffectedArea", "Event", "FeatureSummary", "QueryState", "RenderFeature", "RenderProperties",
    "Sensor", "SensorMarker", "StyleDescriptor", "Warning", "WarningArea", "WarningLevel",
    "resolve_polygon_style", "resolve_sensor_color",
    "MapModel", "build_feature", "build_feature_collection", "build_map_model", "to_geojson",
    "describe_feature", "describe_sensor", "summarize_feature",
    "filter_and_paginate",
]
