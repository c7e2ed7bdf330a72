"""
Metrics definitions for warnmap.

This module defines Prometheus metrics for monitoring
the warning fetch and map building pipeline.
"""

from prometheus_client import Counter, Histogram, Gauge

# 카운터 메트릭
fetches = Counter(
    "warnmap_fetches_total",
    "Number of completed warning/sensor fetches",
    ["outcome"]
)

stale_responses = Counter(
    "warnmap_stale_responses_total",
    "Responses discarded because a newer request was issued"
)

areas_skipped = Counter(
    "warnmap_areas_skipped_total",
    "Warning areas without a renderable geometry"
)

sensors_excluded = Counter(
    "warnmap_sensors_excluded_total",
    "Sensors excluded for non-numeric coordinates"
)

# 히스토그램 메트릭
fetch_seconds = Histogram(
    "warnmap_fetch_duration_seconds",
    "Time spent fetching warnings and sensors",
    buckets=[0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0]
)

# 게이지 메트릭
features_rendered = Gauge(
    "warnmap_features_rendered",
    "Number of features in the displayed map model"
)

current_page = Gauge(
    "warnmap_current_page",
    "Page number of the current query state"
)
