"""
warnmap: weather-hazard warnings correlated with IoT sensor positions.
"""

__version__ = "0.1.0"
