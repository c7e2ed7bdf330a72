"""
Sensor marker building for warnmap.

This module filters sensors down to the positionable set and pairs each
one with its marker color and tooltip text.
"""

from typing import Iterable, List

from .describe import describe_sensor
from .models import Sensor, SensorMarker
from .style import resolve_sensor_color


def positionable_sensors(sensors: Iterable[Sensor]) -> List[Sensor]:
    """두 좌표가 모두 유한한 숫자인 센서만 반환합니다."""
    return [s for s in sensors if s.positionable]


def build_sensor_markers(sensors: Iterable[Sensor]) -> List[SensorMarker]:
    """
    센서 목록을 지도 마커 목록으로 변환합니다.

    좌표가 유효하지 않은 센서는 오류 없이 제외됩니다.
    """
    return [
        SensorMarker(
            sensor_id=s.id,
            name=s.name,
            latitude=float(s.latitude),
            longitude=float(s.longitude),
            color=resolve_sensor_color(s.status),
            description=describe_sensor(s),
        )
        for s in positionable_sensors(sensors)
    ]
