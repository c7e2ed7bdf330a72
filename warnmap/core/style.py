"""
Style resolution for warnmap.

This module maps warning level codes and sensor status values
to the visual styles used by the rendering surface.
"""

from typing import Dict, Optional

from .models import StyleDescriptor

# 레벨별 폴리곤 스타일 (외곽선은 모두 검정, 두께 2)
POLYGON_STYLES: Dict[str, StyleDescriptor] = {
    "RED": StyleDescriptor(fill_color="#D61720", fill_opacity=0.8),
    "ORANGE": StyleDescriptor(fill_color="#EB7500", fill_opacity=0.8),
    "YELLOW": StyleDescriptor(fill_color="#FDEB1B", fill_opacity=0.8),
    "MESSAGE": StyleDescriptor(fill_color="#1EA8A1", fill_opacity=0.8),
}

DEFAULT_POLYGON_STYLE = StyleDescriptor(fill_color="lightblue", fill_opacity=0.6)

# 센서 상태별 마커 색상
SENSOR_COLORS: Dict[str, str] = {
    "RED": "red",
    "ORANGE": "orange",
    "YELLOW": "yellow",
}

DEFAULT_SENSOR_COLOR = "green"


def resolve_polygon_style(level_code: Optional[str]) -> StyleDescriptor:
    """
    경보 레벨 코드에 해당하는 폴리곤 스타일을 반환합니다.

    Args:
        level_code: 경보 레벨 코드 (RED, ORANGE, YELLOW, MESSAGE)

    Returns:
        스타일. 알 수 없는 코드는 기본 스타일
    """
    if not isinstance(level_code, str):
        return DEFAULT_POLYGON_STYLE
    return POLYGON_STYLES.get(level_code, DEFAULT_POLYGON_STYLE)


def resolve_sensor_color(status: Optional[str]) -> str:
    """
    센서 상태에 해당하는 마커 색상을 반환합니다 (대소문자 무시).

    Args:
        status: 센서 상태 문자열

    Returns:
        마커 색상. 상태가 없거나 알 수 없으면 기본 색상
    """
    if not status:
        return DEFAULT_SENSOR_COLOR
    return SENSOR_COLORS.get(str(status).upper(), DEFAULT_SENSOR_COLOR)
