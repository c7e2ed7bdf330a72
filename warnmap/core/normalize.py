"""
Normalization functions for warnmap.

This module contains pure functions for converting raw provider payloads
(camelCase JSON with per-language name fields) into internal domain models.
"""

from typing import Any, Dict, List, Optional

from .models import AffectedArea, Event, Sensor, Warning, WarningArea, WarningLevel
from warnmap.observability.logging_setup import get_logger

log = get_logger("warnmap.normalize")

# 언어 이름이 아닌 필드
_NON_LOCALE_KEYS = ("code", "id", "type")


def _int(value: Any, default: int = 0) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


def _str(value: Any) -> Optional[str]:
    if value is None or value == "":
        return None
    return str(value)


def _localized(raw: Dict[str, Any]) -> Dict[str, str]:
    """{"en": ..., "sv": ...} 형태의 언어별 이름을 추출합니다."""
    names = raw.get("localizedNames") or raw.get("localized_names")
    if isinstance(names, dict):
        return {str(k): str(v) for k, v in names.items() if isinstance(v, str)}
    return {k: v for k, v in raw.items() if k not in _NON_LOCALE_KEYS and isinstance(v, str)}


def _dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def to_event(raw: Any) -> Optional[Event]:
    if not isinstance(raw, dict):
        return None
    return Event(code=str(raw.get("code") or ""), localized_names=_localized(raw))


def to_affected_area(raw: Dict[str, Any]) -> AffectedArea:
    return AffectedArea(id=_int(raw.get("id")), localized_names=_localized(raw))


def to_warning_area(raw: Dict[str, Any]) -> WarningArea:
    """
    원시 경보 영역을 WarningArea로 변환합니다.

    형상은 "area"(GeoJSON Feature) 또는 "geometry" 필드에서 가져오며,
    손상된 형상은 None으로 저장됩니다.
    """
    level_raw = _dict(raw.get("warningLevel"))
    affected = [to_affected_area(a) for a in raw.get("affectedAreas") or [] if isinstance(a, dict)]

    area = WarningArea(
        id=_int(raw.get("id")),
        approximate_start=_str(raw.get("approximateStart")),
        approximate_end=_str(raw.get("approximateEnd")),
        geometry=raw.get("area", raw.get("geometry")),
        affected_areas=affected,
        warning_level=WarningLevel(code=level_raw.get("code"), localized_names=_localized(level_raw)),
        event_description=to_event(raw.get("eventDescription")),
    )
    if not area.renderable:
        log.debug(f"형상 없는 경보 영역 area_id:{area.id}")
    return area


def to_warning(raw: Dict[str, Any]) -> Warning:
    """원시 경보 딕셔너리를 Warning으로 변환합니다."""
    areas = []
    for area_raw in raw.get("warningAreas") or []:
        if not isinstance(area_raw, dict):
            log.warning(f"잘못된 경보 영역 항목 건너뜀 warning_id:{raw.get('id')}")
            continue
        areas.append(to_warning_area(area_raw))

    return Warning(
        id=_int(raw.get("id")),
        event=to_event(raw.get("event")) or Event(),
        warning_areas=areas,
    )


def to_warnings(payload: Any) -> List[Warning]:
    """
    경보 응답 전체를 변환합니다.

    Args:
        payload: {"warnings": [...]} 또는 경보 리스트

    Returns:
        경보 목록 (딕셔너리가 아닌 항목은 건너뜀)
    """
    items = payload.get("warnings") if isinstance(payload, dict) else payload
    if items is None:
        return []
    if not isinstance(items, list):
        raise ValueError("경보 응답 형식이 올바르지 않습니다")

    warnings = []
    for item in items:
        if not isinstance(item, dict):
            log.warning(f"잘못된 경보 항목 건너뜀 type:{type(item).__name__}")
            continue
        warnings.append(to_warning(item))
    return warnings


def _coordinate(value: Any) -> Any:
    # 숫자/문자열/None 외의 값은 None으로 취급
    if value is None or isinstance(value, (int, float, str)) and not isinstance(value, bool):
        return value
    return None


def to_sensor(raw: Dict[str, Any]) -> Sensor:
    """원시 센서 딕셔너리를 Sensor로 변환합니다 (좌표는 그대로 보존)."""
    return Sensor(
        id=_int(raw.get("id")),
        name=str(raw.get("name") or ""),
        latitude=_coordinate(raw.get("latitude")),
        longitude=_coordinate(raw.get("longitude")),
        status=str(raw.get("status") or ""),
        description=_str(raw.get("description")),
    )


def to_sensors(payload: Any) -> List[Sensor]:
    """센서 응답 리스트를 변환합니다."""
    if payload is None:
        return []
    if not isinstance(payload, list):
        raise ValueError("센서 응답 형식이 올바르지 않습니다")
    return [to_sensor(item) for item in payload if isinstance(item, dict)]
