"""
Interaction content for warnmap.

This module builds the human-readable summaries shown when a feature or
sensor marker is activated on the map. All builders tolerate missing
fields and never raise.
"""

from typing import Any, Mapping, Optional, Union

from .models import FeatureSummary, RenderFeature, Sensor

AFFECTED_SEPARATOR = ", "

FEATURE_TEMPLATE = (
    "Warning\n"
    "Type: {warning_type}\n"
    "Level: {level}\n"
    "Start: {start}\n"
    "End: {end}\n"
    "Affected: {affected}"
)

FeatureLike = Union[RenderFeature, Mapping[str, Any], None]


def _text(value: Any) -> str:
    return "" if value is None else str(value)


def _join_names(names: Any) -> str:
    if names is None:
        return ""
    if isinstance(names, str):
        return names
    try:
        return AFFECTED_SEPARATOR.join(_text(n) for n in names)
    except TypeError:
        # 순회할 수 없는 값
        return _text(names)


def _properties_of(feature: FeatureLike) -> Mapping[str, Any]:
    if isinstance(feature, RenderFeature):
        return feature.properties.model_dump(by_alias=True)
    if not isinstance(feature, Mapping):
        return {}
    props = feature.get("properties", feature)
    return props if isinstance(props, Mapping) else {}


def summarize_feature(feature: FeatureLike) -> FeatureSummary:
    """
    피처의 팝업 요약을 생성합니다.

    Args:
        feature: RenderFeature, GeoJSON Feature 딕셔너리 또는 속성 딕셔너리

    Returns:
        모든 필드가 문자열인 요약. 없는 필드는 빈 문자열
    """
    props = _properties_of(feature)
    return FeatureSummary(
        warning_type=_text(props.get("warningTypeLabel")),
        level=_text(props.get("levelCode")),
        start=_text(props.get("approximateStart")),
        end=_text(props.get("approximateEnd")),
        affected=_join_names(props.get("affectedNames")),
    )


def describe_feature(feature: FeatureLike) -> str:
    """피처 요약을 여러 줄 텍스트로 반환합니다."""
    return FEATURE_TEMPLATE.format(**summarize_feature(feature).model_dump())


def describe_sensor(sensor: Optional[Sensor]) -> str:
    """
    센서 마커 툴팁 텍스트를 생성합니다.

    이름, 상태(없으면 Unknown), 설명(있을 때만), 좌표 순으로 구성됩니다.
    """
    if sensor is None:
        return ""
    lines = [sensor.name, f"Status: {sensor.status or 'Unknown'}"]
    if sensor.description:
        lines.append(sensor.description)
    lines.append(f"Lat: {_text(sensor.latitude)}, Lon: {_text(sensor.longitude)}")
    return "\n".join(lines)
