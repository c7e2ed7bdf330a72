"""
Feature building for warnmap.

This module converts warning areas into renderable features,
flattens whole query results into a stable feature collection
and bundles everything the rendering surface needs into a map model.
"""

from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple

from pydantic import BaseModel, ConfigDict

from .markers import build_sensor_markers
from .models import RenderFeature, RenderProperties, Sensor, SensorMarker, StyleDescriptor, Warning, WarningArea
from .style import resolve_polygon_style

DEFAULT_LABEL_LOCALE = "en"
DEFAULT_AREA_LOCALE = "sv"


def build_feature(
    area: WarningArea,
    *,
    label_locale: str = DEFAULT_LABEL_LOCALE,
    area_locale: str = DEFAULT_AREA_LOCALE,
) -> Optional[RenderFeature]:
    """
    경보 영역 하나를 렌더링 피처로 변환합니다.

    Args:
        area: 변환할 경보 영역
        label_locale: 경보 유형 라벨 언어
        area_locale: 영향 지역 이름 언어

    Returns:
        렌더링 피처. 형상이 없거나 인식할 수 없으면 None (건너뜀)
    """
    if area.geometry is None:
        return None

    label = area.event_description.label(label_locale) if area.event_description else ""
    properties = RenderProperties(
        warning_type_label=label,
        approximate_start=area.approximate_start,
        approximate_end=area.approximate_end,
        level_code=area.warning_level.code,
        affected_names=tuple(a.label(area_locale) for a in area.affected_areas),
    )
    return RenderFeature(geometry=area.geometry, properties=properties)


def iter_warning_areas(warnings: Iterable[Warning]) -> Iterable[WarningArea]:
    """경보 목록의 모든 영역을 입력 순서대로 순회합니다."""
    for warning in warnings:
        yield from warning.warning_areas


def build_feature_collection(
    warnings: Iterable[Warning],
    *,
    label_locale: str = DEFAULT_LABEL_LOCALE,
    area_locale: str = DEFAULT_AREA_LOCALE,
) -> List[RenderFeature]:
    """
    모든 경보의 영역을 하나의 피처 목록으로 평탄화합니다.

    출력 순서는 입력 순서(경보 → 영역)를 그대로 따르므로 같은 입력에 대해
    항상 같은 순서가 보장됩니다.
    """
    features: List[RenderFeature] = []
    for area in iter_warning_areas(warnings):
        feature = build_feature(area, label_locale=label_locale, area_locale=area_locale)
        if feature is not None:
            features.append(feature)
    return features


def to_geojson(features: Iterable[RenderFeature]) -> Dict[str, Any]:
    """피처 목록을 GeoJSON FeatureCollection으로 변환합니다."""
    return {
        "type": "FeatureCollection",
        "features": [f.to_geojson() for f in features],
    }


class MapModel(BaseModel):
    """렌더링 표면에 전달되는 지도 데이터 묶음"""
    model_config = ConfigDict(frozen=True)

    features: Tuple[RenderFeature, ...] = ()
    sensors: Tuple[SensorMarker, ...] = ()
    areas_total: int = 0
    sensors_total: int = 0

    @property
    def areas_skipped(self) -> int:
        return self.areas_total - len(self.features)

    @property
    def sensors_excluded(self) -> int:
        return self.sensors_total - len(self.sensors)

    def feature_collection(self) -> Dict[str, Any]:
        return to_geojson(self.features)

    def styles(self) -> List[StyleDescriptor]:
        """피처 순서와 같은 순서의 스타일 목록"""
        return [self.style_for(f.properties.level_code) for f in self.features]

    @staticmethod
    def style_for(level_code: Optional[str]) -> StyleDescriptor:
        return resolve_polygon_style(level_code)


def build_map_model(
    warnings: Sequence[Warning],
    sensors: Sequence[Sensor],
    *,
    label_locale: str = DEFAULT_LABEL_LOCALE,
    area_locale: str = DEFAULT_AREA_LOCALE,
) -> MapModel:
    """
    경보와 센서 목록으로 지도 모델을 생성합니다.

    Args:
        warnings: 조회된 경보 목록
        sensors: 조회된 센서 목록
        label_locale: 경보 유형 라벨 언어
        area_locale: 영향 지역 이름 언어

    Returns:
        피처, 센서 마커, 건너뛴 항목 수를 포함한 지도 모델
    """
    features = build_feature_collection(warnings, label_locale=label_locale, area_locale=area_locale)
    markers = build_sensor_markers(sensors)
    return MapModel(
        features=tuple(features),
        sensors=tuple(markers),
        areas_total=sum(len(w.warning_areas) for w in warnings),
        sensors_total=len(sensors),
    )
