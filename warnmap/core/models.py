"""
Core domain models for warnmap.

This module defines the warning, sensor and render models using Pydantic v2
for type safety and validation.
"""

import math
from typing import Annotated, Any, Dict, List, Literal, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic.alias_generators import to_camel

# 경보 레벨 코드 정의
LevelCode = Literal["RED", "ORANGE", "YELLOW", "MESSAGE", "UNKNOWN"]
KNOWN_LEVELS = ("RED", "ORANGE", "YELLOW", "MESSAGE")

LocalizedNames = Dict[str, str]

# GeoJSON 좌표 (경도, 위도[, 고도])
Ordinate = Annotated[float, Field(allow_inf_nan=False)]
Position = Annotated[List[Ordinate], Field(min_length=2, max_length=3)]
LinearRing = Annotated[List[Position], Field(min_length=4)]
PolygonCoordinates = Annotated[List[LinearRing], Field(min_length=1)]


def is_finite_number(value: Any) -> bool:
    """값이 유한한 실수인지 확인합니다 (bool 제외)."""
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    return isinstance(value, float) and math.isfinite(value)


class Event(BaseModel):
    """경보 이벤트 모델"""
    code: str = ""
    localized_names: LocalizedNames = Field(default_factory=dict)

    def label(self, locale: str) -> str:
        return self.localized_names.get(locale) or ""


class AffectedArea(BaseModel):
    """영향 지역 모델"""
    id: int
    localized_names: LocalizedNames = Field(default_factory=dict)

    def label(self, locale: str) -> str:
        return self.localized_names.get(locale) or ""


class WarningLevel(BaseModel):
    """경보 레벨 모델"""
    code: LevelCode = "UNKNOWN"
    localized_names: LocalizedNames = Field(default_factory=dict)

    @field_validator("code", mode="before")
    @classmethod
    def _coerce_code(cls, value: Any) -> str:
        # 알 수 없는 코드는 UNKNOWN으로 처리
        if value is None:
            return "UNKNOWN"
        code = str(value).strip().upper()
        return code if code in KNOWN_LEVELS else "UNKNOWN"


class PolygonGeometry(BaseModel):
    """폴리곤 형상 모델"""
    model_config = ConfigDict(frozen=True)

    type: Literal["Polygon"]
    coordinates: PolygonCoordinates


class MultiPolygonGeometry(BaseModel):
    """멀티폴리곤 형상 모델"""
    model_config = ConfigDict(frozen=True)

    type: Literal["MultiPolygon"]
    coordinates: Annotated[List[PolygonCoordinates], Field(min_length=1)]


Geometry = Annotated[Union[PolygonGeometry, MultiPolygonGeometry], Field(discriminator="type")]


class WarningArea(BaseModel):
    """경보 영역 모델

    형상이 없거나 지원하지 않는 타입이거나 손상된 경우 geometry는 None이 되며
    해당 영역은 렌더링되지 않습니다.
    """
    id: int
    approximate_start: Optional[str] = None
    approximate_end: Optional[str] = None
    geometry: Optional[Geometry] = None
    affected_areas: List[AffectedArea] = Field(default_factory=list)
    warning_level: WarningLevel
    event_description: Optional[Event] = None

    @field_validator("geometry", mode="wrap")
    @classmethod
    def _lenient_geometry(cls, value: Any, handler) -> Any:
        # GeoJSON Feature 래퍼는 geometry만 꺼내서 사용
        if isinstance(value, dict) and value.get("type") == "Feature":
            value = value.get("geometry")
        if value is None:
            return None
        try:
            return handler(value)
        except ValidationError:
            return None

    @property
    def renderable(self) -> bool:
        return self.geometry is not None


class Warning(BaseModel):
    """기상 경보 모델"""
    id: int
    event: Event = Field(default_factory=Event)
    warning_areas: List[WarningArea] = Field(default_factory=list)


class Sensor(BaseModel):
    """IoT 센서 모델

    좌표는 데이터 소스가 보낸 값을 그대로 보관합니다. 두 좌표가 모두
    유한한 숫자일 때만 지도에 배치할 수 있습니다.
    """
    id: int
    name: str = ""
    latitude: Union[float, str, None] = None
    longitude: Union[float, str, None] = None
    status: Optional[str] = ""
    description: Optional[str] = None

    @property
    def positionable(self) -> bool:
        return is_finite_number(self.latitude) and is_finite_number(self.longitude)


class RenderProperties(BaseModel):
    """렌더링용 파생 속성 모델"""
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    warning_type_label: str = ""
    approximate_start: Optional[str] = None
    approximate_end: Optional[str] = None
    level_code: str = "UNKNOWN"
    affected_names: Tuple[str, ...] = ()


class RenderFeature(BaseModel):
    """렌더링 표면에 전달되는 형상 + 속성 단위"""
    model_config = ConfigDict(frozen=True)

    geometry: Geometry
    properties: RenderProperties

    def to_geojson(self) -> Dict[str, Any]:
        """GeoJSON Feature 딕셔너리로 변환합니다."""
        return {
            "type": "Feature",
            "geometry": self.geometry.model_dump(mode="json"),
            "properties": self.properties.model_dump(mode="json", by_alias=True),
        }


class StyleDescriptor(BaseModel):
    """폴리곤 스타일 모델"""
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    stroke_color: str = "#000000"
    stroke_weight: int = 2
    fill_color: str
    fill_opacity: float

    def to_path_options(self) -> Dict[str, Any]:
        """지도 위젯의 path 옵션 형식으로 변환합니다."""
        return {
            "color": self.stroke_color,
            "weight": self.stroke_weight,
            "fillColor": self.fill_color,
            "fillOpacity": self.fill_opacity,
        }


class SensorMarker(BaseModel):
    """지도에 배치 가능한 센서 마커 모델"""
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    sensor_id: int
    name: str
    latitude: float
    longitude: float
    color: str
    description: str


class FeatureSummary(BaseModel):
    """피처 팝업/툴팁 요약 모델"""
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    warning_type: str = ""
    level: str = ""
    start: str = ""
    end: str = ""
    affected: str = ""


class QueryState(BaseModel):
    """검색/필터/페이지 상태 모델 (변경 시 항상 전체 교체)"""
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    search_term: str = ""
    event_type: str = ""
    page: int = Field(default=1, ge=1)
    page_size: int = Field(default=10, ge=1)
