# warnmap/settings.py
from __future__ import annotations
from pydantic import BaseModel, Field

class DataSourceConfig(BaseModel):
    base_url: str = "http://localhost:8080"
    token: str = ""
    timeout_sec: int = 10
    warnings_path: str = "/api/weather-warnings"
    sensors_path: str = "/api/sensors"

class QueryConfig(BaseModel):
    page_size: int = Field(default=10, ge=1)
    discard_stale_responses: bool = True      # False면 마지막 도착 응답이 우선

class DisplayConfig(BaseModel):
    label_locale: str = "en"                  # 경보 유형 라벨 언어
    area_locale: str = "sv"                   # 영향 지역 이름 언어

class Observability(BaseModel):
    http_port: int = 8099
    metrics_enabled: bool = True
    service_name: str = "warnmap"
    build_version: str = "0.1.0"
    build_date: str = "2026-10-01"
    log_level: str = "INFO"

class Settings(BaseModel):
    # 하위 섹션 (기본값/팩토리로 누락 방지)
    data_source: DataSourceConfig = Field(default_factory=DataSourceConfig)
    query: QueryConfig = Field(default_factory=QueryConfig)
    display: DisplayConfig = Field(default_factory=DisplayConfig)
    observability: Observability = Field(default_factory=Observability)
