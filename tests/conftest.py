"""
테스트 설정 및 픽스처

이 모듈은 pytest 설정과 공통 픽스처를 제공합니다.
"""

import inspect
import pytest
from warnmap.settings import Settings
from warnmap.core.models import AffectedArea, Event, Sensor, Warning, WarningArea, WarningLevel


SQUARE = [[[18.0, 59.0], [19.0, 59.0], [19.0, 60.0], [18.0, 60.0], [18.0, 59.0]]]


def make_area(area_id=1, level="ORANGE", geometry="polygon", names=("Stockholm",), label="Wind"):
    """테스트용 경보 영역 생성"""
    if geometry == "polygon":
        geometry = {"type": "Polygon", "coordinates": SQUARE}
    return WarningArea(
        id=area_id,
        approximate_start="2026-10-19T06:00:00.000Z",
        approximate_end="2026-10-19T18:00:00.000Z",
        geometry=geometry,
        affected_areas=[AffectedArea(id=i, localized_names={"sv": n, "en": n}) for i, n in enumerate(names)],
        warning_level=WarningLevel(code=level),
        event_description=Event(code="WIND", localized_names={"en": label, "sv": "Vind"}) if label else None,
    )


@pytest.fixture
def area_factory():
    """경보 영역 생성 함수"""
    return make_area


@pytest.fixture
def polygon_geometry():
    """테스트용 폴리곤 형상"""
    return {"type": "Polygon", "coordinates": SQUARE}


@pytest.fixture
def multipolygon_geometry():
    """테스트용 멀티폴리곤 형상"""
    return {"type": "MultiPolygon", "coordinates": [SQUARE, SQUARE]}


@pytest.fixture
def sample_warnings():
    """테스트용 경보 목록 (렌더링 가능 1개, 형상 없음 1개)"""
    return [
        Warning(id=1, event=Event(code="WIND"), warning_areas=[make_area(1, "ORANGE")]),
        Warning(id=2, event=Event(code="RAIN"), warning_areas=[make_area(2, "YELLOW", geometry=None)]),
    ]


@pytest.fixture
def sample_sensors():
    """테스트용 센서 목록"""
    return [
        Sensor(id=1, name="north", latitude=59.3, longitude=18.1, status="red"),
        Sensor(id=2, name="broken", latitude="n/a", longitude=18.1, status="green"),
    ]


@pytest.fixture
def raw_warning_payload():
    """경보 백엔드 응답 형식의 원시 데이터"""
    return {
        "warnings": [
            {
                "id": 101,
                "event": {"en": "Wind", "sv": "Vind", "code": "WIND",
                          "mhoClassification": {"en": "Meteorological", "sv": "Meteorologi", "code": "MET"}},
                "normalProbability": True,
                "warningAreas": [
                    {
                        "id": 5001,
                        "approximateStart": "2026-10-19T06:00:00.000Z",
                        "approximateEnd": "2026-10-19T18:00:00.000Z",
                        "area": {"type": "Feature", "geometry": {"type": "Polygon", "coordinates": SQUARE},
                                 "properties": {}},
                        "warningLevel": {"en": "Orange", "sv": "Orange", "code": "ORANGE"},
                        "eventDescription": {"en": "Wind", "sv": "Vind", "code": "WIND"},
                        "affectedAreas": [{"id": 1, "sv": "Stockholms län", "en": "Stockholm County"},
                                          {"id": 2, "sv": "Uppsala län", "en": "Uppsala County"}],
                    },
                    {
                        "id": 5002,
                        "area": {"type": "Feature", "geometry": {"type": "Point", "coordinates": [18.0, 59.0]}},
                        "warningLevel": {"en": "Yellow", "sv": "Gul", "code": "YELLOW"},
                        "affectedAreas": [{"id": 3, "sv": "Gotlands län", "en": "Gotland County"}],
                    },
                ],
            },
            {
                "id": 102,
                "event": {"en": "Rain", "sv": "Regn", "code": "RAIN"},
                "warningAreas": [],
            },
        ]
    }


@pytest.fixture
def raw_sensor_payload():
    """센서 응답 형식의 원시 데이터"""
    return [
        {"id": 1, "name": "north", "latitude": 59.3, "longitude": 18.1, "status": "RED",
         "company_id": 3, "description": "roof"},
        {"id": 2, "name": "south", "latitude": "n/a", "longitude": 18.1, "status": "green"},
    ]


@pytest.fixture
def sample_settings():
    """테스트용 설정"""
    settings = Settings()
    settings.observability.service_name = "test-service"
    settings.observability.build_version = "1.0.0"
    settings.observability.log_level = "INFO"
    return settings


# pytest 설정
def pytest_configure(config):
    """pytest 설정"""
    config.addinivalue_line(
        "markers", "slow: 느린 테스트 마커"
    )
    config.addinivalue_line(
        "markers", "integration: 통합 테스트 마커"
    )


def pytest_collection_modifyitems(config, items):
    """테스트 아이템 수정"""
    for item in items:
        # 비동기 테스트에 asyncio 마커 추가
        if inspect.iscoroutinefunction(getattr(item, "function", None)):
            item.add_marker(pytest.mark.asyncio)

        # 통합 테스트 마커 추가
        if "integration" in item.name:
            item.add_marker(pytest.mark.integration)
