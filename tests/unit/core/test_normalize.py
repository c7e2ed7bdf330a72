"""
normalize 모듈 테스트

경보 백엔드 응답을 도메인 모델로 변환하는 함수를 검증합니다.
"""

import pytest

from warnmap.core.models import PolygonGeometry
from warnmap.core.normalize import to_sensors, to_warning, to_warnings


class TestToWarnings:
    """경보 변환 테스트"""

    def test_full_payload(self, raw_warning_payload):
        """전체 응답 변환"""
        warnings = to_warnings(raw_warning_payload)

        assert [w.id for w in warnings] == [101, 102]
        first = warnings[0]
        assert first.event.code == "WIND"
        assert first.event.localized_names == {"en": "Wind", "sv": "Vind"}
        assert len(first.warning_areas) == 2
        assert warnings[1].warning_areas == []

    def test_area_fields(self, raw_warning_payload):
        """경보 영역 필드 변환"""
        area = to_warnings(raw_warning_payload)[0].warning_areas[0]

        assert area.id == 5001
        assert isinstance(area.geometry, PolygonGeometry)
        assert area.approximate_start == "2026-10-19T06:00:00.000Z"
        assert area.warning_level.code == "ORANGE"
        assert area.event_description.label("en") == "Wind"
        assert [a.label("sv") for a in area.affected_areas] == ["Stockholms län", "Uppsala län"]

    def test_point_area_not_renderable(self, raw_warning_payload):
        """Point 형상 영역은 렌더링 불가"""
        area = to_warnings(raw_warning_payload)[0].warning_areas[1]
        assert area.geometry is None
        assert area.approximate_start is None
        assert area.event_description is None

    def test_bare_list_payload(self, raw_warning_payload):
        """리스트 형식 응답"""
        assert len(to_warnings(raw_warning_payload["warnings"])) == 2

    @pytest.mark.parametrize("payload", [{"warnings": None}, {}, None])
    def test_empty_payload(self, payload):
        """빈 응답"""
        assert to_warnings(payload) == []

    def test_invalid_payload(self):
        """잘못된 응답 형식"""
        with pytest.raises(ValueError):
            to_warnings({"warnings": "oops"})

    def test_non_dict_items_skipped(self):
        """딕셔너리가 아닌 항목은 건너뜀"""
        warnings = to_warnings([1, "x", {"id": 7, "warningAreas": ["bad", {"id": 1}]}])
        assert len(warnings) == 1
        assert warnings[0].id == 7
        assert len(warnings[0].warning_areas) == 1
        assert warnings[0].warning_areas[0].warning_level.code == "UNKNOWN"

    def test_missing_event(self):
        """이벤트가 없는 경보"""
        warning = to_warning({"id": "3"})
        assert warning.id == 3
        assert warning.event.code == ""


class TestToSensors:
    """센서 변환 테스트"""

    def test_sensors(self, raw_sensor_payload):
        """센서 목록 변환 (좌표 원본 유지)"""
        sensors = to_sensors(raw_sensor_payload)

        assert [s.id for s in sensors] == [1, 2]
        assert sensors[0].positionable
        assert sensors[0].description == "roof"
        assert sensors[1].latitude == "n/a"
        assert not sensors[1].positionable
        assert sensors[1].description is None

    def test_invalid_payload(self):
        """잘못된 응답 형식"""
        with pytest.raises(ValueError):
            to_sensors({"sensors": []})

    def test_odd_coordinate_types(self):
        """숫자/문자열이 아닌 좌표는 None"""
        sensors = to_sensors([{"id": 1, "latitude": {"x": 1}, "longitude": True}])
        assert sensors[0].latitude is None
        assert sensors[0].longitude is None
        assert not sensors[0].positionable
