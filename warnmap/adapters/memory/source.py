"""
In-memory data source for warnmap.

This module serves a fixed set of warnings and sensors through the same
filter and pagination rules as the warnings backend.
"""

from typing import Any, Iterable, List, Optional

from warnmap.core.features import DEFAULT_AREA_LOCALE
from warnmap.core.filtering import filter_and_paginate
from warnmap.core.models import Sensor, Warning
from warnmap.core.normalize import to_sensors, to_warnings
from warnmap.observability.logging_setup import get_logger

log = get_logger("warnmap.memory")


class InMemoryWarningSource:
    """메모리 기반 경보/센서 데이터 소스"""

    def __init__(self,
                 warnings: Optional[Iterable[Warning]] = None,
                 sensors: Optional[Iterable[Sensor]] = None,
                 *,
                 area_locale: str = DEFAULT_AREA_LOCALE):
        """
        초기화합니다.

        Args:
            warnings: 제공할 경보 목록
            sensors: 제공할 센서 목록
            area_locale: 지역 이름 검색에 사용할 언어
        """
        self.warnings: List[Warning] = list(warnings or [])
        self.sensors: List[Sensor] = list(sensors or [])
        self.area_locale = area_locale

    @classmethod
    def from_payload(cls, warnings_payload: Any, sensors_payload: Any = None, **kwargs) -> "InMemoryWarningSource":
        """원시 응답 페이로드로부터 데이터 소스를 생성합니다."""
        return cls(to_warnings(warnings_payload), to_sensors(sensors_payload), **kwargs)

    async def get_warnings(self, event_type: str, area_name: str, page: int, page_size: int) -> List[Warning]:
        result = filter_and_paginate(
            self.warnings, event_type, area_name, page, page_size,
            area_locale=self.area_locale,
        )
        log.debug(f"메모리 경보 조회 page:{page} page_size:{page_size} count:{len(result)}")
        return result

    async def get_sensors(self) -> List[Sensor]:
        return list(self.sensors)
