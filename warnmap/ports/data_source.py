"""
Warning data source port interface.

This module defines the protocol the query controller uses to
fetch warnings and sensors.
"""

from typing import List, Protocol

from warnmap.core.models import Sensor, Warning


class DataSourceError(RuntimeError):
    """데이터 소스 조회 실패 (네트워크/응답 파싱 오류)"""


class WarningDataSource(Protocol):
    """경보/센서 데이터 소스 포트 인터페이스"""

    async def get_warnings(self, event_type: str, area_name: str, page: int, page_size: int) -> List[Warning]:
        """
        조건에 맞는 경보 한 페이지를 조회합니다.

        Args:
            event_type: 이벤트 코드 필터 (빈 문자열이면 전체)
            area_name: 지역 이름 검색어 (빈 문자열이면 전체)
            page: 1부터 시작하는 페이지 번호
            page_size: 페이지 크기

        Returns:
            경보 목록

        Raises:
            DataSourceError: 조회 실패 시
        """
        ...

    async def get_sensors(self) -> List[Sensor]:
        """
        등록된 센서 목록을 조회합니다.

        Raises:
            DataSourceError: 조회 실패 시
        """
        ...
