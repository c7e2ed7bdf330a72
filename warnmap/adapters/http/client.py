"""
HTTP data source for warnmap.

This module provides an aiohttp client for the warnings backend,
fetching paginated weather warnings and the operator's sensors.
"""

import asyncio
from typing import Any, Dict, List, Optional

import aiohttp

from warnmap.core.models import Sensor, Warning
from warnmap.core.normalize import to_sensors, to_warnings
from warnmap.observability.logging_setup import get_logger
from warnmap.ports.data_source import DataSourceError

log = get_logger("warnmap.http")


class HttpWarningSource:
    """경보 백엔드 HTTP 클라이언트"""

    def __init__(self,
                 base_url: str,
                 token: str = "",
                 timeout: int = 10,
                 *,
                 warnings_path: str = "/api/weather-warnings",
                 sensors_path: str = "/api/sensors"):
        """
        초기화합니다.

        Args:
            base_url: 백엔드 기본 URL
            token: Bearer 토큰 (빈 문자열이면 인증 헤더 없음)
            timeout: 요청 타임아웃 (초)
            warnings_path: 경보 조회 경로
            sensors_path: 센서 조회 경로
        """
        self.base_url = base_url.rstrip('/')
        self.token = token
        self.timeout = timeout
        self.warnings_path = warnings_path
        self.sensors_path = sensors_path
        self.session: Optional[aiohttp.ClientSession] = None

        log.info("경보 HTTP 클라이언트 초기화됨")

    def _headers(self) -> Dict[str, str]:
        headers = {"Accept": "application/json"}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    async def __aenter__(self):
        """비동기 컨텍스트 매니저 진입"""
        self.session = aiohttp.ClientSession(
            headers=self._headers(),
            timeout=aiohttp.ClientTimeout(total=self.timeout)
        )
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """비동기 컨텍스트 매니저 종료"""
        if self.session:
            await self.session.close()
            self.session = None

    async def _get_json(self, endpoint: str, params: Optional[Dict[str, Any]] = None) -> Any:
        """
        GET 요청을 수행하고 JSON 응답을 반환합니다.

        Args:
            endpoint: API 엔드포인트
            params: 쿼리 매개변수

        Returns:
            응답 데이터

        Raises:
            DataSourceError: 네트워크 오류, HTTP 오류, JSON 파싱 오류
        """
        if not self.session:
            raise RuntimeError("세션이 초기화되지 않았습니다. async with를 사용하세요.")

        url = f"{self.base_url}{endpoint}"
        try:
            async with self.session.get(url, params=params) as response:
                response.raise_for_status()
                return await response.json()
        except aiohttp.ClientResponseError as e:
            raise DataSourceError(f"HTTP {e.status} from {endpoint}") from e
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise DataSourceError(f"request to {endpoint} failed: {e!r}") from e
        except ValueError as e:
            raise DataSourceError(f"invalid JSON from {endpoint}") from e

    async def get_warnings(self, event_type: str, area_name: str, page: int, page_size: int) -> List[Warning]:
        """조건에 맞는 경보 한 페이지를 조회합니다."""
        params = {
            "eventType": event_type,
            "areaName": area_name,
            "page": page,
            "pageSize": page_size,
        }
        data = await self._get_json(self.warnings_path, params=params)
        try:
            warnings = to_warnings(data)
        except ValueError as e:
            raise DataSourceError(str(e)) from e

        log.info(f"경보 조회 완료 page:{page} page_size:{page_size} count:{len(warnings)}")
        return warnings

    async def get_sensors(self) -> List[Sensor]:
        """센서 목록을 조회합니다."""
        data = await self._get_json(self.sensors_path)
        try:
            sensors = to_sensors(data)
        except ValueError as e:
            raise DataSourceError(str(e)) from e

        log.info(f"센서 조회 완료 count:{len(sensors)}")
        return sensors
