"""
Query controller for warnmap.

This module owns the search / filter / pagination state and issues a
refetch on every state change. Each fetch carries a monotonically
increasing request id; with stale-response discarding enabled only the
most recently issued request may update the displayed result.
"""

import asyncio
import time
from typing import Any, Callable, Optional, Set, Tuple

from pydantic import BaseModel, ConfigDict

from warnmap.core.features import DEFAULT_AREA_LOCALE, DEFAULT_LABEL_LOCALE, MapModel, build_map_model
from warnmap.core.models import QueryState, Warning
from warnmap.observability import metrics
from warnmap.observability.logging_setup import get_logger
from warnmap.ports.data_source import WarningDataSource

log = get_logger("warnmap.query")

FETCH_ERROR_MESSAGE = "Failed to fetch data"


class QueryResult(BaseModel):
    """한 번의 조회 결과 (상태 스냅샷 + 지도 모델)"""
    model_config = ConfigDict(frozen=True)

    request_id: int
    state: QueryState
    warnings: Tuple[Warning, ...] = ()
    map_model: MapModel = MapModel()
    has_more: bool = False


class QueryController:
    """검색/필터/페이지 상태와 재조회를 관리하는 컨트롤러"""

    def __init__(self,
                 source: WarningDataSource,
                 *,
                 page_size: int = 10,
                 discard_stale_responses: bool = True,
                 label_locale: str = DEFAULT_LABEL_LOCALE,
                 area_locale: str = DEFAULT_AREA_LOCALE,
                 on_update: Optional[Callable[[QueryResult], Any]] = None,
                 on_error: Optional[Callable[[str], Any]] = None):
        """
        초기화합니다.

        Args:
            source: 경보/센서 데이터 소스
            page_size: 초기 페이지 크기 (1 미만이면 1)
            discard_stale_responses: 최신 요청이 아닌 응답을 버릴지 여부
            label_locale: 경보 유형 라벨 언어
            area_locale: 영향 지역 이름 언어
            on_update: 새 결과가 반영될 때 호출되는 콜백
            on_error: 조회 실패가 반영될 때 호출되는 콜백
        """
        self.source = source
        self.discard_stale_responses = discard_stale_responses
        self.label_locale = label_locale
        self.area_locale = area_locale
        self.on_update = on_update
        self.on_error = on_error

        self._state = QueryState(page_size=max(int(page_size), 1))
        self._issued = 0
        self._tasks: Set[asyncio.Task] = set()

        self.result: Optional[QueryResult] = None
        self.error: Optional[str] = None
        self.stale = False

    @property
    def state(self) -> QueryState:
        return self._state

    @property
    def last_request_id(self) -> int:
        return self._issued

    @property
    def loading(self) -> bool:
        return bool(self._tasks)

    @property
    def has_more(self) -> bool:
        return self.result.has_more if self.result else False

    # ---- 상태 전이 ----

    def set_search_term(self, term: str) -> asyncio.Task:
        """검색어를 교체합니다 (페이지는 유지)."""
        return self._transition(search_term=term)

    def set_event_type(self, event_type: str) -> asyncio.Task:
        """이벤트 유형 필터를 교체합니다 (페이지는 유지)."""
        return self._transition(event_type=event_type)

    def set_page_size(self, page_size: int) -> asyncio.Task:
        """페이지 크기를 교체합니다 (최소 1)."""
        return self._transition(page_size=max(int(page_size), 1))

    def next_page(self) -> asyncio.Task:
        """다음 페이지로 이동합니다 (상한 없음)."""
        return self._transition(page=self._state.page + 1)

    def prev_page(self) -> asyncio.Task:
        """이전 페이지로 이동합니다 (최소 1)."""
        return self._transition(page=max(self._state.page - 1, 1))

    def refresh(self) -> asyncio.Task:
        """현재 상태로 다시 조회합니다."""
        return self._schedule(asyncio.get_running_loop(), self._state)

    def _transition(self, **changes) -> asyncio.Task:
        loop = asyncio.get_running_loop()
        # 부분 수정 없이 항상 새 상태로 교체
        self._state = QueryState(**{**self._state.model_dump(), **changes})
        metrics.current_page.set(self._state.page)
        log.debug(f"조회 상태 변경 changes:{changes}")
        return self._schedule(loop, self._state)

    def _schedule(self, loop: asyncio.AbstractEventLoop, state: QueryState) -> asyncio.Task:
        self._issued += 1
        task = loop.create_task(self._fetch(self._issued, state))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    async def wait_idle(self) -> None:
        """진행 중인 모든 조회가 끝날 때까지 기다립니다."""
        while self._tasks:
            await asyncio.gather(*list(self._tasks))

    # ---- 조회 ----

    def _is_outdated(self, request_id: int) -> bool:
        return self.discard_stale_responses and request_id != self._issued

    def _notify(self, callback: Optional[Callable[[Any], Any]], payload: Any) -> None:
        # 콜백 예외는 조회 태스크 밖으로 전파하지 않음
        if callback is None:
            return
        try:
            callback(payload)
        except Exception:
            log.exception(f"콜백 처리 실패 callback:{getattr(callback, '__name__', callback)!r}")

    async def _fetch(self, request_id: int, state: QueryState) -> Optional[QueryResult]:
        """
        상태 스냅샷으로 경보와 센서를 조회하고 결과를 반영합니다.

        Args:
            request_id: 요청 번호
            state: 요청 시점의 조회 상태

        Returns:
            반영된 결과. 실패했거나 오래된 응답이면 None
        """
        started = time.perf_counter()
        try:
            warnings = await self.source.get_warnings(
                state.event_type, state.search_term, state.page, state.page_size
            )
            sensors = await self.source.get_sensors()
            model = build_map_model(
                warnings, sensors,
                label_locale=self.label_locale, area_locale=self.area_locale,
            )
        except Exception as e:
            metrics.fetches.labels(outcome="error").inc()
            if self._is_outdated(request_id):
                metrics.stale_responses.inc()
                log.warning(f"오래된 요청의 오류 무시 request_id:{request_id} latest:{self._issued}")
                return None
            log.error(f"데이터 조회 실패 request_id:{request_id} error:{e!r}")
            self.error = FETCH_ERROR_MESSAGE
            self.stale = self.result is not None
            self._notify(self.on_error, self.error)
            return None
        finally:
            metrics.fetch_seconds.observe(time.perf_counter() - started)

        metrics.fetches.labels(outcome="ok").inc()
        if self._is_outdated(request_id):
            metrics.stale_responses.inc()
            log.warning(f"오래된 응답 폐기 request_id:{request_id} latest:{self._issued}")
            return None

        result = QueryResult(
            request_id=request_id,
            state=state,
            warnings=tuple(warnings),
            map_model=model,
            has_more=len(warnings) >= state.page_size,
        )
        self.result = result
        self.error = None
        self.stale = False

        metrics.features_rendered.set(len(model.features))
        if model.areas_skipped:
            metrics.areas_skipped.inc(model.areas_skipped)
            log.debug(f"형상 없는 경보 영역 제외 count:{model.areas_skipped}")
        if model.sensors_excluded:
            metrics.sensors_excluded.inc(model.sensors_excluded)
            log.debug(f"좌표 없는 센서 제외 count:{model.sensors_excluded}")
        log.info(f"조회 결과 반영 request_id:{request_id} page:{state.page} "
                 f"warnings:{len(warnings)} features:{len(model.features)} sensors:{len(model.sensors)}")

        self._notify(self.on_update, result)
        return result
