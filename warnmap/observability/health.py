"""
HTTP endpoints for warnmap.

This module implements health, readiness, metrics and info endpoints,
plus the read-mostly map hand-off used by a rendering client: the latest
feature collection, sensor markers, styles, popups and query controls.
"""

from typing import Optional

from fastapi import FastAPI, HTTPException, Body
from fastapi.responses import Response, JSONResponse
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
import time
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from warnmap.controller.query import QueryController
from warnmap.core.describe import summarize_feature
from warnmap.core.features import MapModel
from warnmap.core.style import resolve_polygon_style
from warnmap.settings import Settings
from warnmap.observability.logging_setup import get_logger

log = get_logger("warnmap.http_api")


class QueryUpdate(BaseModel):
    """PUT /query 요청 본문 (camelCase 키)"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    search_term: Optional[str] = None
    event_type: Optional[str] = None
    page_size: Optional[int] = None


def create_app(settings: Settings, controller: QueryController) -> FastAPI:
    """FastAPI 애플리케이션을 생성합니다."""
    app = FastAPI(
        title=settings.observability.service_name,
        version=settings.observability.build_version,
        description="Weather warning map data service"
    )

    start_time = time.time()

    def _map_model() -> MapModel:
        return controller.result.map_model if controller.result else MapModel()

    def _query_view() -> dict:
        return {
            "state": controller.state.model_dump(by_alias=True),
            "requestId": controller.last_request_id,
            "loading": controller.loading,
            "hasMore": controller.has_more,
            "stale": controller.stale,
            "error": controller.error,
        }

    @app.get("/health")
    async def health():
        """헬스 체크 엔드포인트"""
        return JSONResponse({
            "status": "ok",
            "service": settings.observability.service_name,
            "timestamp": time.time()
        })

    @app.get("/ready")
    async def ready():
        """레디니스 체크 엔드포인트 (첫 조회 결과가 있어야 준비 완료)"""
        if controller.result is None:
            return JSONResponse({
                "status": "not_ready",
                "service": settings.observability.service_name,
                "error": controller.error,
                "timestamp": time.time()
            }, status_code=503)
        return JSONResponse({
            "status": "ready",
            "service": settings.observability.service_name,
            "timestamp": time.time()
        })

    @app.get("/metrics")
    async def metrics():
        """Prometheus 메트릭 엔드포인트"""
        if not settings.observability.metrics_enabled:
            raise HTTPException(status_code=503, detail="Metrics disabled")

        return Response(
            generate_latest(),
            media_type=CONTENT_TYPE_LATEST
        )

    @app.get("/info")
    async def info():
        """서비스 정보 엔드포인트"""
        uptime = time.time() - start_time
        return JSONResponse({
            "service": settings.observability.service_name,
            "version": settings.observability.build_version,
            "build_date": settings.observability.build_date,
            "uptime_seconds": int(uptime),
            "metrics_enabled": settings.observability.metrics_enabled,
            "log_level": settings.observability.log_level
        })

    @app.get("/map/features")
    async def map_features():
        """최신 결과의 GeoJSON FeatureCollection"""
        return JSONResponse(_map_model().feature_collection())

    @app.get("/map/features/{index}/summary")
    async def feature_summary(index: int):
        """피처 팝업 요약"""
        features = _map_model().features
        if index < 0 or index >= len(features):
            raise HTTPException(status_code=404, detail="Feature not found")
        return JSONResponse(summarize_feature(features[index]).model_dump(by_alias=True))

    @app.get("/map/sensors")
    async def map_sensors():
        """지도에 배치 가능한 센서 마커 목록"""
        return JSONResponse([m.model_dump(by_alias=True) for m in _map_model().sensors])

    @app.get("/map/styles/{level_code}")
    async def map_style(level_code: str):
        """레벨 코드별 폴리곤 스타일"""
        return JSONResponse(resolve_polygon_style(level_code).model_dump(by_alias=True))

    @app.get("/query")
    async def get_query():
        """현재 조회 상태"""
        return JSONResponse(_query_view())

    @app.put("/query")
    async def put_query(payload: Optional[QueryUpdate] = Body(default=None)):
        """검색어/이벤트 유형/페이지 크기를 변경합니다.

        본문 전체가 검증된 뒤에만 상태 전이를 적용합니다.
        """
        payload = payload or QueryUpdate()
        fields = payload.model_fields_set
        if "search_term" in fields:
            controller.set_search_term(payload.search_term or "")
        if "event_type" in fields:
            controller.set_event_type(payload.event_type or "")
        if "page_size" in fields and payload.page_size is not None:
            controller.set_page_size(payload.page_size)
        log.info(f"조회 조건 변경 요청 fields:{sorted(fields)}")
        return JSONResponse(_query_view())

    @app.post("/query/next")
    async def query_next():
        """다음 페이지"""
        controller.next_page()
        return JSONResponse(_query_view())

    @app.post("/query/prev")
    async def query_prev():
        """이전 페이지"""
        controller.prev_page()
        return JSONResponse(_query_view())

    @app.post("/query/refresh")
    async def query_refresh():
        """현재 조건으로 재조회"""
        controller.refresh()
        return JSONResponse(_query_view())

    @app.get("/")
    async def root():
        """루트 엔드포인트"""
        return JSONResponse({
            "service": settings.observability.service_name,
            "version": settings.observability.build_version,
            "endpoints": {
                "health": "/health",
                "ready": "/ready",
                "metrics": "/metrics",
                "info": "/info",
                "features": "/map/features",
                "sensors": "/map/sensors",
                "query": "/query"
            }
        })

    return app
