# warnmap/main.py
import os, asyncio, signal
import uvicorn
from warnmap.settings import Settings
from warnmap.observability.health import create_app
from warnmap.observability.logging_setup import setup_logging_dev, get_logger
from warnmap.adapters.http.client import HttpWarningSource
from warnmap.controller.query import QueryController

def _b(name, default=False): return os.getenv(name, str(default)).lower() in ("1","true","yes","on")

def build_settings() -> Settings:
    s = Settings()

    # 데이터 소스
    s.data_source.base_url = os.getenv("WARNMAP_API_BASE_URL", s.data_source.base_url)
    s.data_source.token = os.getenv("WARNMAP_API_TOKEN", s.data_source.token)
    s.data_source.timeout_sec = int(os.getenv("WARNMAP_API_TIMEOUT", s.data_source.timeout_sec))

    # 조회
    s.query.page_size = max(int(os.getenv("WARNMAP_PAGE_SIZE", s.query.page_size)), 1)
    s.query.discard_stale_responses = _b("WARNMAP_DISCARD_STALE", s.query.discard_stale_responses)

    # 표시 언어
    s.display.label_locale = os.getenv("WARNMAP_LABEL_LOCALE", s.display.label_locale)
    s.display.area_locale = os.getenv("WARNMAP_AREA_LOCALE", s.display.area_locale)

    # 관측성
    s.observability.metrics_enabled = _b("METRICS_ENABLED", s.observability.metrics_enabled)
    s.observability.http_port = int(os.getenv("WARNMAP_HTTP_PORT", s.observability.http_port))
    s.observability.log_level = os.getenv("LOG_LEVEL", s.observability.log_level)

    return s

def build_controller(s: Settings, source) -> QueryController:
    return QueryController(
        source,
        page_size=s.query.page_size,
        discard_stale_responses=s.query.discard_stale_responses,
        label_locale=s.display.label_locale,
        area_locale=s.display.area_locale,
    )

async def main():
    s = build_settings()
    setup_logging_dev(s.observability.log_level)
    log = get_logger()
    log.info("설정 로드 완료")

    source = HttpWarningSource(
        base_url=s.data_source.base_url,
        token=s.data_source.token,
        timeout=s.data_source.timeout_sec,
        warnings_path=s.data_source.warnings_path,
        sensors_path=s.data_source.sensors_path,
    )

    async with source:
        controller = build_controller(s, source)
        controller.refresh()
        log.info("초기 조회 시작")

        app = create_app(s, controller)
        server = uvicorn.Server(
            uvicorn.Config(app, host="0.0.0.0", port=s.observability.http_port, log_level="info")
        )
        http_task = asyncio.create_task(server.serve())
        log.info(f"HTTP 서버 시작됨 port:{s.observability.http_port}")

        stop = asyncio.Future()
        loop = asyncio.get_running_loop()
        for sig in (signal.SIGTERM, signal.SIGINT):
            try: loop.add_signal_handler(sig, lambda: (not stop.done()) and stop.set_result(True))
            except NotImplementedError: pass

        await asyncio.wait([stop, http_task], return_when=asyncio.FIRST_COMPLETED)
        server.should_exit = True
        await http_task
        log.info("서비스 종료")

def run():
    asyncio.run(main())

if __name__ == "__main__":
    run()
