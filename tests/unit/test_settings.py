"""
설정 로드 테스트

환경 변수 오버라이드와 컨트롤러 조립을 검증합니다.
"""

import pytest

from warnmap.adapters.memory.source import InMemoryWarningSource
from warnmap.main import _b, build_controller, build_settings
from warnmap.settings import Settings


class TestBuildSettings:
    """환경 변수 설정 테스트"""

    def test_defaults(self, monkeypatch):
        """환경 변수가 없으면 기본값"""
        for name in ("WARNMAP_API_BASE_URL", "WARNMAP_PAGE_SIZE", "WARNMAP_DISCARD_STALE",
                     "WARNMAP_LABEL_LOCALE", "WARNMAP_AREA_LOCALE", "METRICS_ENABLED", "LOG_LEVEL"):
            monkeypatch.delenv(name, raising=False)

        s = build_settings()

        assert s.data_source.base_url == "http://localhost:8080"
        assert s.query.page_size == 10
        assert s.query.discard_stale_responses is True
        assert s.display.label_locale == "en"
        assert s.display.area_locale == "sv"
        assert s.observability.http_port == 8099

    def test_env_overrides(self, monkeypatch):
        """환경 변수 오버라이드"""
        monkeypatch.setenv("WARNMAP_API_BASE_URL", "http://warnings.local")
        monkeypatch.setenv("WARNMAP_API_TOKEN", "abc")
        monkeypatch.setenv("WARNMAP_API_TIMEOUT", "3")
        monkeypatch.setenv("WARNMAP_PAGE_SIZE", "0")
        monkeypatch.setenv("WARNMAP_DISCARD_STALE", "false")
        monkeypatch.setenv("WARNMAP_LABEL_LOCALE", "sv")
        monkeypatch.setenv("WARNMAP_HTTP_PORT", "9000")
        monkeypatch.setenv("METRICS_ENABLED", "0")
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")

        s = build_settings()

        assert s.data_source.base_url == "http://warnings.local"
        assert s.data_source.token == "abc"
        assert s.data_source.timeout_sec == 3
        assert s.query.page_size == 1
        assert s.query.discard_stale_responses is False
        assert s.display.label_locale == "sv"
        assert s.observability.http_port == 9000
        assert s.observability.metrics_enabled is False
        assert s.observability.log_level == "DEBUG"

    @pytest.mark.parametrize("value,expected", [("1", True), ("YES", True), ("on", True), ("no", False), ("", False)])
    def test_bool_parsing(self, monkeypatch, value, expected):
        """불리언 환경 변수 파싱"""
        monkeypatch.setenv("WARNMAP_TEST_FLAG", value)
        assert _b("WARNMAP_TEST_FLAG") is expected

    def test_build_controller(self):
        """설정으로 컨트롤러 조립"""
        s = Settings()
        s.query.page_size = 25
        s.query.discard_stale_responses = False
        s.display.label_locale = "sv"

        controller = build_controller(s, InMemoryWarningSource())

        assert controller.state.page_size == 25
        assert controller.discard_stale_responses is False
        assert controller.label_locale == "sv"
        assert controller.area_locale == "sv"
