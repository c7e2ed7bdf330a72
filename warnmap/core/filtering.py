"""
Server-side warning filtering for warnmap.

This module implements the event-type / area-name filters and page slicing
that a warnings endpoint applies before returning a page of results.
"""

from typing import List, Optional, Sequence

from .features import DEFAULT_AREA_LOCALE
from .models import Warning

DEFAULT_PAGE_SIZE = 10


def _filter_by_area(warning: Warning, needle: str, area_locale: str) -> Optional[Warning]:
    """
    영향 지역 이름으로 경보를 좁힙니다.

    일치하는 영역만 남기고, 각 영역에는 일치하는 영향 지역만 남깁니다.
    일치하는 영역이 없으면 None을 반환합니다.
    """
    matching_areas = []
    for area in warning.warning_areas:
        matching_affected = [
            a for a in area.affected_areas
            if needle in a.label(area_locale).lower()
        ]
        if matching_affected:
            matching_areas.append(area.model_copy(update={"affected_areas": matching_affected}))

    if not matching_areas:
        return None
    return warning.model_copy(update={"warning_areas": matching_areas})


def filter_warnings(
    warnings: Sequence[Warning],
    event_type: str = "",
    area_name: str = "",
    *,
    area_locale: str = DEFAULT_AREA_LOCALE,
) -> List[Warning]:
    """
    이벤트 유형과 지역 이름으로 경보를 필터링합니다.

    Args:
        warnings: 전체 경보 목록 (변경되지 않음)
        event_type: 이벤트 코드 (빈 문자열이면 필터 없음, 정확히 일치)
        area_name: 지역 이름 (빈 문자열이면 필터 없음, 대소문자 무시 부분 일치)
        area_locale: 지역 이름 비교에 사용할 언어

    Returns:
        필터링된 경보 목록
    """
    needle = area_name.lower()
    result = []
    for warning in warnings:
        if event_type and warning.event.code != event_type:
            continue
        if needle:
            narrowed = _filter_by_area(warning, needle, area_locale)
            if narrowed is not None:
                result.append(narrowed)
            continue
        result.append(warning)
    return result


def paginate(items: Sequence[Warning], page: int, page_size: int) -> List[Warning]:
    """1부터 시작하는 페이지 번호로 목록을 자릅니다. 범위를 벗어나면 빈 목록."""
    if page < 1:
        page = 1
    if page_size < 1:
        page_size = DEFAULT_PAGE_SIZE
    start = (page - 1) * page_size
    return list(items[start:start + page_size])


def filter_and_paginate(
    warnings: Sequence[Warning],
    event_type: str = "",
    area_name: str = "",
    page: int = 1,
    page_size: int = DEFAULT_PAGE_SIZE,
    *,
    area_locale: str = DEFAULT_AREA_LOCALE,
) -> List[Warning]:
    """필터링 후 요청한 페이지를 반환합니다."""
    filtered = filter_warnings(warnings, event_type, area_name, area_locale=area_locale)
    return paginate(filtered, page, page_size)
