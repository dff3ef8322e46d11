"""스폿 장르 파싱과 지역/장르 파생 목록."""

from __future__ import annotations

import re
from typing import Iterable

from dateplan.schemas.spot import Spot

# 반각 쉼표, 전각 쉼표(，), 일본어 읽기점(、)
_GENRE_DELIMITERS = re.compile(r"[,，、]")


def parse_genres(raw: str | None) -> list[str]:
    """장르 원문을 토큰 목록으로 변환합니다.

    세 가지 구분자로 나누고 앞뒤 공백을 제거한 뒤 빈 토큰은 버립니다.
    등장 순서를 유지하며 중복은 제거하지 않습니다.

    Args:
        raw: 스폿의 장르 원문 (None 가능)

    Returns:
        장르 토큰 목록
    """
    if not raw:
        return []
    tokens = (token.strip() for token in _GENRE_DELIMITERS.split(raw))
    return [token for token in tokens if token]


def filter_area_spots(spots: Iterable[Spot], area: str) -> list[Spot]:
    """지역 라벨이 정확히 일치하는 스폿만 남긴다. area가 없는 스폿은 빈 문자열로 취급한다."""
    return [spot for spot in spots if (spot.area or "") == area]


def list_areas(spots: Iterable[Spot]) -> list[str]:
    """스폿에 등록된 지역 라벨을 중복 없이 정렬해 반환한다."""
    return sorted({spot.area for spot in spots if spot.area})


def list_area_genres(spots: Iterable[Spot], area: str) -> list[str]:
    """지역 내 스폿들이 가진 장르를 중복 없이 정렬해 반환한다."""
    genres: set[str] = set()
    for spot in filter_area_spots(spots, area):
        genres.update(parse_genres(spot.genre))
    return sorted(genres)
