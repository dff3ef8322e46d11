"""템플릿 스텝을 가능한 만큼 채우는 플랜 생성기."""

from __future__ import annotations

from typing import Sequence

from dateplan.core.logger import get_logger
from dateplan.core.randomness import RandomSource, build_random_source, pick_random
from dateplan.planner.genres import filter_area_spots, parse_genres
from dateplan.schemas.plan import GeneratedPlan, PlanItem
from dateplan.schemas.spot import Spot

logger = get_logger(__name__)


def generate_max_fill(
    spots: Sequence[Spot],
    area: str,
    template_id: str,
    template_name: str,
    steps: Sequence[str],
    *,
    rng: RandomSource | None = None,
) -> GeneratedPlan:
    """지정 템플릿으로 "만들 수 있는 범위에서 최대한" 플랜을 생성합니다.

    - 각 스텝 장르를 가진 미사용 스폿 중 하나를 무작위로 고릅니다.
    - 후보가 없는 스텝은 `missing_genres`에 기록하고 건너뜁니다.
      이때 `step_index`는 템플릿상의 위치를 그대로 유지하므로 연속되지 않을 수 있습니다.
    - 한 플랜 안에서 같은 스폿은 두 번 쓰이지 않습니다.

    Args:
        spots: 스폿 카탈로그 (전체 또는 지역 필터 결과)
        area: 대상 지역
        template_id: 템플릿 ID
        template_name: 템플릿 이름
        steps: 순서가 있는 필수 장르 목록
        rng: 후보 선택에 사용할 난수 소스

    Returns:
        생성된 플랜 (항목이 0개일 수 있으나 None은 반환하지 않음)
    """
    random_source = rng or build_random_source()
    area_spots = filter_area_spots(spots, area)
    spot_genres = {spot.id: parse_genres(spot.genre) for spot in area_spots}

    used: set[str] = set()
    items: list[PlanItem] = []
    missing_genres: list[str] = []

    for index, step_genre in enumerate(steps):
        candidates = [
            spot for spot in area_spots if spot.id not in used and step_genre in spot_genres[spot.id]
        ]
        picked = pick_random(candidates, random_source)

        if picked is None:
            logger.debug("No candidate for step %d (%s) in area %s", index, step_genre, area)
            missing_genres.append(step_genre)
            continue

        used.add(picked.id)
        items.append(
            PlanItem(
                step_index=index,
                step_genre=step_genre,
                matched_genre=step_genre,
                spot=picked,
                spot_genres=spot_genres[picked.id],
            )
        )

    return GeneratedPlan(
        area=area,
        template_id=template_id,
        template_name=template_name,
        items=items,
        missing_genres=missing_genres,
    )
