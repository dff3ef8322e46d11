"""지역별로 선택 가능한 템플릿을 고르는 필터."""

from __future__ import annotations

from typing import Sequence

from dateplan.core.logger import get_logger
from dateplan.core.randomness import RandomSource, build_random_source
from dateplan.planner.genres import filter_area_spots
from dateplan.planner.max_fill import generate_max_fill
from dateplan.schemas.plan import PlanTemplate
from dateplan.schemas.spot import Spot

logger = get_logger(__name__)


def is_template_satisfiable(
    template: PlanTemplate,
    spots: Sequence[Spot],
    area: str,
    *,
    rng: RandomSource | None = None,
) -> bool:
    """템플릿을 지역에서 미리 생성해 보고 부족한 장르가 없으면 True."""
    result = generate_max_fill(
        spots,
        area,
        template.id,
        template.name,
        template.steps,
        rng=rng,
    )
    return not result.missing_genres


def filter_enabled_templates(
    templates: Sequence[PlanTemplate],
    spots: Sequence[Spot],
    area: str,
    *,
    rng: RandomSource | None = None,
    strict: bool = True,
) -> list[PlanTemplate]:
    """지역에서 선택지로 노출할 템플릿 목록을 만든다.

    - auto 템플릿은 항상 맨 앞에 노출한다.
    - steps가 빈 일반 템플릿은 노출하지 않는다.
    - strict이면 이 지역에서 모든 스텝이 채워지는 템플릿만 남긴다.
    - 일반 템플릿은 이름순으로 정렬한다.
    """
    random_source = rng or build_random_source()
    area_spots = filter_area_spots(spots, area)

    auto = next((template for template in templates if template.is_auto), None)
    enabled: list[PlanTemplate] = []
    for template in templates:
        if template.is_auto or not template.steps:
            continue
        if strict and not is_template_satisfiable(template, area_spots, area, rng=random_source):
            logger.debug("Template %s is not satisfiable in area %s", template.id, area)
            continue
        enabled.append(template)

    enabled.sort(key=lambda template: template.name)
    return [auto, *enabled] if auto else enabled
