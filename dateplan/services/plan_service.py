"""API에서 사용하는 플랜 생성 오케스트레이션."""

from __future__ import annotations

from typing import Sequence

from dateplan.core.config import Settings, get_settings
from dateplan.core.logger import get_logger
from dateplan.core.plan_templates import find_template
from dateplan.core.randomness import RandomSource
from dateplan.planner.diverse import generate_diverse
from dateplan.planner.eligibility import filter_enabled_templates
from dateplan.planner.genres import filter_area_spots, list_area_genres
from dateplan.planner.max_fill import generate_max_fill
from dateplan.schemas.plan import AreaDetailResponse, GeneratedPlan, PlanRequest, PlanResponse, PlanTemplate
from dateplan.schemas.spot import Spot

logger = get_logger(__name__)

NO_SPOTS_MESSAGE = "このエリアではプランを作れるスポットが不足しています（まずスポットを追加してください）。"


class TemplateNotFoundError(LookupError):
    """요청한 템플릿 ID가 카탈로그에 없을 때 발생합니다."""

    def __init__(self, template_id: str) -> None:
        super().__init__(f"Unknown plan template: {template_id}")
        self.template_id = template_id


def _generate_auto(
    spots: Sequence[Spot],
    area: str,
    max_steps: int | None,
    rng: RandomSource,
    settings: Settings,
) -> GeneratedPlan | None:
    return generate_diverse(
        spots,
        area,
        max_steps or settings.PLAN_DEFAULT_MAX_STEPS,
        rng=rng,
        preferred_genres=settings.preferred_genres,
        fallback_genre=settings.PLAN_FALLBACK_GENRE,
        template_name=settings.PLAN_AUTO_TEMPLATE_NAME,
    )


def build_plan(
    spots: Sequence[Spot],
    templates: Sequence[PlanTemplate],
    request: PlanRequest,
    *,
    rng: RandomSource,
    settings: Settings | None = None,
) -> GeneratedPlan | None:
    """요청한 모드로 플랜을 생성한다.

    - auto: 다양성 모드. 지역에 스폿이 없으면 None.
    - 그 외: 템플릿 채우기 모드로 한 번 생성한다. strict 필터가 켜져 있고 결과에
      부족 장르가 있으면 선택지에서 빠진 템플릿으로 보고 auto 모드로 대체한다.

    Raises:
        TemplateNotFoundError: 템플릿 ID가 카탈로그에 없을 때
    """
    resolved_settings = settings or get_settings()

    template = find_template(templates, request.template_id)
    if template is None:
        raise TemplateNotFoundError(request.template_id)

    if template.is_auto:
        return _generate_auto(spots, request.area, request.max_steps, rng, resolved_settings)

    plan = generate_max_fill(
        filter_area_spots(spots, request.area),
        request.area,
        template.id,
        template.name,
        template.steps,
        rng=rng,
    )

    if resolved_settings.PLAN_TEMPLATE_STRICT_FILTER and plan.missing_genres:
        logger.warning(
            "Template %s left %s unfilled in area %s; falling back to auto",
            template.id,
            plan.missing_genres,
            request.area,
        )
        return _generate_auto(spots, request.area, request.max_steps, rng, resolved_settings)

    return plan


def generate_plan_response(
    spots: Sequence[Spot],
    templates: Sequence[PlanTemplate],
    request: PlanRequest,
    *,
    rng: RandomSource,
    settings: Settings | None = None,
) -> PlanResponse:
    """플랜을 생성해 API 응답 형태로 감싼다. 플랜이 없으면 안내 문구를 채운다."""
    plan = build_plan(spots, templates, request, rng=rng, settings=settings)
    if plan is None:
        return PlanResponse(plan=None, message=NO_SPOTS_MESSAGE)

    logger.info(
        "Plan generated: area=%s template=%s items=%d missing=%d",
        plan.area,
        plan.template_id,
        len(plan.items),
        len(plan.missing_genres),
    )
    return PlanResponse(plan=plan)


def describe_area(
    spots: Sequence[Spot],
    templates: Sequence[PlanTemplate],
    area: str,
    *,
    rng: RandomSource,
    settings: Settings | None = None,
) -> AreaDetailResponse:
    """지역에 등록된 장르와 선택 가능한 템플릿을 계산한다."""
    resolved_settings = settings or get_settings()
    enabled = filter_enabled_templates(
        templates,
        spots,
        area,
        rng=rng,
        strict=resolved_settings.PLAN_TEMPLATE_STRICT_FILTER,
    )
    return AreaDetailResponse(area=area, genres=list_area_genres(spots, area), templates=enabled)
