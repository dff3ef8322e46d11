"""데이트 플랜 생성 API."""

from fastapi import APIRouter, Depends, HTTPException, status

from dateplan.api.dependencies import (
    get_plan_templates,
    get_random_source,
    get_spot_catalog,
    require_service_secret,
)
from dateplan.core.logger import get_logger
from dateplan.core.randomness import RandomSource
from dateplan.planner.genres import list_areas
from dateplan.schemas.plan import (
    AreaDetailResponse,
    AreaListResponse,
    PlanRequest,
    PlanResponse,
    PlanTemplate,
    TemplateListResponse,
)
from dateplan.services.plan_service import TemplateNotFoundError, describe_area, generate_plan_response
from dateplan.services.spot_catalog import SpotCatalogProtocol

router = APIRouter(prefix="/api/v1", tags=["plans"], dependencies=[Depends(require_service_secret)])
logger = get_logger(__name__)

PLAN_RESPONSE_EXAMPLES = {
    "generated": {
        "summary": "플랜 생성 성공",
        "description": "지역에 스폿이 있어 플랜이 생성된 경우",
        "value": {
            "plan": {
                "area": "横浜",
                "template_id": "auto",
                "template_name": "おまかせ",
                "items": [
                    {
                        "step_index": 0,
                        "step_genre": "ランチ",
                        "matched_genre": "ランチ",
                        "spot": {"id": "1", "name": "港の見えるレストラン", "area": "横浜", "genre": "ランチ,ディナー"},
                        "spot_genres": ["ランチ", "ディナー"],
                    }
                ],
                "missing_genres": ["ディナー"],
            },
            "message": None,
        },
    },
    "no_spots": {
        "summary": "스폿 없음",
        "description": "지역에 스폿이 하나도 없어 플랜을 만들 수 없는 경우",
        "value": {
            "plan": None,
            "message": "このエリアではプランを作れるスポットが不足しています（まずスポットを追加してください）。",
        },
    },
}


@router.get("/areas", response_model=AreaListResponse)
def get_areas(catalog: SpotCatalogProtocol = Depends(get_spot_catalog)) -> AreaListResponse:  # noqa: B008
    """스폿이 등록된 지역 목록을 반환한다."""
    return AreaListResponse(areas=list_areas(catalog.list_spots()))


@router.get("/areas/{area}", response_model=AreaDetailResponse)
def get_area_detail(
    area: str,
    catalog: SpotCatalogProtocol = Depends(get_spot_catalog),  # noqa: B008
    templates: list[PlanTemplate] = Depends(get_plan_templates),  # noqa: B008
    rng: RandomSource = Depends(get_random_source),  # noqa: B008
) -> AreaDetailResponse:
    """지역에 등록된 장르와 선택 가능한 템플릿을 반환한다."""
    return describe_area(catalog.list_spots(area=area), templates, area, rng=rng)


@router.get("/templates", response_model=TemplateListResponse)
def get_templates(templates: list[PlanTemplate] = Depends(get_plan_templates)) -> TemplateListResponse:  # noqa: B008
    """전체 템플릿 카탈로그를 반환한다."""
    return TemplateListResponse(templates=templates)


@router.post(
    "/plans",
    response_model=PlanResponse,
    status_code=status.HTTP_200_OK,
    responses={
        200: {
            "description": "플랜 생성 결과",
            "content": {"application/json": {"examples": PLAN_RESPONSE_EXAMPLES}},
        },
        404: {"description": "존재하지 않는 템플릿"},
    },
)
def create_plan(
    request: PlanRequest,
    catalog: SpotCatalogProtocol = Depends(get_spot_catalog),  # noqa: B008
    templates: list[PlanTemplate] = Depends(get_plan_templates),  # noqa: B008
    rng: RandomSource = Depends(get_random_source),  # noqa: B008
) -> PlanResponse:
    """지역과 템플릿으로 데이트 플랜을 생성한다."""
    logger.info("Plan request received: area=%s template=%s", request.area, request.template_id)
    try:
        return generate_plan_response(catalog.list_spots(area=request.area), templates, request, rng=rng)
    except TemplateNotFoundError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"존재하지 않는 템플릿입니다: {exc.template_id}",
        ) from exc
