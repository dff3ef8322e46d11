"""API 의존성 모음."""

from fastapi import Depends, Header, HTTPException, status
from sqlalchemy.orm import Session

from dateplan.core.config import get_settings
from dateplan.core.plan_templates import load_plan_templates
from dateplan.core.randomness import RandomSource, build_random_source
from dateplan.database import get_db
from dateplan.schemas.plan import PlanTemplate
from dateplan.services.spot_catalog import SpotCatalogProtocol, SqlSpotCatalog


def require_service_secret(
    x_service_secret: str | None = Header(default=None, alias="x-service-secret"),
) -> None:
    """서비스 간 인증을 위한 시크릿 헤더를 검증한다."""
    settings = get_settings()
    if not settings.SERVICE_SECRET:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="서비스 시크릿 설정이 없습니다.",
        )

    if x_service_secret != settings.SERVICE_SECRET:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="유효하지 않은 서비스 시크릿입니다.",
        )


def get_spot_catalog(db: Session = Depends(get_db)) -> SpotCatalogProtocol:  # noqa: B008
    """요청 세션에 묶인 스폿 카탈로그를 제공합니다."""
    return SqlSpotCatalog(db)


def get_plan_templates() -> list[PlanTemplate]:
    """설정된 템플릿 카탈로그를 제공합니다."""
    return load_plan_templates(get_settings().PLAN_TEMPLATES_PATH)


def get_random_source() -> RandomSource:
    """요청마다 새 난수 소스를 제공합니다."""
    return build_random_source()
