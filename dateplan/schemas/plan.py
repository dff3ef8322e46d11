"""플랜 템플릿/생성 결과 및 API 요청·응답 스키마."""

from pydantic import BaseModel, ConfigDict, Field

from dateplan.schemas.spot import Spot

AUTO_TEMPLATE_ID = "auto"


class PlanTemplate(BaseModel):
    """이름이 붙은 장르 스텝 목록.

    id가 `auto`이고 steps가 비어 있으면 다양성 모드를 의미한다.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1, description="템플릿 ID")
    name: str = Field(..., description="표시용 템플릿 이름")
    steps: list[str] = Field(default_factory=list, description="순서가 있는 필수 장르 목록")

    @property
    def is_auto(self) -> bool:
        return self.id == AUTO_TEMPLATE_ID


class PlanItem(BaseModel):
    """플랜의 한 스텝."""

    model_config = ConfigDict(frozen=True)

    step_index: int = Field(..., ge=0, description="0부터 시작하는 스텝 위치")
    step_genre: str = Field(..., description="이 스텝에 배정된 장르")
    matched_genre: str = Field(..., description="선택 근거가 된 장르 (폴백 시 센티널 값)")
    spot: Spot = Field(..., description="선택된 스폿")
    spot_genres: list[str] = Field(default_factory=list, description="스폿이 가진 전체 장르")


class GeneratedPlan(BaseModel):
    """생성된 플랜."""

    model_config = ConfigDict(frozen=True)

    area: str = Field(..., description="지역 라벨")
    template_id: str = Field(..., description="사용된 템플릿 ID")
    template_name: str = Field(..., description="사용된 템플릿 이름")
    items: list[PlanItem] = Field(default_factory=list, description="스텝 순서의 플랜 항목")
    missing_genres: list[str] = Field(default_factory=list, description="채우지 못한 장르")

    @property
    def spot_ids(self) -> list[str]:
        return [item.spot.id for item in self.items]


class PlanRequest(BaseModel):
    """플랜 생성 요청."""

    area: str = Field(..., min_length=1, description="플랜을 만들 지역")
    template_id: str = Field(default=AUTO_TEMPLATE_ID, description="템플릿 ID (기본: auto)")
    max_steps: int | None = Field(default=None, ge=1, le=20, description="auto 모드 최대 스텝 수")


class PlanResponse(BaseModel):
    """플랜 생성 응답. 지역에 스폿이 없으면 plan은 null."""

    plan: GeneratedPlan | None = Field(default=None, description="생성된 플랜")
    message: str | None = Field(default=None, description="플랜을 만들 수 없을 때의 안내 문구")


class AreaListResponse(BaseModel):
    """지역 목록 응답."""

    areas: list[str] = Field(default_factory=list, description="정렬된 지역 라벨 목록")


class AreaDetailResponse(BaseModel):
    """지역별 장르와 선택 가능한 템플릿."""

    area: str = Field(..., description="지역 라벨")
    genres: list[str] = Field(default_factory=list, description="지역에 등록된 장르")
    templates: list[PlanTemplate] = Field(default_factory=list, description="선택 가능한 템플릿")


class TemplateListResponse(BaseModel):
    """템플릿 카탈로그 응답."""

    templates: list[PlanTemplate] = Field(default_factory=list, description="전체 템플릿")
