"""데이트 스폿 값 객체."""

from pydantic import BaseModel, ConfigDict, Field


class Spot(BaseModel):
    """플랜 생성에 입력되는 스폿.

    `genre`는 "ランチ,カフェ,記念日用"처럼 구분자로 이어진 자유 텍스트이며,
    파싱은 `dateplan.planner.genres.parse_genres`가 담당한다.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="스폿 고유 ID")
    name: str = Field(..., description="스폿 이름")
    area: str | None = Field(default=None, description="지역 라벨")
    genre: str | None = Field(default=None, description="구분자로 이어진 장르 원문")
    address: str | None = Field(default=None, description="주소")
    description: str | None = Field(default=None, description="설명")
    image_url: str | None = Field(default=None, description="대표 이미지 URL")
    budget: str | None = Field(default=None, description="예산 텍스트")
    reserve_url: str | None = Field(default=None, description="예약 링크")
    google_map_url: str | None = Field(default=None, description="구글 맵 링크")
