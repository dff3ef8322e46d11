"""애플리케이션 전역 설정을 관리하는 모듈."""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_DEFAULT_MAX_STEPS = 5
_MAX_STEPS_UPPER_BOUND = 20


def _split_csv(value: str) -> list[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


class Settings(BaseSettings):
    """환경 변수 기반 설정 모델."""

    DATABASE_URL: str = "sqlite:///./dateplan.db"
    SERVICE_SECRET: str = ""
    DOCS_ENABLED: bool = False
    EXPOSE_INTERNAL_ERRORS: bool = False
    CORS_ALLOW_ORIGINS: str = ""
    SECURITY_HEADERS_ENABLED: bool = True
    READINESS_TIMEOUT_SECONDS: int = 5
    PLAN_DEFAULT_MAX_STEPS: int = _DEFAULT_MAX_STEPS
    PLAN_PREFERRED_GENRES: str = "ランチ,体験施設,遊び,カフェ,ディナー,夜景,記念日用,クリスマスマーケット"
    PLAN_FALLBACK_GENRE: str = "おすすめ"
    PLAN_AUTO_TEMPLATE_NAME: str = "おまかせ"
    PLAN_TEMPLATE_STRICT_FILTER: bool = True
    PLAN_TEMPLATES_PATH: str | None = None

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("PLAN_DEFAULT_MAX_STEPS", mode="before")
    @classmethod
    def _clamp_plan_default_max_steps(cls, value: object) -> int:
        try:
            numeric = int(value) if value is not None else _DEFAULT_MAX_STEPS
        except (TypeError, ValueError):
            numeric = _DEFAULT_MAX_STEPS
        return min(_MAX_STEPS_UPPER_BOUND, max(1, numeric))

    @field_validator("PLAN_TEMPLATES_PATH", mode="before")
    @classmethod
    def _blank_templates_path_to_none(cls, value: object) -> object:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @property
    def preferred_genres(self) -> list[str]:
        """`PLAN_PREFERRED_GENRES`를 순서를 유지한 목록으로 반환한다."""
        return _split_csv(self.PLAN_PREFERRED_GENRES)

    @property
    def cors_origins(self) -> list[str]:
        return _split_csv(self.CORS_ALLOW_ORIGINS)


@lru_cache
def get_settings() -> Settings:
    """Settings 인스턴스를 반환한다. 최초 호출 시에만 생성되고 이후 캐싱된다."""
    return Settings()
