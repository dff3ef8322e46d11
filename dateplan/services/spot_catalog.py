"""스폿 카탈로그 조회 인터페이스와 SQLAlchemy 구현."""

from abc import ABC, abstractmethod

from sqlalchemy import select
from sqlalchemy.orm import Session

from dateplan.core.logger import get_logger
from dateplan.models.spot import SpotRecord
from dateplan.schemas.spot import Spot

logger = get_logger(__name__)


class SpotCatalogProtocol(ABC):
    """스폿 카탈로그 읽기를 위한 인터페이스를 정의합니다."""

    @abstractmethod
    def list_spots(self, area: str | None = None) -> list[Spot]:
        """스폿 목록을 조회합니다.

        Args:
            area: 지정하면 해당 지역의 스폿만 반환

        Returns:
            등록 순서의 스폿 목록
        """
        raise NotImplementedError


def record_to_spot(record: SpotRecord) -> Spot:
    """ORM 레코드를 `Spot` 값 객체로 변환한다."""
    return Spot(
        id=str(record.id),
        name=record.name,
        area=record.area,
        genre=record.genre,
        address=record.address,
        description=record.description,
        image_url=record.image_url,
        budget=record.budget,
        reserve_url=record.reserve_url,
        google_map_url=record.google_map_url,
    )


class SqlSpotCatalog(SpotCatalogProtocol):
    """`spots` 테이블에서 스폿을 읽는 카탈로그."""

    def __init__(self, db: Session) -> None:
        self._db = db

    def list_spots(self, area: str | None = None) -> list[Spot]:
        stmt = select(SpotRecord).order_by(SpotRecord.created_at, SpotRecord.id)
        if area is not None:
            stmt = stmt.where(SpotRecord.area == area)

        records = self._db.scalars(stmt).all()
        logger.debug("Loaded %d spots (area=%s)", len(records), area)
        return [record_to_spot(record) for record in records]
