# dateplan/models/spot.py
from datetime import datetime

from sqlalchemy import DateTime, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from dateplan.models.base import Base


# Spot 테이블 정의 (외부 백엔드가 관리, 이 서비스는 읽기만 함)
class SpotRecord(Base):
    __tablename__ = "spots"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    name: Mapped[str] = mapped_column(String(200), nullable=False)

    # 예: 横浜
    area: Mapped[str | None] = mapped_column(String(100), index=True, nullable=True)

    # 예: "ランチ,カフェ,記念日用"
    genre: Mapped[str | None] = mapped_column(Text, nullable=True)

    address: Mapped[str | None] = mapped_column(Text, nullable=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    image_url: Mapped[str | None] = mapped_column(Text, nullable=True)
    budget: Mapped[str | None] = mapped_column(String(100), nullable=True)
    reserve_url: Mapped[str | None] = mapped_column(Text, nullable=True)
    google_map_url: Mapped[str | None] = mapped_column(Text, nullable=True)

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())

    def __repr__(self):
        return f"<SpotRecord(id={self.id}, name={self.name}, area={self.area})>"
