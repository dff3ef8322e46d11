# dateplan/models/base.py
from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """모든 SQLAlchemy 모델의 기반이 되는 선언적 기본 클래스.

    스폿 테이블은 외부 백엔드가 소유하며, 이 서비스는 같은 메타데이터로
    읽기 전용 매핑만 선언합니다.
    """

    pass
