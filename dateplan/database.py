"""스폿 DB 세션 관리."""

from functools import lru_cache
from typing import Iterator

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import Session, sessionmaker

from dateplan.core.config import get_settings


@lru_cache
def get_engine() -> Engine:
    """설정된 DB에 대한 엔진을 만든다. 최초 호출 시에만 생성된다.

    동기 엔드포인트는 스레드풀에서 실행되므로 SQLite는 스레드 검사를 끈다.
    """
    url = make_url(get_settings().DATABASE_URL)
    connect_args = {"check_same_thread": False} if url.get_backend_name() == "sqlite" else {}
    return create_engine(url, pool_pre_ping=True, connect_args=connect_args)


@lru_cache
def get_session_factory() -> sessionmaker[Session]:
    return sessionmaker(bind=get_engine(), autoflush=False, expire_on_commit=False)


def get_db() -> Iterator[Session]:
    """요청 하나 동안 사용할 읽기 세션을 제공하는 FastAPI 의존성."""
    with get_session_factory()() as db:
        yield db
