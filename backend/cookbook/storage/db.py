from sqlalchemy import Engine
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

from cookbook.config import settings
from cookbook.logging import get_logger

logger = get_logger(__name__)


def build_engine(database_url: str | None = None) -> Engine:
    url = database_url or settings.database_url
    if url.startswith("sqlite"):
        # In-memory SQLite must share one connection across the threadpool.
        kwargs = {"connect_args": {"check_same_thread": False}}
        if url in ("sqlite://", "sqlite:///:memory:"):
            kwargs["poolclass"] = StaticPool
        return create_engine(url, **kwargs)
    return create_engine(url, pool_pre_ping=True)


def create_db_and_tables(engine: Engine) -> None:
    SQLModel.metadata.create_all(engine)
    logger.info("catalog.sql.created url=%s", engine.url.render_as_string(hide_password=True))


def get_session(engine: Engine) -> Session:
    return Session(engine)
