from sqlmodel import SQLModel, Session, create_engine

from menucost.config import settings


def _connect_args(url: str) -> dict:
    # FastAPI runs sync handlers on a threadpool
    if url.startswith("sqlite"):
        return {"check_same_thread": False}
    return {}


engine = create_engine(
    settings.database_url,
    pool_pre_ping=True,
    connect_args=_connect_args(settings.database_url),
)


def create_db_and_tables() -> None:
    # Import for side effect: registers tables on SQLModel.metadata
    from menucost.storage import models  # noqa: F401

    SQLModel.metadata.create_all(engine)


def get_session() -> Session:
    return Session(engine)
