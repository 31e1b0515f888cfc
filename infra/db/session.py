import logging
import os
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, DeclarativeBase
from app.settings import settings

logger = logging.getLogger(__name__)


def _sqlite_url(path: str) -> str:
    folder = os.path.dirname(os.path.abspath(path))
    os.makedirs(folder, exist_ok=True)
    return f"sqlite:///{path}"


# Request handlers run in FastAPI's threadpool, so one SQLite connection may be
# used from several threads.
engine = create_engine(
    _sqlite_url(settings.SQLITE_PATH),
    connect_args={"check_same_thread": False},
)
SessionLocal = sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)


class Base(DeclarativeBase):
    pass


def init_db():
    from infra.db.models import AnalysisRecord
    Base.metadata.create_all(bind=engine, tables=[AnalysisRecord.__table__])
    logger.info("Analysis store ready at %s", settings.SQLITE_PATH)
