import logging
from typing import Iterator

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from userposts.config import DATABASE_URL, DB_TIMEOUT

logger = logging.getLogger(__name__)

Base = declarative_base()


def create_db_engine(url: str = DATABASE_URL, timeout: float = DB_TIMEOUT) -> Engine:
    connect_args = {}
    if url.startswith("sqlite"):
        connect_args = {"check_same_thread": False, "timeout": timeout}

    return create_engine(url, connect_args=connect_args)


engine = create_db_engine()

session_local = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def init_database(bind: Engine = engine) -> None:
    """Create the users, posts and addresses tables if they are missing."""
    # models must be imported so their tables are registered on Base.metadata
    import userposts.models  # noqa: F401

    Base.metadata.create_all(bind=bind)

    with bind.connect() as conn:
        conn.execute(text("SELECT 1"))

    logger.info(f"Database initialized: {bind.url}")


def close_database(bind: Engine = engine) -> None:
    bind.dispose()
    logger.info("Database connections closed")


def get_db() -> Iterator[Session]:
    db = session_local()
    try:
        yield db
    finally:
        db.close()
