# app/db/session.py
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from app.core.config import get_settings
from app.core.logging import get_logger
from app.db.models import Base

logger = get_logger(__name__)

# Get database URL from settings
DATABASE_URL = get_settings().DATABASE_URL


def build_engine(database_url: str) -> Engine:
    """
    Creates the SQLAlchemy engine for the given URL.
    SQLite connections are shared across the threadpool FastAPI runs sync
    endpoints in, so the same-thread check is switched off for them.
    """
    if database_url.startswith("sqlite"):
        return create_engine(
            database_url,
            connect_args={"check_same_thread": False},
        )
    return create_engine(
        database_url,
        pool_pre_ping=True,
        pool_size=10,
        max_overflow=20
    )


# Create the SQLAlchemy engine.
engine = build_engine(DATABASE_URL)

# Create a configured "Session" class
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def init_db(bind: Engine = engine) -> None:
    """Creates the customers table if it does not exist yet."""
    logger.info("Ensuring database tables exist")
    Base.metadata.create_all(bind=bind)


# Dependency to get a DB session
def get_db():
    """
    FastAPI dependency that provides a SQLAlchemy database session.
    The session is committed when the request finishes, rolled back if the
    endpoint raised, and always closed.
    """
    db: Session = SessionLocal()
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()
