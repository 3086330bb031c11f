from sqlalchemy import create_engine, inspect
from sqlalchemy.orm import declarative_base, sessionmaker
import logging

from .config import settings

logger = logging.getLogger(__name__)

SQLALCHEMY_DATABASE_URL = settings.DATABASE_URL

engine = create_engine(
    SQLALCHEMY_DATABASE_URL,
    connect_args={"check_same_thread": False} if SQLALCHEMY_DATABASE_URL.startswith("sqlite") else {},
)
SessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False)
Base = declarative_base()


def init_db():
    # Import here to avoid circular dependency
    from .models import User, Character  # noqa: F401

    # The case-insensitive username index is declared on the model and
    # created together with the tables
    Base.metadata.create_all(bind=engine)
    logger.info("Database initialized: tables=%s", sorted(inspect(engine).get_table_names()))


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
