# src/backend/utils/database.py
import logging
from typing import Any, Dict

from dotenv import load_dotenv
from fastapi import HTTPException
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker
from sqlalchemy.orm import declarative_base
from sqlalchemy.pool import NullPool

from src.backend.config import settings

logger = logging.getLogger(__name__)
logging.basicConfig(level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO))

# Export .env into os.environ too, for anything that reads the process env directly
load_dotenv()

DATABASE_URL = settings.database_url


def _engine_kwargs(url: str) -> Dict[str, Any]:
    """
    Pool options for server databases. SQLite (local runs, tests) gets a
    connection per checkout instead, since its driver has no real pool.
    """
    kwargs: Dict[str, Any] = {
        "echo": settings.DB_ECHO,  # Logs all SQL queries if True
        "connect_args": {"timeout": settings.DB_TIMEOUT},
    }
    if url.startswith("sqlite"):
        kwargs["poolclass"] = NullPool
        return kwargs

    kwargs.update(
        pool_size=settings.DB_POOL_SIZE,
        max_overflow=settings.DB_MAX_OVERFLOW,
        pool_pre_ping=True,  # Ensures the connections are valid before using them
    )
    return kwargs


try:
    engine = create_async_engine(DATABASE_URL, **_engine_kwargs(DATABASE_URL))
    # never log the password
    logger.info("Database engine created for %s", engine.url.render_as_string(hide_password=True))
except SQLAlchemyError as e:
    logger.error(f"Error creating database engine: {e}")
    raise Exception(f"Database connection failed: {e}")

AsyncSessionLocal = async_sessionmaker(
    engine,
    class_=AsyncSession,
    autoflush=False,
    autocommit=False,
    expire_on_commit=False,  # Don't expire objects after commit
)

# Base class for SQLAlchemy ORM models
Base = declarative_base()


# Dependency to retrieve a database session in FastAPI
# Ensures the session is properly closed after use
async def get_db():
    try:
        async with AsyncSessionLocal() as session:
            yield session
    except SQLAlchemyError as e:
        logger.error(f"Error: while interacting with the database: {e}")
        raise HTTPException(status_code=500, detail="Database operation failed")
