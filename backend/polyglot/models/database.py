"""Database configuration and session management.

This module provides:
- Async SQLAlchemy engine built from settings
- Session factory for database operations
- FastAPI dependency for request-scoped sessions
- Database initialization utility
"""

import logging
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession
from sqlalchemy.orm import sessionmaker, declarative_base
from polyglot.config.settings import settings

logger = logging.getLogger(__name__)

DATABASE_URL = settings.database_url

engine = create_async_engine(
    DATABASE_URL,
    echo=settings.DEBUG,
    future=True,
    pool_pre_ping=True,
)

AsyncSessionLocal = sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False
)

Base = declarative_base()


async def get_db():
    """Database dependency for FastAPI endpoints"""
    async with AsyncSessionLocal() as session:
        yield session


async def init_db():
    """Create tables defined in SQLAlchemy models if they don't exist."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database tables initialized successfully")
