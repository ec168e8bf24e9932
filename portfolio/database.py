"""Async database engine, session factory, and initialization."""
import json
import logging
import os
from pathlib import Path

from sqlalchemy import func, select
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import create_async_engine, async_sessionmaker, AsyncSession
from sqlalchemy.orm import DeclarativeBase

from .config import settings

logger = logging.getLogger(__name__)

DATABASE_URL = settings.database_url

engine = create_async_engine(DATABASE_URL, echo=False)
async_session_factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


class Base(DeclarativeBase):
    pass


async def get_db():
    """FastAPI dependency: yield an async DB session."""
    async with async_session_factory() as session:
        yield session


async def init_db():
    """Create all tables and seed the tool catalog if it is empty."""
    db_path = make_url(DATABASE_URL).database
    if DATABASE_URL.startswith("sqlite") and db_path and db_path != ":memory:":
        os.makedirs(Path(db_path).parent, exist_ok=True)

    async with engine.begin() as conn:
        from . import models  # noqa: ensure models are registered
        await conn.run_sync(Base.metadata.create_all)

    logger.info(f"Database initialized at {DATABASE_URL}")
    async with async_session_factory() as db:
        await seed_tools(db, Path(settings.seed_path))


async def seed_tools(db: AsyncSession, seed_path: Path) -> int:
    """One-time import of the tool catalog from a JSON seed file."""
    from .models import Tool

    if not seed_path.exists():
        return 0

    count = (await db.execute(select(func.count()).select_from(Tool))).scalar_one()
    if count:
        return 0  # already seeded

    with open(seed_path, encoding="utf-8") as f:
        entries = json.load(f)

    for entry in entries:
        db.add(Tool(
            id=entry["id"],
            name=entry["name"],
            description=entry.get("description", ""),
            category=entry["category"],
            config=entry.get("config") or {},
            is_active=entry.get("is_active", True),
        ))
    await db.commit()
    logger.info(f"Seeded {len(entries)} tools from {seed_path.name}")
    return len(entries)
