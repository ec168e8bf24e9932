"""Tool descriptor store — read-only catalog queries."""
import logging
from typing import List

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from .models import Tool
from .tools.registry import ToolDescriptor

logger = logging.getLogger(__name__)


def to_descriptor(row: Tool) -> ToolDescriptor:
    return ToolDescriptor(
        id=str(row.id),
        name=row.name,
        description=row.description or "",
        category=row.category or "",
        config=row.config or {},
    )


async def fetch_active_tools(db: AsyncSession) -> List[ToolDescriptor]:
    """Active tools ordered by name. A failed query yields an empty catalog."""
    try:
        result = await db.execute(
            select(Tool).where(Tool.is_active.is_(True)).order_by(Tool.name)
        )
        rows = result.scalars().all()
    except Exception as e:
        logger.error(f"Error fetching tools: {e}", exc_info=True)
        return []
    return [to_descriptor(row) for row in rows]
