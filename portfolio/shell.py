"""Interaction shell — the Tools page state: catalog, per-tool forms, cached results."""
import logging
import random
from typing import Any, Dict, List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from .store import fetch_active_tools
from .tools import (
    CapabilityClient, ExecutionContext, ResultCache, ResultEnvelope, ToolDescriptor,
    execute_tool, resolve,
)

logger = logging.getLogger(__name__)


class ToolNotFound(LookupError):
    pass


class ToolShell:
    """Owns the result cache for its lifetime; the executor is the only writer."""

    def __init__(self, capabilities: Optional[CapabilityClient] = None, rng: Optional[random.Random] = None):
        self.cache = ResultCache()
        self.ctx = ExecutionContext(rng=rng or random.Random(), capabilities=capabilities)
        self._tools: Dict[str, ToolDescriptor] = {}

    async def load(self, db: AsyncSession) -> List[ToolDescriptor]:
        self.set_tools(await fetch_active_tools(db))
        logger.info(f"Tool catalog loaded: {len(self._tools)} tools")
        return self.tools

    def set_tools(self, tools: List[ToolDescriptor]):
        self._tools = {t.id: t for t in tools}

    @property
    def tools(self) -> List[ToolDescriptor]:
        return list(self._tools.values())

    def get_tool(self, tool_id: str) -> ToolDescriptor:
        tool = self._tools.get(tool_id)
        if tool is None:
            raise ToolNotFound(tool_id)
        return tool

    def catalog(self) -> List[Dict[str, Any]]:
        """Descriptors with their category's icon, color and form fields."""
        entries = []
        for tool in self._tools.values():
            entry = tool.to_dict()
            entry.update(resolve(tool.category).describe())
            entries.append(entry)
        return entries

    async def submit(self, tool_id: str, form_data: Optional[Dict[str, Any]] = None) -> ResultEnvelope:
        return await execute_tool(self.get_tool(tool_id), form_data, self.cache, self.ctx)

    def result(self, tool_id: str) -> Optional[ResultEnvelope]:
        return self.cache.get(tool_id)

    def view(self, tool_id: str) -> List[str]:
        envelope = self.cache.get(tool_id)
        if envelope is None:
            return []
        return resolve(self.get_tool(tool_id).category).view(envelope.payload)

    def close(self):
        self.cache.clear()
        logger.info("Tool shell closed, results cleared")
