"""Shared fixtures for the tool engine tests."""
import random
from unittest.mock import AsyncMock, MagicMock

import pytest

from portfolio.tools import ExecutionContext, ResultCache, ToolDescriptor


class ScriptedRandom(random.Random):
    """random() returns the given draws in order."""

    def __init__(self, draws):
        super().__init__(0)
        self._draws = list(draws)

    def random(self):
        return self._draws.pop(0)


@pytest.fixture
def capabilities():
    caps = MagicMock()
    caps.invoke = AsyncMock(return_value={})
    return caps


@pytest.fixture
def ctx(capabilities):
    return ExecutionContext(rng=random.Random(1234), capabilities=capabilities)


@pytest.fixture
def cache():
    return ResultCache()


@pytest.fixture
def make_tool():
    def _make(category, tool_id="t1", config=None, name="Outil"):
        return ToolDescriptor(id=tool_id, name=name, description="", category=category, config=config or {})
    return _make
