"""Tool executor — resolves the category strategy, runs it, caches the envelope."""
import inspect
import logging
import time
from typing import Any, Dict, Optional

from .cache import ResultCache, ResultEnvelope
from .forms import parse_input
from .registry import ExecutionContext, ToolDescriptor, resolve

logger = logging.getLogger(__name__)


async def execute_tool(
    tool: ToolDescriptor,
    form_data: Optional[Dict[str, Any]],
    cache: ResultCache,
    ctx: Optional[ExecutionContext] = None,
) -> ResultEnvelope:
    """Execute a tool with raw form input and store the outcome in `cache`.

    Input is validated against the category's form contract first; a
    ValidationError propagates to the caller and nothing is cached. Any
    failure inside the strategy (remote capability errors included) is logged
    and replaced by the category's zero-value error payload, so this only
    raises for invalid input.
    """
    defn = resolve(tool.category)
    data = parse_input(defn.fields, form_data)
    ctx = ctx or ExecutionContext()

    seq = cache.next_sequence(tool.id)
    arg_str = ", ".join(f"{k}={v!r}" for k, v in data.items())
    logger.info(f"Executing tool: {tool.id} [{defn.key}]({arg_str}) seq={seq}")
    t0 = time.monotonic()

    try:
        payload = defn.handler(tool.config, data, ctx)
        if inspect.isawaitable(payload):
            payload = await payload
    except Exception as e:
        logger.error(f"Tool {tool.id} [{defn.key}] failed: {e}", exc_info=True)
        payload = defn.on_error(data)

    envelope = ResultEnvelope(tool_id=tool.id, category=defn.key, payload=payload, sequence=seq)
    cache.set(tool.id, envelope)

    elapsed = time.monotonic() - t0
    outcome = "error" if envelope.is_error else "ok"
    logger.info(f"Tool {tool.id}: {elapsed:.2f}s -> {outcome}")
    return envelope
