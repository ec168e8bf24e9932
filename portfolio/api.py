"""REST API routes: tool catalog and execution."""
import logging
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Body, Depends, HTTPException, Request
from pydantic import BaseModel

from .shell import ToolNotFound, ToolShell
from .tools import ResultEnvelope, ValidationError

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api")


# ── Pydantic schemas ──────────────────────────────────────────

class ResultOut(BaseModel):
    tool_id: str
    category: str
    result: Any = None
    is_error: bool
    view: List[str]


def get_shell(request: Request) -> ToolShell:
    """FastAPI dependency: the shell owned by the running app."""
    return request.app.state.shell


def _result_out(shell: ToolShell, envelope: ResultEnvelope) -> ResultOut:
    return ResultOut(
        tool_id=envelope.tool_id,
        category=envelope.category,
        result=envelope.payload,
        is_error=envelope.is_error,
        view=shell.view(envelope.tool_id),
    )


# ── Tools ─────────────────────────────────────────────────────

@router.get("/tools")
async def list_tools(shell: ToolShell = Depends(get_shell)):
    return shell.catalog()


@router.post("/tools/{tool_id}/run", response_model=ResultOut)
async def run_tool(
    tool_id: str,
    form_data: Optional[Dict[str, Any]] = Body(default=None),
    shell: ToolShell = Depends(get_shell),
):
    try:
        envelope = await shell.submit(tool_id, form_data)
    except ToolNotFound:
        raise HTTPException(status_code=404, detail="Tool not found")
    except ValidationError as e:
        logger.info(f"Rejected input for {tool_id}: {e.errors}")
        raise HTTPException(status_code=422, detail=e.errors)

    # A stale write may have been dropped; report what the cache holds
    return _result_out(shell, shell.result(tool_id) or envelope)


@router.get("/tools/{tool_id}/result", response_model=ResultOut)
async def get_result(tool_id: str, shell: ToolShell = Depends(get_shell)):
    envelope = shell.result(tool_id)
    if envelope is None:
        raise HTTPException(status_code=404, detail="No result for this tool")
    return _result_out(shell, envelope)
