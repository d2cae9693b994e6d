from __future__ import annotations
from fastapi import APIRouter
from pydantic import BaseModel
from typing import Any, Dict, List

from tempmail_mcp.core.models import ResponseEnvelope
from .gateway import DispatchGateway

class ToolCallRequest(BaseModel):
    tool: str
    args: Dict[str, Any] = {}

def mount_mcp_routes(gateway: DispatchGateway) -> APIRouter:
    r = APIRouter(prefix="/mcp", tags=["mcp"])

    @r.get("/tools")
    def list_tools() -> List[Dict[str, Any]]:
        return gateway.registry.list()

    # tool failures are ordinary results: always 200, isError carries the outcome
    @r.post("/call", response_model=ResponseEnvelope)
    def call_tool(req: ToolCallRequest) -> ResponseEnvelope:
        return gateway.handle(req.tool, req.args)

    return r
