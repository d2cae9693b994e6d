from __future__ import annotations

import logging
from typing import Any, Dict, List

import anyio
import mcp.types as types
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server

from .gateway import DispatchGateway

logger = logging.getLogger(__name__)


class ToolResultError(Exception):
    """Carries an error envelope's text; the SDK turns it into an isError result."""


def build_server(gateway: DispatchGateway, name: str, version: str) -> Server:
    server = Server(name, version=version)

    @server.list_tools()
    async def list_tools() -> List[types.Tool]:
        return [
            types.Tool(name=t.name, description=t.description, inputSchema=t.input_schema)
            for t in gateway.registry.descriptors()
        ]

    # argument checks belong to the gateway so every transport reports them the same way
    @server.call_tool(validate_input=False)
    async def call_tool(name: str, arguments: Dict[str, Any]) -> List[types.TextContent]:
        envelope = await anyio.to_thread.run_sync(gateway.handle, name, arguments)
        if envelope.is_error:
            raise ToolResultError(envelope.first_text())
        return [types.TextContent(type="text", text=b.text) for b in envelope.content]

    return server


async def serve_stdio(server: Server) -> None:
    async with stdio_server() as (read_stream, write_stream):
        logger.info("%s running on stdio", server.name)
        await server.run(read_stream, write_stream, server.create_initialization_options())
