from __future__ import annotations

import logging
import sys
from typing import Optional

import anyio
import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from tempmail_mcp.core.config import Settings, settings as default_settings
from tempmail_mcp.core.errors import MissingConfigurationError
from tempmail_mcp.core.logging_db import DbLogger

from tempmail_mcp.mcp.catalog import TOOLS
from tempmail_mcp.mcp.gateway import DispatchGateway
from tempmail_mcp.mcp.mcp_http import mount_mcp_routes
from tempmail_mcp.mcp.mcp_stdio import build_server, serve_stdio
from tempmail_mcp.mcp.tool_registry import ToolRegistry

from tempmail_mcp.remote.tempmail_client import TempMailClient


def build_gateway(settings: Settings) -> DispatchGateway:
    """
    Wire registry, API client and (optional) event log into a gateway.

    :raises MissingConfigurationError: TEMPMAIL_API_KEY is not set
    """
    api_key = settings.require_api_key()
    logging.debug(f"API key loaded: {settings.masked_api_key()}")
    logging.debug(f"Base URL: {settings.base_url}")

    db: Optional[DbLogger] = None
    if settings.event_log_url:
        try:
            db = DbLogger(settings.event_log_url)
        except Exception as e:
            logging.exception(f"Event log unavailable, continuing without it: {e}")

    client = TempMailClient(settings.base_url, api_key, timeout=settings.timeout_s)
    return DispatchGateway(ToolRegistry(TOOLS), client, db=db)


def create_app(settings: Settings = default_settings, gateway: Optional[DispatchGateway] = None) -> FastAPI:
    gateway = gateway or build_gateway(settings)

    app = FastAPI(title=settings.app_name, version=settings.app_version)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(mount_mcp_routes(gateway))

    @app.get("/", tags=["meta"])
    def root():
        return {
            "name": settings.app_name,
            "version": settings.app_version,
            "status": "ok",
            "docs": "/docs",
            "endpoints": {
                "tools": "/mcp/tools",
                "mcp_call": "/mcp/call",
                "events": "/events",
            },
        }

    @app.get("/health", tags=["meta"])
    def health():
        return {"status": "ok"}

    @app.get("/events", tags=["debug"])
    def events(limit: int = 50, tool_name: Optional[str] = None):
        if gateway.db is None:
            return {"ok": False, "error": "Event log not enabled (set EVENT_LOG_URL)", "events": []}
        return {"ok": True, "events": gateway.db.recent_events(limit=limit, tool_name=tool_name)}

    return app


def main() -> int:
    settings = default_settings
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        gateway = build_gateway(settings)
    except MissingConfigurationError as e:
        logging.error(f"Cannot start {settings.app_name}: {e}")
        return 1

    try:
        if settings.transport == "http":
            uvicorn.run(
                create_app(settings, gateway),
                host=settings.host,
                port=settings.port,
                log_level=settings.log_level.lower(),
            )
        elif settings.transport == "stdio":
            server = build_server(gateway, settings.app_name, settings.app_version)
            anyio.run(serve_stdio, server)
        else:
            logging.error(f"Unknown MCP_TRANSPORT: {settings.transport} (expected stdio or http)")
            return 1
    except KeyboardInterrupt:
        logging.info("Interrupted, shutting down")
    finally:
        gateway.client.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
