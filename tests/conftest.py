from __future__ import annotations

from typing import Any, Dict, List, Optional

import pytest

from tempmail_mcp.mcp.catalog import TOOLS
from tempmail_mcp.mcp.gateway import DispatchGateway
from tempmail_mcp.mcp.tool_registry import ToolRegistry

# a complete, valid argument set for every tool
VALID_ARGS: Dict[str, Dict[str, Any]] = {
    "get_email_domains": {},
    "create_email": {"name": "a", "domain": "b.com", "expiryTime": 3600000},
    "list_emails": {},
    "delete_email": {"emailId": "e1"},
    "get_messages": {"emailId": "e1"},
    "get_message_detail": {"emailId": "e1", "messageId": "m1"},
    "delete_message": {"emailId": "e1", "messageId": "m1"},
    "get_webhook_config": {},
    "set_webhook_config": {"url": "https://x/y", "enabled": True},
}

EMAIL = {
    "id": "e1",
    "address": "a@b.com",
    "userId": "u1",
    "createdAt": "2024-01-01T00:00:00.000Z",
    "expiresAt": "2024-01-02T00:00:00.000Z",
}

MESSAGE = {
    "id": "m1",
    "from_address": "sender@example.com",
    "subject": "Hello",
    "received_at": 1700000000000,
}


class StubClient:
    """Stands in for TempMailClient; records every request it is asked to send."""

    def __init__(self, reply: Any = None, error: Optional[Exception] = None):
        self.reply = {} if reply is None else reply
        self.error = error
        self.calls: List[Dict[str, Any]] = []
        self.closed = False

    def request(self, method: str, path: str, *, params=None, json=None) -> Any:
        self.calls.append({"method": method, "path": path, "params": params, "json": json})
        if self.error is not None:
            raise self.error
        return self.reply

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def registry() -> ToolRegistry:
    return ToolRegistry(TOOLS)


@pytest.fixture
def make_gateway(registry):
    def _make(reply: Any = None, error: Optional[Exception] = None, **kwargs):
        client = StubClient(reply=reply, error=error)
        return DispatchGateway(registry, client, **kwargs), client
    return _make
