from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass
from typing import Any, Callable, Dict, Mapping, Optional, Tuple, Type, Union
from urllib.parse import quote

from pydantic import BaseModel, ValidationError

from tempmail_mcp.core.errors import ToolCallError, UpstreamPayloadError
from tempmail_mcp.core.logging_db import DbLogger
from tempmail_mcp.core.models import (
    CreatedEmail,
    DomainList,
    EmailPage,
    MessageDetail,
    MessagePage,
    OperationResult,
    ResponseEnvelope,
    WebhookConfig,
)
from tempmail_mcp.remote.tempmail_client import TempMailClient
from . import formatters
from .tool_registry import ToolRegistry
from .tool_types import ToolInvocation

logger = logging.getLogger(__name__)

Formatter = Callable[[Any, Dict[str, Any]], str]


@dataclass(frozen=True)
class Route:
    method: str
    path: str                       # may contain {emailId} / {messageId}
    reply: Type[BaseModel]
    render: Formatter
    body: Tuple[str, ...] = ()      # argument names copied into the JSON body
    query: Tuple[str, ...] = ()     # argument names sent as query params when non-empty

    def build_path(self, args: Mapping[str, Any]) -> str:
        segments = {k: quote(str(v), safe="") for k, v in args.items()}
        return self.path.format(**segments)

    def build_params(self, args: Mapping[str, Any]) -> Optional[Dict[str, Any]]:
        params = {k: args[k] for k in self.query if args.get(k)}
        return params or None

    def build_body(self, args: Mapping[str, Any]) -> Optional[Dict[str, Any]]:
        if not self.body:
            return None
        return {k: _wire_value(args.get(k)) for k in self.body}


def _wire_value(value: Any) -> Any:
    # 3600000.0 -> 3600000; enum members go out as the integers the service expects
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


ROUTES: Dict[str, Route] = {
    "get_email_domains": Route("GET", "/api/email/domains", DomainList, formatters.format_domains),
    "create_email": Route(
        "POST", "/api/emails/generate", CreatedEmail, formatters.format_created_email,
        body=("name", "domain", "expiryTime"),
    ),
    "list_emails": Route("GET", "/api/emails", EmailPage, formatters.format_email_page, query=("cursor",)),
    "delete_email": Route("DELETE", "/api/emails/{emailId}", OperationResult, formatters.format_email_deleted),
    "get_messages": Route(
        "GET", "/api/emails/{emailId}", MessagePage, formatters.format_message_page, query=("cursor",),
    ),
    "get_message_detail": Route(
        "GET", "/api/emails/{emailId}/{messageId}", MessageDetail, formatters.format_message_detail,
    ),
    "delete_message": Route(
        "DELETE", "/api/emails/{emailId}/{messageId}", OperationResult, formatters.format_message_deleted,
    ),
    "get_webhook_config": Route("GET", "/api/webhook", WebhookConfig, formatters.format_webhook_config),
    "set_webhook_config": Route(
        "POST", "/api/webhook", OperationResult, formatters.format_webhook_updated,
        body=("url", "enabled"),
    ),
}


@dataclass(frozen=True)
class ToolSuccess:
    text: str

    def envelope(self) -> ResponseEnvelope:
        return ResponseEnvelope.text(self.text)


@dataclass(frozen=True)
class ToolFailure:
    error: Exception

    @property
    def text(self) -> str:
        if isinstance(self.error, ToolCallError):
            return f"Error: {self.error}"
        return f"Error: internal error: {self.error}"

    def envelope(self) -> ResponseEnvelope:
        return ResponseEnvelope.text(self.text, is_error=True)


ToolOutcome = Union[ToolSuccess, ToolFailure]


class DispatchGateway:
    """
    Routes one tool invocation to one temp mail API call.

    Every failure comes back as a ToolFailure / error envelope; nothing
    raised by validation, the network or the formatters leaves `dispatch`.
    """
    def __init__(
            self,
            registry: ToolRegistry,
            client: TempMailClient,
            *,
            routes: Optional[Mapping[str, Route]] = None,
            db: Optional[DbLogger] = None,
    ):
        self.registry = registry
        self.client = client
        self.routes = dict(routes or ROUTES)
        self.db = db

        missing = [t.name for t in registry.descriptors() if t.name not in self.routes]
        if missing:
            raise ValueError(f"No route for tools: {', '.join(missing)}")

    def _log(self, event_type: str, payload: Dict[str, Any], *, request_id: str, tool_name: str) -> None:
        try:
            if self.db is not None:
                self.db.log_event(event_type, payload, request_id=request_id, tool_name=tool_name)
        except Exception as e:
            logger.exception(f"DbLogger failure (ignored): {e}")

    def _call(self, invocation: ToolInvocation) -> str:
        self.registry.validate(invocation)
        args = dict(invocation.arguments or {})
        route = self.routes[invocation.name]

        data = self.client.request(
            route.method,
            route.build_path(args),
            params=route.build_params(args),
            json=route.build_body(args),
        )

        try:
            reply = route.reply.model_validate(data)
        except ValidationError as e:
            raise UpstreamPayloadError(invocation.name, f"{e.error_count()} invalid field(s): {e.errors()[0]['loc']}") from e
        return route.render(reply, args)

    def dispatch(self, invocation: ToolInvocation) -> ToolOutcome:
        request_id = str(uuid.uuid4())
        self._log("tool_call", {"args": invocation.arguments},
                  request_id=request_id, tool_name=invocation.name)

        try:
            outcome: ToolOutcome = ToolSuccess(self._call(invocation))
        except ToolCallError as e:
            logger.warning("Tool %s failed: %s", invocation.name, e)
            outcome = ToolFailure(e)
        except Exception as e:
            logger.exception(f"Unexpected error in tool {invocation.name}: {e}")
            outcome = ToolFailure(e)

        event = "tool_result" if isinstance(outcome, ToolSuccess) else "tool_error"
        self._log(event, {"text": outcome.text}, request_id=request_id, tool_name=invocation.name)
        return outcome

    def handle(self, name: str, arguments: Optional[Mapping[str, Any]] = None) -> ResponseEnvelope:
        return self.dispatch(ToolInvocation(name=name, arguments=arguments or {})).envelope()
