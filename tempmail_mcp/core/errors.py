from __future__ import annotations

import json
from typing import Any


class TempMailError(Exception):
    """Root of every error raised by this package."""


class MissingConfigurationError(TempMailError):
    """A required setting is absent; the server cannot start."""

    def __init__(self, setting: str):
        self.setting = setting
        super().__init__(f"{setting} environment variable is not set")


class ToolCallError(TempMailError):
    """
    Failure of a single tool invocation.

    The dispatch gateway turns these into error envelopes instead of
    letting them reach the caller.
    """


class UnknownToolError(ToolCallError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown tool: {name}")


class MissingArgumentError(ToolCallError):
    def __init__(self, field: str):
        self.field = field
        super().__init__(f"Missing required argument: {field}")


class InvalidArgumentError(ToolCallError):
    def __init__(self, field: str, reason: str):
        self.field = field
        self.reason = reason
        super().__init__(f"Invalid argument '{field}': {reason}")


class UpstreamHttpError(ToolCallError):
    def __init__(self, status_code: int, reason: str, body: Any = None):
        self.status_code = status_code
        self.reason = reason
        self.body = body
        super().__init__(
            f"API request failed: {status_code} {reason} - {json.dumps(body, ensure_ascii=False)}"
        )


class TransportError(ToolCallError):
    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(f"API request failed: {detail}")


class UpstreamPayloadError(ToolCallError):
    def __init__(self, tool: str, detail: str):
        self.tool = tool
        self.detail = detail
        super().__init__(f"Unexpected response for {tool}: {detail}")
