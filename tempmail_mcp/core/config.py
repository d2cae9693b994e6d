from __future__ import annotations

import os
from dataclasses import dataclass
from dotenv import load_dotenv

from tempmail_mcp.core.errors import MissingConfigurationError

load_dotenv()

DEFAULT_BASE_URL = "https://chat-tempmail.com"


@dataclass(frozen=True)
class Settings:
    app_name: str = os.getenv("APP_NAME", "mcp-server-tempmail")
    app_version: str = "1.0.0"
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # stdio | http
    transport: str = os.getenv("MCP_TRANSPORT", "stdio").lower()
    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8000"))

    api_key: str = os.getenv("TEMPMAIL_API_KEY", "").strip()
    base_url: str = os.getenv("TEMPMAIL_BASE_URL", "").strip() or DEFAULT_BASE_URL
    timeout_s: float = float(os.getenv("TEMPMAIL_TIMEOUT_S", "30"))

    # empty disables the tool-call event log
    event_log_url: str = os.getenv("EVENT_LOG_URL", "").strip()

    def require_api_key(self) -> str:
        if not self.api_key:
            raise MissingConfigurationError("TEMPMAIL_API_KEY")
        return self.api_key

    def masked_api_key(self) -> str:
        return f"{self.api_key[:8]}..." if self.api_key else "(unset)"


settings = Settings()
