import sys

from tempmail_mcp.core.config import settings
from tempmail_mcp.core.logging_db import DbLogger

if __name__ == "__main__":
    if not settings.event_log_url:
        sys.exit("EVENT_LOG_URL is not set; nothing to initialize")
    DbLogger(settings.event_log_url)
    print(f"Event log initialized at: {settings.event_log_url}")
