"""
Text renderers for the temp mail replies.

One function per tool. Each takes the parsed reply model (plus the call
arguments where the reply alone is not enough) and returns the text block
shown to the caller.
"""
from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Optional

from tempmail_mcp.core.models import (
    CreatedEmail,
    DomainList,
    EmailPage,
    MessageDetail,
    MessagePage,
    OperationResult,
    WebhookConfig,
)
from .catalog import ONE_DAY_MS, ONE_HOUR_MS, PERMANENT, THREE_DAYS_MS

EXPIRY_LABELS = {
    PERMANENT: "permanent",
    ONE_HOUR_MS: "1 hour",
    ONE_DAY_MS: "1 day",
    THREE_DAYS_MS: "3 days",
}

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def local_time(dt: datetime) -> str:
    return dt.astimezone().strftime(TIMESTAMP_FORMAT)


def expiry_label(expiry_ms: Any) -> str:
    label = EXPIRY_LABELS.get(expiry_ms)
    if label is None:
        return f"{expiry_ms} milliseconds"
    return label


def _with_cursor(text: str, cursor: Optional[str]) -> str:
    if cursor:
        return f"{text}\n\nNext page cursor: {cursor}"
    return text


def format_domains(reply: DomainList, args: Dict[str, Any]) -> str:
    lines = [f"- {d}" for d in reply.domains]
    return "Available domains:\n" + "\n".join(lines)


def format_created_email(reply: CreatedEmail, args: Dict[str, Any]) -> str:
    return (
        "Temporary email created:\n"
        f"Address: {reply.email}\n"
        f"Email ID: {reply.id}\n"
        f"Expires in: {expiry_label(args.get('expiryTime'))}"
    )


def format_email_page(reply: EmailPage, args: Dict[str, Any]) -> str:
    blocks: List[str] = [
        f"- {e.address} (ID: {e.id})\n"
        f"  Created: {local_time(e.createdAt)}\n"
        f"  Expires: {local_time(e.expiresAt)}"
        for e in reply.emails
    ]
    text = f"Email addresses ({reply.total} total):\n\n" + "\n\n".join(blocks)
    return _with_cursor(text, reply.nextCursor)


def format_message_page(reply: MessagePage, args: Dict[str, Any]) -> str:
    if not reply.messages:
        return "No messages in this mailbox."

    blocks: List[str] = [
        f"- Message ID: {m.id}\n"
        f"  From: {m.from_address}\n"
        f"  Subject: {m.subject or ''}\n"
        f"  Received: {local_time(m.received_at_dt)}"
        for m in reply.messages
    ]
    text = f"Messages ({reply.total} total):\n\n" + "\n\n".join(blocks)
    return _with_cursor(text, reply.nextCursor)


def format_message_detail(reply: MessageDetail, args: Dict[str, Any]) -> str:
    m = reply.message
    return (
        "Message details:\n\n"
        f"Message ID: {m.id}\n"
        f"From: {m.from_address}\n"
        f"Subject: {m.subject or ''}\n"
        f"Received: {local_time(m.received_at_dt)}\n\n"
        f"Text content:\n{m.content or '(no text content)'}\n\n"
        f"HTML content:\n{m.html or '(no HTML content)'}"
    )


def format_email_deleted(reply: OperationResult, args: Dict[str, Any]) -> str:
    if reply.success:
        return f"Deleted email {args.get('emailId')}"
    return "Failed to delete email."


def format_message_deleted(reply: OperationResult, args: Dict[str, Any]) -> str:
    if reply.success:
        return f"Deleted message {args.get('messageId')}"
    return "Failed to delete message."


def _webhook_lines(url: Optional[str], enabled: bool) -> str:
    return f"URL: {url or '(not set)'}\nStatus: {'enabled' if enabled else 'disabled'}"


def format_webhook_config(reply: WebhookConfig, args: Dict[str, Any]) -> str:
    return "Webhook configuration:\n" + _webhook_lines(reply.url, reply.enabled)


def format_webhook_updated(reply: OperationResult, args: Dict[str, Any]) -> str:
    if not reply.success:
        return "Failed to update webhook configuration."
    return "Webhook configuration updated:\n" + _webhook_lines(args.get("url"), bool(args.get("enabled")))
