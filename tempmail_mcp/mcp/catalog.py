from __future__ import annotations

from typing import Tuple

from .tool_types import FieldSpec, ToolDescriptor

ONE_HOUR_MS = 3600000
ONE_DAY_MS = 86400000
THREE_DAYS_MS = 259200000
PERMANENT = 0

EXPIRY_CHOICES = (ONE_HOUR_MS, ONE_DAY_MS, THREE_DAYS_MS, PERMANENT)

_EMAIL_ID = FieldSpec("emailId", "string", "Email address ID", required=True)
_MESSAGE_ID = FieldSpec("messageId", "string", "Message ID", required=True)
_CURSOR = FieldSpec("cursor", "string", "Pagination cursor (optional)")

TOOLS: Tuple[ToolDescriptor, ...] = (
    # mailboxes
    ToolDescriptor(
        name="get_email_domains",
        description="List all email domains available for new addresses",
    ),
    ToolDescriptor(
        name="create_email",
        description="Create a new temporary email address",
        fields=(
            FieldSpec("name", "string", "Local part (prefix) of the address", required=True),
            FieldSpec("domain", "string", "Email domain", required=True),
            FieldSpec(
                "expiryTime",
                "number",
                "Expiry time in milliseconds. Allowed values: 3600000 (1 hour), "
                "86400000 (1 day), 259200000 (3 days), 0 (permanent)",
                required=True,
                allowed_values=EXPIRY_CHOICES,
            ),
        ),
    ),
    ToolDescriptor(
        name="list_emails",
        description="List all email addresses owned by the account",
        fields=(_CURSOR,),
    ),
    ToolDescriptor(
        name="delete_email",
        description="Delete an email address",
        fields=(_EMAIL_ID,),
    ),
    # messages
    ToolDescriptor(
        name="get_messages",
        description="List the messages received by an email address",
        fields=(_EMAIL_ID, _CURSOR),
    ),
    ToolDescriptor(
        name="get_message_detail",
        description="Get the full content of a message",
        fields=(_EMAIL_ID, _MESSAGE_ID),
    ),
    ToolDescriptor(
        name="delete_message",
        description="Delete a message",
        fields=(_EMAIL_ID, _MESSAGE_ID),
    ),
    # webhook
    ToolDescriptor(
        name="get_webhook_config",
        description="Get the current webhook configuration",
    ),
    ToolDescriptor(
        name="set_webhook_config",
        description="Set or update the webhook configuration",
        fields=(
            FieldSpec("url", "string", "Webhook URL (must be a valid HTTP/HTTPS URL)", required=True),
            FieldSpec("enabled", "boolean", "Whether the webhook is enabled", required=True),
        ),
    ),
)
