from __future__ import annotations
from datetime import datetime, timezone
from pydantic import BaseModel, ConfigDict, Field
from typing import List, Literal, Optional


# ---------------------------------------------------------------------------
# Remote resources (read-only views of what the temp mail service returns)
# ---------------------------------------------------------------------------

class Email(BaseModel):
    id: str
    address: str
    userId: Optional[str] = None
    createdAt: datetime
    expiresAt: datetime


class Message(BaseModel):
    id: str
    from_address: str
    subject: Optional[str] = ""
    content: Optional[str] = None
    html: Optional[str] = None
    received_at: int  # epoch millis

    @property
    def received_at_dt(self) -> datetime:
        return datetime.fromtimestamp(self.received_at / 1000, tz=timezone.utc)


class WebhookConfig(BaseModel):
    url: Optional[str] = ""
    enabled: bool = False


# ---------------------------------------------------------------------------
# Endpoint replies
# ---------------------------------------------------------------------------

class DomainList(BaseModel):
    domains: List[str]


class CreatedEmail(BaseModel):
    id: str
    email: str


class EmailPage(BaseModel):
    emails: List[Email]
    nextCursor: Optional[str] = None
    total: int = 0


class MessagePage(BaseModel):
    messages: List[Message]
    nextCursor: Optional[str] = None
    total: int = 0


class MessageDetail(BaseModel):
    message: Message


class OperationResult(BaseModel):
    success: bool


# ---------------------------------------------------------------------------
# Envelope returned for every tool call
# ---------------------------------------------------------------------------

class TextBlock(BaseModel):
    type: Literal["text"] = "text"
    text: str


class ResponseEnvelope(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    content: List[TextBlock]
    is_error: bool = Field(False, alias="isError")

    @classmethod
    def text(cls, text: str, *, is_error: bool = False) -> "ResponseEnvelope":
        return cls(content=[TextBlock(text=text)], is_error=is_error)

    def first_text(self) -> str:
        return self.content[0].text if self.content else ""
