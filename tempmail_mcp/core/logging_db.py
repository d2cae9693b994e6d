from __future__ import annotations

import json
from datetime import datetime, timezone
from typing import Any, Dict, Optional, List

from sqlalchemy import (
    Column, DateTime, Integer, String, Text, create_engine, Index, select, desc
)
from sqlalchemy.orm import declarative_base, sessionmaker

Base = declarative_base()

class EventLog(Base):
    __tablename__ = "event_logs"

    id = Column(Integer, primary_key=True, autoincrement=True)
    created_at = Column(DateTime(timezone=True), nullable=False, index=True)

    request_id = Column(String(64), nullable=True, index=True)
    tool_name = Column(String(128), nullable=True, index=True)
    event_type = Column(String(64), nullable=False, index=True)

    payload_json = Column(Text, nullable=False)

Index("ix_event_logs_request_tool", EventLog.request_id, EventLog.tool_name)

class DbLogger:
    """Append-only log of tool invocations (calls, results, errors)."""

    def __init__(self, database_url: str):
        self.engine = create_engine(database_url, future=True)
        Base.metadata.create_all(self.engine)
        self.Session = sessionmaker(bind=self.engine, autoflush=False, autocommit=False, future=True)

    def log_event(
            self,
            event_type: str,
            payload: Dict[str, Any],
            *,
            request_id: Optional[str] = None,
            tool_name: Optional[str] = None,
            created_at: Optional[datetime] = None,
    ) -> int:
        ts = created_at or datetime.now(timezone.utc)
        row = EventLog(
            created_at=ts,
            request_id=request_id,
            tool_name=tool_name,
            event_type=event_type,
            payload_json=json.dumps(payload, ensure_ascii=False, default=str),
        )
        with self.Session() as s:
            s.add(row)
            s.commit()
            s.refresh(row)
            return int(row.id)

    def recent_events(self, limit: int = 50, tool_name: Optional[str] = None) -> List[Dict[str, Any]]:
        stmt = select(EventLog).order_by(desc(EventLog.id)).limit(limit)
        if tool_name:
            stmt = stmt.where(EventLog.tool_name == tool_name)
        with self.Session() as s:
            rows = s.execute(stmt).scalars().all()
        return [
            {
                "id": r.id,
                "created_at": r.created_at.isoformat(),
                "request_id": r.request_id,
                "tool_name": r.tool_name,
                "event_type": r.event_type,
                "payload": json.loads(r.payload_json),
            }
            for r in rows
        ]
