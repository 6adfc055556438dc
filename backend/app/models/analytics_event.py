from datetime import datetime
from enum import Enum as PyEnum
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field
from sqlalchemy import JSON, Column, DateTime, Enum as SAEnum, Integer, String

from app.db.db import Base


class AnalyticsEventType(str, PyEnum):
    card_added = "card_added"
    card_removed = "card_removed"
    upsell_tapped = "upsell_tapped"
    apply_tapped = "apply_tapped"
    notification_tapped = "notification_tapped"
    recommendation_shown = "recommendation_shown"


class AnalyticsEvent(Base):
    __tablename__ = "analytics_events"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    user_id = Column(String(128), nullable=True, index=True)
    device_id = Column(String(128), nullable=True)
    event_type = Column(SAEnum(AnalyticsEventType), nullable=False)
    event_data = Column(JSON, nullable=False, default=dict)
    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)


class AnalyticsEventCreate(BaseModel):
    event_type: AnalyticsEventType
    event_data: Dict[str, Any] = Field(default_factory=dict)
    device_id: Optional[str] = None
