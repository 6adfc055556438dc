import logging
from typing import Any, Dict, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.models.analytics_event import AnalyticsEvent, AnalyticsEventType

logger = logging.getLogger(__name__)


class AnalyticsService:
    """Stores product analytics events. Never raises: analytics must not block a request."""

    def __init__(self, db: Session):
        self.db = db

    def track_event(
        self,
        event_type: AnalyticsEventType,
        event_data: Optional[Dict[str, Any]] = None,
        *,
        user_id: Optional[str] = None,
        device_id: Optional[str] = None,
    ) -> Optional[AnalyticsEvent]:
        event = AnalyticsEvent(
            user_id=user_id,
            device_id=device_id,
            event_type=event_type,
            event_data=event_data or {},
        )
        try:
            self.db.add(event)
            self.db.commit()
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.warning("Analytics error: %s", exc)
            return None
        return event

    def track_card_added(self, user_id: str, card_id: str) -> Optional[AnalyticsEvent]:
        return self.track_event(AnalyticsEventType.card_added, {"card_id": card_id}, user_id=user_id)

    def track_card_removed(self, user_id: str, card_id: str) -> Optional[AnalyticsEvent]:
        return self.track_event(AnalyticsEventType.card_removed, {"card_id": card_id}, user_id=user_id)

    def track_recommendation_shown(
        self, user_id: str, card_id: Optional[str], merchant_category: str
    ) -> Optional[AnalyticsEvent]:
        return self.track_event(
            AnalyticsEventType.recommendation_shown,
            {"card_id": card_id, "merchant_category": merchant_category},
            user_id=user_id,
        )
