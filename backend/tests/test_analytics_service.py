from unittest.mock import Mock

from sqlalchemy.exc import SQLAlchemyError

from app.models.analytics_event import AnalyticsEvent, AnalyticsEventType
from app.services.analytics_service import AnalyticsService


def test_track_event_stores_row(db_session):
    # Arrange
    service = AnalyticsService(db_session)

    # Act
    event = service.track_event(
        AnalyticsEventType.upsell_tapped,
        {"card_id": "dining-max"},
        user_id="u_1",
        device_id="ios-123",
    )

    # Assert
    assert event is not None
    stored = db_session.query(AnalyticsEvent).one()
    assert stored.event_type == AnalyticsEventType.upsell_tapped
    assert stored.event_data == {"card_id": "dining-max"}
    assert stored.user_id == "u_1"
    assert stored.device_id == "ios-123"


def test_card_helpers_record_card_id(db_session):
    # Arrange
    service = AnalyticsService(db_session)

    # Act
    service.track_card_added("u_1", "amex-gold")
    service.track_card_removed("u_1", "amex-gold")

    # Assert
    types = [row.event_type for row in db_session.query(AnalyticsEvent).order_by(AnalyticsEvent.id)]
    assert types == [AnalyticsEventType.card_added, AnalyticsEventType.card_removed]


def test_storage_failure_is_logged_not_raised(caplog):
    # Arrange
    db = Mock()
    db.commit.side_effect = SQLAlchemyError("disk full")
    service = AnalyticsService(db)

    # Act
    with caplog.at_level("WARNING"):
        event = service.track_event(AnalyticsEventType.apply_tapped, {"card_id": "amex-gold"})

    # Assert
    assert event is None
    db.rollback.assert_called_once()
    assert "Analytics error" in caplog.text
