from typing import Optional

from fastapi import APIRouter, Depends, status

from app.dependencies.security import optional_device_id_header, optional_user_id_header
from app.dependencies.services import get_analytics_service
from app.models.analytics_event import AnalyticsEventCreate
from app.services.analytics_service import AnalyticsService

router = APIRouter(
    prefix="/api/v1/analytics",
    tags=["analytics"]
)


@router.post("/events", status_code=status.HTTP_202_ACCEPTED)
def track_event(
    payload: AnalyticsEventCreate,
    # Anonymous events are allowed
    user_id: Optional[str] = Depends(optional_user_id_header),
    device_id: Optional[str] = Depends(optional_device_id_header),
    service: AnalyticsService = Depends(get_analytics_service),
):
    event = service.track_event(
        payload.event_type,
        payload.event_data,
        user_id=user_id,
        device_id=payload.device_id or device_id,
    )
    return {"accepted": True, "stored": event is not None}
