from fastapi import APIRouter, Depends

from app.dependencies.security import require_user_id_header
from app.dependencies.services import get_analytics_service, get_recommendation_service
from app.schemas.recommendation_schemas import (
    NotificationResponse,
    RecommendationRequest,
    RecommendationResponse,
)
from app.services.analytics_service import AnalyticsService
from app.services.notification_service import build_recommendation_notification
from app.services.recommendation_service import RecommendationService, resolve_merchant
from engine.categories import category_display_name

router = APIRouter(
    prefix="/api/v1/recommendation",
    tags=["recommendation"]
)


@router.post("", response_model=RecommendationResponse)
def recommend_card(
    payload: RecommendationRequest,
    user_id: str = Depends(require_user_id_header),
    service: RecommendationService = Depends(get_recommendation_service),
    analytics: AnalyticsService = Depends(get_analytics_service),
):
    """Best owned card, alternatives, upsell and full ranking for the merchant."""
    merchant = resolve_merchant(payload.merchant)
    result = service.recommend(user_id=user_id, merchant=merchant, card_ids=payload.card_ids)

    analytics.track_recommendation_shown(
        user_id,
        result.best.card.id if result.best else None,
        merchant.category.value,
    )
    return RecommendationResponse.from_result(result, category_display_name(merchant.category))


@router.post("/notification", response_model=NotificationResponse)
def recommendation_notification(
    payload: RecommendationRequest,
    user_id: str = Depends(require_user_id_header),
    service: RecommendationService = Depends(get_recommendation_service),
):
    """Push alert content for the best owned card; null when the wallet is empty."""
    merchant = resolve_merchant(payload.merchant)
    result = service.recommend(user_id=user_id, merchant=merchant, card_ids=payload.card_ids)
    if result.best is None:
        return NotificationResponse(notification=None)
    return NotificationResponse(notification=build_recommendation_notification(merchant, result.best))
