"""
Recommendation API Schemas - DTOs between the HTTP layer and the engine.

This module defines Pydantic models for:
- the merchant a client reports (MCC code, category or nearby-place types)
- ranked card recommendations and upsell results
- the push notification payload built from a recommendation
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from engine.models import Recommendation, RecommendationResult


class MerchantRequest(BaseModel):
    """
    Merchant the user is at.

    Category resolution order: explicit `category`, then `mcc_code`, then
    `place_types`. Anything unresolvable becomes "other".
    """
    id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    category: Optional[str] = Field(None, description="Spending category, e.g. dining")
    mcc_code: Optional[str] = Field(None, description="Merchant category code, e.g. 5812")
    place_types: Optional[List[str]] = Field(None, description="Nearby-place types, e.g. ['cafe']")
    address: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None


class RecommendationRequest(BaseModel):
    merchant: MerchantRequest
    # Overrides the stored wallet when provided
    card_ids: Optional[List[str]] = None


class MerchantResponse(BaseModel):
    id: str
    name: str
    category: str
    category_display_name: str
    mcc_code: str
    address: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None


class RecommendationItem(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    card_id: str
    card_name: str
    issuer: str
    reward_type: str
    multiplier: float
    estimated_reward: str
    reason: str
    annual_fee: float
    signup_bonus: Optional[str] = None
    affiliate_url: Optional[str] = None

    @classmethod
    def from_recommendation(cls, rec: Recommendation) -> "RecommendationItem":
        return cls(
            card_id=rec.card.id,
            card_name=rec.card.name,
            issuer=rec.card.issuer,
            reward_type=rec.card.reward_type.value,
            multiplier=rec.multiplier,
            estimated_reward=rec.estimated_reward,
            reason=rec.reason,
            annual_fee=rec.card.annual_fee,
            signup_bonus=rec.card.signup_bonus,
            affiliate_url=rec.card.affiliate_url,
        )


class RecommendationResponse(BaseModel):
    merchant: MerchantResponse
    recommended: Optional[RecommendationItem] = None
    alternatives: List[RecommendationItem]
    upsell: Optional[RecommendationItem] = None
    ranked_cards: List[RecommendationItem]

    @classmethod
    def from_result(cls, result: RecommendationResult, category_display_name: str) -> "RecommendationResponse":
        def item(rec: Optional[Recommendation]) -> Optional[RecommendationItem]:
            return RecommendationItem.from_recommendation(rec) if rec is not None else None

        merchant = result.merchant
        return cls(
            merchant=MerchantResponse(
                id=merchant.id,
                name=merchant.name,
                category=merchant.category.value,
                category_display_name=category_display_name,
                mcc_code=merchant.mcc_code,
                address=merchant.address,
                latitude=merchant.latitude,
                longitude=merchant.longitude,
            ),
            recommended=item(result.best),
            alternatives=[item(rec) for rec in result.alternatives],
            upsell=item(result.upsell),
            ranked_cards=[item(rec) for rec in result.ranked],
        )


class NotificationPayload(BaseModel):
    """Push alert content. Delivery is the mobile client's job."""
    title: str
    body: str
    data: Dict[str, Any]
    channel_id: str = "card-recommendations"


class NotificationResponse(BaseModel):
    notification: Optional[NotificationPayload] = None
