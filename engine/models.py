"""
Data models for the card recommendation engine.
All models are frozen dataclasses; the engine never mutates them.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class SpendCategory(str, Enum):
    """
    Normalized spending buckets.

    The first block is what a merchant can resolve to. The second block only
    appears on catalog reward entries, so it never matches a merchant.
    """
    DINING = "dining"
    GROCERY = "grocery"
    GAS = "gas"
    DRUGSTORE = "drugstore"
    TRAVEL = "travel"
    ENTERTAINMENT = "entertainment"
    STREAMING = "streaming"
    TRANSIT = "transit"
    ONLINE_SHOPPING = "online_shopping"
    OTHER = "other"

    FLIGHTS = "flights"
    HOTELS = "hotels"
    CAR_RENTAL = "car_rental"
    AMAZON = "amazon"
    COSTCO = "costco"
    TARGET = "target"
    WHOLE_FOODS = "whole_foods"
    ROTATING = "rotating"
    MOBILE_WALLET = "mobile_wallet"
    OFFICE_SUPPLIES = "office_supplies"
    SHIPPING = "shipping"
    ADVERTISING = "advertising"
    EV_CHARGING = "ev_charging"
    FITNESS = "fitness"

    @classmethod
    def parse(cls, value) -> "SpendCategory":
        """Resolve a raw string to a category; anything unknown is OTHER."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return cls.OTHER


MERCHANT_CATEGORIES = (
    SpendCategory.DINING,
    SpendCategory.GROCERY,
    SpendCategory.GAS,
    SpendCategory.DRUGSTORE,
    SpendCategory.TRAVEL,
    SpendCategory.ENTERTAINMENT,
    SpendCategory.STREAMING,
    SpendCategory.TRANSIT,
    SpendCategory.ONLINE_SHOPPING,
    SpendCategory.OTHER,
)


class RewardType(str, Enum):
    POINTS = "points"
    CASHBACK = "cashback"
    MILES = "miles"


class CardNetwork(str, Enum):
    VISA = "visa"
    MASTERCARD = "mastercard"
    AMEX = "amex"
    DISCOVER = "discover"


@dataclass(frozen=True)
class RewardStructure:
    """
    One category-specific earn rate on a card.

    Fields:
    - category: bucket the rate applies to
    - multiplier: reward per unit spent, in the owning card's reward type
    - description: human-readable rate description shown to the user
    - mcc_codes: optional MCC codes the issuer lists for this rate
    """
    category: SpendCategory
    multiplier: float
    description: str
    mcc_codes: Optional[tuple[str, ...]] = None


@dataclass(frozen=True)
class CreditCard:
    """
    Immutable catalog entry.

    Only id, reward_type, base_reward and reward_structure take part in
    ranking. The remaining optional fields belong to card display and the
    apply flow.
    """
    id: str
    name: str
    issuer: str
    network: CardNetwork
    annual_fee: float
    base_reward: float
    reward_type: RewardType
    reward_structure: tuple[RewardStructure, ...] = ()
    color: Optional[str] = None
    gradient_colors: Optional[tuple[str, str]] = None
    logo_url: Optional[str] = None
    signup_bonus: Optional[str] = None
    signup_bonus_value: Optional[float] = None
    affiliate_url: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "issuer": self.issuer,
            "network": self.network.value,
            "annual_fee": self.annual_fee,
            "base_reward": self.base_reward,
            "reward_type": self.reward_type.value,
            "reward_structure": [
                {
                    "category": reward.category.value,
                    "multiplier": reward.multiplier,
                    "description": reward.description,
                    "mcc_codes": list(reward.mcc_codes) if reward.mcc_codes else None,
                }
                for reward in self.reward_structure
            ],
            "color": self.color,
            "gradient_colors": list(self.gradient_colors) if self.gradient_colors else None,
            "logo_url": self.logo_url,
            "signup_bonus": self.signup_bonus,
            "signup_bonus_value": self.signup_bonus_value,
            "affiliate_url": self.affiliate_url,
        }


@dataclass(frozen=True)
class Merchant:
    """
    A place the user is about to pay at.

    Fields:
    - id: merchant identifier from the detection source
    - name: display name
    - category: resolved spending bucket
    - mcc_code: originating category code
    - address, latitude, longitude: optional location details
    """
    id: str
    name: str
    category: SpendCategory
    mcc_code: str
    address: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "category": self.category.value,
            "mcc_code": self.mcc_code,
            "address": self.address,
            "latitude": self.latitude,
            "longitude": self.longitude,
        }


@dataclass(frozen=True)
class Recommendation:
    """
    A card evaluated against a merchant. Built fresh on every query.

    Fields:
    - card: the evaluated card
    - merchant: the merchant it was evaluated against
    - multiplier: the card's earn rate for merchant.category
    - estimated_reward: formatted reward for the reference spend
    - reason: the reward description backing the multiplier
    """
    card: CreditCard
    merchant: Merchant
    multiplier: float
    estimated_reward: str
    reason: str

    def to_dict(self) -> dict:
        return {
            "card_id": self.card.id,
            "card_name": self.card.name,
            "issuer": self.card.issuer,
            "reward_type": self.card.reward_type.value,
            "multiplier": self.multiplier,
            "estimated_reward": self.estimated_reward,
            "reason": self.reason,
            "merchant_id": self.merchant.id,
            "merchant_category": self.merchant.category.value,
        }


@dataclass(frozen=True)
class RecommendationResult:
    """
    Everything the app shows for one merchant visit.

    Fields:
    - merchant: the merchant the result was computed against
    - best: the best owned card, or None for an empty wallet
    - alternatives: up to three runner-up owned cards
    - upsell: a non-owned card that strictly beats best, or None
    - ranked: every owned card, best first
    """
    merchant: Merchant
    best: Optional[Recommendation]
    alternatives: tuple[Recommendation, ...]
    upsell: Optional[Recommendation]
    ranked: tuple[Recommendation, ...]

    def to_dict(self) -> dict:
        return {
            "merchant": self.merchant.to_dict(),
            "best": self.best.to_dict() if self.best else None,
            "alternatives": [rec.to_dict() for rec in self.alternatives],
            "upsell": self.upsell.to_dict() if self.upsell else None,
            "ranked": [rec.to_dict() for rec in self.ranked],
        }
