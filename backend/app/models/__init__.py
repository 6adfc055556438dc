from .analytics_event import AnalyticsEvent, AnalyticsEventCreate, AnalyticsEventType
from .card import Card, CardReward, CardSchema, CatalogResponse, RewardStructureSchema
from .wallet import AddCardRequest, SetDefaultCardRequest, UserCard, UserCardResponse, UserWallet, WalletResponse

__all__ = [
    "AnalyticsEvent",
    "AnalyticsEventCreate",
    "AnalyticsEventType",
    "Card",
    "CardReward",
    "CardSchema",
    "CatalogResponse",
    "RewardStructureSchema",
    "AddCardRequest",
    "SetDefaultCardRequest",
    "UserCard",
    "UserCardResponse",
    "UserWallet",
    "WalletResponse",
]
