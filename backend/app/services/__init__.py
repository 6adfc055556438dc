from .analytics_service import AnalyticsService
from .catalog_service import CatalogService
from .errors import ServiceError
from .notification_service import build_recommendation_notification
from .recommendation_service import RecommendationService, resolve_merchant
from .wallet_service import WalletService

__all__ = [
    "AnalyticsService",
    "CatalogService",
    "ServiceError",
    "build_recommendation_notification",
    "RecommendationService",
    "resolve_merchant",
    "WalletService",
]
