from .analytics import router as analytics_router
from .catalog import router as catalog_router
from .recommendation import router as recommendation_router
from .wallet import router as wallet_router

__all__ = [
    "analytics_router",
    "catalog_router",
    "recommendation_router",
    "wallet_router",
]
