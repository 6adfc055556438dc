from fastapi import Depends
from sqlalchemy.orm import Session

from app.dependencies.db import get_db
from app.services.analytics_service import AnalyticsService
from app.services.catalog_service import CatalogService
from app.services.recommendation_service import RecommendationService
from app.services.wallet_service import WalletService


def get_catalog_service(db: Session = Depends(get_db)) -> CatalogService:
    return CatalogService(db)


def get_wallet_service(db: Session = Depends(get_db)) -> WalletService:
    return WalletService(db)


def get_analytics_service(db: Session = Depends(get_db)) -> AnalyticsService:
    return AnalyticsService(db)


def get_recommendation_service(db: Session = Depends(get_db)) -> RecommendationService:
    # Shares one session between the catalog and wallet lookups
    return RecommendationService(db, CatalogService(db), WalletService(db))
