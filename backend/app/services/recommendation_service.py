from __future__ import annotations

import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from app.schemas.recommendation_schemas import MerchantRequest
from app.services.catalog_service import CatalogService
from app.services.wallet_service import WalletService
from engine.categories import classify, classify_place_types, mcc_for_category
from engine.models import MERCHANT_CATEGORIES, Merchant, RecommendationResult, SpendCategory
from engine.recommender import recommend

logger = logging.getLogger(__name__)


def resolve_merchant(payload: MerchantRequest) -> Merchant:
    """Turn a client-reported merchant into an engine Merchant.

    Rules:
    - An explicit category wins; unknown names and catalog-only buckets
      resolve to "other".
    - Otherwise the MCC code is classified.
    - Otherwise the first recognized place type decides.
    - With none of these the merchant is "other".
    """
    if payload.category:
        category = SpendCategory.parse(payload.category)
        # Catalog-only buckets (amazon, flights, ...) are never merchant categories
        if category not in MERCHANT_CATEGORIES:
            category = SpendCategory.OTHER
        mcc_code = payload.mcc_code or mcc_for_category(category)
    elif payload.mcc_code:
        category = classify(payload.mcc_code)
        mcc_code = payload.mcc_code
    elif payload.place_types:
        category = classify_place_types(payload.place_types)
        mcc_code = mcc_for_category(category)
    else:
        category = SpendCategory.OTHER
        mcc_code = mcc_for_category(category)

    return Merchant(
        id=payload.id,
        name=payload.name,
        category=category,
        mcc_code=mcc_code,
        address=payload.address,
        latitude=payload.latitude,
        longitude=payload.longitude,
    )


class RecommendationService:
    def __init__(
        self,
        db: Session,
        catalog_service: Optional[CatalogService] = None,
        wallet_service: Optional[WalletService] = None,
    ):
        self.db = db
        self.catalog_service = catalog_service or CatalogService(db)
        self.wallet_service = wallet_service or WalletService(db)

    def recommend(
        self,
        *,
        user_id: str,
        merchant: Merchant,
        card_ids: Optional[List[str]] = None,
    ) -> RecommendationResult:
        """Return best card, alternatives, upsell and full ranking for a user at a merchant.

        The catalog and the wallet are loaded first; the engine then runs
        over those materialized values only.
        """
        catalog = self.catalog_service.get_catalog()
        owned_card_ids = card_ids if card_ids is not None else self.wallet_service.get_user_card_ids(user_id)

        result = recommend(merchant, owned_card_ids, catalog)
        logger.info(
            "Recommendation for user=%s merchant=%s category=%s: best=%s upsell=%s",
            user_id,
            merchant.id,
            merchant.category.value,
            result.best.card.id if result.best else None,
            result.upsell.card.id if result.upsell else None,
        )
        return result
