"""Wallet routes.

The wallet is keyed by the `x-user-id` header. New users are given the
default wallet on first access. Cards must exist in the catalog to be
added; removal and default changes only look at the wallet itself.
"""

import logging

from fastapi import APIRouter, Depends, status

from app.dependencies.security import require_user_id_header
from app.dependencies.services import get_analytics_service, get_catalog_service, get_wallet_service
from app.models.wallet import AddCardRequest, SetDefaultCardRequest, WalletResponse
from app.services.analytics_service import AnalyticsService
from app.services.catalog_service import CatalogService
from app.services.errors import ServiceError, conflict, not_found
from app.services.wallet_service import WalletService

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/v1/wallet",
    tags=["wallet"]
)


def _not_in_wallet(user_id: str, card_id: str) -> ServiceError:
    return not_found("CARD_NOT_IN_WALLET", "Card is not in the user's wallet.", user_id=user_id, card_id=card_id)


@router.get("", response_model=WalletResponse)
def get_wallet(
    user_id: str = Depends(require_user_id_header),
    wallet_service: WalletService = Depends(get_wallet_service),
):
    return wallet_service.get_wallet(user_id)


@router.post("/cards", response_model=WalletResponse, status_code=status.HTTP_201_CREATED)
def add_card(
    payload: AddCardRequest,
    user_id: str = Depends(require_user_id_header),
    wallet_service: WalletService = Depends(get_wallet_service),
    catalog_service: CatalogService = Depends(get_catalog_service),
    analytics: AnalyticsService = Depends(get_analytics_service),
):
    if payload.card_id not in catalog_service.get_catalog():
        raise not_found("CARD_NOT_FOUND", "Card not found in catalog.", card_id=payload.card_id)

    if not wallet_service.add_card(user_id, payload.card_id, payload.nickname):
        raise conflict(
            "CARD_ALREADY_IN_WALLET",
            "Card is already in the user's wallet.",
            user_id=user_id,
            card_id=payload.card_id,
        )

    analytics.track_card_added(user_id, payload.card_id)
    return wallet_service.get_wallet(user_id)


@router.delete("/cards/{card_id}", response_model=WalletResponse)
def remove_card(
    card_id: str,
    user_id: str = Depends(require_user_id_header),
    wallet_service: WalletService = Depends(get_wallet_service),
    analytics: AnalyticsService = Depends(get_analytics_service),
):
    if not wallet_service.remove_card(user_id, card_id):
        raise _not_in_wallet(user_id, card_id)

    analytics.track_card_removed(user_id, card_id)
    return wallet_service.get_wallet(user_id)


@router.put("/default", response_model=WalletResponse)
def set_default_card(
    payload: SetDefaultCardRequest,
    user_id: str = Depends(require_user_id_header),
    wallet_service: WalletService = Depends(get_wallet_service),
):
    if not wallet_service.set_default_card(user_id, payload.card_id):
        raise _not_in_wallet(user_id, payload.card_id)
    return wallet_service.get_wallet(user_id)


@router.post("/reset", response_model=WalletResponse)
def reset_wallet(
    user_id: str = Depends(require_user_id_header),
    wallet_service: WalletService = Depends(get_wallet_service),
):
    logger.info("Resetting wallet for %s", user_id)
    return wallet_service.reset_to_defaults(user_id)
