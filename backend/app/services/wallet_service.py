"""User wallet store.

Tracks which catalog card ids a user owns, in the order they were added,
and which one is the user's default card. New users start with the
default wallet from settings.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from app.config import settings
from app.models.wallet import UserCard, UserWallet

logger = logging.getLogger(__name__)


class WalletService:
    def __init__(self, db: Session, default_card_ids: Optional[List[str]] = None):
        self.db = db
        self.default_card_ids = (
            list(default_card_ids) if default_card_ids is not None else list(settings.DEFAULT_WALLET_CARD_IDS)
        )

    def _find_wallet(self, user_id: str) -> Optional[UserWallet]:
        return self.db.query(UserWallet).filter(UserWallet.user_id == user_id).first()

    def get_wallet(self, user_id: str) -> UserWallet:
        """Return the user's wallet, creating it with the default cards on first access."""
        wallet = self._find_wallet(user_id)
        if wallet is None:
            wallet = self.initialize_default_wallet(user_id)
        return wallet

    def initialize_default_wallet(self, user_id: str) -> UserWallet:
        """Create a wallet holding the default cards. The user must not have a wallet yet."""
        wallet = UserWallet(
            user_id=user_id,
            default_card_id=self.default_card_ids[0] if self.default_card_ids else None,
            cards=[UserCard(card_id=card_id) for card_id in self.default_card_ids],
        )
        self.db.add(wallet)
        self.db.commit()
        self.db.refresh(wallet)
        logger.info("Initialized wallet for %s with %d default cards", user_id, len(wallet.cards))
        return wallet

    def get_user_card_ids(self, user_id: str) -> List[str]:
        """Owned card ids in wallet order."""
        return [card.card_id for card in self.get_wallet(user_id).cards]

    def has_card(self, user_id: str, card_id: str) -> bool:
        return any(card.card_id == card_id for card in self.get_wallet(user_id).cards)

    def add_card(self, user_id: str, card_id: str, nickname: Optional[str] = None) -> bool:
        """Add a card to the wallet. Returns False if it is already there."""
        wallet = self.get_wallet(user_id)
        if any(card.card_id == card_id for card in wallet.cards):
            return False

        wallet.cards.append(UserCard(card_id=card_id, nickname=nickname))
        # First card becomes the default
        if len(wallet.cards) == 1:
            wallet.default_card_id = card_id
        self.db.commit()
        logger.info("Added card %s to wallet of %s", card_id, user_id)
        return True

    def remove_card(self, user_id: str, card_id: str) -> bool:
        """Remove a card. Returns False if it is not in the wallet."""
        wallet = self.get_wallet(user_id)
        match = next((card for card in wallet.cards if card.card_id == card_id), None)
        if match is None:
            return False

        wallet.cards.remove(match)
        if wallet.default_card_id == card_id:
            wallet.default_card_id = wallet.cards[0].card_id if wallet.cards else None
        self.db.commit()
        logger.info("Removed card %s from wallet of %s", card_id, user_id)
        return True

    def set_default_card(self, user_id: str, card_id: str) -> bool:
        """Make card_id the default. Returns False if it is not in the wallet."""
        wallet = self.get_wallet(user_id)
        if not any(card.card_id == card_id for card in wallet.cards):
            return False

        wallet.default_card_id = card_id
        self.db.commit()
        return True

    def clear_wallet(self, user_id: str) -> None:
        wallet = self._find_wallet(user_id)
        if wallet is None:
            return
        self.db.delete(wallet)
        self.db.commit()

    def reset_to_defaults(self, user_id: str) -> UserWallet:
        self.clear_wallet(user_id)
        return self.initialize_default_wallet(user_id)
