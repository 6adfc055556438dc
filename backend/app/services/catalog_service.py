"""Card catalog provider.

Resolves the card catalog through a fallback chain:
1. active cards in the database
2. the JSON cache file written by the last successful database read
3. the catalog bundled with the engine

Failures at any step are logged and fall through to the next one, so
callers always get a catalog.
"""

from __future__ import annotations

import json
import logging
import os
import time
from typing import Iterable, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, selectinload

from app.config import settings
from app.models.card import Card, CardReward
from engine.catalog import CardCatalog, default_catalog
from engine.models import CreditCard

logger = logging.getLogger(__name__)

SOURCE_DATABASE = "database"
SOURCE_CACHE = "cache"
SOURCE_BUNDLED = "bundled"


class CatalogService:
    def __init__(
        self,
        db: Session,
        cache_path: Optional[str] = None,
        cache_ttl_seconds: Optional[int] = None,
    ):
        self.db = db
        self.cache_path = cache_path or settings.CARDS_CACHE_PATH
        self.cache_ttl_seconds = (
            cache_ttl_seconds if cache_ttl_seconds is not None else settings.CARDS_CACHE_TTL_SECONDS
        )

    # ------------------------------------------------------------------
    # Database
    # ------------------------------------------------------------------
    def fetch_cards_from_db(self) -> Optional[list[dict]]:
        """Return active cards as records, ordered by issuer, or None if unavailable."""
        try:
            rows = (
                self.db.query(Card)
                .options(selectinload(Card.rewards))
                .filter(Card.is_active.is_(True))
                .order_by(Card.issuer.asc(), Card.created_at.asc(), Card.id.asc())
                .all()
            )
        except SQLAlchemyError as exc:
            # Leave the session usable for the wallet lookup that follows
            self.db.rollback()
            logger.error("Error fetching cards from database: %s", exc)
            return None

        if not rows:
            return None

        records = [row.to_record() for row in rows]
        self._write_cache(records)
        logger.info("Fetched %d cards from database", len(records))
        return records

    def seed_cards(self, cards: Iterable[CreditCard]) -> int:
        """Insert catalog cards that are not in the database yet. Returns the number added."""
        existing = {card_id for (card_id,) in self.db.query(Card.id).all()}
        added = 0
        for card in cards:
            if card.id in existing:
                continue
            row = Card(
                id=card.id,
                name=card.name,
                issuer=card.issuer,
                network=card.network,
                annual_fee=card.annual_fee,
                base_reward=card.base_reward,
                reward_type=card.reward_type,
                color=card.color,
                gradient_start=card.gradient_colors[0] if card.gradient_colors else None,
                gradient_end=card.gradient_colors[1] if card.gradient_colors else None,
                logo_url=card.logo_url,
                signup_bonus=card.signup_bonus,
                signup_bonus_value=card.signup_bonus_value,
                affiliate_url=card.affiliate_url,
                is_active=True,
            )
            row.rewards = [
                CardReward(
                    category=reward.category.value,
                    multiplier=reward.multiplier,
                    description=reward.description,
                    mcc_codes=",".join(reward.mcc_codes) if reward.mcc_codes else None,
                )
                for reward in card.reward_structure
            ]
            self.db.add(row)
            existing.add(card.id)
            added += 1

        self.db.commit()
        logger.info("Seeded %d cards into the catalog", added)
        return added

    # ------------------------------------------------------------------
    # Cache
    # ------------------------------------------------------------------
    def _write_cache(self, records: list[dict]) -> None:
        try:
            os.makedirs(os.path.dirname(self.cache_path) or ".", exist_ok=True)
            with open(self.cache_path, "w", encoding="utf-8") as f:
                json.dump({"timestamp": time.time(), "cards": records}, f, indent=2)
        except OSError as exc:
            logger.error("Error caching cards: %s", exc)

    def get_cached_cards(self) -> Optional[list[dict]]:
        """Return cached records if the cache file exists and has not expired."""
        if not os.path.exists(self.cache_path):
            return None
        try:
            with open(self.cache_path, "r", encoding="utf-8") as f:
                payload = json.load(f)
        except (OSError, ValueError) as exc:
            logger.error("Error reading card cache: %s", exc)
            return None

        if not isinstance(payload, dict):
            logger.error("Discarding card cache with unexpected shape: %s", type(payload).__name__)
            return None
        try:
            cache_age = time.time() - float(payload.get("timestamp", 0))
        except (TypeError, ValueError) as exc:
            logger.error("Discarding card cache with bad timestamp: %s", exc)
            return None
        if cache_age > self.cache_ttl_seconds:
            logger.info("Card cache expired")
            return None

        cards = payload.get("cards")
        if not isinstance(cards, list):
            return None
        return cards or None

    def clear_cache(self) -> None:
        try:
            os.remove(self.cache_path)
        except FileNotFoundError:
            pass
        except OSError as exc:
            logger.error("Error clearing card cache: %s", exc)

    # ------------------------------------------------------------------
    # Catalog
    # ------------------------------------------------------------------
    def _build(self, records: list[dict], source: str) -> Optional[CardCatalog]:
        try:
            return CardCatalog.from_records(records)
        except (KeyError, TypeError, ValueError) as exc:
            logger.error("Discarding malformed %s catalog: %s", source, exc)
            return None

    def get_catalog_with_source(self) -> tuple[CardCatalog, str]:
        records = self.fetch_cards_from_db()
        if records:
            catalog = self._build(records, SOURCE_DATABASE)
            if catalog is not None:
                return catalog, SOURCE_DATABASE

        cached = self.get_cached_cards()
        if cached:
            catalog = self._build(cached, SOURCE_CACHE)
            if catalog is not None:
                logger.info("Using cached cards")
                return catalog, SOURCE_CACHE

        logger.info("Using bundled card data")
        return default_catalog(), SOURCE_BUNDLED

    def get_catalog(self) -> CardCatalog:
        return self.get_catalog_with_source()[0]

    def get_cards(self) -> list[CreditCard]:
        return list(self.get_catalog())

    def refresh_cards(self) -> tuple[CardCatalog, str]:
        """Re-read the database, skipping the cache. Falls back to bundled data."""
        records = self.fetch_cards_from_db()
        if records:
            catalog = self._build(records, SOURCE_DATABASE)
            if catalog is not None:
                return catalog, SOURCE_DATABASE
        return default_catalog(), SOURCE_BUNDLED
