"""
Read-only card catalog.
Wraps an ordered list of CreditCard definitions behind id lookup, issuer
filtering and search. The bundled catalog ships in engine/data/cards.json.
"""

import json
from functools import lru_cache
from pathlib import Path
from typing import Iterable, Iterator, Optional

from engine.models import CardNetwork, CreditCard, RewardStructure, RewardType, SpendCategory


BUNDLED_CATALOG_PATH = Path(__file__).resolve().parent / "data" / "cards.json"


def _field(record: dict, snake: str, camel: str, default=None):
    if snake in record:
        return record[snake]
    return record.get(camel, default)


def reward_from_record(record: dict) -> RewardStructure:
    mcc_codes = _field(record, "mcc_codes", "mccCodes")
    return RewardStructure(
        category=SpendCategory.parse(record["category"]),
        multiplier=float(record["multiplier"]),
        description=record.get("description") or "",
        mcc_codes=tuple(mcc_codes) if mcc_codes else None,
    )


def card_from_record(record: dict) -> CreditCard:
    """
    Build a CreditCard from a plain dict.

    Accepts snake_case keys (database rows, JSON cache) or the camelCase keys
    used by mobile clients. Unknown reward categories resolve to OTHER.
    """
    rewards = _field(record, "reward_structure", "rewardStructure", []) or []
    gradient = _field(record, "gradient_colors", "gradientColors")
    bonus_value = _field(record, "signup_bonus_value", "signupBonusValue")
    return CreditCard(
        id=record["id"],
        name=record["name"],
        issuer=record["issuer"],
        network=CardNetwork(record["network"]),
        annual_fee=float(_field(record, "annual_fee", "annualFee", 0) or 0),
        base_reward=float(_field(record, "base_reward", "baseReward")),
        reward_type=RewardType(_field(record, "reward_type", "rewardType")),
        reward_structure=tuple(reward_from_record(r) for r in rewards),
        color=record.get("color"),
        gradient_colors=tuple(gradient) if gradient else None,
        logo_url=_field(record, "logo_url", "logoUrl"),
        signup_bonus=_field(record, "signup_bonus", "signupBonus"),
        signup_bonus_value=float(bonus_value) if bonus_value is not None else None,
        affiliate_url=_field(record, "affiliate_url", "affiliateUrl"),
    )


class CardCatalog:
    """Immutable, ordered mapping of card id -> CreditCard."""

    def __init__(self, cards: Iterable[CreditCard]):
        self._cards = tuple(cards)
        self._by_id: dict[str, CreditCard] = {}
        for card in self._cards:
            # First definition of an id wins
            self._by_id.setdefault(card.id, card)

    @classmethod
    def from_records(cls, records: Iterable[dict]) -> "CardCatalog":
        return cls(card_from_record(record) for record in records)

    @property
    def cards(self) -> tuple[CreditCard, ...]:
        return self._cards

    def get_card_by_id(self, card_id: str) -> Optional[CreditCard]:
        return self._by_id.get(card_id)

    def cards_by_issuer(self, issuer: str) -> list[CreditCard]:
        return [card for card in self._cards if card.issuer == issuer]

    def search(self, query: str) -> list[CreditCard]:
        """Case-insensitive substring match on card name or issuer."""
        needle = query.lower()
        return [
            card for card in self._cards
            if needle in card.name.lower() or needle in card.issuer.lower()
        ]

    def to_records(self) -> list[dict]:
        return [card.to_dict() for card in self._cards]

    def __contains__(self, card_id: object) -> bool:
        return card_id in self._by_id

    def __iter__(self) -> Iterator[CreditCard]:
        return iter(self._cards)

    def __len__(self) -> int:
        return len(self._cards)


def load_catalog(path: Path) -> CardCatalog:
    with open(path, "r", encoding="utf-8") as f:
        return CardCatalog.from_records(json.load(f))


@lru_cache(maxsize=1)
def default_catalog() -> CardCatalog:
    """The bundled catalog. Loaded once per process."""
    return load_catalog(BUNDLED_CATALOG_PATH)
