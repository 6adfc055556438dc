"""Test helpers: an in-memory database and a small catalog whose ids match the default wallet."""

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.db.db import Base
import app.models  # noqa: F401
from engine.models import CardNetwork, CreditCard, RewardStructure, RewardType, SpendCategory


def make_session_factory():
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    return sessionmaker(bind=engine)


def make_card(card_id, issuer, reward_type, base_reward, rewards=(), name=None):
    return CreditCard(
        id=card_id,
        name=name or card_id.replace("-", " ").title(),
        issuer=issuer,
        network=CardNetwork.VISA,
        annual_fee=0,
        base_reward=base_reward,
        reward_type=reward_type,
        reward_structure=tuple(
            RewardStructure(category=category, multiplier=multiplier, description=description)
            for category, multiplier, description in rewards
        ),
    )


TEST_CARDS = [
    make_card(
        "amex-gold", "American Express", RewardType.POINTS, 1,
        [(SpendCategory.DINING, 4, "4x at restaurants"), (SpendCategory.GROCERY, 4, "4x at U.S. supermarkets")],
        name="American Express Gold Card",
    ),
    make_card(
        "chase-sapphire-preferred", "Chase", RewardType.POINTS, 1,
        [(SpendCategory.DINING, 3, "3x on dining"), (SpendCategory.TRAVEL, 2, "2x on travel")],
        name="Chase Sapphire Preferred",
    ),
    make_card("citi-double-cash", "Citi", RewardType.CASHBACK, 2, name="Citi Double Cash"),
    make_card(
        "chase-freedom-unlimited", "Chase", RewardType.CASHBACK, 1.5,
        [(SpendCategory.DINING, 3, "3% on dining")],
        name="Chase Freedom Unlimited",
    ),
    make_card(
        "dining-max", "Capital One", RewardType.CASHBACK, 1,
        [(SpendCategory.DINING, 5, "5% on dining")],
        name="Dining Max",
    ),
]

DEFAULT_WALLET = [
    "amex-gold",
    "chase-sapphire-preferred",
    "citi-double-cash",
    "chase-freedom-unlimited",
]
