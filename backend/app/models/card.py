from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    DateTime,
    Enum as SAEnum,
    ForeignKey,
    Integer,
    Numeric,
    String,
)
from sqlalchemy.orm import relationship

from app.db.db import Base
from engine.models import CardNetwork, RewardType


# SQLAlchemy ORM Models
class Card(Base):
    __tablename__ = "cards"

    id = Column(String(64), primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    issuer = Column(String(255), nullable=False)
    network = Column(SAEnum(CardNetwork), nullable=False)
    annual_fee = Column(Numeric(10, 2), nullable=False, default=0)
    base_reward = Column(Numeric(10, 4), nullable=False)
    reward_type = Column(SAEnum(RewardType), nullable=False)
    color = Column(String(16), nullable=True)
    gradient_start = Column(String(16), nullable=True)
    gradient_end = Column(String(16), nullable=True)
    logo_url = Column(String(512), nullable=True)
    signup_bonus = Column(String(255), nullable=True)
    signup_bonus_value = Column(Numeric(10, 2), nullable=True)
    affiliate_url = Column(String(512), nullable=True)
    is_active = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)
    updated_at = Column(DateTime, nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow)

    __table_args__ = (
        CheckConstraint("base_reward >= 0", name="ck_cards_base_reward_non_negative"),
    )

    # Reward rows keep insertion order; the first matching category wins
    rewards = relationship(
        "CardReward",
        back_populates="card",
        cascade="all, delete-orphan",
        order_by="CardReward.id",
    )

    def to_record(self) -> dict:
        """Plain dict in the shape engine.catalog.card_from_record expects."""
        gradient = None
        if self.gradient_start and self.gradient_end:
            gradient = [self.gradient_start, self.gradient_end]
        return {
            "id": self.id,
            "name": self.name,
            "issuer": self.issuer,
            "network": self.network.value,
            "annual_fee": float(self.annual_fee or 0),
            "base_reward": float(self.base_reward),
            "reward_type": self.reward_type.value,
            "reward_structure": [reward.to_record() for reward in self.rewards],
            "color": self.color,
            "gradient_colors": gradient,
            "logo_url": self.logo_url,
            "signup_bonus": self.signup_bonus,
            "signup_bonus_value": float(self.signup_bonus_value) if self.signup_bonus_value is not None else None,
            "affiliate_url": self.affiliate_url,
        }


class CardReward(Base):
    __tablename__ = "card_rewards"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    card_id = Column(String(64), ForeignKey("cards.id", ondelete="CASCADE"), nullable=False, index=True)
    # Stored as text; unknown values resolve to "other" when loaded
    category = Column(String(64), nullable=False)
    multiplier = Column(Numeric(10, 4), nullable=False)
    description = Column(String(512), nullable=False, default="")
    mcc_codes = Column(String(512), nullable=True)  # comma separated

    __table_args__ = (
        CheckConstraint("multiplier >= 0", name="ck_card_rewards_multiplier_non_negative"),
    )

    card = relationship("Card", back_populates="rewards")

    def to_record(self) -> dict:
        return {
            "category": self.category,
            "multiplier": float(self.multiplier),
            "description": self.description or "",
            "mcc_codes": self.mcc_codes.split(",") if self.mcc_codes else None,
        }


# Pydantic Models for Request/Response
class RewardStructureSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    category: str
    multiplier: float = Field(..., ge=0)
    description: str
    mcc_codes: Optional[list[str]] = None


class CardSchema(BaseModel):
    """Catalog card as returned by the API"""
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    issuer: str
    network: CardNetwork
    annual_fee: float = Field(0, ge=0)
    base_reward: float = Field(..., ge=0)
    reward_type: RewardType
    reward_structure: list[RewardStructureSchema] = []
    color: Optional[str] = None
    gradient_colors: Optional[list[str]] = None
    logo_url: Optional[str] = None
    signup_bonus: Optional[str] = None
    signup_bonus_value: Optional[float] = None
    affiliate_url: Optional[str] = None

    @field_validator("id", "name", "issuer")
    @classmethod
    def not_empty(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("must not be empty")
        return v.strip()


class CatalogResponse(BaseModel):
    cards: list[CardSchema]
    source: str  # "database" | "cache" | "bundled"
