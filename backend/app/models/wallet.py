from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, field_validator
from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import relationship

from app.db.db import Base


# SQLAlchemy ORM Models
class UserWallet(Base):
    __tablename__ = "user_wallets"

    user_id = Column(String(128), primary_key=True, index=True)
    default_card_id = Column(String(64), nullable=True)
    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)

    # Wallet order is insertion order; it decides ranking ties
    cards = relationship(
        "UserCard",
        back_populates="wallet",
        cascade="all, delete-orphan",
        order_by="UserCard.id",
    )


class UserCard(Base):
    __tablename__ = "user_cards"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    user_id = Column(String(128), ForeignKey("user_wallets.user_id", ondelete="CASCADE"), nullable=False)
    # Not a foreign key: the catalog can drop cards a wallet still references
    card_id = Column(String(64), nullable=False)
    nickname = Column(String(255), nullable=True)
    added_at = Column(DateTime, nullable=False, default=datetime.utcnow)

    __table_args__ = (
        UniqueConstraint("user_id", "card_id", name="uq_user_cards_user_card"),
    )

    wallet = relationship("UserWallet", back_populates="cards")


# Pydantic Models for Request/Response
class UserCardResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    card_id: str
    nickname: Optional[str] = None
    added_at: datetime


class WalletResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    user_id: str
    default_card_id: Optional[str] = None
    cards: List[UserCardResponse]


class AddCardRequest(BaseModel):
    card_id: str
    nickname: Optional[str] = None

    @field_validator("card_id")
    @classmethod
    def card_id_not_empty(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("card_id cannot be empty")
        return v.strip()


class SetDefaultCardRequest(BaseModel):
    card_id: str
