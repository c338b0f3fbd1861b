"""Coin balance model, stored independently of the pet."""

from sqlalchemy import BigInteger, String
from sqlalchemy.orm import Mapped, mapped_column

from ledger_tamagotchi.models.base import Base


class CoinBalance(Base):
    """Reward currency earned by working, keyed by owner."""

    __tablename__ = "coin_balances"

    owner: Mapped[str] = mapped_column(String(255), primary_key=True)
    balance: Mapped[int] = mapped_column(BigInteger, default=0)
