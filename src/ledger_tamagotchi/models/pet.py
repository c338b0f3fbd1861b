"""Pet model: one virtual pet per owner."""

from enum import Enum

from sqlalchemy import BigInteger, Boolean, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from ledger_tamagotchi.models.base import Base

MAX_STAT = 100


class PetMood(str, Enum):
    """Mood shown to the owner, derived from the current stats."""

    HAPPY = "happy"
    NEUTRAL = "neutral"
    SAD = "sad"
    DECEASED = "deceased"


class Pet(Base):
    """A virtual pet whose stats decay between owner actions.

    Timestamps are integer UNIX seconds taken from the engine's clock,
    not database server time, so decay is reproducible in tests.
    """

    __tablename__ = "pets"

    owner: Mapped[str] = mapped_column(String(255), primary_key=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)

    birthdate: Mapped[int] = mapped_column(BigInteger, nullable=False)
    last_updated: Mapped[int] = mapped_column(BigInteger, nullable=False)
    is_alive: Mapped[bool] = mapped_column(Boolean, default=True)

    # Stats, each bounded to [0, MAX_STAT]
    hunger: Mapped[int] = mapped_column(Integer, default=MAX_STAT)
    happiness: Mapped[int] = mapped_column(Integer, default=MAX_STAT)
    energy: Mapped[int] = mapped_column(Integer, default=MAX_STAT)

    # Cosmetics
    has_glasses: Mapped[bool] = mapped_column(Boolean, default=False)

    def __repr__(self) -> str:
        return (
            f"Pet(owner={self.owner!r}, name={self.name!r}, alive={self.is_alive}, "
            f"hunger={self.hunger}, happiness={self.happiness}, energy={self.energy})"
        )
