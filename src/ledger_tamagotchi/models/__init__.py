"""Database models."""

from ledger_tamagotchi.models.base import Base
from ledger_tamagotchi.models.coins import CoinBalance
from ledger_tamagotchi.models.pet import MAX_STAT, Pet, PetMood

__all__ = ["MAX_STAT", "Base", "CoinBalance", "Pet", "PetMood"]
