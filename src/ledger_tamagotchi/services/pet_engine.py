"""Pet lifecycle engine.

Every public operation runs as one transaction against the owner's records:
authorize, load the pet, apply lazy decay, apply the action, commit. Any
error rolls the whole transaction back, including decay computed on the way.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import NamedTuple

import structlog
from sqlalchemy.ext.asyncio import AsyncSession

from ledger_tamagotchi.core.exceptions import (
    InsufficientResourceError,
    PetAlreadyExistsError,
    PetDeceasedError,
    PetError,
    PetNotFoundError,
)
from ledger_tamagotchi.crud import coins as coins_crud
from ledger_tamagotchi.crud import pet as pet_crud
from ledger_tamagotchi.models.pet import Pet
from ledger_tamagotchi.services import pet_logic
from ledger_tamagotchi.services.auth import Authorizer
from ledger_tamagotchi.services.clock import Clock, SystemClock

logger = structlog.get_logger()

PET_EXISTS_MESSAGE = "Pet already exists for this owner"
PET_NOT_FOUND_MESSAGE = "Pet not found"
PET_DECEASED_MESSAGE = "Your pet is no longer with us."
NOT_ENOUGH_ENERGY_MESSAGE = "Not enough energy to work."
NOT_ENOUGH_COINS_MESSAGE = "Not enough coins to mint glasses."


class DebugStatus(NamedTuple):
    """Diagnostic view of a pet: (exists, is_alive, hunger, happiness)."""

    exists: bool
    is_alive: bool
    hunger: int
    happiness: int


class PetEngine:
    """Applies the pet rules for owners through one database session."""

    def __init__(
        self,
        session: AsyncSession,
        authorizer: Authorizer,
        clock: Clock | None = None,
    ) -> None:
        self.session = session
        self.authorizer = authorizer
        self.clock = clock or SystemClock()

    @asynccontextmanager
    async def _transaction(self) -> AsyncIterator[None]:
        try:
            yield
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise

    async def _load_with_decay(self, owner: str, now: int) -> Pet:
        pet = await pet_crud.get_pet(self.session, owner, for_update=True)
        if pet is None:
            raise PetNotFoundError(PET_NOT_FOUND_MESSAGE)

        decay = pet_logic.apply_decay(pet, now)
        if decay is not None:
            logger.debug(
                "pet_decayed",
                owner=owner,
                periods=decay.periods,
                hunger=pet.hunger,
                happiness=pet.happiness,
            )
            if not pet.is_alive:
                logger.info("pet_died", owner=owner, pet_name=pet.name, birthdate=pet.birthdate)

        return pet

    @asynccontextmanager
    async def _action(self, owner: str, action: str) -> AsyncIterator[Pet]:
        """Run an owner action on a living pet, committing only on success."""
        self.authorizer.require_auth(owner)
        try:
            async with self._transaction():
                now = self.clock.now()
                pet = await self._load_with_decay(owner, now)
                if not pet.is_alive:
                    raise PetDeceasedError(PET_DECEASED_MESSAGE)

                yield pet

                pet.last_updated = max(pet.last_updated, now)
        except PetError as e:
            logger.info("pet_action_rejected", owner=owner, action=action, error=e.message)
            raise

        logger.info(
            "pet_action",
            owner=owner,
            action=action,
            hunger=pet.hunger,
            happiness=pet.happiness,
            energy=pet.energy,
        )

    async def _change_coins(self, owner: str, delta: int) -> int:
        balance = await coins_crud.get_coins(self.session, owner)
        new_balance = await coins_crud.set_coins(self.session, owner, balance + delta)
        logger.debug("coins_changed", owner=owner, delta=delta, balance=new_balance)
        return new_balance

    async def create(self, owner: str, name: str) -> Pet:
        """Hatch a new pet, replacing a dead one if present.

        An existing pet is decayed first so a long-neglected pet is found
        dead and can be replaced. Creating always resets the coin balance.
        """
        self.authorizer.require_auth(owner)
        async with self._transaction():
            now = self.clock.now()
            if await pet_crud.pet_exists(self.session, owner):
                existing = await self._load_with_decay(owner, now)
                if existing.is_alive:
                    raise PetAlreadyExistsError(PET_EXISTS_MESSAGE)

            pet = await pet_crud.put_new_pet(self.session, owner, name, now)
            await coins_crud.set_coins(self.session, owner, 0)

        logger.info("pet_created", owner=owner, pet_name=name, birthdate=now)
        return pet

    async def get_pet(self, owner: str) -> Pet:
        """Read a pet, persisting any decay since its last update."""
        async with self._transaction():
            pet = await self._load_with_decay(owner, self.clock.now())
        return pet

    async def feed(self, owner: str) -> Pet:
        async with self._action(owner, "feed") as pet:
            pet_logic.feed(pet)
        return pet

    async def play(self, owner: str) -> Pet:
        async with self._action(owner, "play") as pet:
            pet_logic.play(pet)
        return pet

    async def sleep(self, owner: str) -> Pet:
        async with self._action(owner, "sleep") as pet:
            pet_logic.sleep(pet)
        return pet

    async def work(self, owner: str) -> Pet:
        """Trade energy and happiness for coins."""
        async with self._action(owner, "work") as pet:
            if not pet_logic.can_work(pet):
                raise InsufficientResourceError(NOT_ENOUGH_ENERGY_MESSAGE)
            pet_logic.work(pet)
            await self._change_coins(owner, pet_logic.WORK_COIN_REWARD)
        return pet

    async def mint_glasses(self, owner: str) -> Pet:
        """Spend coins on the glasses cosmetic."""
        async with self._action(owner, "mint_glasses") as pet:
            coins = await coins_crud.get_coins(self.session, owner)
            if not pet_logic.can_afford_glasses(coins):
                raise InsufficientResourceError(NOT_ENOUGH_COINS_MESSAGE)
            pet_logic.wear_glasses(pet)
            await self._change_coins(owner, -pet_logic.GLASSES_PRICE)
        return pet

    async def get_coins(self, owner: str) -> int:
        """Get an owner's coin balance; 0 when they have none."""
        return await coins_crud.get_coins(self.session, owner)

    async def debug_status(self, owner: str) -> DebugStatus:
        """Report existence, liveness, hunger and happiness without failing."""
        if not await pet_crud.pet_exists(self.session, owner):
            return DebugStatus(exists=False, is_alive=False, hunger=0, happiness=0)

        pet = await self.get_pet(owner)
        return DebugStatus(
            exists=True,
            is_alive=pet.is_alive,
            hunger=pet.hunger,
            happiness=pet.happiness,
        )

    async def remove(self, owner: str) -> None:
        """Delete an owner's pet and coins. Missing records are fine."""
        self.authorizer.require_auth(owner)
        async with self._transaction():
            removed_pet = await pet_crud.delete_pet(self.session, owner)
            removed_coins = await coins_crud.delete_coins(self.session, owner)

        logger.info("pet_removed", owner=owner, pet=removed_pet, coins=removed_coins)
