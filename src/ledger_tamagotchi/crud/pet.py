"""CRUD operations for Pet model."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ledger_tamagotchi.models.pet import MAX_STAT, Pet


async def get_pet(db: AsyncSession, owner: str, *, for_update: bool = False) -> Pet | None:
    """Get the pet record for an owner, optionally locking the row."""
    stmt = select(Pet).where(Pet.owner == owner)
    if for_update:
        stmt = stmt.with_for_update()
    result = await db.execute(stmt)
    return result.scalar_one_or_none()


async def pet_exists(db: AsyncSession, owner: str) -> bool:
    """Check whether an owner has a pet record, alive or not."""
    result = await db.execute(select(Pet.owner).where(Pet.owner == owner))
    return result.scalar_one_or_none() is not None


async def put_new_pet(db: AsyncSession, owner: str, name: str, now: int) -> Pet:
    """Write a fresh pet for an owner, overwriting any previous generation.

    Changes are flushed but not committed; the caller owns the transaction.
    """
    pet = await get_pet(db, owner)
    if pet is None:
        pet = Pet(owner=owner)
        db.add(pet)

    pet.name = name
    pet.birthdate = now
    pet.last_updated = now
    pet.is_alive = True
    pet.hunger = MAX_STAT
    pet.happiness = MAX_STAT
    pet.energy = MAX_STAT
    pet.has_glasses = False

    await db.flush()
    return pet


async def delete_pet(db: AsyncSession, owner: str) -> bool:
    """Delete an owner's pet if present. Returns whether a record was removed."""
    pet = await get_pet(db, owner)
    if pet is None:
        return False
    await db.delete(pet)
    await db.flush()
    return True
