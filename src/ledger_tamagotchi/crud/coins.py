"""CRUD operations for coin balances."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ledger_tamagotchi.models.coins import CoinBalance


async def _get_record(db: AsyncSession, owner: str) -> CoinBalance | None:
    result = await db.execute(select(CoinBalance).where(CoinBalance.owner == owner))
    return result.scalar_one_or_none()


async def get_coins(db: AsyncSession, owner: str) -> int:
    """Get an owner's balance, 0 when no record exists."""
    record = await _get_record(db, owner)
    return record.balance if record is not None else 0


async def set_coins(db: AsyncSession, owner: str, balance: int) -> int:
    """Store an owner's balance, creating the record if needed."""
    record = await _get_record(db, owner)
    if record is None:
        record = CoinBalance(owner=owner, balance=balance)
        db.add(record)
    else:
        record.balance = balance
    await db.flush()
    return balance


async def delete_coins(db: AsyncSession, owner: str) -> bool:
    """Delete an owner's balance if present."""
    record = await _get_record(db, owner)
    if record is None:
        return False
    await db.delete(record)
    await db.flush()
    return True
