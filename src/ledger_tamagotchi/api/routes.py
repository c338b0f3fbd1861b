"""API routes for pet management."""

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Annotated

from fastapi import APIRouter, Depends, Header, HTTPException, status
from pydantic import BaseModel, ConfigDict, Field, computed_field
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from ledger_tamagotchi.core.config import settings
from ledger_tamagotchi.core.database import get_session
from ledger_tamagotchi.core.exceptions import (
    InsufficientResourceError,
    PetAlreadyExistsError,
    PetDeceasedError,
    PetError,
    PetNotFoundError,
    UnauthorizedError,
)
from ledger_tamagotchi.models.pet import Pet, PetMood
from ledger_tamagotchi.services.auth import CallerAuthorizer, verify_owner_token
from ledger_tamagotchi.services.clock import Clock, SystemClock
from ledger_tamagotchi.services.pet_engine import PetEngine
from ledger_tamagotchi.services.pet_logic import calculate_mood

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1", tags=["pets"])

DbSession = Annotated[AsyncSession, Depends(get_session)]

ERROR_STATUS_CODES: dict[type[PetError], int] = {
    UnauthorizedError: status.HTTP_403_FORBIDDEN,
    PetNotFoundError: status.HTTP_404_NOT_FOUND,
    PetAlreadyExistsError: status.HTTP_409_CONFLICT,
    PetDeceasedError: status.HTTP_410_GONE,
    InsufficientResourceError: status.HTTP_409_CONFLICT,
}


def get_clock() -> Clock:
    """Clock dependency, overridden in tests."""
    return SystemClock()


def get_caller(
    x_owner: Annotated[str | None, Header()] = None,
    authorization: Annotated[str | None, Header()] = None,
) -> str | None:
    """Resolve the calling owner from request headers.

    With an auth secret configured the caller must also present a bearer
    token signed for that owner; without one, X-Owner is trusted.
    """
    if settings.auth_secret:
        token = (authorization or "").removeprefix("Bearer ").strip()
        if x_owner is None or not token or not verify_owner_token(
            x_owner, token, settings.auth_secret
        ):
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Invalid owner token",
            )

    return x_owner


def get_engine(
    session: DbSession,
    caller: Annotated[str | None, Depends(get_caller)],
    clock: Annotated[Clock, Depends(get_clock)],
) -> PetEngine:
    """Build a pet engine bound to this request's session and caller."""
    return PetEngine(session, CallerAuthorizer(caller), clock)


Engine = Annotated[PetEngine, Depends(get_engine)]


@contextmanager
def pet_errors() -> Iterator[None]:
    """Translate engine errors into HTTP errors."""
    try:
        yield
    except PetError as e:
        raise HTTPException(
            status_code=ERROR_STATUS_CODES.get(type(e), status.HTTP_400_BAD_REQUEST),
            detail=e.message,
        ) from e


class PetCreate(BaseModel):
    """Request model for creating a pet."""

    name: str = Field(..., min_length=1, max_length=100)


class PetResponse(BaseModel):
    """Response model for pet data."""

    model_config = ConfigDict(from_attributes=True)

    owner: str
    name: str
    birthdate: int
    last_updated: int
    is_alive: bool
    hunger: int
    happiness: int
    energy: int
    has_glasses: bool

    @computed_field  # type: ignore[prop-decorator]
    @property
    def mood(self) -> PetMood:
        return calculate_mood(self.is_alive, self.hunger, self.happiness, self.energy)


class ActionResponse(BaseModel):
    """Response model for owner actions."""

    message: str
    pet: PetResponse
    coins: int


class CoinsResponse(BaseModel):
    """Coin balance response."""

    owner: str
    coins: int


class DebugStatusResponse(BaseModel):
    """Diagnostic pet status response."""

    exists: bool
    is_alive: bool
    hunger: int
    happiness: int


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    version: str
    database: str


async def _action_response(engine: PetEngine, pet: Pet, message: str) -> ActionResponse:
    return ActionResponse(
        message=message,
        pet=PetResponse.model_validate(pet),
        coins=await engine.get_coins(pet.owner),
    )


@router.get("/health", response_model=HealthResponse)
async def health_check(session: DbSession) -> HealthResponse:
    """Health check endpoint."""
    from ledger_tamagotchi import __version__

    try:
        await session.execute(text("SELECT 1"))
        db_status = "connected"
    except Exception:
        logger.exception("Database health check failed")
        db_status = "disconnected"

    return HealthResponse(status="healthy", version=__version__, database=db_status)


@router.post("/pets/{owner}", response_model=PetResponse, status_code=status.HTTP_201_CREATED)
async def create_pet(owner: str, pet_data: PetCreate, engine: Engine) -> PetResponse:
    """Hatch a new pet for an owner."""
    with pet_errors():
        pet = await engine.create(owner, pet_data.name)
    return PetResponse.model_validate(pet)


@router.get("/pets/{owner}", response_model=PetResponse)
async def get_pet(owner: str, engine: Engine) -> PetResponse:
    """Get pet status, applying any decay since the last visit."""
    with pet_errors():
        pet = await engine.get_pet(owner)
    return PetResponse.model_validate(pet)


@router.post("/pets/{owner}/feed", response_model=ActionResponse)
async def feed_pet(owner: str, engine: Engine) -> ActionResponse:
    with pet_errors():
        pet = await engine.feed(owner)
    return await _action_response(engine, pet, f"{pet.name} has been fed!")


@router.post("/pets/{owner}/play", response_model=ActionResponse)
async def play_with_pet(owner: str, engine: Engine) -> ActionResponse:
    with pet_errors():
        pet = await engine.play(owner)
    return await _action_response(engine, pet, f"{pet.name} had fun playing!")


@router.post("/pets/{owner}/sleep", response_model=ActionResponse)
async def put_pet_to_sleep(owner: str, engine: Engine) -> ActionResponse:
    with pet_errors():
        pet = await engine.sleep(owner)
    return await _action_response(engine, pet, f"{pet.name} is well rested.")


@router.post("/pets/{owner}/work", response_model=ActionResponse)
async def work_pet(owner: str, engine: Engine) -> ActionResponse:
    """Send the pet to work to earn coins."""
    with pet_errors():
        pet = await engine.work(owner)
    return await _action_response(engine, pet, f"{pet.name} earned some coins.")


@router.post("/pets/{owner}/mint-glasses", response_model=ActionResponse)
async def mint_glasses(owner: str, engine: Engine) -> ActionResponse:
    """Buy the glasses cosmetic."""
    with pet_errors():
        pet = await engine.mint_glasses(owner)
    return await _action_response(engine, pet, f"{pet.name} looks cool in new glasses!")


@router.get("/pets/{owner}/coins", response_model=CoinsResponse)
async def get_coins(owner: str, engine: Engine) -> CoinsResponse:
    return CoinsResponse(owner=owner, coins=await engine.get_coins(owner))


@router.get("/pets/{owner}/debug", response_model=DebugStatusResponse)
async def debug_status(owner: str, engine: Engine) -> DebugStatusResponse:
    """Diagnostic status; never fails for a missing pet."""
    result = await engine.debug_status(owner)
    return DebugStatusResponse(**result._asdict())


@router.delete("/pets/{owner}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_pet(owner: str, engine: Engine) -> None:
    """Remove a pet and its coins."""
    with pet_errors():
        await engine.remove(owner)
