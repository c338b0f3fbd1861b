"""Errors raised by the pet lifecycle engine.

Every error aborts the current operation; the engine rolls back before
re-raising so no partial state is ever committed.
"""


class PetError(Exception):
    """Base class for pet engine errors."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class UnauthorizedError(PetError):
    """The caller may not act on behalf of the owner."""


class PetNotFoundError(PetError):
    """The owner has no pet record."""


class PetAlreadyExistsError(PetError):
    """The owner already has a living pet."""


class PetDeceasedError(PetError):
    """The owner's pet is no longer alive."""


class InsufficientResourceError(PetError):
    """Not enough energy or coins for the requested action."""
