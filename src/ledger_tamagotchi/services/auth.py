"""Owner authorization.

The engine only ever asks one question, "may the caller act as this owner?",
through an injected ``Authorizer``. How the caller was identified is the
HTTP layer's business; tokens here are HMAC-SHA256 over the owner id.
"""

import hashlib
import hmac
from typing import Protocol

from ledger_tamagotchi.core.exceptions import UnauthorizedError

TOKEN_PREFIX = "sha256="


class Authorizer(Protocol):
    """Capability check called at the top of owner-scoped operations."""

    def require_auth(self, owner: str) -> None: ...


class CallerAuthorizer:
    """Authorizes exactly one identity: the resolved caller."""

    def __init__(self, caller: str | None) -> None:
        self.caller = caller

    def require_auth(self, owner: str) -> None:
        if self.caller is None or self.caller != owner:
            raise UnauthorizedError(f"Caller is not authorized to act for {owner}")


def sign_owner_token(owner: str, secret: str) -> str:
    """Issue a token proving the bearer may act as ``owner``."""
    digest = hmac.new(secret.encode("utf-8"), owner.encode("utf-8"), hashlib.sha256).hexdigest()
    return f"{TOKEN_PREFIX}{digest}"


def verify_owner_token(owner: str, token: str, secret: str) -> bool:
    """Verify a token issued by ``sign_owner_token`` (constant-time compare)."""
    if not token.startswith(TOKEN_PREFIX):
        return False
    return hmac.compare_digest(sign_owner_token(owner, secret), token)
