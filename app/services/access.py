"""Request gate: bearer-token extraction, authentication and role checks.

Authentication trusts any token whose signature and expiry verify and whose
user still exists. It does not consult the session cache and does not look at
``is_active``: logout and password change only stop a token from being
refreshed, not from being used until it expires.
"""

from collections.abc import Iterable

from app.core.errors import Forbidden, InvalidToken, Unauthorized
from app.core.security import TokenService
from app.models.user import User
from app.schemas.user import Role
from app.services.user_store import UserStore

BEARER_SCHEME = "bearer"


def extract_bearer_token(authorization: str | None) -> str | None:
    """Return the token from ``Authorization: Bearer <token>``, or None if absent/malformed."""
    if not authorization:
        return None
    parts = authorization.strip().split()
    if len(parts) != 2 or parts[0].lower() != BEARER_SCHEME:
        return None
    return parts[1]


def authenticate(
    authorization: str | None,
    tokens: TokenService,
    users: UserStore,
) -> User:
    """Resolve the request's user. Any failure is the same Unauthorized, with no detail."""
    token = extract_bearer_token(authorization)
    if token is None:
        raise Unauthorized()
    try:
        claims = tokens.verify(token)
    except InvalidToken as e:
        raise Unauthorized() from e
    user = users.find_by_id(claims.user_id)
    if user is None:
        raise Unauthorized()
    return user


def try_authenticate(
    authorization: str | None,
    tokens: TokenService,
    users: UserStore,
) -> User | None:
    """Like authenticate, but an anonymous request (or any failure) yields None."""
    try:
        return authenticate(authorization, tokens, users)
    except Unauthorized:
        return None


def authorize(role: Role | str, allowed: Iterable[Role]) -> None:
    """Raise Forbidden unless role is one of the allowed roles."""
    allowed_roles = frozenset(Role(r) for r in allowed)
    try:
        current = Role(role)
    except ValueError as e:
        raise Forbidden() from e
    if current not in allowed_roles:
        raise Forbidden(f"User role {current.value} is not authorized to access this route")
