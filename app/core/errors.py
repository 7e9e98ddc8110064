"""Credential-lifecycle error kinds.

Each error carries a stable ``code`` and a human-readable ``message``. The
``status_code`` is a hint for the HTTP boundary; the services never look at it.
Infrastructure failures (database, network) are not part of this taxonomy and
propagate unchanged.
"""


class AuthError(Exception):
    """Base class for credential-logic failures."""

    code: str = "auth_error"
    status_code: int = 400
    default_message: str = "Authentication error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class DuplicateUser(AuthError):
    code = "duplicate_user"
    status_code = 409
    default_message = "User already exists"


class InvalidCredentials(AuthError):
    """Unknown email or wrong password; the two cases share one message."""

    code = "invalid_credentials"
    status_code = 401
    default_message = "Invalid credentials"


class AccountDeactivated(AuthError):
    code = "account_deactivated"
    status_code = 401
    default_message = "Account is deactivated"


class NotFound(AuthError):
    code = "not_found"
    status_code = 404
    default_message = "User not found"


class EmailTaken(AuthError):
    code = "email_taken"
    status_code = 409
    default_message = "Email already in use"


class IncorrectPassword(AuthError):
    code = "incorrect_password"
    status_code = 400
    default_message = "Current password is incorrect"


class InvalidToken(AuthError):
    """Malformed, expired or badly signed token."""

    code = "invalid_token"
    status_code = 401
    default_message = "Invalid token"


class UserInactiveOrMissing(AuthError):
    code = "user_inactive_or_missing"
    status_code = 401
    default_message = "User not found or inactive"


class StaleToken(AuthError):
    """Token verifies but is no longer the user's current session token."""

    code = "stale_token"
    status_code = 401
    default_message = "Invalid or expired token"


class Unauthorized(AuthError):
    code = "unauthorized"
    status_code = 401
    default_message = "Not authorized to access this route"


class Forbidden(AuthError):
    code = "forbidden"
    status_code = 403
    default_message = "Not allowed to access this route"


class RateLimited(AuthError):
    """Client exceeded the per-window request budget."""

    code = "rate_limited"
    status_code = 429
    default_message = "Too many requests from this client, please try again later"
