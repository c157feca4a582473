"""Test helper functions for common data creation patterns."""

from datetime import UTC, datetime, timedelta
from uuid import UUID

from jose import jwt

from src.project_notes.core.config import get_settings

FUNCTIONS = "/functions/v1"


def make_token(
    user_id: UUID | str,
    *,
    email: str | None = None,
    expires_in: timedelta = timedelta(hours=1),
    audience: str | None = "authenticated",
    secret: str | None = None,
) -> str:
    """Mint a bearer token the way the identity service does.

    Args:
        user_id: Subject of the token.
        email: Optional e-mail claim.
        expires_in: Lifetime; negative values produce an expired token.
        audience: ``aud`` claim, omitted when None.
        secret: Signing secret (default: the configured AUTH_JWT_SECRET).
    """
    settings = get_settings()
    claims: dict[str, object] = {
        "sub": str(user_id),
        "exp": datetime.now(UTC) + expires_in,
        "role": "authenticated",
    }
    if email:
        claims["email"] = email
    if audience:
        claims["aud"] = audience
    return jwt.encode(
        claims,
        secret or settings.auth_jwt_secret or "",
        algorithm=settings.auth_jwt_algorithm,
    )


def auth_headers(user_id: UUID | str, **token_kwargs) -> dict[str, str]:
    return {"Authorization": f"Bearer {make_token(user_id, **token_kwargs)}"}
