"""Bearer token decoding."""

from typing import Any

from jose import JWTError, jwt


def decode_token(
    token: str,
    secret: str,
    algorithm: str = "HS256",
    audience: str | None = None,
) -> dict[str, Any] | None:
    """Decode and validate a JWT. Returns None on any error.

    Expiry is always enforced. The audience claim is checked only when
    ``audience`` is given.
    """
    try:
        return jwt.decode(  # type: ignore[no-any-return]
            token,
            secret,
            algorithms=[algorithm],
            audience=audience,
            options={"verify_aud": bool(audience)},
        )
    except JWTError:
        return None


def extract_bearer_token(authorization: str | None) -> str | None:
    """Return the credential from an ``Authorization: Bearer <token>`` header."""
    if not authorization:
        return None
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()
