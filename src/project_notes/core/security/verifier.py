"""Auth verifiers - turn a bearer credential into a user identity.

Tokens are issued and refreshed by the identity service. This module only
verifies them, either locally with the shared JWT secret or by asking the
identity service who the token belongs to.
"""

from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

import httpx

from src.project_notes.core.config import Settings, get_settings
from src.project_notes.core.logging import get_logger
from src.project_notes.core.security.tokens import decode_token

logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class AuthenticatedUser:
    """Identity resolved from a verified bearer credential."""

    id: UUID
    email: str | None = None


class AuthVerifier(Protocol):
    async def verify(self, token: str) -> AuthenticatedUser | None:
        """Return the token's user, or None if the token is not valid."""
        ...

    async def aclose(self) -> None: ...


def _parse_user_id(value: object) -> UUID | None:
    if not value:
        return None
    try:
        return UUID(str(value))
    except ValueError:
        return None


class JWTAuthVerifier:
    """Verify tokens signed with the identity service's shared secret."""

    def __init__(self, secret: str, algorithm: str = "HS256", audience: str | None = None):
        self.secret = secret
        self.algorithm = algorithm
        self.audience = audience or None

    async def verify(self, token: str) -> AuthenticatedUser | None:
        payload = decode_token(token, self.secret, self.algorithm, self.audience)
        if payload is None:
            return None

        user_id = _parse_user_id(payload.get("sub"))
        if user_id is None:
            logger.warning("token_missing_subject")
            return None

        return AuthenticatedUser(id=user_id, email=payload.get("email"))

    async def aclose(self) -> None:
        return None


class RemoteAuthVerifier:
    """Ask the identity service's ``/user`` endpoint who owns the token."""

    def __init__(
        self,
        base_url: str,
        api_key: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        headers = {"apikey": api_key} if api_key else {}
        self._client = httpx.AsyncClient(
            base_url=base_url.rstrip("/"),
            headers=headers,
            transport=transport,
        )

    async def verify(self, token: str) -> AuthenticatedUser | None:
        try:
            response = await self._client.get(
                "/user", headers={"Authorization": f"Bearer {token}"}
            )
        except httpx.HTTPError as e:
            logger.warning("auth_service_unreachable", error=str(e))
            return None

        if response.status_code != 200:
            return None

        try:
            body = response.json()
        except ValueError:
            logger.warning("auth_service_invalid_response", status=response.status_code)
            return None

        user_id = _parse_user_id(body.get("id")) if isinstance(body, dict) else None
        if user_id is None:
            return None
        return AuthenticatedUser(id=user_id, email=body.get("email"))

    async def aclose(self) -> None:
        await self._client.aclose()


def build_auth_verifier(settings: Settings) -> AuthVerifier:
    """Create the verifier selected by AUTH_VERIFIER."""
    if settings.auth_verifier == "remote":
        if settings.auth_url is None:
            raise ValueError("AUTH_URL is required when AUTH_VERIFIER=remote")
        return RemoteAuthVerifier(settings.auth_url, api_key=settings.auth_api_key)

    if settings.auth_jwt_secret is None:
        raise ValueError("AUTH_JWT_SECRET is required when AUTH_VERIFIER=jwt")
    return JWTAuthVerifier(
        settings.auth_jwt_secret,
        algorithm=settings.auth_jwt_algorithm,
        audience=settings.auth_jwt_audience,
    )


_verifier: AuthVerifier | None = None


def get_auth_verifier() -> AuthVerifier:
    """Get or create the auth verifier singleton."""
    global _verifier
    if _verifier is None:
        _verifier = build_auth_verifier(get_settings())
    return _verifier


async def close_auth_verifier() -> None:
    """Release the verifier's HTTP client. Call during shutdown."""
    global _verifier
    if _verifier is not None:
        await _verifier.aclose()
        _verifier = None
