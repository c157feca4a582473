"""Authentication dependencies."""

from typing import Annotated

from fastapi import Depends, Header, HTTPException, Request

from src.project_notes.core.logging import bind_user_context
from src.project_notes.core.result import Err
from src.project_notes.core.security import (
    AuthenticatedUser,
    AuthVerifier,
    extract_bearer_token,
    get_auth_verifier,
)

AuthVerifierDep = Annotated[AuthVerifier, Depends(get_auth_verifier)]


async def resolve_user(
    verifier: AuthVerifier, authorization: str | None
) -> AuthenticatedUser | None:
    """Return the user behind an Authorization header, or None."""
    token = extract_bearer_token(authorization)
    if token is None:
        return None
    return await verifier.verify(token)


async def get_current_user(
    verifier: AuthVerifierDep,
    authorization: Annotated[str | None, Header()] = None,
) -> AuthenticatedUser:
    """Resolve the bearer credential to a user or fail with 401.

    Missing, malformed, expired and unknown credentials all get the same
    "Unauthorized" answer. Nothing is retried.
    """
    user = await resolve_user(verifier, authorization)
    if user is None:
        err = Err.unauthenticated()
        raise HTTPException(status_code=err.status_code, detail=err.message)

    bind_user_context(user.id, user.email)
    return user


async def authenticate_request(request: Request) -> AuthenticatedUser | None:
    """Authenticate a request outside of dependency solving.

    FastAPI decodes a JSON body before it solves dependencies, so a request
    whose body cannot be decoded never reaches ``get_current_user``. The
    verifier is looked up through ``dependency_overrides`` like any other
    dependency.
    """
    provider = request.app.dependency_overrides.get(get_auth_verifier, get_auth_verifier)
    return await resolve_user(provider(), request.headers.get("authorization"))


CurrentUser = Annotated[AuthenticatedUser, Depends(get_current_user)]
