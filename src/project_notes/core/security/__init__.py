"""Security utilities - bearer token verification.

Re-exports all security-related functions for convenience.
"""

from src.project_notes.core.security.tokens import decode_token, extract_bearer_token
from src.project_notes.core.security.verifier import (
    AuthenticatedUser,
    AuthVerifier,
    JWTAuthVerifier,
    RemoteAuthVerifier,
    build_auth_verifier,
    close_auth_verifier,
    get_auth_verifier,
)

__all__ = [
    # Tokens
    "decode_token",
    "extract_bearer_token",
    # Verifiers
    "AuthenticatedUser",
    "AuthVerifier",
    "JWTAuthVerifier",
    "RemoteAuthVerifier",
    "build_auth_verifier",
    "close_auth_verifier",
    "get_auth_verifier",
]
