"""
Authentication Service Facade following Black Box Design principles.

This module provides:
- A clean interface for authentication that hides implementation details
- Standardized authentication results
- Protocol definitions for swappable implementations
"""

import logging
from dataclasses import dataclass
from typing import Optional, Protocol

from fastapi.concurrency import run_in_threadpool

from .auth import CredentialStore, MalformedCredentialsError, Role, parse_basic_authorization

logger = logging.getLogger(__name__)


@dataclass
class AuthResult:
    """Standardized authentication result."""
    ok: bool
    identity: Optional[str]
    role: Optional[Role]
    error: Optional[str] = None


class AuthenticationService(Protocol):
    """Protocol for authentication services."""

    async def authenticate(self, authorization: Optional[str]) -> AuthResult:
        """
        Authenticate a request.

        Args:
            authorization: Authorization header value

        Returns:
            AuthResult with authentication status and details
        """
        ...


class BasicAuthenticationService:
    """
    HTTP Basic implementation of AuthenticationService.

    Wraps the credential store; password hashing is CPU-bound, so the
    check runs on the threadpool instead of the event loop.
    """

    def __init__(self, credential_store: CredentialStore):
        self._store = credential_store

    @property
    def credential_store(self) -> CredentialStore:
        return self._store

    async def authenticate(self, authorization: Optional[str]) -> AuthResult:
        if not authorization:
            return AuthResult(
                ok=False,
                identity=None,
                role=None,
                error="Authentication required: no Basic credentials provided",
            )

        try:
            username, password = parse_basic_authorization(authorization)
        except MalformedCredentialsError as e:
            return AuthResult(ok=False, identity=None, role=None, error=f"Authentication failed: {e}")

        credential = await run_in_threadpool(self._store.authenticate, username, password)
        if credential is None:
            logger.warning(f"Invalid credentials attempted for user: {username!r}")
            return AuthResult(
                ok=False,
                identity=None,
                role=None,
                error="Authentication failed: Invalid credentials",
            )

        return AuthResult(ok=True, identity=credential.username, role=credential.role)
