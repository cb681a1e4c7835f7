"""
Authentication Middleware Module - Black Box Interface

Purpose: Gate a FastAPI application behind HTTP Basic authentication
Interface: BasicAuthMiddleware, create_basic_auth_middleware()
Hidden: Header extraction, skip-path matching, error formatting

Works with any object satisfying the AuthenticationService protocol.
"""

import logging
from typing import Dict, List, Optional

from fastapi import Request
from fastapi.responses import JSONResponse

from ..auth.service import AuthenticationService

logger = logging.getLogger(__name__)


class BasicAuthMiddleware:
    """
    HTTP Basic authentication middleware for FastAPI applications.

    Requests to a skipped path go straight through; every other request
    must carry valid Basic credentials or is answered with 401 before any
    route handler runs.
    """

    def __init__(
        self,
        auth_service: AuthenticationService,
        skip_paths: Optional[Dict[str, List[str]]] = None,
        realm: str = "SInvoice Mock",
        log_attempts: bool = True
    ):
        """
        Initialize authentication middleware.

        Args:
            auth_service: Service whose authenticate() checks the Authorization header
            skip_paths: Dict of {path: [methods]} to skip authentication ("*" for any method)
            realm: Realm advertised in the WWW-Authenticate challenge
            log_attempts: Whether to log authentication attempts
        """
        self.auth_service = auth_service
        self.skip_paths = skip_paths or {}
        self.realm = realm
        self.log_attempts = log_attempts

    def should_skip_auth(self, request: Request) -> bool:
        """Check if authentication should be skipped for this request."""
        path = str(request.url.path)
        method = request.method.upper()

        if path in self.skip_paths:
            allowed_methods = self.skip_paths[path]
            if "*" in allowed_methods or method in allowed_methods:
                return True

        return False

    def format_error(self, status_code: int, message: str) -> Dict[str, object]:
        """Format error response body."""
        return {
            "error": message,
            "status": status_code
        }

    def unauthorized(self, message: str) -> JSONResponse:
        return JSONResponse(
            status_code=401,
            content=self.format_error(401, message),
            headers={"WWW-Authenticate": f'Basic realm="{self.realm}"'},
        )

    async def __call__(self, request: Request, call_next):
        """Process the request through authentication middleware."""
        if self.should_skip_auth(request):
            if self.log_attempts:
                logger.debug(f"Skipping auth for {request.method} {request.url.path}")
            return await call_next(request)

        authorization = request.headers.get("authorization")

        try:
            result = await self.auth_service.authenticate(authorization)
        except Exception as e:
            logger.error(f"Error during authentication: {e}")
            return JSONResponse(
                status_code=500,
                content=self.format_error(500, "Internal error during authentication")
            )

        if not result.ok:
            if self.log_attempts:
                logger.warning(f"Rejected {request.method} {request.url.path}: {result.error}")
            return self.unauthorized(result.error or "Authentication failed")

        if self.log_attempts:
            logger.info(f"Request authenticated for user: {result.identity}")

        # Role is recorded but no route checks it
        request.state.auth_identity = result.identity
        request.state.auth_role = result.role

        return await call_next(request)


def create_basic_auth_middleware(
    auth_service: AuthenticationService,
    health_path: str,
    skip_paths: Optional[Dict[str, List[str]]] = None,
    realm: str = "SInvoice Mock"
) -> BasicAuthMiddleware:
    """
    Factory function to create Basic authentication middleware.

    Args:
        auth_service: Authentication service facade
        health_path: Health check path, exempt for every method
        skip_paths: Additional paths to skip {"/path": ["GET", "POST"]}
        realm: Realm advertised in the WWW-Authenticate challenge

    Returns:
        Configured BasicAuthMiddleware instance
    """
    default_skip_paths = {health_path: ["*"]}

    if skip_paths:
        default_skip_paths.update(skip_paths)

    return BasicAuthMiddleware(
        auth_service=auth_service,
        skip_paths=default_skip_paths,
        realm=realm
    )


__all__ = [
    "BasicAuthMiddleware",
    "create_basic_auth_middleware"
]
