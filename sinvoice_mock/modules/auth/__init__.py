"""
Authentication Module - Black Box Interface

Purpose: Validate HTTP Basic credentials against the fixed account set
Interface: AuthFactory.build(), AuthenticationService.authenticate()
Hidden: Password hashing, header decoding, credential storage

This module can be replaced with any other auth implementation without
affecting the responder.
"""

from .auth import (
    Credential,
    CredentialStore,
    MalformedCredentialsError,
    Role,
    hash_password,
    parse_basic_authorization,
    verify_password,
)
from .factory import AuthFactory
from .service import AuthenticationService, AuthResult, BasicAuthenticationService

__all__ = [
    "AuthFactory",
    "AuthResult",
    "AuthenticationService",
    "BasicAuthenticationService",
    "Credential",
    "CredentialStore",
    "MalformedCredentialsError",
    "Role",
    "hash_password",
    "parse_basic_authorization",
    "verify_password",
]
