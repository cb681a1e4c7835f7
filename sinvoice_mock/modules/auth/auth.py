"""
Authentication module for the SInvoice mock API.

Holds the fixed credential set and the primitives needed to check an
HTTP Basic ``Authorization`` header against it. Passwords are kept only
as salted PBKDF2 hashes; the store is built once and never mutated.
"""

import base64
import hashlib
import secrets
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Iterable, Mapping, Optional, Tuple

HASH_ALGORITHM = "pbkdf2_sha256"
SALT_BYTES = 16

# Seeded accounts: (username, password, role name)
DEFAULT_ACCOUNTS = (
    ("admin", "admin123", "ADMIN"),
    ("user", "user123", "USER"),
)


class MalformedCredentialsError(ValueError):
    """Raised when an Authorization header is not a usable Basic credential."""


class Role(str, Enum):
    """Account role. Recorded on the request, never enforced by a route."""

    ADMIN = "ADMIN"
    USER = "USER"


def hash_password(password: str, iterations: int, salt: Optional[bytes] = None) -> str:
    """
    Hash a password with PBKDF2-HMAC-SHA256.

    Args:
        password: Plain-text password
        iterations: Work factor
        salt: Salt bytes; a random one is generated when omitted

    Returns:
        Encoded hash ``pbkdf2_sha256$<iterations>$<salt_hex>$<digest_hex>``
    """
    if salt is None:
        salt = secrets.token_bytes(SALT_BYTES)
    digest = hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt, iterations)
    return f"{HASH_ALGORITHM}${iterations}${salt.hex()}${digest.hex()}"


def verify_password(password: str, encoded: str) -> bool:
    """Check a password against an encoded hash. Malformed hashes never match."""
    try:
        algorithm, iterations_raw, salt_hex, digest_hex = encoded.split("$")
        iterations = int(iterations_raw)
        salt = bytes.fromhex(salt_hex)
        expected = bytes.fromhex(digest_hex)
    except ValueError:
        return False

    if algorithm != HASH_ALGORITHM or iterations < 1:
        return False

    candidate = hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt, iterations)
    return secrets.compare_digest(candidate, expected)


def parse_basic_authorization(header: str) -> Tuple[str, str]:
    """
    Decode an HTTP Basic Authorization header value.

    Args:
        header: Raw header value, e.g. ``Basic YWRtaW46YWRtaW4xMjM=``

    Returns:
        Tuple of (username, password)

    Raises:
        MalformedCredentialsError: If the header is not a valid Basic credential
    """
    scheme, _, encoded = header.strip().partition(" ")
    if scheme.lower() != "basic" or not encoded.strip():
        raise MalformedCredentialsError("Authorization scheme must be Basic")

    try:
        decoded = base64.b64decode(encoded.strip(), validate=True).decode("utf-8")
    except ValueError:
        # binascii.Error, UnicodeDecodeError and non-ASCII input are all ValueErrors
        raise MalformedCredentialsError("Basic credentials are not valid base64 UTF-8") from None

    # Only the first colon separates; passwords may contain more
    username, separator, password = decoded.partition(":")
    if not separator:
        raise MalformedCredentialsError("Basic credentials must be 'username:password'")

    return username, password


@dataclass(frozen=True)
class Credential:
    """A single account: username, hashed password and role."""

    username: str
    password_hash: str
    role: Role

    def matches(self, password: str) -> bool:
        return verify_password(password, self.password_hash)


class CredentialStore:
    """
    Immutable, in-memory set of accounts.

    Built once at startup and shared read-only by every request, so no
    locking is needed.
    """

    def __init__(self, credentials: Iterable[Credential]):
        self._credentials: Mapping[str, Credential] = MappingProxyType(
            {credential.username: credential for credential in credentials}
        )
        self._dummy_hash = self._build_dummy_hash()

    def _build_dummy_hash(self) -> Optional[str]:
        """Hash with the store's work factor, checked for unknown usernames."""
        for credential in self._credentials.values():
            try:
                iterations = int(credential.password_hash.split("$")[1])
            except (IndexError, ValueError):
                continue
            return hash_password(secrets.token_hex(8), iterations)
        return None

    @classmethod
    def seeded(cls, iterations: int) -> "CredentialStore":
        """Build the store with the two fixed mock accounts."""
        return cls(
            Credential(
                username=username,
                password_hash=hash_password(password, iterations),
                role=Role(role),
            )
            for username, password, role in DEFAULT_ACCOUNTS
        )

    def __len__(self) -> int:
        return len(self._credentials)

    def __contains__(self, username: object) -> bool:
        return username in self._credentials

    @property
    def usernames(self) -> Tuple[str, ...]:
        return tuple(self._credentials)

    def get(self, username: str) -> Optional[Credential]:
        return self._credentials.get(username)

    def authenticate(self, username: str, password: str) -> Optional[Credential]:
        """
        Verify a username/password pair.

        Usernames are case-sensitive.

        Returns:
            The matching Credential, or None if the pair is not valid
        """
        credential = self._credentials.get(username)
        if credential is None:
            # Unknown users pay the same PBKDF2 cost as known ones
            if self._dummy_hash is not None:
                verify_password(password, self._dummy_hash)
            return None
        if not credential.matches(password):
            return None
        return credential
