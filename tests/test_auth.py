"""
Unit tests for the authentication module.
"""

import base64
from unittest.mock import patch

import pytest

from sinvoice_mock.config import AuthConfig
from sinvoice_mock.modules.auth import (
    AuthFactory,
    BasicAuthenticationService,
    Credential,
    CredentialStore,
    MalformedCredentialsError,
    Role,
    hash_password,
    parse_basic_authorization,
    verify_password,
)

from conftest import TEST_HASH_ITERATIONS, basic_header, make_config_provider


@pytest.fixture(scope="module")
def store():
    """Seeded credential store (hashed once per module)."""
    return CredentialStore.seeded(TEST_HASH_ITERATIONS)


@pytest.fixture
def auth_service(store):
    return BasicAuthenticationService(store)


def _encode(raw: str) -> str:
    return "Basic " + base64.b64encode(raw.encode("utf-8")).decode("ascii")


# Password hashing


def test_hash_password_is_salted():
    """Two hashes of the same password differ and both verify."""
    first = hash_password("admin123", TEST_HASH_ITERATIONS)
    second = hash_password("admin123", TEST_HASH_ITERATIONS)

    assert first != second
    assert verify_password("admin123", first)
    assert verify_password("admin123", second)


def test_hash_password_encodes_work_factor():
    encoded = hash_password("secret", 2000, salt=b"\x00" * 16)

    algorithm, iterations, salt_hex, digest_hex = encoded.split("$")
    assert algorithm == "pbkdf2_sha256"
    assert iterations == "2000"
    assert salt_hex == "00" * 16
    assert len(digest_hex) == 64
    assert "secret" not in encoded


def test_verify_password_rejects_wrong_password():
    encoded = hash_password("user123", TEST_HASH_ITERATIONS)
    assert verify_password("user124", encoded) is False
    assert verify_password("", encoded) is False


@pytest.mark.parametrize(
    "encoded",
    ["", "plain-text", "md5$1000$00$00", "pbkdf2_sha256$abc$00$00", "pbkdf2_sha256$1000$zz$00"],
)
def test_verify_password_malformed_hash(encoded):
    """Malformed stored hashes never verify."""
    assert verify_password("anything", encoded) is False


# Header parsing


def test_parse_basic_authorization_valid():
    assert parse_basic_authorization(_encode("admin:admin123")) == ("admin", "admin123")


def test_parse_basic_authorization_scheme_case_insensitive():
    header = _encode("user:user123").replace("Basic", "basic")
    assert parse_basic_authorization(header) == ("user", "user123")


def test_parse_basic_authorization_password_with_colon():
    """Only the first colon separates username from password."""
    assert parse_basic_authorization(_encode("admin:a:b:c")) == ("admin", "a:b:c")


@pytest.mark.parametrize(
    "header",
    [
        "Bearer abc.def.ghi",
        "Basic",
        "Basic not-base64!!",
        _encode("no-colon-here"),
        "Basic " + base64.b64encode(b"\xff\xfe:x").decode("ascii"),
        "Basic \u00e9\u00e9\u00e9\u00e9",
    ],
)
def test_parse_basic_authorization_malformed(header):
    with pytest.raises(MalformedCredentialsError):
        parse_basic_authorization(header)


def test_malformed_credentials_error_is_value_error():
    assert issubclass(MalformedCredentialsError, ValueError)


# Credential store


def test_seeded_store_has_two_accounts(store):
    assert len(store) == 2
    assert set(store.usernames) == {"admin", "user"}
    assert store.get("admin").role is Role.ADMIN
    assert store.get("user").role is Role.USER


def test_seeded_store_keeps_only_hashes(store):
    for username, password in (("admin", "admin123"), ("user", "user123")):
        credential = store.get(username)
        assert credential.password_hash != password
        assert credential.password_hash.startswith("pbkdf2_sha256$")


def test_store_authenticate_valid_pairs(store):
    assert store.authenticate("admin", "admin123").username == "admin"
    assert store.authenticate("user", "user123").username == "user"


def test_store_authenticate_mismatched_pairs(store):
    """Each password only works for its own account."""
    assert store.authenticate("admin", "user123") is None
    assert store.authenticate("user", "admin123") is None


def test_store_usernames_are_case_sensitive(store):
    assert "Admin" not in store
    assert store.authenticate("Admin", "admin123") is None
    assert store.authenticate("ADMIN", "admin123") is None


def test_store_unknown_user_runs_hash_check(store):
    """Unknown usernames go through one PBKDF2 verification like known ones."""
    with patch("sinvoice_mock.modules.auth.auth.verify_password", wraps=verify_password) as spy:
        assert store.authenticate("mallory", "admin123") is None

    spy.assert_called_once()
    assert spy.call_args[0][0] == "admin123"


def test_store_dummy_hash_uses_store_work_factor(store):
    assert store._dummy_hash.split("$")[1] == str(TEST_HASH_ITERATIONS)


def test_empty_store_rejects_everyone():
    assert CredentialStore([]).authenticate("admin", "admin123") is None


def test_store_is_immutable(store):
    with pytest.raises(TypeError):
        store._credentials["mallory"] = Credential("mallory", "x", Role.ADMIN)

    credential = store.get("admin")
    with pytest.raises(AttributeError):
        credential.role = Role.USER


# Service facade


@pytest.mark.asyncio
async def test_service_accepts_admin(auth_service):
    result = await auth_service.authenticate(basic_header("admin", "admin123")["Authorization"])

    assert result.ok is True
    assert result.identity == "admin"
    assert result.role is Role.ADMIN
    assert result.error is None


@pytest.mark.asyncio
async def test_service_accepts_user(auth_service):
    result = await auth_service.authenticate(basic_header("user", "user123")["Authorization"])

    assert result.ok is True
    assert result.identity == "user"
    assert result.role is Role.USER


@pytest.mark.asyncio
async def test_service_missing_header(auth_service):
    result = await auth_service.authenticate(None)

    assert result.ok is False
    assert result.identity is None
    assert "Authentication required" in result.error


@pytest.mark.asyncio
async def test_service_malformed_header(auth_service):
    result = await auth_service.authenticate("Bearer token")

    assert result.ok is False
    assert "Basic" in result.error


@pytest.mark.asyncio
async def test_service_non_ascii_header(auth_service):
    result = await auth_service.authenticate("Basic \u00e9\u00e9\u00e9\u00e9")

    assert result.ok is False
    assert result.error.startswith("Authentication failed")

@pytest.mark.asyncio
async def test_service_wrong_password(auth_service):
    result = await auth_service.authenticate(basic_header("admin", "wrong")["Authorization"])

    assert result.ok is False
    assert result.error == "Authentication failed: Invalid credentials"


@pytest.mark.asyncio
async def test_service_unknown_user(auth_service):
    result = await auth_service.authenticate(basic_header("mallory", "admin123")["Authorization"])

    assert result.ok is False
    assert result.role is None


def test_factory_builds_seeded_service():
    service = AuthFactory.build(make_config_provider())

    assert isinstance(service, BasicAuthenticationService)
    assert set(service.credential_store.usernames) == {"admin", "user"}
    stored = service.credential_store.get("admin").password_hash
    assert stored.split("$")[1] == str(TEST_HASH_ITERATIONS)


def test_auth_config_is_frozen():
    config = AuthConfig(realm="r", hash_iterations=TEST_HASH_ITERATIONS)
    with pytest.raises(AttributeError):
        config.hash_iterations = 1
