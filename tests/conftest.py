"""
Shared test fixtures for keyderive tests.
"""
import pytest

from keyderive.crypto.digests import DigestAlgorithm, DigestSpec, resolve_digest


# Canonical conformance vector: HMAC-SHA1, "password"/"NaCl", 3 iterations, 128 bytes
NACL_SHA1_128_HEX = (
    "d4c1f846f67205a1cc1c27f9581c26d9651a9aba91ab3fd05e945102fe73397a"
    "4131b3c1604f1cbdf8c2a901101af97116d94ab7591a1f7d372e421d98aa19ba"
    "75e34f607322f2c127fd0ebdbc946da8f481c35fa9f6512be5f587fcd386c077"
    "3a4646df3096d677585b6c39edab7ba6c5ecd1e86837cabf040191bc146a5394"
)


@pytest.fixture
def nacl_params() -> dict:
    """Options for the canonical SHA1 conformance vector."""
    return {
        "digest": "sha1",
        "password": "password",
        "salt": "NaCl",
        "length": 128,
        "iterations": 3,
    }


@pytest.fixture
def sha1_spec() -> DigestSpec:
    return resolve_digest(DigestAlgorithm.SHA1)


@pytest.fixture
def sha512_spec() -> DigestSpec:
    return resolve_digest(DigestAlgorithm.SHA512)


@pytest.fixture
def nacl_expected_hex() -> str:
    """Expected hex output for nacl_params."""
    return NACL_SHA1_128_HEX


KEYDERIVE_ENV_VARS = (
    "KEYDERIVE_DEFAULT_DIGEST",
    "KEYDERIVE_DEFAULT_ITERATIONS",
    "KEYDERIVE_TEXT_ENCODING",
)


@pytest.fixture
def clean_env(monkeypatch):
    """Remove any KEYDERIVE_* overrides from the developer's shell."""
    for name in KEYDERIVE_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
