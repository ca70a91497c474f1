"""
keyderive - PBKDF2 (PKCS#5) key derivation.

Usage:
    >>> from keyderive import derive_hex
    >>> derive_hex(digest="sha1", password="password", salt="salt",
    ...            length=20, iterations=1)
    '0c60c80f961f0e71f3a9b524af6012062fe037a6'
"""

from keyderive.crypto import (
    DigestAlgorithm,
    DerivationRequest,
    PBKDF2Error,
    derive,
    derive_hex,
    derive_key,
    derive_key_hex,
    verify_key,
)

__version__ = "0.1.0"

__all__ = [
    "DigestAlgorithm",
    "DerivationRequest",
    "PBKDF2Error",
    "derive",
    "derive_hex",
    "derive_key",
    "derive_key_hex",
    "verify_key",
]
