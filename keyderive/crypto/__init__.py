"""PBKDF2 key derivation package."""

from .digests import (
    DigestAlgorithm,
    DigestSpec,
    resolve_digest,
    supported_digests,
)
from .errors import (
    PBKDF2Error,
    UnsupportedDigest,
    InvalidKeyLength,
    KeyLengthIssue,
    InvalidIterationCount,
    InvalidBlockIndex,
    MissingInput,
    XorLengthMismatch,
)
from .pbkdf2 import (
    DerivationRequest,
    xor_bytes,
    prf,
    accumulate_block,
    derive_key,
    derive_key_hex,
    build_request,
    derive,
    derive_hex,
    verify_key,
    max_key_length,
    bytes_to_hex,
    hex_to_bytes,
    secure_compare,
)

__all__ = [
    "DigestAlgorithm",
    "DigestSpec",
    "resolve_digest",
    "supported_digests",
    "PBKDF2Error",
    "UnsupportedDigest",
    "InvalidKeyLength",
    "KeyLengthIssue",
    "InvalidIterationCount",
    "InvalidBlockIndex",
    "MissingInput",
    "XorLengthMismatch",
    "DerivationRequest",
    "xor_bytes",
    "prf",
    "accumulate_block",
    "derive_key",
    "derive_key_hex",
    "build_request",
    "derive",
    "derive_hex",
    "verify_key",
    "max_key_length",
    "bytes_to_hex",
    "hex_to_bytes",
    "secure_compare",
]
