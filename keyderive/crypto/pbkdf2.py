"""
PBKDF2 key derivation (PKCS#5 v2.0, RFC 8018 section 5.2).

Derivation pipeline, leaves first:
- resolve_digest: digest name -> DigestSpec (see digests.py)
- prf: HMAC(password, seed) with the resolved digest
- accumulate_block: U1 ^ U2 ^ ... ^ Uc for one block index
- derive_key: blocks 1..l concatenated and truncated to the key length

Everything a derivation needs travels in a frozen DerivationRequest or as
explicit arguments. Nothing is cached between calls, so concurrent
derivations with different parameters cannot interfere.

Only derive()/derive_hex() consult keyderive.config for defaults; the
lower-level functions take every value explicitly.
"""
from dataclasses import dataclass
import hmac
import logging
import struct
from typing import Optional, Union

from keyderive.config import settings
from keyderive.constants import BLOCK_INDEX_FORMAT, MAX_BLOCK_INDEX
from keyderive.crypto.digests import DigestAlgorithm, DigestSpec, resolve_digest
from keyderive.crypto.errors import (
    InvalidBlockIndex,
    InvalidIterationCount,
    InvalidKeyLength,
    KeyLengthIssue,
    MissingInput,
    XorLengthMismatch,
)

logger = logging.getLogger(__name__)

BytesLike = Union[bytes, bytearray, memoryview]


# =============================================================================
# Data Structures
# =============================================================================


@dataclass(frozen=True)
class DerivationRequest:
    """
    Parameters for one PBKDF2 derivation.

    Validated on construction, so a DerivationRequest that exists is
    always derivable. All checks run before any hashing.

    Attributes:
        digest: HMAC digest algorithm
        password: HMAC key material
        salt: Salt prepended to each block counter
        length: Derived key length in bytes
        iterations: PRF applications per block (work factor)
    """

    digest: DigestAlgorithm
    password: bytes
    salt: bytes
    length: int
    iterations: int

    def __post_init__(self):
        spec = resolve_digest(self.digest)
        # Normalize "SHA256" and friends to the enum member
        object.__setattr__(self, "digest", spec.name)

        check_key_length(self.length, spec)
        check_iterations(self.iterations)

        object.__setattr__(self, "password", _require_bytes(self.password, "password"))
        object.__setattr__(self, "salt", _require_bytes(self.salt, "salt"))

    @property
    def digest_spec(self) -> DigestSpec:
        return resolve_digest(self.digest)

    def __repr__(self) -> str:
        # Keep key material out of logs and tracebacks
        return (
            f"DerivationRequest(digest={self.digest.value!r}, length={self.length}, "
            f"iterations={self.iterations})"
        )


# =============================================================================
# Validation
# =============================================================================


def _require_bytes(value: Optional[BytesLike], argument: str) -> bytes:
    if value is None:
        raise MissingInput(argument)
    if not isinstance(value, (bytes, bytearray, memoryview)):
        raise TypeError(f"{argument} must be bytes, not {type(value).__name__}")
    return bytes(value)


def max_key_length(spec: DigestSpec) -> int:
    """Largest key length the 32-bit block counter can address for this digest."""
    return MAX_BLOCK_INDEX * spec.output_length


def check_key_length(length: Optional[int], spec: DigestSpec) -> None:
    """
    Check a requested key length against the digest's ceiling.

    Raises:
        InvalidKeyLength: With reason MISSING, NOT_INTEGER, NON_POSITIVE
            or TOO_LONG
    """
    if length is None:
        raise InvalidKeyLength(KeyLengthIssue.MISSING)
    if isinstance(length, bool) or not isinstance(length, int):
        raise InvalidKeyLength(KeyLengthIssue.NOT_INTEGER, length)
    if length <= 0:
        raise InvalidKeyLength(KeyLengthIssue.NON_POSITIVE, length)

    maximum = max_key_length(spec)
    if length > maximum:
        raise InvalidKeyLength(KeyLengthIssue.TOO_LONG, length, maximum)


def check_iterations(iterations: int) -> None:
    """Raise InvalidIterationCount unless iterations is an int >= 1."""
    if isinstance(iterations, bool) or not isinstance(iterations, int) or iterations < 1:
        raise InvalidIterationCount(iterations)


# =============================================================================
# Core Derivation
# =============================================================================


def xor_bytes(x: bytes, y: bytes) -> bytes:
    """
    XOR two equal-length byte strings.

    Raises:
        XorLengthMismatch: If the lengths differ. Operands are never
            truncated or padded.

    Example:
        >>> xor_bytes(b"abc", b"def")
        b'\\x05\\x07\\x05'
    """
    if len(x) != len(y):
        error = XorLengthMismatch(len(x), len(y))
        logger.error("PBKDF2 internal invariant violated: %s", error)
        raise error

    return bytes(a ^ b for a, b in zip(x, y))


def prf(spec: DigestSpec, password: bytes, seed: bytes) -> bytes:
    """
    PBKDF2 pseudorandom function: HMAC with the password as key.

    Args:
        spec: Resolved digest
        password: HMAC key (may be empty, not None)
        seed: HMAC message (may be empty, not None)

    Returns:
        spec.output_length bytes

    Raises:
        MissingInput: If password or seed is None
    """
    if password is None:
        raise MissingInput("password")
    if seed is None:
        raise MissingInput("seed")

    return spec.hmac(password, seed)


def accumulate_block(
    spec: DigestSpec,
    password: bytes,
    salt: bytes,
    iterations: int,
    block_index: int,
) -> bytes:
    """
    Compute one PBKDF2 output block.

    T_i = U_1 ^ U_2 ^ ... ^ U_c where
    U_1 = PRF(password, salt || INT_32_BE(i)) and U_j = PRF(password, U_{j-1}).

    Args:
        spec: Resolved digest
        password: HMAC key
        salt: Salt bytes
        iterations: Number of PRF applications (c >= 1)
        block_index: 1-based block number (i)

    Returns:
        spec.output_length bytes

    Raises:
        InvalidIterationCount: If iterations < 1
        InvalidBlockIndex: If block_index is outside 1..2**32-1
        MissingInput: If password or salt is None
    """
    check_iterations(iterations)
    if password is None:
        raise MissingInput("password")
    if (
        isinstance(block_index, bool)
        or not isinstance(block_index, int)
        or not 1 <= block_index <= MAX_BLOCK_INDEX
    ):
        raise InvalidBlockIndex(block_index)
    if salt is None:
        raise MissingInput("salt")

    # prf() with the keyed HMAC set up once for the whole block
    keyed_prf = spec.compile_hmac(password)

    seed = bytes(salt) + struct.pack(BLOCK_INDEX_FORMAT, block_index)
    u = keyed_prf(seed)
    block = u

    for _ in range(2, iterations + 1):
        u = keyed_prf(u)
        block = xor_bytes(block, u)

    return block


def derive_key(request: DerivationRequest) -> bytes:
    """
    Derive a key of exactly request.length bytes.

    Computes blocks 1..l where l = ceil(length / hLen), concatenates them
    in order and drops the unused tail of the last block.

    Args:
        request: Validated derivation parameters

    Returns:
        Derived key bytes

    Example:
        >>> request = DerivationRequest(
        ...     DigestAlgorithm.SHA1, b"password", b"salt", 20, 1
        ... )
        >>> derive_key(request).hex()
        '0c60c80f961f0e71f3a9b524af6012062fe037a6'
    """
    spec = request.digest_spec
    block_count = -(-request.length // spec.output_length)

    logger.debug(
        "Deriving PBKDF2 key: digest=%s length=%d iterations=%d blocks=%d",
        spec.name.value,
        request.length,
        request.iterations,
        block_count,
    )

    key = b"".join(
        accumulate_block(spec, request.password, request.salt, request.iterations, index)
        for index in range(1, block_count + 1)
    )

    return key[:request.length]


# =============================================================================
# High-Level Derivation (options interface)
# =============================================================================


def _coerce_bytes(value: Union[BytesLike, str, None], argument: str) -> bytes:
    """Convert a password/salt option to bytes. str is encoded, None rejected."""
    if isinstance(value, str):
        return value.encode(settings.TEXT_ENCODING)
    return _require_bytes(value, argument)


def build_request(
    digest: Union[DigestAlgorithm, str, None] = None,
    password: Union[BytesLike, str, None] = None,
    salt: Union[BytesLike, str, None] = None,
    length: Optional[int] = None,
    iterations: Optional[int] = None,
) -> DerivationRequest:
    """
    Build a DerivationRequest from loosely-typed options.

    Missing digest and iterations fall back to settings.DEFAULT_DIGEST
    (SHA512) and settings.DEFAULT_ITERATIONS (10000). Validation order is
    digest, key length, iterations, then password and salt.

    Raises:
        UnsupportedDigest: Unknown digest
        InvalidKeyLength: Length missing, non-positive or too long
        InvalidIterationCount: Iterations < 1
        MissingInput: Password or salt is None
        TypeError: Password or salt is neither bytes-like nor str
    """
    spec = resolve_digest(settings.DEFAULT_DIGEST if digest is None else digest)
    check_key_length(length, spec)

    if iterations is None:
        iterations = settings.DEFAULT_ITERATIONS
    check_iterations(iterations)

    return DerivationRequest(
        digest=spec.name,
        password=_coerce_bytes(password, "password"),
        salt=_coerce_bytes(salt, "salt"),
        length=length,
        iterations=iterations,
    )


def derive(
    digest: Union[DigestAlgorithm, str, None] = None,
    password: Union[BytesLike, str, None] = None,
    salt: Union[BytesLike, str, None] = None,
    length: Optional[int] = None,
    iterations: Optional[int] = None,
) -> bytes:
    """
    Derive a key from keyword options.

    Example:
        >>> derive(digest="sha256", password="password", salt="salt",
        ...        length=32, iterations=1).hex()
        '120fb6cffcf8b32c43e7225256c4f837a86548c92ccc35480805987cb70be17b'
    """
    request = build_request(digest, password, salt, length, iterations)
    return derive_key(request)


def derive_key_hex(request: DerivationRequest) -> str:
    """Derive a key and return it as a lowercase hex string."""
    return bytes_to_hex(derive_key(request))


def derive_hex(
    digest: Union[DigestAlgorithm, str, None] = None,
    password: Union[BytesLike, str, None] = None,
    salt: Union[BytesLike, str, None] = None,
    length: Optional[int] = None,
    iterations: Optional[int] = None,
) -> str:
    """Like derive(), but returns lowercase hex (two characters per byte)."""
    return bytes_to_hex(derive(digest, password, salt, length, iterations))


def verify_key(expected_key: bytes, request: DerivationRequest) -> bool:
    """
    Check that request derives expected_key.

    The comparison is constant-time for equal-length inputs.

    Returns:
        True if the derived key matches, False otherwise (including a
        length mismatch)
    """
    return secure_compare(derive_key(request), bytes(expected_key))


# =============================================================================
# Utilities
# =============================================================================


def bytes_to_hex(data: bytes) -> str:
    """Convert bytes to lowercase hex string."""
    return bytes(data).hex()


def hex_to_bytes(hex_str: str) -> bytes:
    """Convert hex string to bytes."""
    return bytes.fromhex(hex_str)


def secure_compare(a: bytes, b: bytes) -> bool:
    """
    Compare two byte strings in constant time.

    Args:
        a: First byte string
        b: Second byte string

    Returns:
        True if equal, False otherwise
    """
    return hmac.compare_digest(a, b)
