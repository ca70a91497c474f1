"""
Digest resolution for the PBKDF2 pseudorandom function.

PKCS#5 recommends HMAC with SHA1, SHA224, SHA256, SHA384 or SHA512. Each
is mapped to an immutable DigestSpec in a fixed table; nothing else is
accepted. Hash and HMAC implementations come from the cryptography package.
"""
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Callable, Mapping, Tuple, Type, Union

from cryptography.hazmat.primitives import hashes, hmac

from keyderive.crypto.errors import UnsupportedDigest


# =============================================================================
# Data Structures
# =============================================================================


class DigestAlgorithm(str, Enum):
    """Hash functions supported as the PBKDF2 PRF."""

    SHA1 = "sha1"
    SHA224 = "sha224"
    SHA256 = "sha256"
    SHA384 = "sha384"
    SHA512 = "sha512"


@dataclass(frozen=True)
class DigestSpec:
    """
    Resolved digest: name, output length and HMAC function.

    Attributes:
        name: Which algorithm this is
        output_length: Digest size in bytes (also the PBKDF2 block size)
        algorithm: cryptography hash class, instantiated per HMAC call
    """

    name: DigestAlgorithm
    output_length: int
    algorithm: Type[hashes.HashAlgorithm]

    def __post_init__(self):
        if self.output_length != self.algorithm.digest_size:
            raise ValueError(
                f"{self.name.value} output length must be {self.algorithm.digest_size} bytes"
            )

    def compile_hmac(self, key: bytes) -> Callable[[bytes], bytes]:
        """
        Key an HMAC once and return a message -> digest function.

        Each call copies the keyed context, so the key schedule is not
        redone per message.
        """
        keyed = hmac.HMAC(key, self.algorithm())

        def keyed_hmac(message: bytes) -> bytes:
            mac = keyed.copy()
            mac.update(message)
            return mac.finalize()

        return keyed_hmac

    def hmac(self, key: bytes, message: bytes) -> bytes:
        """Compute HMAC(key, message) with this digest."""
        return self.compile_hmac(key)(message)


_DIGESTS: Mapping[DigestAlgorithm, DigestSpec] = MappingProxyType({
    DigestAlgorithm.SHA1: DigestSpec(DigestAlgorithm.SHA1, 20, hashes.SHA1),
    DigestAlgorithm.SHA224: DigestSpec(DigestAlgorithm.SHA224, 28, hashes.SHA224),
    DigestAlgorithm.SHA256: DigestSpec(DigestAlgorithm.SHA256, 32, hashes.SHA256),
    DigestAlgorithm.SHA384: DigestSpec(DigestAlgorithm.SHA384, 48, hashes.SHA384),
    DigestAlgorithm.SHA512: DigestSpec(DigestAlgorithm.SHA512, 64, hashes.SHA512),
})


# =============================================================================
# Resolution
# =============================================================================


def supported_digests() -> Tuple[DigestAlgorithm, ...]:
    """Return the supported digest algorithms."""
    return tuple(_DIGESTS)


def resolve_digest(name: Union[DigestAlgorithm, str]) -> DigestSpec:
    """
    Resolve a digest name to its DigestSpec.

    Accepts a DigestAlgorithm member or its name as a string, matched
    case-insensitively ("SHA512", "sha512"). There is no default here:
    None is rejected like any other unknown value.

    Args:
        name: Algorithm to resolve

    Returns:
        The shared, immutable DigestSpec for that algorithm

    Raises:
        UnsupportedDigest: If name is not one of the supported algorithms

    Example:
        >>> resolve_digest("sha256").output_length
        32
    """
    if isinstance(name, DigestAlgorithm):
        return _DIGESTS[name]
    if not isinstance(name, str):
        raise UnsupportedDigest(name)

    try:
        algorithm = DigestAlgorithm(name.strip().lower())
    except ValueError:
        raise UnsupportedDigest(name) from None

    return _DIGESTS[algorithm]
