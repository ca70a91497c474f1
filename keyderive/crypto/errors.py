"""
Exceptions raised by PBKDF2 key derivation.

Every error derives from PBKDF2Error, which is itself a ValueError, so
callers that only care about "bad parameters" can catch either one.

XorLengthMismatch is the odd one out: it signals a broken internal
invariant (a bookkeeping bug), not bad user input. It carries
``is_internal = True`` so logging can tell the two apart.
"""
from enum import Enum
from typing import Any, Optional


class PBKDF2Error(ValueError):
    """Base exception for PBKDF2 derivation errors."""

    is_internal = False


class UnsupportedDigest(PBKDF2Error):
    """Requested digest is not one of SHA1/SHA224/SHA256/SHA384/SHA512."""

    def __init__(self, digest: Any):
        self.digest = digest
        super().__init__(f"Unsupported digest: {digest!r}")


class KeyLengthIssue(str, Enum):
    """Why a requested key length was rejected."""

    MISSING = "missing"
    NOT_INTEGER = "not an integer"
    NON_POSITIVE = "non-positive"
    TOO_LONG = "too long"


_KEY_LENGTH_MESSAGES = {
    KeyLengthIssue.MISSING: "A key length must be provided",
    KeyLengthIssue.NOT_INTEGER: "Key length must be an integer",
    KeyLengthIssue.NON_POSITIVE: "Key length must be positive",
    KeyLengthIssue.TOO_LONG: "Desired key is too long",
}


class InvalidKeyLength(PBKDF2Error):
    """Requested key length is absent, non-positive, or above the ceiling."""

    def __init__(self, reason: KeyLengthIssue, length: Any = None, maximum: Optional[int] = None):
        self.reason = reason
        self.length = length
        self.maximum = maximum
        message = _KEY_LENGTH_MESSAGES[reason]
        if reason is KeyLengthIssue.TOO_LONG and maximum is not None:
            message = f"{message} ({length} > {maximum} bytes)"
        super().__init__(message)


class InvalidIterationCount(PBKDF2Error):
    """Iteration count is not a positive integer."""

    def __init__(self, iterations: Any):
        self.iterations = iterations
        super().__init__(f"Iteration count must be a positive integer, got {iterations!r}")


class InvalidBlockIndex(PBKDF2Error):
    """Block index does not fit the 1-based 32-bit block counter."""

    def __init__(self, block_index: Any):
        self.block_index = block_index
        super().__init__(f"Block index must be in 1..2**32-1, got {block_index!r}")


class MissingInput(PBKDF2Error):
    """Password, salt or seed was None."""

    def __init__(self, argument: str):
        self.argument = argument
        super().__init__(f"{argument} is required")


class XorLengthMismatch(PBKDF2Error):
    """XOR operands differ in length. Indicates a bug, not bad input."""

    is_internal = True

    def __init__(self, left_length: int, right_length: int):
        self.left_length = left_length
        self.right_length = right_length
        super().__init__(
            f"XOR arguments are not the same length ({left_length} != {right_length})"
        )
