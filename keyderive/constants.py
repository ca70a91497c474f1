"""
Algorithm constants for PBKDF2.

These values come from PKCS#5 and are not configurable. Tunable defaults
(digest, iteration count) live in keyderive.config.
"""

# Block indices are encoded as a 4-byte big-endian unsigned integer, so the
# last addressable block is 2**32 - 1. This bounds the derived key length to
# MAX_BLOCK_INDEX * digest output length.
MAX_BLOCK_INDEX = 2**32 - 1

# Format for the block counter appended to the salt
BLOCK_INDEX_FORMAT = ">I"

DEFAULT_DIGEST_NAME = "sha512"
DEFAULT_ITERATIONS = 10000
DEFAULT_TEXT_ENCODING = "utf-8"
