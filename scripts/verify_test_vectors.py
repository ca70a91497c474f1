#!/usr/bin/env python3
"""
PBKDF2 Test Vector Verification
===============================

Checks keyderive against published PBKDF2 vectors (RFC 6070 and the
NaCl conformance vector) and prints a PASS/FAIL line per vector.

Usage:
    python3 scripts/verify_test_vectors.py

Exit codes:
    0 = All vectors passed
    1 = One or more vectors failed
"""

import logging
import sys

from keyderive.crypto import (
    DerivationRequest,
    PBKDF2Error,
    bytes_to_hex,
    derive_key,
    hex_to_bytes,
)

logger = logging.getLogger(__name__)

# =============================================================================
# Test Vectors
# =============================================================================

TEST_VECTORS = {
    "version": "1.0",
    "description": "PBKDF2-HMAC test vectors",
    "pbkdf2": [
        {
            "description": "RFC 6070 #1 (SHA1, c=1)",
            "digest": "sha1",
            "password_hex": "70617373776f7264",
            "salt_hex": "73616c74",
            "iterations": 1,
            "length": 20,
            "expected_key_hex": "0c60c80f961f0e71f3a9b524af6012062fe037a6",
        },
        {
            "description": "RFC 6070 #2 (SHA1, c=2)",
            "digest": "sha1",
            "password_hex": "70617373776f7264",
            "salt_hex": "73616c74",
            "iterations": 2,
            "length": 20,
            "expected_key_hex": "ea6c014dc72d6f8ccd1ed92ace1d41f0d8de8957",
        },
        {
            "description": "RFC 6070 #3 (SHA1, c=4096)",
            "digest": "sha1",
            "password_hex": "70617373776f7264",
            "salt_hex": "73616c74",
            "iterations": 4096,
            "length": 20,
            "expected_key_hex": "4b007901b765489abead49d926f721d065a429c1",
        },
        {
            "description": "RFC 6070 #5 (SHA1, long password and salt, 25 bytes)",
            "digest": "sha1",
            "password_hex": "70617373776f726450415353574f524470617373776f7264",
            "salt_hex": "73616c7453414c5473616c7453414c5473616c7453414c5473616c7453414c5473616c74",
            "iterations": 4096,
            "length": 25,
            "expected_key_hex": "3d2eec4fe41c849b80c8d83662c0e44a8b291a964cf2f07038",
        },
        {
            "description": "RFC 6070 #6 (SHA1, embedded NUL bytes)",
            "digest": "sha1",
            "password_hex": "7061737300776f7264",
            "salt_hex": "7361006c74",
            "iterations": 4096,
            "length": 16,
            "expected_key_hex": "56fa6aa75548099dcc37d7f03425e0c3",
        },
        {
            "description": "SHA256, c=1",
            "digest": "sha256",
            "password_hex": "70617373776f7264",
            "salt_hex": "73616c74",
            "iterations": 1,
            "length": 32,
            "expected_key_hex": "120fb6cffcf8b32c43e7225256c4f837a86548c92ccc35480805987cb70be17b",
        },
        {
            "description": "NaCl conformance (SHA1, c=3, 128 bytes)",
            "digest": "sha1",
            "password_hex": "70617373776f7264",
            "salt_hex": "4e61436c",
            "iterations": 3,
            "length": 128,
            "expected_key_hex": (
                "d4c1f846f67205a1cc1c27f9581c26d9651a9aba91ab3fd05e945102fe73397a"
                "4131b3c1604f1cbdf8c2a901101af97116d94ab7591a1f7d372e421d98aa19ba"
                "75e34f607322f2c127fd0ebdbc946da8f481c35fa9f6512be5f587fcd386c077"
                "3a4646df3096d677585b6c39edab7ba6c5ecd1e86837cabf040191bc146a5394"
            ),
        },
    ],
}


def check_pbkdf2_vectors() -> tuple[int, int]:
    """Derive every vector and compare with the expected key."""
    passed = 0
    failed = 0

    print("\n" + "=" * 60)
    print("PBKDF2 Derivation Tests")
    print("=" * 60)

    for vector in TEST_VECTORS["pbkdf2"]:
        desc = vector["description"]
        try:
            request = DerivationRequest(
                digest=vector["digest"],
                password=hex_to_bytes(vector["password_hex"]),
                salt=hex_to_bytes(vector["salt_hex"]),
                length=vector["length"],
                iterations=vector["iterations"],
            )
            result = bytes_to_hex(derive_key(request))
            expected = vector["expected_key_hex"]

            if result == expected:
                print(f"  [PASS] {desc}")
                passed += 1
            else:
                print(f"  [FAIL] {desc}")
                print(f"         Expected: {expected}")
                print(f"         Got:      {result}")
                failed += 1
        except PBKDF2Error as e:
            logger.exception("Vector %r raised", desc)
            print(f"  [FAIL] {desc}")
            print(f"         Error: {e}")
            failed += 1

    return passed, failed


def main():
    """Run all vectors and report results."""
    logging.basicConfig(level=logging.WARNING)

    print("=" * 60)
    print("KEYDERIVE PBKDF2 TEST VECTORS")
    print("=" * 60)
    print(f"Vector version: {TEST_VECTORS['version']}")
    print(f"Python version: {sys.version}")

    total_passed, total_failed = check_pbkdf2_vectors()

    print("\n" + "=" * 60)
    print("SUMMARY")
    print("=" * 60)
    print(f"  Passed: {total_passed}")
    print(f"  Failed: {total_failed}")
    print(f"  Total:  {total_passed + total_failed}")

    if total_failed == 0:
        print("\n[SUCCESS] All PBKDF2 vectors passed!")
        return 0
    else:
        print(f"\n[FAILURE] {total_failed} vector(s) failed!")
        return 1


if __name__ == "__main__":
    sys.exit(main())
