"""Content fingerprints for exact-match lookup."""

import hashlib

# Fingerprints key caches and exact-match tables; they are not a security control
FINGERPRINT_ALGORITHM = "sha1"


def fingerprint(normalized_content: str) -> str:
    """Compute the fingerprint of normalized content.

    Equal normalized content always yields an equal fingerprint.

    Args:
        normalized_content: Output of the normalization pipeline

    Returns:
        Hexadecimal SHA-1 digest (40 characters)

    Example:
        >>> fingerprint("")
        'da39a3ee5e6b4b0d3255bfef95601890afd80709'
    """
    hash_obj = hashlib.new(FINGERPRINT_ALGORITHM, normalized_content.encode("utf-8"))
    return hash_obj.hexdigest()
