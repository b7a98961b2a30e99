"""
kdf.py - HKDF (RFC 5869) helpers for deterministic passwords.

How this works:
1. Extract: HMAC-SHA256 keyed with the salt, run over the seed. This
   collapses a possibly low-quality seed into a uniform 32-byte pseudorandom
   key (PRK).
2. Expand: the PRK is stretched into as many output bytes as we need, bound
   to an "info" label. Different labels give independent outputs, which is
   how the same seed yields different passwords per service and per retry.

Both steps use the `cryptography` library's HMAC and HKDFExpand primitives.
"""

import logging

from cryptography.hazmat.primitives import hashes, hmac
from cryptography.hazmat.primitives.kdf.hkdf import HKDFExpand

from passcraft.errors import KeyDerivationError


logger = logging.getLogger(__name__)

# SHA-256 digest size, also the PRK size
HASH_LENGTH = 32

# Fixed label prefix, keeps our outputs apart from any other HKDF user
DOMAIN_TAG = b"passcraft-password"


def hkdf_extract(salt: bytes, key_material: bytes) -> bytes:
    """
    Derive the pseudorandom key from the seed.

    Args:
        salt: Extraction salt. An empty salt is replaced by HASH_LENGTH zero
            bytes, as RFC 5869 specifies.
        key_material: The secret input (the seed)

    Returns:
        32-byte pseudorandom key
    """
    if not salt:
        salt = b"\x00" * HASH_LENGTH
    h = hmac.HMAC(salt, hashes.SHA256())
    h.update(key_material)
    return h.finalize()


def hkdf_expand(prk: bytes, info: bytes, length: int = HASH_LENGTH) -> bytes:
    """
    Expand a pseudorandom key into `length` bytes bound to `info`.

    Raises:
        KeyDerivationError: If the expansion fails (e.g. length above 255 * 32)
    """
    try:
        expander = HKDFExpand(algorithm=hashes.SHA256(), length=length, info=info)
        return expander.derive(prk)
    except (ValueError, TypeError) as e:
        logger.error("Failed to expand HKDF: %s", e)
        raise KeyDerivationError(f"Failed to expand HKDF: {e}") from e


def build_info(retry: int, service=None) -> bytes:
    """Build the expand label: tag, optional "-service", "-" and the 4-byte retry counter."""
    info = DOMAIN_TAG
    if service is not None:
        info += b"-" + service.encode("utf-8")
    return info + b"-" + retry.to_bytes(4, "big")
