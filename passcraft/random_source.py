"""
random_source.py - Cryptographically secure index sampling.

We pull 4 bytes from the OS CSPRNG through `secrets` (never `random`, which is
a predictable Mersenne Twister), read them as a big-endian unsigned 32-bit
integer and reduce modulo the requested range.

Note on bias: 2**32 is not a multiple of 76 or 26, so low indexes are very
slightly more likely than high ones (on the order of 1 in 50 million).
That is negligible for password characters. If this is ever reused for key
material, switch to rejection sampling.
"""

import logging
import secrets
from typing import Sequence, TypeVar

from passcraft.errors import RandomBytesError


logger = logging.getLogger(__name__)

T = TypeVar("T")


def random_bytes(count: int) -> bytes:
    """Read `count` bytes from the OS random number generator."""
    try:
        return secrets.token_bytes(count)
    except OSError as e:
        logger.error("Failed to fill random bytes: %s", e)
        raise RandomBytesError(f"Failed to fill random bytes: {e}") from e


def next_uniform(modulus: int) -> int:
    """
    Return a random integer in [0, modulus).

    Args:
        modulus: Size of the range, must be positive

    Returns:
        The sampled index

    Raises:
        ValueError: If modulus is not positive
        RandomBytesError: If the OS entropy source fails
    """
    if modulus <= 0:
        raise ValueError(f"modulus must be positive, got: {modulus}")
    value = int.from_bytes(random_bytes(4), "big")
    return value % modulus


def choice(items: Sequence[T]) -> T:
    """Pick one element of a non-empty sequence."""
    return items[next_uniform(len(items))]
