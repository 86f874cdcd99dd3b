"""
Fingerprint functions behind a uniform bytes -> bytes contract.

- XXH3-64:  8-byte output, little-endian encoding of the 64-bit digest
- XXH3-128: 16-byte output, high half then low half, each big-endian

Both are non-cryptographic. They detect accidental corruption and casual
tampering with overwhelming probability; they are not collision resistant
against an adversary.

The `xxhash` package is lazily imported - a missing dependency produces a
clear error message at first use rather than at package import.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from xxmerkle.constants import (
    LEAF_PREFIX,
    NODE_PREFIX,
    XXH64_DIGEST_SIZE,
    XXH128_DIGEST_SIZE,
)
from xxmerkle.config import Config
from xxmerkle.errors import HashComputationError


def _import_xxhash():
    """Lazily import the xxhash package.

    Raises ImportError with a helpful message if not installed.
    """
    try:
        import xxhash

        return xxhash
    except ImportError:
        raise ImportError(
            "xxhash is required for Merkle tree hashing. "
            "Install with: pip install xxhash"
        )


def xxh3_64(data: bytes) -> bytes:
    """XXH3-64 digest as 8 little-endian bytes."""
    value = _import_xxhash().xxh3_64_intdigest(data)
    return value.to_bytes(XXH64_DIGEST_SIZE, "little")


def xxh3_128(data: bytes) -> bytes:
    """XXH3-128 digest as 16 bytes: high 64 bits then low 64 bits, big-endian."""
    value = _import_xxhash().xxh3_128_intdigest(data)
    high, low = value >> 64, value & 0xFFFFFFFFFFFFFFFF
    return high.to_bytes(8, "big") + low.to_bytes(8, "big")


@dataclass(frozen=True)
class HashFunction:
    """A named, fixed-width fingerprint strategy.

    Calling the instance hashes its argument. Any exception raised by the
    underlying function surfaces as HashComputationError, chained to the
    original cause. Holds no state between calls.
    """

    name: str
    digest_size: int
    func: Callable[[bytes], bytes]

    def __call__(self, data: bytes) -> bytes:
        try:
            digest = self.func(data)
        except (HashComputationError, ImportError):
            raise
        except Exception as e:
            raise HashComputationError(f"{self.name} failed: {e}") from e
        if len(digest) != self.digest_size:
            raise HashComputationError(
                f"{self.name} returned {len(digest)} bytes "
                f"(expected {self.digest_size})"
            )
        return digest


XXH3_64 = HashFunction("xxh3_64", XXH64_DIGEST_SIZE, xxh3_64)
XXH3_128 = HashFunction("xxh3_128", XXH128_DIGEST_SIZE, xxh3_128)


def hash_function_for(config: Config | None = None) -> HashFunction:
    """Select the fingerprint strategy for a configuration (default XXH3-64)."""
    if config is not None and config.xxh128:
        return XXH3_128
    return XXH3_64


def sprout_leaf(
    data: bytes, hash_func: HashFunction, domain_separation: bool = False
) -> bytes:
    """Hash raw input into a leaf, tagged with 0x00 under domain separation.

    Used at build time and again at proof/verify time; both must agree.
    """
    if domain_separation:
        return hash_func(LEAF_PREFIX + data)
    return hash_func(bytes(data))


def hash_node(
    left: bytes, right: bytes, hash_func: HashFunction, domain_separation: bool = False
) -> bytes:
    """Hash a pair of children into their parent, tagged with 0x01 under domain separation."""
    if domain_separation:
        return hash_func(NODE_PREFIX + left + right)
    return hash_func(left + right)
