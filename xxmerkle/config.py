"""
Tree configuration.

Two independent switches:
    xxh128             - 16-byte XXH3-128 fingerprints instead of 8-byte XXH3-64
    domain_separation  - prefix 0x00 to leaves and 0x01 to internal nodes

The same Config used to build a tree must be passed to verify(). A mismatch
is not detected as an error; verification simply returns False.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from xxmerkle.constants import (
    ENV_DOMAIN_SEPARATION,
    ENV_XXH128,
    XXH64_DIGEST_SIZE,
    XXH128_DIGEST_SIZE,
)

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"", "0", "false", "no", "off"})


def _env_flag(name: str) -> bool:
    raw = os.environ.get(name, "").strip().lower()
    if raw in _TRUE_VALUES:
        return True
    if raw in _FALSE_VALUES:
        return False
    raise ValueError(
        f"Invalid boolean for {name}: {raw!r} "
        f"(expected one of {sorted((_TRUE_VALUES | _FALSE_VALUES) - {''})})"
    )


@dataclass(frozen=True)
class Config:
    """Build/verify configuration. A value, never shared mutable state.

    Attributes:
        xxh128: Use XXH3-128 (16-byte nodes). Default XXH3-64 (8-byte nodes).
        domain_separation: Prepend leaf/node type tags before hashing.
    """

    xxh128: bool = False
    domain_separation: bool = False

    @property
    def digest_size(self) -> int:
        return XXH128_DIGEST_SIZE if self.xxh128 else XXH64_DIGEST_SIZE

    @classmethod
    def from_env(cls) -> Config:
        """Create a Config from environment variables.

        Reads:
            XXMERKLE_XXH128             - "1"/"true" selects XXH3-128
            XXMERKLE_DOMAIN_SEPARATION  - "1"/"true" enables 0x00/0x01 tags

        Unset variables default to False.
        """
        return cls(
            xxh128=_env_flag(ENV_XXH128),
            domain_separation=_env_flag(ENV_DOMAIN_SEPARATION),
        )
