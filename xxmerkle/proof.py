"""
Membership proofs and their verification.

A proof is one sibling hash per tree level plus a direction bitfield:
    bit i == 1  -> the proven node is the RIGHT child at level i
                   (parent = H(tag? + sibling + current))
    bit i == 0  -> the proven node is the LEFT child at level i
                   (parent = H(tag? + current + sibling))

verify() needs no tree - only the raw input, a trusted root, the proof and
the Config the tree was built with.
"""

from __future__ import annotations

import hmac
import logging
from dataclasses import dataclass

from xxmerkle.config import Config
from xxmerkle.errors import InputMissingError, InvalidProofError, ProofMissingError
from xxmerkle.hashing import hash_function_for, hash_node, sprout_leaf

logger = logging.getLogger(__name__)

_BUFFER_TYPES = (bytes, bytearray, memoryview)


@dataclass(frozen=True)
class Proof:
    """Inclusion proof for one leaf.

    Attributes:
        directions: Bitfield, bit i set when the node at level i is a right child.
        siblings: Hash paired with the proven node at each level, leaves first.
    """

    directions: int
    siblings: tuple[bytes, ...]

    def __post_init__(self) -> None:
        siblings = tuple(self.siblings)
        for s in siblings:
            if not isinstance(s, _BUFFER_TYPES):
                raise TypeError(
                    f"Sibling must be bytes-like, got {type(s).__name__}"
                )
        if isinstance(self.directions, bool) or not isinstance(self.directions, int):
            raise TypeError(
                f"Direction bits must be an int, got {type(self.directions).__name__}"
            )
        # Own the sibling bytes: callers may hand in lists or bytearrays
        object.__setattr__(self, "siblings", tuple(bytes(s) for s in siblings))
        if self.directions < 0 or self.directions >= 1 << len(self.siblings):
            raise InvalidProofError(
                f"Direction bits {self.directions:#x} do not fit "
                f"{len(self.siblings)} levels"
            )

    @property
    def depth(self) -> int:
        return len(self.siblings)

    def is_right_child(self, level: int) -> bool:
        """True if the proven node is the right operand at the given level."""
        return bool(self.directions >> level & 1)


def verify(
    data: bytes | None,
    root: bytes | None,
    proof: Proof | None,
    config: Config | None = None,
) -> bool:
    """Check that data is a leaf of the tree committed to by root.

    Returns False on any mismatch: wrong data, tampered sibling or direction
    bits, a wrong or missing root, or a Config that differs from the one
    used at build.

    Raises:
        InputMissingError: If data is None.
        ProofMissingError: If proof is None.
        HashComputationError: If the fingerprint function fails.
    """
    if data is None:
        raise InputMissingError("Cannot verify a proof without leaf data")
    if proof is None:
        raise ProofMissingError("Cannot verify without a proof")
    if config is None:
        config = Config()

    hash_func = hash_function_for(config)
    current = sprout_leaf(data, hash_func, config.domain_separation)

    path = proof.directions
    for sibling in proof.siblings:
        if path & 1:
            current = hash_node(sibling, current, hash_func, config.domain_separation)
        else:
            current = hash_node(current, sibling, hash_func, config.domain_separation)
        path >>= 1

    if not isinstance(root, _BUFFER_TYPES):
        logger.debug("No usable root to compare against (got %s)", type(root).__name__)
        return False
    if hmac.compare_digest(current, bytes(root)):
        return True
    logger.debug("Proof did not reproduce root %s (got %s)", bytes(root).hex(), current.hex())
    return False
