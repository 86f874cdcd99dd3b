"""
xxmerkle - binary Merkle tree over xxHash3 fingerprints.

Architecture:
    Leaves:   XXH3(0x00? + data)                 <- 0x00 only with domain separation
    Nodes:    XXH3(0x01? + left + right)         <- odd levels duplicate their last node
    Root:     XXH3 of the final stored pair      <- kept apart from the levels
    Proofs:   direction bitfield + one sibling per level, verified without the tree

XXH3 is a fast non-cryptographic fingerprint. A root is a probabilistic
integrity check, not a collision-resistant commitment.
"""

from xxmerkle.constants import (
    ENV_DOMAIN_SEPARATION,
    ENV_XXH128,
    LEAF_PREFIX,
    MIN_LEAF_COUNT,
    NODE_PREFIX,
    XXH64_DIGEST_SIZE,
    XXH128_DIGEST_SIZE,
)
from xxmerkle.errors import (
    MerkleTreeError,
    InvalidLeafCountError,
    LeafNotFoundError,
    IndexOutOfRangeError,
    InputMissingError,
    ProofMissingError,
    InvalidProofError,
    HashComputationError,
    TreeInvariantError,
)
from xxmerkle.config import Config
from xxmerkle.hashing import (
    HashFunction,
    hash_function_for,
    hash_node,
    sprout_leaf,
)
from xxmerkle.proof import Proof, verify
from xxmerkle.tree import MerkleTree, build

__version__ = "0.1.0"

__all__ = [
    "Config",
    "HashFunction",
    "hash_function_for",
    "MerkleTree",
    "build",
    "sprout_leaf",
    "hash_node",
    "Proof",
    "verify",
    "MerkleTreeError",
    "InvalidLeafCountError",
    "LeafNotFoundError",
    "IndexOutOfRangeError",
    "InputMissingError",
    "ProofMissingError",
    "InvalidProofError",
    "HashComputationError",
    "TreeInvariantError",
    "ENV_DOMAIN_SEPARATION",
    "ENV_XXH128",
    "LEAF_PREFIX",
    "MIN_LEAF_COUNT",
    "NODE_PREFIX",
    "XXH64_DIGEST_SIZE",
    "XXH128_DIGEST_SIZE",
]
