"""
Exception taxonomy for tree construction, proof generation and verification.

Every error derives from MerkleTreeError and from the closest builtin, so
callers can catch either. A proof that does not match its root is not an
error: verify() returns False for that.
"""

from __future__ import annotations


class MerkleTreeError(Exception):
    """Base class for all xxmerkle errors."""


class InvalidLeafCountError(MerkleTreeError, ValueError):
    """Fewer than two inputs were supplied to build a tree."""


class LeafNotFoundError(MerkleTreeError, LookupError):
    """The requested input is not a leaf of the tree."""


class IndexOutOfRangeError(MerkleTreeError, IndexError):
    """A proof was requested for a leaf position outside the tree."""


class InputMissingError(MerkleTreeError, ValueError):
    """verify() was called without leaf data."""


class ProofMissingError(MerkleTreeError, ValueError):
    """verify() was called without a proof."""


class HashComputationError(MerkleTreeError):
    """The underlying fingerprint function failed. Never retried."""


class TreeInvariantError(MerkleTreeError, RuntimeError):
    """A stored level violates the builder's invariants.

    Raised when a sibling index falls outside a level that should have been
    padded to even length at build time. Indicates a defect, not bad input.
    """


class InvalidProofError(MerkleTreeError, ValueError):
    """A Proof was constructed with malformed siblings or direction bits."""
