"""
Merkle tree construction and proof generation.

Layout for 5 leaves (depth 3):
    level 0:  L0 L1 L2 L3 L4 L4      <- odd level, last leaf duplicated
    level 1:  N0 N1 N2 N2            <- odd again, duplicated again
    level 2:  M0 M1                  <- always exactly one pair
    root:     H(M0 + M1)             <- stored apart from the levels

Duplicates are materialized in the stored levels because proofs read their
siblings straight from them. Depth is ceil(log2(leaf_count)).
"""

from __future__ import annotations

import logging
from typing import Iterable

from xxmerkle.constants import MIN_LEAF_COUNT
from xxmerkle.config import Config
from xxmerkle.errors import (
    IndexOutOfRangeError,
    InvalidLeafCountError,
    LeafNotFoundError,
    TreeInvariantError,
)
from xxmerkle.hashing import HashFunction, hash_function_for, hash_node, sprout_leaf
from xxmerkle.proof import Proof, verify

logger = logging.getLogger(__name__)


def _pad_if_odd(level: list[bytes]) -> list[bytes]:
    if len(level) % 2 == 1:
        return level + [level[-1]]
    return level


class MerkleTree:
    """Immutable binary Merkle tree over raw byte inputs.

    Usage:
        tree = MerkleTree.from_inputs([b"alpha", b"beta", b"gamma"])
        proof = tree.proof_for_input(b"beta")
        assert verify(b"beta", tree.root, proof, tree.config)
    """

    def __init__(
        self,
        config: Config,
        leaves: tuple[bytes, ...],
        levels: tuple[tuple[bytes, ...], ...],
        root: bytes,
        leaf_index: dict[bytes, int],
    ) -> None:
        self._config = config
        self._leaves = leaves
        self._levels = levels
        self._root = root
        self._leaf_index = leaf_index
        self._hash_func = hash_function_for(config)

    @classmethod
    def from_inputs(
        cls, inputs: Iterable[bytes], config: Config | None = None
    ) -> MerkleTree:
        """Build a Merkle tree from raw inputs.

        Args:
            inputs: Ordered raw data, one entry per leaf. At least two entries.
            config: Hash width and domain separation. Defaults to Config().

        Returns:
            A MerkleTree instance.

        Raises:
            InvalidLeafCountError: If fewer than two inputs are given.
            HashComputationError: If hashing fails. No partial tree is returned.
        """
        if config is None:
            config = Config()
        data = list(inputs)
        if len(data) < MIN_LEAF_COUNT:
            raise InvalidLeafCountError(
                f"A Merkle tree needs at least {MIN_LEAF_COUNT} leaves, got {len(data)}"
            )

        hash_func = hash_function_for(config)
        sep = config.domain_separation
        depth = (len(data) - 1).bit_length()

        leaves = [sprout_leaf(d, hash_func, sep) for d in data]

        # Last write wins for duplicate inputs
        leaf_index = {leaf: i for i, leaf in enumerate(leaves)}

        levels: list[tuple[bytes, ...]] = []
        layer = leaves
        for _ in range(depth - 1):
            layer = _pad_if_odd(layer)
            levels.append(tuple(layer))
            layer = [
                hash_node(layer[i], layer[i + 1], hash_func, sep)
                for i in range(0, len(layer), 2)
            ]

        if len(layer) != 2:
            raise TreeInvariantError(
                f"Top stored level has {len(layer)} nodes (expected 2)"
            )
        levels.append(tuple(layer))
        root = hash_node(layer[0], layer[1], hash_func, sep)

        logger.debug(
            "Built Merkle tree: %d leaves, depth %d, %s, domain separation %s",
            len(leaves), depth, hash_func.name, "on" if sep else "off",
        )
        return cls(config, tuple(leaves), tuple(levels), root, leaf_index)

    @property
    def config(self) -> Config:
        return self._config

    @property
    def hash_function(self) -> HashFunction:
        return self._hash_func

    @property
    def root(self) -> bytes:
        """The Merkle root (8 or 16 bytes depending on Config.xxh128)."""
        return self._root

    @property
    def root_hex(self) -> str:
        return self._root.hex()

    @property
    def leaves(self) -> tuple[bytes, ...]:
        """Leaf hashes in input order, without duplication padding."""
        return self._leaves

    @property
    def levels(self) -> tuple[tuple[bytes, ...], ...]:
        """Stored levels, leaves first. Each level is padded to even length."""
        return self._levels

    @property
    def leaf_count(self) -> int:
        return len(self._leaves)

    @property
    def depth(self) -> int:
        return len(self._levels)

    def __len__(self) -> int:
        return self.leaf_count

    def __contains__(self, data: object) -> bool:
        if not isinstance(data, (bytes, bytearray, memoryview)):
            return False
        leaf = sprout_leaf(data, self._hash_func, self._config.domain_separation)
        return leaf in self._leaf_index

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MerkleTree):
            return NotImplemented
        return (
            self._config == other._config
            and self._levels == other._levels
            and self._root == other._root
        )

    def __hash__(self) -> int:
        return hash((self._config, self._root))

    def __repr__(self) -> str:
        return (
            f"MerkleTree(leaf_count={self.leaf_count}, depth={self.depth}, "
            f"root={self.root_hex})"
        )

    def index_of(self, data: bytes) -> int:
        """Return the leaf position of raw input data.

        Duplicate inputs resolve to their last position.

        Raises:
            LeafNotFoundError: If data is not a leaf of this tree.
        """
        leaf = sprout_leaf(data, self._hash_func, self._config.domain_separation)
        try:
            return self._leaf_index[leaf]
        except KeyError:
            raise LeafNotFoundError(
                f"Leaf {leaf.hex()} is not a member of this tree"
            ) from None

    def proof_for_input(self, data: bytes) -> Proof:
        """Generate an inclusion proof for raw input data.

        Raises:
            LeafNotFoundError: If data is not a leaf of this tree.
            HashComputationError: If hashing the input fails.
        """
        return self.proof_for_index(self.index_of(data))

    def proof_for_index(self, index: int) -> Proof:
        """Generate an inclusion proof for the leaf at the given index.

        Args:
            index: 0-based position in the original input list.

        Raises:
            IndexOutOfRangeError: If index is out of range.
            TreeInvariantError: If a stored level lacks the expected sibling.
        """
        if index < 0 or index >= self.leaf_count:
            raise IndexOutOfRangeError(
                f"Leaf index {index} out of range [0, {self.leaf_count})"
            )

        directions = 0
        siblings: list[bytes] = []
        idx = index

        for level, nodes in enumerate(self._levels):
            if idx & 1:
                directions |= 1 << level
                sibling_idx = idx - 1
            else:
                sibling_idx = idx + 1

            if sibling_idx >= len(nodes):
                raise TreeInvariantError(
                    f"Sibling index {sibling_idx} out of bounds at level {level} "
                    f"({len(nodes)} nodes)"
                )
            siblings.append(nodes[sibling_idx])
            idx >>= 1

        logger.debug("Generated proof for leaf %d (depth %d)", index, self.depth)
        return Proof(directions=directions, siblings=tuple(siblings))

    def verify(self, data: bytes, proof: Proof) -> bool:
        """Verify a proof against this tree's own root and config."""
        return verify(data, self._root, proof, self._config)


def build(config: Config | None, inputs: Iterable[bytes]) -> MerkleTree:
    """Build a tree from raw inputs. See MerkleTree.from_inputs()."""
    return MerkleTree.from_inputs(inputs, config)
