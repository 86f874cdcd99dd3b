"""
Tree-wide constants: domain separation tags, fingerprint widths, env names.
"""

# Domain separation tags
LEAF_PREFIX = b"\x00"
NODE_PREFIX = b"\x01"

# Fingerprint widths
XXH64_DIGEST_SIZE = 8
XXH128_DIGEST_SIZE = 16

# A tree needs at least one pair to produce a root
MIN_LEAF_COUNT = 2

# Environment overrides read by Config.from_env()
ENV_XXH128 = "XXMERKLE_XXH128"
ENV_DOMAIN_SEPARATION = "XXMERKLE_DOMAIN_SEPARATION"
