"""
pwtoolkit.generator
Policy-driven password generator with an injectable random source.

Pass a seeded random.Random for reproducible output, or random.SystemRandom()
for OS-backed randomness.
"""

import logging
import random
import string
from typing import List, Optional, Tuple

from .config import DEFAULT_POLICY, PolicyConfig

logger = logging.getLogger(__name__)

MIN_EXTRA_CHARS = 2


def _edge_pools(policy: PolicyConfig) -> Tuple[str, str]:
    """Return (edge_eligible, disallowed_at_edges) character strings."""
    edge = ""
    if policy.require_lowercase:
        edge += string.ascii_lowercase
    if policy.require_uppercase:
        edge += string.ascii_uppercase
    disallowed = (
        ("" if policy.require_digits else string.digits)
        + ("" if policy.require_special else policy.special_characters)
    )
    if not edge:
        # no letter class enabled: any enabled class may sit at the edges
        if policy.require_digits:
            edge += string.digits
        if policy.require_special:
            edge += policy.special_characters
    return edge, disallowed


def generate(policy: Optional[PolicyConfig] = None, rng: Optional[random.Random] = None) -> str:
    """
    Generate a password containing one character of every required class,
    padded from the combined pool to at least the minimum length.
    The first and last characters come from the edge-eligible classes.
    """
    policy = policy or DEFAULT_POLICY
    rng = rng or random.Random()

    pools = []
    if policy.require_lowercase:
        pools.append(string.ascii_lowercase)
    if policy.require_uppercase:
        pools.append(string.ascii_uppercase)
    if policy.require_digits:
        pools.append(string.digits)
    if policy.require_special:
        pools.append(policy.special_characters)
    if not pools:
        raise ValueError("At least one character class must be enabled")

    required = [rng.choice(p) for p in pools]
    all_chars = "".join(pools)
    remaining = max(policy.minimum_length - len(required), MIN_EXTRA_CHARS)
    combined: List[str] = required + [rng.choice(all_chars) for _ in range(remaining)]
    rng.shuffle(combined)

    edge_chars, disallowed = _edge_pools(policy)
    candidates = [
        i for i, c in enumerate(combined) if c in edge_chars and c not in disallowed
    ]
    if candidates:
        first_idx, last_idx = candidates[0], candidates[-1]
        first, last = combined[first_idx], combined[last_idx]
        middle = [c for i, c in enumerate(combined) if i not in (first_idx, last_idx)]
    else:
        logger.debug("no edge-eligible character drawn; drawing edges separately")
        first, last = rng.choice(edge_chars), rng.choice(edge_chars)
        middle = combined

    return first + "".join(middle) + last
