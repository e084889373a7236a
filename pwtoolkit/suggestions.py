"""
pwtoolkit.suggestions

Produce scored password candidates for a policy: each candidate is generated
then scored with the same policy, in generation order.
"""

import logging
import random
from typing import Dict, List, Optional, Union

from .config import DEFAULT_POLICY, PolicyConfig
from .evaluator import score
from .generator import generate

logger = logging.getLogger(__name__)


def suggest(
    policy: Optional[PolicyConfig] = None,
    n: int = 1,
    rng: Optional[random.Random] = None,
) -> List[Dict[str, Union[str, int]]]:
    """
    Return exactly n entries of {"password": str, "score": int}.
    """
    if n < 0:
        raise ValueError("n must be >= 0")
    policy = policy or DEFAULT_POLICY
    rng = rng or random.Random()

    results = []
    for _ in range(n):
        pw = generate(policy, rng)
        results.append({"password": pw, "score": score(pw, policy)})
    logger.debug("generated %d suggestion(s)", n)
    return results
