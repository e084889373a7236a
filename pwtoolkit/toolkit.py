"""
pwtoolkit.toolkit

PasswordToolkit ties one resolved policy and one random source to the
scoring, generation and suggestion functions.

    >>> tk = create({"minimumLength": 12, "requireSpecial": False})
    >>> tk.analyse("Passw0rd!")["score"] <= 100
    True
"""

import random
from typing import Any, Dict, List, Mapping, Optional, Union

from .config import DEFAULT_POLICY, PolicyConfig, resolve_policy
from .evaluator import score_password
from .generator import generate
from .suggestions import suggest


class PasswordToolkit:
    def __init__(self, policy: Optional[PolicyConfig] = None, rng: Optional[random.Random] = None):
        self._policy = policy or DEFAULT_POLICY
        self._rng = rng or random.Random()

    @property
    def policy(self) -> PolicyConfig:
        return self._policy

    def analyse(self, password: str) -> Dict[str, int]:
        return score_password(password, self._policy)

    def generate(self) -> str:
        return generate(self._policy, self._rng)

    def suggest(self, n: int) -> List[Dict[str, Union[str, int]]]:
        return suggest(self._policy, n, self._rng)

    def __repr__(self) -> str:
        return f"PasswordToolkit(policy={self._policy!r})"


def create(
    options: Optional[Mapping[str, Any]] = None,
    rng: Optional[random.Random] = None,
    **kwargs: Any,
) -> PasswordToolkit:
    """
    Build a toolkit from an options mapping and/or keyword options.
    Keyword options override keys of the same name in the mapping.
    """
    merged = dict(options or {})
    merged.update(kwargs)
    return PasswordToolkit(resolve_policy(merged), rng)
