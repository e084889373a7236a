"""Password strength scoring and policy-driven password suggestions."""

from .classifier import CharCounts, classify, count_interior_digits_and_symbols
from .config import DEFAULT_SPECIAL_CHARACTERS, PolicyConfig, resolve_policy
from .evaluator import score, score_password
from .generator import generate
from .suggestions import suggest
from .toolkit import PasswordToolkit, create

__all__ = [
    "CharCounts",
    "DEFAULT_SPECIAL_CHARACTERS",
    "PasswordToolkit",
    "PolicyConfig",
    "classify",
    "count_interior_digits_and_symbols",
    "create",
    "generate",
    "resolve_policy",
    "score",
    "score_password",
    "suggest",
]
