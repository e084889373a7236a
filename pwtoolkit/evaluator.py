"""
pwtoolkit.evaluator

Password strength scoring against a PolicyConfig:
- requirement_match_count(password, counts, policy): how many policy rules the password meets
- breakdown(password, policy): every term of the weighted formula
- score(password, policy): final integer score, clamped to 100 at the top
- score_password(password, policy): {"score": int}
- strength_label(score): human-readable label for display
"""

from typing import Dict, Optional

from .classifier import CharCounts, classify, count_interior_digits_and_symbols
from .config import DEFAULT_POLICY, PolicyConfig

MAX_SCORE = 100


def requirement_match_count(password: str, counts: CharCounts, policy: PolicyConfig) -> int:
    """
    One point per satisfied rule: minimum length, and each required class that
    is present. A custom special set earns one extra point when the password
    uses one of its characters.
    """
    matches = 0
    if len(password) >= policy.minimum_length:
        matches += 1
    if policy.require_uppercase and counts.uppercase > 0:
        matches += 1
    if policy.require_lowercase and counts.lowercase > 0:
        matches += 1
    if policy.require_digits and counts.digits > 0:
        matches += 1
    if policy.require_special and counts.special_characters > 0:
        matches += 1
        if not policy.uses_default_specials:
            if any(c in password for c in policy.allowed_special_characters):
                matches += 1
    return matches


def breakdown(password: str, policy: Optional[PolicyConfig] = None) -> Dict[str, int]:
    """
    Compute all terms of the weighted formula.

    The uppercase/lowercase terms are (length - count) * 2 and are added to
    the total, so fewer letters of a case score higher.
    """
    if not isinstance(password, str):
        raise TypeError(f"password must be a string, got {type(password).__name__}")
    policy = policy or DEFAULT_POLICY
    n = len(password)
    counts = classify(password)

    terms = {
        "length": n * 4,
        "uppercase": (n - counts.uppercase) * 2,
        "lowercase": (n - counts.lowercase) * 2,
        "digits": counts.digits * 4,
        "special": counts.special_characters * 6,
        "requirements": requirement_match_count(password, counts, policy) * 2,
        "interior": count_interior_digits_and_symbols(password) * 2,
    }
    raw = sum(terms.values())

    only_letters = counts.letters if counts.digits == 0 and counts.special_characters == 0 else 0
    only_numbers = counts.digits if counts.letters == 0 and counts.special_characters == 0 else 0
    deductions = (
        only_letters
        + only_numbers
        + counts.consecutive_uppercase * 2
        + counts.consecutive_lowercase * 2
        + counts.consecutive_digits * 2
    )

    terms.update(
        raw=raw,
        only_letters=only_letters,
        only_numbers=only_numbers,
        consecutive=(counts.consecutive_uppercase + counts.consecutive_lowercase + counts.consecutive_digits) * 2,
        deductions=deductions,
        # upper bound only
        score=min(raw - deductions, MAX_SCORE),
    )
    return terms


def score(password: str, policy: Optional[PolicyConfig] = None) -> int:
    return breakdown(password, policy)["score"]


def score_password(password: str, policy: Optional[PolicyConfig] = None) -> Dict[str, int]:
    return {"score": score(password, policy)}


def strength_label(value: int) -> str:
    if value < 20:
        return "Very Weak"
    elif value < 40:
        return "Weak"
    elif value < 60:
        return "Fair"
    elif value < 80:
        return "Strong"
    return "Excellent"
