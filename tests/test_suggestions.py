import random

import pytest

from pwtoolkit.config import PolicyConfig
from pwtoolkit.evaluator import score
from pwtoolkit.suggestions import suggest

def test_suggest_five():
    policy = PolicyConfig()
    out = suggest(policy, 5, random.Random(99))
    assert len(out) == 5
    for s in out:
        assert set(s) == {"password", "score"}
        assert len(s["password"]) >= policy.minimum_length
        assert s["score"] <= 100
        assert s["score"] == score(s["password"], policy)

def test_suggest_zero():
    assert suggest(PolicyConfig(), 0) == []

def test_suggest_negative():
    with pytest.raises(ValueError):
        suggest(PolicyConfig(), -1)

def test_suggest_reproducible():
    policy = PolicyConfig(minimum_length=12)
    assert suggest(policy, 3, random.Random(7)) == suggest(policy, 3, random.Random(7))

def test_scored_with_custom_policy():
    policy = PolicyConfig(allowed_special_characters=("~",))
    for s in suggest(policy, 5, random.Random(3)):
        assert "~" in s["password"]
        assert s["score"] == score(s["password"], policy)
