import dataclasses
import json

import pytest

from pwtoolkit.config import (
    DEFAULT_SPECIAL_CHARACTERS,
    DEFAULTS,
    PolicyConfig,
    load_policy_file,
    normalize_options,
    resolve_policy,
)

def test_defaults():
    p = resolve_policy()
    assert p.minimum_length == 8
    assert p.require_uppercase and p.require_lowercase and p.require_digits and p.require_special
    assert p.allowed_special_characters == DEFAULT_SPECIAL_CHARACTERS
    assert len(DEFAULT_SPECIAL_CHARACTERS) == 21
    assert p.uses_default_specials

def test_custom_specials_replace_default():
    p = resolve_policy({"allowedSpecialCharacters": ["~", "-"]})
    assert p.allowed_special_characters == ("~", "-")
    assert p.special_characters == "~-"
    assert not p.uses_default_specials

def test_specials_fallback_to_default():
    for value in ([], (), "", None, 5, {"~": 1}):
        assert PolicyConfig(allowed_special_characters=value).allowed_special_characters == DEFAULT_SPECIAL_CHARACTERS

def test_string_specials_fall_back_to_default():
    assert PolicyConfig(allowed_special_characters="~=").allowed_special_characters == DEFAULT_SPECIAL_CHARACTERS
    p = resolve_policy({"allowedSpecialCharacters": "~"})
    assert p.uses_default_specials

def test_specials_must_be_single_chars():
    with pytest.raises(ValueError):
        PolicyConfig(allowed_special_characters=["~~"])
    with pytest.raises(ValueError):
        PolicyConfig(allowed_special_characters=[1])

def test_reordered_default_counts_as_default():
    p = PolicyConfig(allowed_special_characters=tuple(reversed(DEFAULT_SPECIAL_CHARACTERS)))
    assert p.uses_default_specials

def test_minimum_length_validated():
    for bad in (0, -3, 2.5, True):
        with pytest.raises(ValueError):
            PolicyConfig(minimum_length=bad)

def test_flags_must_be_bool():
    with pytest.raises(ValueError):
        PolicyConfig(require_digits="no")

def test_none_keeps_default():
    assert resolve_policy({"minimumLength": None}).minimum_length == 8

def test_aliases():
    p = resolve_policy({
        "minimum_characters": 10,
        "containsUpperCase": False,
        "requireDigits": False,
        "require_special": False,
    })
    assert p.minimum_length == 10
    assert not p.require_uppercase
    assert p.require_lowercase
    assert not p.require_digits
    assert not p.require_special

def test_unknown_option():
    with pytest.raises(ValueError):
        normalize_options({"maxLength": 3})

def test_normalize_does_not_mutate_defaults():
    normalize_options({"minimumLength": 30})
    assert DEFAULTS["minimum_length"] == 8

def test_frozen():
    p = PolicyConfig()
    with pytest.raises(dataclasses.FrozenInstanceError):
        p.minimum_length = 3

def test_list_is_copied():
    chars = ["~"]
    p = PolicyConfig(allowed_special_characters=chars)
    chars.append("=")
    assert p.allowed_special_characters == ("~",)

def test_load_policy_file(tmp_path):
    path = tmp_path / "policy.json"
    path.write_text(json.dumps({"minimumLength": 12, "allowedSpecialCharacters": ["~"]}), encoding="utf-8")
    p = resolve_policy(load_policy_file(str(path)))
    assert p.minimum_length == 12
    assert p.allowed_special_characters == ("~",)

def test_load_policy_file_errors(tmp_path):
    bad = tmp_path / "bad.json"
    bad.write_text("{not json", encoding="utf-8")
    with pytest.raises(ValueError):
        load_policy_file(str(bad))
    arr = tmp_path / "arr.json"
    arr.write_text("[1, 2]", encoding="utf-8")
    with pytest.raises(ValueError):
        load_policy_file(str(arr))
    with pytest.raises(FileNotFoundError):
        load_policy_file(str(tmp_path / "missing.json"))
