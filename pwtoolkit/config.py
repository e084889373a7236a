# pwtoolkit/config.py
"""
Policy configuration for pwtoolkit.

Options are merged over DEFAULTS and validated into an immutable PolicyConfig.
Option dicts may use snake_case keys, the camelCase keys of the public API,
or the legacy names (minimum_characters, containsUpperCase, ...).
A policy can also be read from a JSON file; it is never written back.
"""

import json
import logging
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Tuple

logger = logging.getLogger(__name__)

DEFAULT_SPECIAL_CHARACTERS: Tuple[str, ...] = (
    "!", "@", "#", "$", "%", "^", "&", "*", "(", ")", "_",
    "+", "[", "]", "{", "}", "<", ">", "?", ",", ".",
)

DEFAULTS: Dict[str, Any] = {
    "minimum_length": 8,
    "require_uppercase": True,
    "require_lowercase": True,
    "require_digits": True,
    "require_special": True,
    "allowed_special_characters": None,  # None -> DEFAULT_SPECIAL_CHARACTERS
}

OPTION_ALIASES: Dict[str, str] = {
    "minimumLength": "minimum_length",
    "requireUppercase": "require_uppercase",
    "requireLowercase": "require_lowercase",
    "requireDigits": "require_digits",
    "requireSpecial": "require_special",
    "allowedSpecialCharacters": "allowed_special_characters",
    # legacy names
    "minimum_characters": "minimum_length",
    "containsUpperCase": "require_uppercase",
    "containsLowerCase": "require_lowercase",
    "containsNumbers": "require_digits",
    "containsSpecialCharacters": "require_special",
}


@dataclass(frozen=True)
class PolicyConfig:
    minimum_length: int = 8
    require_uppercase: bool = True
    require_lowercase: bool = True
    require_digits: bool = True
    require_special: bool = True
    allowed_special_characters: Tuple[str, ...] = DEFAULT_SPECIAL_CHARACTERS

    def __post_init__(self) -> None:
        if isinstance(self.minimum_length, bool) or not isinstance(self.minimum_length, int):
            raise ValueError(f"minimum_length must be an integer, got {self.minimum_length!r}")
        if self.minimum_length < 1:
            raise ValueError("minimum_length must be >= 1")
        for name in ("require_uppercase", "require_lowercase", "require_digits", "require_special"):
            if not isinstance(getattr(self, name), bool):
                raise ValueError(f"{name} must be a boolean")
        # tuple() so a caller's list cannot alias the frozen config
        object.__setattr__(
            self, "allowed_special_characters", _resolve_specials(self.allowed_special_characters)
        )

    @property
    def special_characters(self) -> str:
        return "".join(self.allowed_special_characters)

    @property
    def uses_default_specials(self) -> bool:
        """True when the special set is the built-in one, ignoring order."""
        return sorted(self.allowed_special_characters) == sorted(DEFAULT_SPECIAL_CHARACTERS)


def _resolve_specials(value: Any) -> Tuple[str, ...]:
    """
    A non-empty list or tuple replaces the default set entirely.
    Anything else (None, empty, a bare string, other types) falls back to the default.
    """
    if not isinstance(value, (list, tuple)) or len(value) == 0:
        if value is not None:
            logger.debug("falling back to default special characters (got %r)", value)
        return DEFAULT_SPECIAL_CHARACTERS
    chars = tuple(value)
    for c in chars:
        if not isinstance(c, str) or len(c) != 1:
            raise ValueError(f"special characters must be single-character strings, got {c!r}")
    return chars


DEFAULT_POLICY = PolicyConfig()


def normalize_options(options: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
    """Map aliases to canonical keys and merge over DEFAULTS."""
    out = DEFAULTS.copy()
    for key, value in (options or {}).items():
        name = OPTION_ALIASES.get(key, key)
        if name not in DEFAULTS:
            raise ValueError(f"Unknown policy option: {key}")
        # None keeps the default, as an omitted key would
        if value is not None:
            out[name] = value
    return out


def resolve_policy(options: Optional[Mapping[str, Any]] = None) -> PolicyConfig:
    opts = normalize_options(options)
    policy = PolicyConfig(
        minimum_length=opts["minimum_length"],
        require_uppercase=opts["require_uppercase"],
        require_lowercase=opts["require_lowercase"],
        require_digits=opts["require_digits"],
        require_special=opts["require_special"],
        allowed_special_characters=opts["allowed_special_characters"],
    )
    logger.debug("resolved policy: %r", policy)
    return policy


def load_policy_file(path: str) -> Dict[str, Any]:
    """
    Read policy options from a JSON object file.
    Raises FileNotFoundError if missing, ValueError on malformed content.
    """
    with open(path, "r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid policy file {path}: {e}") from e
    if not isinstance(data, dict):
        raise ValueError(f"Policy file {path} must contain a JSON object")
    return data
