# bip39ssh_core/config.py

from __future__ import annotations
from dataclasses import dataclass, asdict
from typing import Any, Dict, Mapping, Optional
import os
from .constants import (
    DEFAULT_COUNT, DEFAULT_PATH_TEMPLATE, DEFAULT_WORD_COUNT, MAX_COUNT, STRENGTH_BY_WORDS,
)
from .derivation import render_path
from .errors import InvalidOptions


def _as_int(value: Any, default: int, name: str) -> int:
    if value is None or value == "":
        return default
    try:
        return int(value)
    except (TypeError, ValueError):
        raise InvalidOptions(f"{name} must be an integer, got {value!r}") from None


@dataclass
class DeriveOptions:
    """
    Every option a host may pass when generating keys.

    count          number of sequential keys (1..MAX_COUNT)
    passphrase     optional BIP39 passphrase ("25th word")
    word_count     12 or 24, used only when a new mnemonic is generated
    path_template  derivation path with an ``{i}`` placeholder for the key index
    """
    count: int = DEFAULT_COUNT
    passphrase: str = ""
    word_count: int = DEFAULT_WORD_COUNT
    path_template: str = DEFAULT_PATH_TEMPLATE

    def validate(self) -> "DeriveOptions":
        if not isinstance(self.count, int) or not 1 <= self.count <= MAX_COUNT:
            raise InvalidOptions(f"count must be between 1 and {MAX_COUNT}, got {self.count!r}")
        if self.word_count not in STRENGTH_BY_WORDS:
            raise InvalidOptions(f"word_count must be one of {tuple(STRENGTH_BY_WORDS)}, got {self.word_count!r}")
        # raises InvalidOptions / InvalidPath for a broken template
        render_path(self.path_template, 0)
        return self

    def to_dict(self) -> Dict[str, Any]:
        d = asdict(self)
        d.pop("passphrase")
        return d

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "DeriveOptions":
        """Build from host form data; missing or empty values fall back to defaults."""
        return cls(
            count=_as_int(data.get("count"), DEFAULT_COUNT, "count"),
            passphrase=data.get("passphrase") or "",
            word_count=_as_int(data.get("word_count", data.get("wordCount")), DEFAULT_WORD_COUNT, "word_count"),
            path_template=data.get("path_template") or DEFAULT_PATH_TEMPLATE,
        ).validate()

    @classmethod
    def from_env(cls, passphrase: Optional[str] = "", **overrides: Any) -> "DeriveOptions":
        """Read BIP39SSH_* settings; non-None overrides win and skip the env value."""
        def pick(name: str, env: str, default: int) -> int:
            if overrides.get(name) is not None:
                return overrides[name]
            return _as_int(os.getenv(env), default, env)

        return cls(
            count=pick("count", "BIP39SSH_COUNT", DEFAULT_COUNT),
            passphrase=passphrase or "",
            word_count=pick("word_count", "BIP39SSH_WORD_COUNT", DEFAULT_WORD_COUNT),
            path_template=overrides.get("path_template") or os.getenv("BIP39SSH_PATH_TEMPLATE") or DEFAULT_PATH_TEMPLATE,
        ).validate()
