"""
bip39ssh_core.seed
------------------
BIP39 mnemonic handling: generation, validation, import, and the
standard PBKDF2 stretch (2048 rounds, salt "mnemonic" + passphrase)
from phrase to 64-byte seed.

The wordlist and checksum logic come from the ``mnemonic`` reference
implementation; this module only adds the strength policy and error kinds.
"""

from __future__ import annotations
from typing import Optional
from mnemonic import Mnemonic
from .constants import MNEMONIC_LANGUAGE, STRENGTH_BY_WORDS
from .errors import InvalidMnemonic, InvalidStrength
from .logger import get_logger

log = get_logger("bip39ssh.seed")

ALLOWED_STRENGTHS = tuple(STRENGTH_BY_WORDS.values())


def normalize_phrase(phrase: str) -> str:
    # collapse runs of whitespace; the wordlist check splits on single spaces
    return " ".join(phrase.split())


class MnemonicService:
    def __init__(self, language: str = MNEMONIC_LANGUAGE):
        self.language = language
        self._mnemo = Mnemonic(language)

    def generate(self, strength: int = 256) -> str:
        if strength not in ALLOWED_STRENGTHS:
            raise InvalidStrength(f"strength must be one of {ALLOWED_STRENGTHS}, got {strength!r}")
        words = self._mnemo.generate(strength=strength)
        log.info(f"[MNEMONIC] generated {len(words.split())}-word phrase")
        return words

    def generate_words(self, word_count: int = 24) -> str:
        return self.generate(self.strength_for_words(word_count))

    @staticmethod
    def strength_for_words(word_count: int) -> int:
        try:
            return STRENGTH_BY_WORDS[word_count]
        except (KeyError, TypeError):
            raise InvalidStrength(
                f"word count must be one of {tuple(STRENGTH_BY_WORDS)}, got {word_count!r}"
            ) from None

    def validate(self, mnemonic: Optional[str]) -> bool:
        if not mnemonic or not isinstance(mnemonic, str):
            return False
        return self._mnemo.check(normalize_phrase(mnemonic))

    def import_mnemonic(self, mnemonic: Optional[str]) -> str:
        """Return the normalized phrase, or raise InvalidMnemonic."""
        if not self.validate(mnemonic):
            log.warning("[MNEMONIC] rejected phrase (wordlist or checksum)")
            raise InvalidMnemonic("Invalid mnemonic phrase")
        return normalize_phrase(mnemonic)

    def to_seed(self, mnemonic: str, passphrase: Optional[str] = "") -> bytes:
        # NFKD normalization of phrase and passphrase happens inside Mnemonic.to_seed
        return Mnemonic.to_seed(normalize_phrase(mnemonic), passphrase or "")
