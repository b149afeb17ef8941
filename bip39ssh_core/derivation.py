"""
bip39ssh_core.derivation
------------------------
Deterministic Ed25519 key derivation from a BIP39 seed.

Canonical algorithm (the only one supported):

    k1       = PBKDF2-HMAC-SHA512(seed, salt=path, 100000 rounds, 32 bytes)
    material = k1 || HMAC-SHA512(key=k1, msg=path)[:32]

The 64-byte material is used directly as the secret key and its last
32 bytes serve as the public key (NaCl secret-key layout). The path
string is only a salt: there is no BIP32 parent/child chaining, so two
paths sharing a prefix yield unrelated keys.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple, Union
from .constants import (
    DEFAULT_PATH_TEMPLATE, ED25519_KEY_LEN, ED25519_EXPANDED_LEN,
    HARDENED_OFFSET, PATH_KDF_ITERATIONS, PATH_PREFIX,
)
from .crypto import hmac_sha512, pbkdf2_sha512, public_key_from_secret
from .errors import InvalidMnemonic, InvalidOptions, InvalidPath, UnsupportedKeyType
from .logger import get_logger
from .seed import MnemonicService

log = get_logger("bip39ssh.derivation")


@dataclass(frozen=True)
class DerivationPath:
    text: str
    segments: Tuple[Tuple[int, bool], ...] = ()

    @classmethod
    def parse(cls, text: str) -> "DerivationPath":
        if not isinstance(text, str) or not text.startswith(PATH_PREFIX):
            raise InvalidPath(f'Invalid derivation path: {text}. Must start with "{PATH_PREFIX}"')
        segments = []
        for part in text[len(PATH_PREFIX):].split("/"):
            hardened = part.endswith("'")
            digits = part[:-1] if hardened else part
            if not digits.isdigit() or not digits.isascii():
                raise InvalidPath(f"Invalid derivation path: {text}. Bad segment {part!r}")
            index = int(digits)
            if index >= HARDENED_OFFSET:
                raise InvalidPath(f"Invalid derivation path: {text}. Index {index} out of range")
            segments.append((index, hardened))
        return cls(text=text, segments=tuple(segments))

    @property
    def descriptor(self) -> str:
        return f"Derivation Path: {self.text}"

    def describe(self) -> str:
        """Human-readable explanation of each path segment."""
        lines = ["This key was derived from the master seed using the following path:", "- m: Master seed"]
        for index, hardened in self.segments:
            if hardened:
                lines.append(f"- {index}': Hardened derivation (index {index})")
            else:
                lines.append(f"- {index}: Normal derivation (index {index})")
        lines.append("")
        lines.append("This path ensures deterministic key generation and allows you to regenerate the same key later.")
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.text


def render_path(template: str, index: int) -> DerivationPath:
    if "{i}" not in template:
        raise InvalidOptions(f"path template must contain '{{i}}': {template!r}")
    return DerivationPath.parse(template.replace("{i}", str(index)))


@dataclass(frozen=True)
class KeyPair:
    public: bytes
    secret: bytes = field(repr=False)

    @property
    def kind(self) -> str:
        return "seed" if len(self.secret) == ED25519_KEY_LEN else "expanded"


class KeyDerivationEngine:
    """
    Stateless: holds configuration only, so one instance per call or one
    shared across threads behave identically.
    """

    def __init__(self, iterations: int = PATH_KDF_ITERATIONS, mnemonics: Optional[MnemonicService] = None):
        self.iterations = iterations
        self.mnemonics = mnemonics or MnemonicService()

    def derive_key_material(self, seed: bytes, path: Union[str, DerivationPath]) -> bytes:
        if not isinstance(path, DerivationPath):
            path = DerivationPath.parse(path)
        salt = path.text.encode("utf-8")
        k1 = pbkdf2_sha512(seed, salt, self.iterations, 32)
        return k1 + hmac_sha512(k1, salt)[:32]

    @staticmethod
    def derive_key_pair(material: bytes) -> KeyPair:
        if len(material) not in (ED25519_KEY_LEN, ED25519_EXPANDED_LEN):
            raise UnsupportedKeyType(
                f"key material must be {ED25519_KEY_LEN} or {ED25519_EXPANDED_LEN} bytes, got {len(material)}"
            )
        material = bytes(material)
        return KeyPair(public=public_key_from_secret(material), secret=material)

    def _seed_for(self, mnemonic: str, passphrase: Optional[str]) -> bytes:
        if not self.mnemonics.validate(mnemonic):
            raise InvalidMnemonic("Invalid mnemonic")
        return self.mnemonics.to_seed(mnemonic, passphrase)

    def derive_paths(
        self,
        mnemonic: str,
        paths: Union[str, Sequence[str]],
        passphrase: Optional[str] = "",
    ) -> List[Tuple[DerivationPath, KeyPair]]:
        """Derive one key pair per explicit path, in the given order."""
        if isinstance(paths, str):
            paths = [paths]
        if not paths:
            raise InvalidPath("at least one derivation path is required")
        parsed = [DerivationPath.parse(p) for p in paths]
        seed = self._seed_for(mnemonic, passphrase)

        results = []
        for path in parsed:
            pair = self.derive_key_pair(self.derive_key_material(seed, path))
            results.append((path, pair))
            log.debug(f"[DERIVE] path={path.text}")
        log.info(f"[DERIVE] derived {len(results)} key(s)")
        return results

    def derive_multiple(
        self,
        mnemonic: str,
        passphrase: Optional[str] = "",
        count: int = 1,
        path_template: str = DEFAULT_PATH_TEMPLATE,
    ) -> List[Tuple[DerivationPath, KeyPair]]:
        if not isinstance(count, int) or count < 1:
            raise InvalidOptions(f"count must be a positive integer, got {count!r}")
        paths = [render_path(path_template, i).text for i in range(count)]
        return self.derive_paths(mnemonic, paths, passphrase)
