"""
bip39ssh_core.service
---------------------
Host-facing facade over the pipeline:

    mnemonic -> seed -> key material -> key pair -> encoded text

Each call builds its own service objects, so nothing derived from a
mnemonic outlives the call that produced it.
"""

from __future__ import annotations
from typing import List, Optional, Sequence, Tuple, Union
from .config import DeriveOptions
from .crypto import compute_fingerprint
from .derivation import DerivationPath, KeyDerivationEngine, KeyPair
from .encoding import SSHEncoder
from .models import EncodedKey, KeyBundle
from .seed import MnemonicService
from .verify import KeyPairVerifier, VerificationResult
from .logger import get_logger

log = get_logger("bip39ssh.service")


def encode_key(path: DerivationPath, pair: KeyPair, encoder: Optional[SSHEncoder] = None) -> EncodedKey:
    encoder = encoder or SSHEncoder()
    return EncodedKey(
        path=path.text,
        private_key=encoder.encode_private(pair.secret, pair.public),
        public_key=encoder.encode_public(pair.public),
        fingerprint=compute_fingerprint(pair.public),
        info=path.describe(),
    )


class KeyService:
    def __init__(self, engine: Optional[KeyDerivationEngine] = None):
        self.engine = engine or KeyDerivationEngine()
        self.mnemonics = self.engine.mnemonics
        self.encoder = SSHEncoder()

    def _bundle(self, derived: List[Tuple[DerivationPath, KeyPair]], mnemonic: Optional[str] = None) -> KeyBundle:
        return KeyBundle(keys=[encode_key(p, kp, self.encoder) for p, kp in derived], mnemonic=mnemonic)

    def generate_new(self, options: Optional[DeriveOptions] = None) -> KeyBundle:
        options = (options or DeriveOptions()).validate()
        mnemonic = self.mnemonics.generate_words(options.word_count)
        derived = self.engine.derive_multiple(mnemonic, options.passphrase, options.count, options.path_template)
        log.info(f"[SERVICE] generated new seed with {len(derived)} key(s)")
        return self._bundle(derived, mnemonic=mnemonic)

    def from_existing(self, mnemonic: str, options: Optional[DeriveOptions] = None) -> KeyBundle:
        options = (options or DeriveOptions()).validate()
        mnemonic = self.mnemonics.import_mnemonic(mnemonic)
        derived = self.engine.derive_multiple(mnemonic, options.passphrase, options.count, options.path_template)
        log.info(f"[SERVICE] derived {len(derived)} key(s) from existing seed")
        return self._bundle(derived)

    def restore(self, mnemonic: str, paths: Union[str, Sequence[str]], passphrase: Optional[str] = "") -> KeyBundle:
        derived = self.engine.derive_paths(mnemonic, paths, passphrase)
        log.info(f"[SERVICE] restored {len(derived)} key(s)")
        return self._bundle(derived)

    def verify(self, public_text: str, private_text: str) -> VerificationResult:
        return KeyPairVerifier(self.encoder).verify(public_text, private_text)


def generate_new_keys(options: Optional[DeriveOptions] = None) -> KeyBundle:
    return KeyService().generate_new(options)

def generate_from_existing(mnemonic: str, options: Optional[DeriveOptions] = None) -> KeyBundle:
    return KeyService().from_existing(mnemonic, options)

def restore_keys(mnemonic: str, paths: Union[str, Sequence[str]], passphrase: Optional[str] = "") -> KeyBundle:
    return KeyService().restore(mnemonic, paths, passphrase)

def verify_pair(public_text: str, private_text: str) -> VerificationResult:
    return KeyService().verify(public_text, private_text)
