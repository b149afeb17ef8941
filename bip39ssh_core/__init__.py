"""
bip39ssh Core Package
=====================
Deterministic Ed25519 key pairs from a BIP39 mnemonic, rendered as
SSH-style text, plus pair verification and fingerprinting.

Provides:
- Mnemonic generation, validation and seed stretching
- Path-salted key derivation and Ed25519 key pair construction
- Text encoding/decoding of public and private keys
- Key pair verification with SHA-256 fingerprints

The core does no file, network or template I/O.
"""

from .config import DeriveOptions
from .derivation import DerivationPath, KeyDerivationEngine, KeyPair
from .encoding import SSHEncoder
from .errors import (
    ErrorKind, KeyToolError, InvalidMnemonic, InvalidStrength, InvalidPath,
    InvalidKeyFormat, PairMismatch, UnsupportedKeyType, InvalidOptions,
)
from .models import EncodedKey, KeyBundle
from .seed import MnemonicService
from .service import KeyService
from .verify import KeyPairVerifier, VerificationResult

__version__ = "0.1.0"
