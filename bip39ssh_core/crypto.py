"""
bip39ssh_core.crypto
--------------------
Cryptographic primitives behind key derivation:

- PBKDF2-HMAC-SHA512 and HMAC-SHA512 for path-salted key material
- Ed25519 public key construction from a 32-byte seed
- Ed25519 public key lookup for a 64-byte secret (secret || public layout)
- SHA-256 fingerprints in colon-separated hex

Everything here is a pure function of its inputs; no key bytes are cached.
"""

from __future__ import annotations
from cryptography.hazmat.primitives.asymmetric import ed25519
from cryptography.hazmat.primitives.kdf.pbkdf2 import PBKDF2HMAC
from cryptography.hazmat.primitives import hashes, hmac
from .constants import ED25519_KEY_LEN, ED25519_EXPANDED_LEN
from .errors import UnsupportedKeyType
from .utils import sha256, colon_hex


# --------- KDF ----------
def pbkdf2_sha512(password: bytes, salt: bytes, iterations: int, length: int) -> bytes:
    kdf = PBKDF2HMAC(algorithm=hashes.SHA512(), length=length, salt=salt, iterations=iterations)
    return kdf.derive(password)

def hmac_sha512(key: bytes, data: bytes) -> bytes:
    mac = hmac.HMAC(key, hashes.SHA512())
    mac.update(data)
    return mac.finalize()

# --------- Ed25519 ----------
def ed25519_public_from_seed(seed: bytes) -> bytes:
    sk = ed25519.Ed25519PrivateKey.from_private_bytes(seed)
    return sk.public_key().public_bytes_raw()

def ed25519_public_from_expanded(expanded: bytes) -> bytes:
    """
    Public half of a 64-byte secret, taken as-is from its last 32 bytes.

    This is the NaCl "from secret key" construction: the bytes are not
    checked against the scalar, so a 64-byte secret is only self-consistent
    by convention.
    """
    return bytes(expanded[ED25519_KEY_LEN:])

def public_key_from_secret(secret: bytes) -> bytes:
    if len(secret) == ED25519_KEY_LEN:
        return ed25519_public_from_seed(secret)
    if len(secret) == ED25519_EXPANDED_LEN:
        return ed25519_public_from_expanded(secret)
    raise UnsupportedKeyType(
        f"Ed25519 secret must be {ED25519_KEY_LEN} or {ED25519_EXPANDED_LEN} bytes, got {len(secret)}"
    )

# --------- Fingerprint ----------
def compute_fingerprint(pub_raw: bytes) -> str:
    """
    SHA-256 of the raw public key as 32 colon-separated hex byte pairs,
    e.g. ``"3f:a0:...:9c"``. Depends on the public key bytes only.
    """
    return colon_hex(sha256(pub_raw))
