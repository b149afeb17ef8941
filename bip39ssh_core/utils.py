"""
bip39ssh_core.utils
-------------------
Small helpers for base64, hashing and text layout used by the encoder
and the verifier.
"""

from __future__ import annotations
import base64, binascii, hashlib
from typing import List


def b64e(b: bytes) -> str:
    return base64.b64encode(b).decode("ascii")

def b64d(s: str) -> bytes:
    # strict: rejects characters outside the alphabet instead of skipping them
    return base64.b64decode(s.encode("ascii"), validate=True)

def try_b64d(s: str):
    try:
        return b64d(s)
    except (binascii.Error, UnicodeEncodeError, ValueError):
        return None

def sha256(data: bytes) -> str:
    return hashlib.sha256(data).hexdigest()

def colon_hex(digest_hex: str) -> str:
    return ":".join(digest_hex[i:i + 2] for i in range(0, len(digest_hex), 2))

def wrap(text: str, width: int) -> List[str]:
    return [text[i:i + width] for i in range(0, len(text), width)]
