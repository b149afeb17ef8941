"""
bip39ssh_core.encoding
----------------------
Textual key representations.

- Public:  ``ssh-ed25519 <base64(pub)>`` (authorized_keys style)
- Private: base64(secret || public), 64 chars per line, between
  ``PRIVATE_HEADER`` and ``PRIVATE_FOOTER``.

The private framing is this package's own format. It carries no OpenSSH
container fields (magic, cipher, KDF, padding) and OpenSSH clients will
not load it.
"""

from __future__ import annotations
from typing import Optional
from .constants import (
    ED25519_KEY_LEN, KEY_TYPE, PRIVATE_FOOTER, PRIVATE_HEADER, PRIVATE_LINE_WIDTH,
)
from .crypto import public_key_from_secret
from .errors import InvalidKeyFormat
from .utils import b64e, try_b64d, wrap

MIN_PRIVATE_PAYLOAD = 64


class SSHEncoder:
    @staticmethod
    def encode_public(pub: bytes) -> str:
        if len(pub) != ED25519_KEY_LEN:
            raise InvalidKeyFormat(f"Ed25519 public key must be {ED25519_KEY_LEN} bytes, got {len(pub)}")
        return f"{KEY_TYPE} {b64e(pub)}"

    @staticmethod
    def encode_private(secret: bytes, pub: Optional[bytes] = None) -> str:
        """Frame ``secret || public``; the public key is recomputed when omitted."""
        if pub is None:
            pub = public_key_from_secret(secret)
        body = "\n".join(wrap(b64e(bytes(secret) + bytes(pub)), PRIVATE_LINE_WIDTH))
        return f"{PRIVATE_HEADER}\n{body}\n{PRIVATE_FOOTER}"

    @staticmethod
    def decode_public(text: str) -> bytes:
        if not isinstance(text, str):
            raise InvalidKeyFormat("public key must be text")
        tokens = text.split()
        if len(tokens) < 2 or tokens[0] != KEY_TYPE:
            raise InvalidKeyFormat(f"public key must start with '{KEY_TYPE} '")
        # a trailing comment token is allowed and ignored
        raw = try_b64d(tokens[1])
        if raw is None:
            raise InvalidKeyFormat("public key is not valid base64")
        if len(raw) != ED25519_KEY_LEN:
            raise InvalidKeyFormat(f"decoded public key is {len(raw)} bytes, expected {ED25519_KEY_LEN}")
        return raw

    @staticmethod
    def decode_private(text: str) -> bytes:
        if not isinstance(text, str):
            raise InvalidKeyFormat("private key must be text")
        lines = [line.strip() for line in text.strip().splitlines()]
        try:
            start = lines.index(PRIVATE_HEADER)
            end = lines.index(PRIVATE_FOOTER, start + 1)
        except ValueError:
            raise InvalidKeyFormat("private key markers are missing") from None

        raw = try_b64d("".join(lines[start + 1:end]))
        if raw is None:
            raise InvalidKeyFormat("private key body is not valid base64")
        if len(raw) < MIN_PRIVATE_PAYLOAD:
            raise InvalidKeyFormat(
                f"decoded private key is {len(raw)} bytes, expected at least {MIN_PRIVATE_PAYLOAD}"
            )
        return raw
