"""
bip39ssh_core.verify
--------------------
Checks that a public/private text pair belong together and fingerprints
the public key. Malformed input never raises; every outcome is a
``VerificationResult``.
"""

from __future__ import annotations
from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional
import hmac
from .constants import ED25519_KEY_LEN
from .crypto import compute_fingerprint, public_key_from_secret
from .encoding import SSHEncoder
from .errors import ErrorKind, KeyToolError, InvalidKeyFormat, PairMismatch
from .logger import get_logger

log = get_logger("bip39ssh.verify")


@dataclass(frozen=True)
class VerificationResult:
    valid: bool
    fingerprint: Optional[str] = None
    error_kind: Optional[ErrorKind] = None
    message: str = ""

    def to_dict(self) -> Dict[str, Any]:
        d = asdict(self)
        d["error_kind"] = self.error_kind.value if self.error_kind else None
        return d

    def raise_for_error(self) -> "VerificationResult":
        if self.valid:
            return self
        if self.error_kind == ErrorKind.PAIR_MISMATCH:
            raise PairMismatch(self.message)
        raise InvalidKeyFormat(self.message)


class KeyPairVerifier:
    def __init__(self, encoder: Optional[SSHEncoder] = None, check_secret: bool = True):
        self.encoder = encoder or SSHEncoder()
        # also recompute the public key from the embedded secret
        self.check_secret = check_secret

    def verify(self, public_text: str, private_text: str) -> VerificationResult:
        try:
            pub = self.encoder.decode_public(public_text)
            payload = self.encoder.decode_private(private_text)
        except KeyToolError as e:
            log.info(f"[VERIFY] decode failed: {e}")
            return VerificationResult(
                valid=False,
                error_kind=ErrorKind.INVALID_KEY_FORMAT,
                message=f"Invalid key format: {e}",
            )

        secret, embedded = payload[:-ED25519_KEY_LEN], payload[-ED25519_KEY_LEN:]
        if not hmac.compare_digest(pub, embedded):
            log.info("[VERIFY] public key does not match private key")
            return self._mismatch()

        if self.check_secret:
            try:
                derived = public_key_from_secret(secret)
            except KeyToolError as e:
                return VerificationResult(
                    valid=False,
                    error_kind=ErrorKind.INVALID_KEY_FORMAT,
                    message=f"Invalid key format: {e}",
                )
            if not hmac.compare_digest(derived, pub):
                log.info("[VERIFY] embedded secret does not produce the public key")
                return self._mismatch()

        fingerprint = compute_fingerprint(pub)
        log.info(f"[VERIFY] valid pair fingerprint={fingerprint}")
        return VerificationResult(
            valid=True,
            fingerprint=fingerprint,
            message="The key pair is valid.",
        )

    @staticmethod
    def _mismatch() -> VerificationResult:
        return VerificationResult(
            valid=False,
            error_kind=ErrorKind.PAIR_MISMATCH,
            message="The provided public and private keys do not form a valid key pair.",
        )
