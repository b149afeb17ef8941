"""
bip39ssh_core.errors
--------------------
Error kinds shared by every stage of the pipeline.

Each exception carries an ``ErrorKind`` so hosts can map failures to
user-facing messages and status codes without string matching.
"""

from __future__ import annotations
from enum import Enum
from typing import Dict


class ErrorKind(str, Enum):
    INVALID_MNEMONIC = "InvalidMnemonic"
    INVALID_STRENGTH = "InvalidStrength"
    INVALID_PATH = "InvalidPath"
    INVALID_KEY_FORMAT = "InvalidKeyFormat"
    PAIR_MISMATCH = "PairMismatch"
    UNSUPPORTED_KEY_TYPE = "UnsupportedKeyType"
    INVALID_OPTIONS = "InvalidOptions"


class KeyToolError(Exception):
    kind: ErrorKind = ErrorKind.INVALID_OPTIONS

    def to_dict(self) -> Dict[str, str]:
        return {"error": self.kind.value, "message": str(self)}


class InvalidMnemonic(KeyToolError):
    kind = ErrorKind.INVALID_MNEMONIC


class InvalidStrength(KeyToolError):
    kind = ErrorKind.INVALID_STRENGTH


class InvalidPath(KeyToolError):
    kind = ErrorKind.INVALID_PATH


class InvalidKeyFormat(KeyToolError):
    kind = ErrorKind.INVALID_KEY_FORMAT


class PairMismatch(KeyToolError):
    kind = ErrorKind.PAIR_MISMATCH


class UnsupportedKeyType(KeyToolError):
    kind = ErrorKind.UNSUPPORTED_KEY_TYPE


class InvalidOptions(KeyToolError):
    kind = ErrorKind.INVALID_OPTIONS
