# bip39ssh_core/models.py

from __future__ import annotations
from dataclasses import dataclass, asdict, field
from typing import Any, Dict, List, Optional


@dataclass
class EncodedKey:
    """
    One derived key in its textual form. These strings are the only
    artifacts meant to leave the core; where and how they are stored is
    up to the host.
    """
    path: str
    private_key: str
    public_key: str
    fingerprint: str
    info: str = ""

    @property
    def descriptor(self) -> str:
        return f"Derivation Path: {self.path}"

    def to_dict(self) -> Dict[str, Any]:
        d = asdict(self)
        d["descriptor"] = self.descriptor
        return d

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "EncodedKey":
        return cls(
            path=data["path"],
            private_key=data["private_key"],
            public_key=data["public_key"],
            fingerprint=data.get("fingerprint", ""),
            info=data.get("info", ""),
        )


@dataclass
class KeyBundle:
    keys: List[EncodedKey] = field(default_factory=list)
    mnemonic: Optional[str] = None  # set only for freshly generated phrases

    def to_dict(self) -> Dict[str, Any]:
        d: Dict[str, Any] = {"success": True, "keys": [k.to_dict() for k in self.keys]}
        if self.mnemonic is not None:
            d["mnemonic"] = self.mnemonic
        return d
