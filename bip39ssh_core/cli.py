"""
bip39ssh CLI
============

Thin host around the key service. Prints JSON on stdout and never writes
key files; storing the output is left to the caller.

Usage:
    bip39ssh generate --words 12 --count 3        # new mnemonic + keys
    bip39ssh derive --count 2                     # keys from an existing mnemonic
    bip39ssh restore --path "m/44'/60'/0'/0/0"    # keys for explicit paths
    bip39ssh verify id_ed25519.pub id_ed25519     # check a key pair

The mnemonic is read from --mnemonic, then BIP39SSH_MNEMONIC, then a prompt.
"""

import argparse
import getpass
import json
import os
import sys
from pathlib import Path
from typing import Optional

from bip39ssh_core.config import DeriveOptions
from bip39ssh_core.errors import InvalidKeyFormat, KeyToolError
from bip39ssh_core.service import KeyService


def _emit(doc: dict) -> None:
    print(json.dumps(doc, indent=2))


def _read_mnemonic(args) -> str:
    if args.mnemonic:
        return args.mnemonic
    env = os.getenv("BIP39SSH_MNEMONIC")
    if env:
        return env
    return getpass.getpass("Mnemonic: ")


def _options(args) -> DeriveOptions:
    return DeriveOptions.from_env(
        passphrase=args.passphrase,
        count=args.count,
        word_count=getattr(args, "words", None),
        path_template=args.path_template,
    )


def cmd_generate(args) -> int:
    bundle = KeyService().generate_new(_options(args))
    _emit(bundle.to_dict())
    return 0


def cmd_derive(args) -> int:
    options = _options(args)
    bundle = KeyService().from_existing(_read_mnemonic(args), options)
    _emit(bundle.to_dict())
    return 0


def cmd_restore(args) -> int:
    bundle = KeyService().restore(_read_mnemonic(args), args.path, args.passphrase)
    _emit(bundle.to_dict())
    return 0


def _read_key_file(path: str) -> str:
    try:
        return Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise InvalidKeyFormat(f"cannot read key file {path}: {e}") from e


def cmd_verify(args) -> int:
    public_text = _read_key_file(args.public_key)
    private_text = _read_key_file(args.private_key)
    result = KeyService().verify(public_text, private_text)
    _emit(result.to_dict())
    return 0 if result.valid else 1


def _add_derive_args(p, words: bool) -> None:
    p.add_argument("--count", "-n", type=int, help="Number of keys (1-10)")
    p.add_argument("--passphrase", default="", help="Optional BIP39 passphrase")
    p.add_argument("--path-template", help="Path with {i} placeholder")
    if words:
        p.add_argument("--words", type=int, choices=(12, 24), help="Mnemonic length")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bip39ssh",
        description="Deterministic Ed25519 SSH-style keys from a BIP39 mnemonic",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    p = subparsers.add_parser("generate", help="Generate a new mnemonic and keys")
    _add_derive_args(p, words=True)
    p.set_defaults(func=cmd_generate)

    p = subparsers.add_parser("derive", help="Derive keys from an existing mnemonic")
    p.add_argument("--mnemonic", help="Mnemonic phrase (prompted when omitted)")
    _add_derive_args(p, words=False)
    p.set_defaults(func=cmd_derive)

    p = subparsers.add_parser("restore", help="Restore keys for explicit derivation paths")
    p.add_argument("--mnemonic", help="Mnemonic phrase (prompted when omitted)")
    p.add_argument("--passphrase", default="", help="Optional BIP39 passphrase")
    p.add_argument("--path", action="append", required=True, help="Derivation path, repeatable")
    p.set_defaults(func=cmd_restore)

    p = subparsers.add_parser("verify", help="Check that a public and private key match")
    p.add_argument("public_key", help="Public key file")
    p.add_argument("private_key", help="Private key file")
    p.set_defaults(func=cmd_verify)

    return parser


def main(argv: Optional[list] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    try:
        return args.func(args)
    except KeyToolError as e:
        _emit({"success": False, **e.to_dict()})
        return 2


if __name__ == "__main__":
    sys.exit(main())
