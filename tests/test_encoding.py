import base64
import pytest
from bip39ssh_core.encoding import SSHEncoder
from bip39ssh_core.derivation import KeyDerivationEngine
from bip39ssh_core.constants import PRIVATE_HEADER, PRIVATE_FOOTER
from bip39ssh_core.errors import InvalidKeyFormat

SEED32 = bytes(range(32))


@pytest.fixture
def pair():
    return KeyDerivationEngine.derive_key_pair(SEED32)


def test_encode_public_format(pair):
    text = SSHEncoder.encode_public(pair.public)
    key_type, body = text.split(" ")
    assert key_type == "ssh-ed25519"
    assert base64.b64decode(body) == pair.public


def test_public_round_trip(pair):
    text = SSHEncoder.encode_public(pair.public)
    assert SSHEncoder.decode_public(text) == pair.public
    assert SSHEncoder.encode_public(SSHEncoder.decode_public(text)) == text


def test_decode_public_ignores_comment(pair):
    text = SSHEncoder.encode_public(pair.public) + " user@host\n"
    assert SSHEncoder.decode_public(text) == pair.public


@pytest.mark.parametrize("text", [
    "",
    "ssh-ed25519",
    "ssh-rsa AAAAB3NzaC1yc2E=",
    "ssh-ed25519 not*base64!",
    "ssh-ed25519 " + base64.b64encode(b"short").decode(),
    None,
])
def test_decode_public_rejects(text):
    with pytest.raises(InvalidKeyFormat):
        SSHEncoder.decode_public(text)


def test_encode_private_framing(pair):
    text = SSHEncoder.encode_private(pair.secret, pair.public)
    lines = text.split("\n")
    assert lines[0] == PRIVATE_HEADER
    assert lines[-1] == PRIVATE_FOOTER
    body = lines[1:-1]
    assert all(len(line) <= 64 for line in body)
    assert all(len(line) == 64 for line in body[:-1])
    assert base64.b64decode("".join(body)) == pair.secret + pair.public


def test_encode_private_recomputes_public(pair):
    assert SSHEncoder.encode_private(pair.secret) == SSHEncoder.encode_private(pair.secret, pair.public)


def test_private_round_trip():
    pair = KeyDerivationEngine.derive_key_pair(bytes(range(64)))
    text = SSHEncoder.encode_private(pair.secret, pair.public)
    payload = SSHEncoder.decode_private(text)
    assert len(payload) == 96
    assert SSHEncoder.encode_private(payload[:-32], payload[-32:]) == text


def test_decode_private_tolerates_surrounding_whitespace(pair):
    text = SSHEncoder.encode_private(pair.secret, pair.public)
    padded = "\n  " + text.replace("\n", "\r\n") + "\n\n"
    assert SSHEncoder.decode_private(padded) == pair.secret + pair.public


def test_decode_private_missing_markers(pair):
    text = SSHEncoder.encode_private(pair.secret, pair.public)
    with pytest.raises(InvalidKeyFormat):
        SSHEncoder.decode_private(text.replace(PRIVATE_FOOTER, ""))
    with pytest.raises(InvalidKeyFormat):
        SSHEncoder.decode_private(text.replace(PRIVATE_HEADER, ""))


def test_decode_private_undersized():
    text = f"{PRIVATE_HEADER}\n{base64.b64encode(bytes(63)).decode()}\n{PRIVATE_FOOTER}"
    with pytest.raises(InvalidKeyFormat):
        SSHEncoder.decode_private(text)


def test_decode_private_bad_base64():
    with pytest.raises(InvalidKeyFormat):
        SSHEncoder.decode_private(f"{PRIVATE_HEADER}\n%%%%\n{PRIVATE_FOOTER}")
