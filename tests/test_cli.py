import json
import pytest
from bip39ssh_core.cli import main


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("BIP39SSH_COUNT", "BIP39SSH_WORD_COUNT", "BIP39SSH_PATH_TEMPLATE", "BIP39SSH_MNEMONIC"):
        monkeypatch.delenv(name, raising=False)


def run(capsys, argv):
    code = main(argv)
    return code, json.loads(capsys.readouterr().out)


def test_generate(capsys):
    code, doc = run(capsys, ["generate", "--words", "12", "--count", "2"])
    assert code == 0
    assert len(doc["mnemonic"].split()) == 12
    assert len(doc["keys"]) == 2


def test_restore_and_verify(capsys, tmp_path, mnemonic, eth_path):
    code, doc = run(capsys, ["restore", "--mnemonic", mnemonic, "--path", eth_path])
    assert code == 0
    key = doc["keys"][0]
    assert key["descriptor"] == f"Derivation Path: {eth_path}"

    # storing the keys is the caller's job
    (tmp_path / "id_ed25519").write_text(key["private_key"])
    (tmp_path / "id_ed25519.pub").write_text(key["public_key"] + "\n")
    code, result = run(capsys, ["verify", str(tmp_path / "id_ed25519.pub"), str(tmp_path / "id_ed25519")])
    assert code == 0
    assert result["valid"] is True
    assert result["fingerprint"] == key["fingerprint"]


def test_derive_reads_mnemonic_from_env(capsys, monkeypatch, mnemonic):
    monkeypatch.setenv("BIP39SSH_MNEMONIC", mnemonic)
    code, doc = run(capsys, ["derive", "--count", "1"])
    assert code == 0
    assert doc["keys"][0]["path"] == "m/44'/0'/0'/0/0"


def test_errors_are_reported_as_json(capsys, mnemonic):
    code, doc = run(capsys, ["restore", "--mnemonic", mnemonic, "--path", "44'/0'/0'/0/0"])
    assert code == 2
    assert doc == {"success": False, "error": "InvalidPath", "message": doc["message"]}

    code, doc = run(capsys, ["derive", "--mnemonic", "this is not a mnemonic phrase with checksum"])
    assert code == 2
    assert doc["error"] == "InvalidMnemonic"


def test_verify_mismatch_exit_code(capsys, tmp_path, mnemonic):
    _, doc = run(capsys, ["derive", "--mnemonic", mnemonic, "--count", "2"])
    a, b = doc["keys"]
    (tmp_path / "a.pub").write_text(a["public_key"])
    (tmp_path / "b").write_text(b["private_key"])
    code, result = run(capsys, ["verify", str(tmp_path / "a.pub"), str(tmp_path / "b")])
    assert code == 1
    assert result["error_kind"] == "PairMismatch"


def test_count_flag_overrides_bad_env(capsys, monkeypatch, mnemonic):
    monkeypatch.setenv("BIP39SSH_COUNT", "many")
    code, doc = run(capsys, ["derive", "--mnemonic", mnemonic, "--count", "1"])
    assert code == 0
    assert len(doc["keys"]) == 1


def test_verify_missing_file(capsys, tmp_path):
    code, doc = run(capsys, ["verify", str(tmp_path / "nope.pub"), str(tmp_path / "nope")])
    assert code == 2
    assert doc["success"] is False
    assert doc["error"] == "InvalidKeyFormat"


def test_verify_non_utf8_file(capsys, tmp_path):
    (tmp_path / "bad.pub").write_bytes(b"\xff\xfe\x00garbage")
    (tmp_path / "bad").write_bytes(b"\xff\xfe\x00garbage")
    code, doc = run(capsys, ["verify", str(tmp_path / "bad.pub"), str(tmp_path / "bad")])
    assert code == 2
    assert doc["error"] == "InvalidKeyFormat"
