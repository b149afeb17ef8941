# bip39ssh_core/constants.py

KEY_TYPE = "ssh-ed25519"

PRIVATE_HEADER = "-----BEGIN BIP39 ED25519 PRIVATE KEY-----"
PRIVATE_FOOTER = "-----END BIP39 ED25519 PRIVATE KEY-----"
PRIVATE_LINE_WIDTH = 64

ED25519_KEY_LEN = 32
ED25519_EXPANDED_LEN = 64

MNEMONIC_LANGUAGE = "english"
STRENGTH_BY_WORDS = {12: 128, 24: 256}

PATH_KDF_ITERATIONS = 100_000
PATH_PREFIX = "m/"
HARDENED_OFFSET = 0x80000000

DEFAULT_COUNT = 1
MAX_COUNT = 10
DEFAULT_WORD_COUNT = 24
DEFAULT_PATH_TEMPLATE = "m/44'/0'/0'/0/{i}"
