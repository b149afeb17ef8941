import pytest

ABANDON = "abandon abandon abandon abandon abandon abandon abandon abandon abandon abandon abandon about"
ETH_PATH = "m/44'/60'/0'/0/0"


@pytest.fixture
def mnemonic():
    return ABANDON


@pytest.fixture
def eth_path():
    return ETH_PATH
