import pytest
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import ec, rsa

from xmldsig_signer.storage.key_store import PrivateKeyStore


def _pem(private_key, password=None):
    if password is None:
        encryption = serialization.NoEncryption()
    else:
        encryption = serialization.BestAvailableEncryption(password)
    return private_key.private_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PrivateFormat.PKCS8,
        encryption_algorithm=encryption,
    )


@pytest.fixture(scope="session")
def rsa_key():
    return rsa.generate_private_key(public_exponent=65537, key_size=2048)


@pytest.fixture(scope="session")
def ec_key():
    return ec.generate_private_key(ec.SECP256R1())


@pytest.fixture
def rsa_pem(rsa_key):
    return _pem(rsa_key)


@pytest.fixture
def encrypted_rsa_pem(rsa_key):
    return _pem(rsa_key, b"s3cret")


@pytest.fixture
def rsa_store(rsa_pem):
    store = PrivateKeyStore()
    store.load_from_pem(rsa_pem)
    return store


@pytest.fixture
def ec_pem(ec_key):
    return _pem(ec_key)


@pytest.fixture
def ec_store(ec_pem):
    store = PrivateKeyStore()
    store.load_from_pem(ec_pem)
    return store


@pytest.fixture
def empty_store():
    return PrivateKeyStore()
