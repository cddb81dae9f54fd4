"""
Signing key capability and its implementation over the cryptography library.
"""
from typing import Optional, Protocol

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.backends import default_backend
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import padding, rsa

from xmldsig_signer.exceptions import AlgorithmError

HASHES = {
    "sha1": hashes.SHA1,
    "sha256": hashes.SHA256,
    "sha512": hashes.SHA512,
}

# OpenSSL combined sign-digest names -> hash used with PKCS#1 v1.5
LEGACY_HASHES = {
    "sha1WithRSAEncryption": "sha1",
    "sha256WithRSAEncryption": "sha256",
    "sha512WithRSAEncryption": "sha512",
}


def get_hash(hash_name):
    """Returns a fresh hash algorithm instance for a hash name."""
    try:
        return HASHES[hash_name]()
    except KeyError:
        raise AlgorithmError(f"Unsupported hash algorithm: {hash_name!r}") from None


def hash_for_legacy_id(legacy_id):
    try:
        return LEGACY_HASHES[legacy_id]
    except KeyError:
        raise AlgorithmError(f"Unknown legacy algorithm id: {legacy_id!r}") from None


def pss_padding(hash_name, mgf_hash_name=None):
    return padding.PSS(
        mgf=padding.MGF1(get_hash(mgf_hash_name or hash_name)),
        salt_length=padding.PSS.DIGEST_LENGTH,
    )


class SigningKey(Protocol):
    """What the signature engine needs from a private key."""

    def sign_pss(
        self, data: bytes, hash_name: str, mgf_hash_name: Optional[str] = None
    ) -> bytes:
        ...

    def sign_pkcs1v15(self, data: bytes, hash_name: str) -> bytes:
        ...

    def verify_pss(
        self, data: bytes, signature: bytes, hash_name: str, mgf_hash_name: Optional[str] = None
    ) -> bool:
        ...

    def verify_pkcs1v15(self, data: bytes, signature: bytes, hash_name: str) -> bool:
        ...

    def public_key(self):
        ...


class RsaSigningKey:
    """SigningKey backed by a ``cryptography`` RSA private key."""

    def __init__(self, private_key: rsa.RSAPrivateKey):
        if not isinstance(private_key, rsa.RSAPrivateKey):
            raise TypeError("RsaSigningKey requires an RSA private key")
        self._private_key = private_key

    @property
    def key_size(self):
        return self._private_key.key_size

    def sign_pss(self, data, hash_name, mgf_hash_name=None):
        """Signs data using RSA-PSS; MGF1 uses the signing hash unless told otherwise."""
        return self._private_key.sign(
            data, pss_padding(hash_name, mgf_hash_name), get_hash(hash_name)
        )

    def sign_pkcs1v15(self, data, hash_name):
        return self._private_key.sign(data, padding.PKCS1v15(), get_hash(hash_name))

    def verify_pss(self, data, signature, hash_name, mgf_hash_name=None):
        pad = pss_padding(hash_name, mgf_hash_name)
        return verify_rsa(self.public_key(), data, signature, pad, hash_name)

    def verify_pkcs1v15(self, data, signature, hash_name):
        return verify_rsa(self.public_key(), data, signature, padding.PKCS1v15(), hash_name)

    def public_key(self):
        return self._private_key.public_key()


def verify_rsa(public_key, data, signature, pad, hash_name):
    """Verifies an RSA signature, returning False instead of raising."""
    try:
        public_key.verify(signature, data, pad, get_hash(hash_name))
        return True
    except InvalidSignature:
        return False


def load_private_key(pem, password=None):
    """Loads a PEM-encoded private key (bytes or str)."""
    if isinstance(pem, str):
        pem = pem.encode("ascii")
    if isinstance(password, str):
        password = password.encode("utf-8")
    return serialization.load_pem_private_key(pem, password=password, backend=default_backend())
