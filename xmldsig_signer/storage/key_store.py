"""
Holds the private key and certificates used for signing.
"""
import logging
from typing import Optional

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import ec, rsa
from cryptography.hazmat.primitives.serialization import pkcs12

from xmldsig_signer.crypto import keys, pki
from xmldsig_signer.exceptions import KeyStoreError

logger = logging.getLogger(__name__)


def _to_bytes(value):
    if isinstance(value, str):
        return value.encode("utf-8")
    return value


class PrivateKeyStore:
    """
    Key material for one signer.

    RSA keys are exposed through :meth:`get_private_key` as a SigningKey;
    every key is also available as unencrypted PKCS#8 PEM text through
    :meth:`get_private_key_as_pem`, which is what the ECDSA path reads.
    """

    def __init__(self):
        self._signing_key = None
        self._private_key_pem = None
        self._public_key = None
        self._certificates = []

    def load_from_pem(self, pem, password=None):
        """Loads a PEM private key, optionally encrypted with password."""
        try:
            private_key = keys.load_private_key(pem, _to_bytes(password))
        except (ValueError, TypeError, UnsupportedAlgorithm) as e:
            raise KeyStoreError(f"Could not load private key: {e}") from e
        self._set_private_key(private_key)

    def load_from_file(self, key_file, password=None):
        with open(key_file, "rb") as f:
            self.load_from_pem(f.read(), password)

    def load_from_pkcs12(self, data, password):
        """Loads the key and any bundled certificates from a PKCS#12 blob."""
        try:
            private_key, cert, extra_certs = pkcs12.load_key_and_certificates(
                data, _to_bytes(password)
            )
        except (ValueError, TypeError, UnsupportedAlgorithm) as e:
            raise KeyStoreError(f"Could not load PKCS#12 data: {e}") from e
        if private_key is None:
            raise KeyStoreError("PKCS#12 data contains no private key")

        self._set_private_key(private_key)
        if cert is not None:
            self._certificates.append(cert)
        self._certificates.extend(extra_certs or [])

    def _set_private_key(self, private_key):
        if not isinstance(private_key, (rsa.RSAPrivateKey, ec.EllipticCurvePrivateKey)):
            raise KeyStoreError(
                f"Unsupported private key type: {type(private_key).__name__}"
            )

        self._private_key_pem = private_key.private_bytes(
            encoding=serialization.Encoding.PEM,
            format=serialization.PrivateFormat.PKCS8,
            encryption_algorithm=serialization.NoEncryption(),
        ).decode("ascii")
        self._public_key = private_key.public_key()

        if isinstance(private_key, rsa.RSAPrivateKey):
            self._signing_key = keys.RsaSigningKey(private_key)
        else:
            self._signing_key = None
        logger.debug("Loaded %s private key", type(private_key).__name__)

    def add_certificates_from_x509_pem(self, certs_pem):
        try:
            certs = pki.load_certs_from_pem(certs_pem)
        except ValueError as e:
            raise KeyStoreError(f"Could not load certificates: {e}") from e
        self._certificates.extend(certs)

    def get_private_key(self) -> Optional[keys.SigningKey]:
        """Returns the RSA SigningKey, or None when no RSA key is loaded."""
        return self._signing_key

    def get_private_key_as_pem(self) -> Optional[str]:
        return self._private_key_pem

    def get_public_key(self):
        """Returns the public key of the loaded key, else of the first certificate."""
        if self._public_key is not None:
            return self._public_key
        if self._certificates:
            return self._certificates[0].public_key()
        return None

    def get_certificates(self):
        return list(self._certificates)

    def get_certificate_fingerprints(self):
        return [pki.get_cert_fingerprint(cert) for cert in self._certificates]
