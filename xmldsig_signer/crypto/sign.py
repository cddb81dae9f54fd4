"""
Computes XML-DSig signature and digest values.
"""
import logging

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import ec
from cryptography.hazmat.primitives.asymmetric.utils import decode_dss_signature

from xmldsig_signer.crypto import keys
from xmldsig_signer.crypto.algorithm import Family
from xmldsig_signer.exceptions import (
    AlgorithmError,
    InvalidDigestError,
    KeyStoreError,
    MissingKeyError,
    SignatureComputationError,
)

logger = logging.getLogger(__name__)


def ecdsa_der_to_raw(der_signature, curve):
    """Converts a DER ECDSA signature to fixed-width r || s."""
    r, s = decode_dss_signature(der_signature)
    size = (curve.key_size + 7) // 8
    return r.to_bytes(size, "big") + s.to_bytes(size, "big")


class CryptoSigner:
    """
    Signs and digests byte payloads with one key store and one algorithm.

    The signer keeps no state between calls. Sharing one instance across
    threads relies on the cryptography library's key objects allowing
    concurrent sign/verify calls, which holds for its OpenSSL backend.
    """

    def __init__(self, key_store, algorithm):
        self._key_store = key_store
        self._algorithm = algorithm

    @property
    def key_store(self):
        return self._key_store

    @property
    def algorithm(self):
        return self._algorithm

    def compute_signature(self, data: bytes) -> bytes:
        if isinstance(data, str):
            data = data.encode("utf-8")
        family = self._algorithm.family
        logger.debug("Computing %s signature", self._algorithm.signature_algorithm_name())

        if family is Family.ECDSA:
            return self._compute_signature_with_ecdsa(data)

        signing_key = self._key_store.get_private_key()
        if signing_key is None:
            raise MissingKeyError()

        if family is Family.PSS:
            signature_value = self._compute_signature_with_pss(signing_key, data)
        else:
            signature_value = self._compute_signature_with_pkcs1v15(signing_key, data)

        if not signature_value:
            raise SignatureComputationError()
        return signature_value

    def _compute_signature_with_pss(self, signing_key, data):
        scheme = self._algorithm.scheme
        try:
            signature_value = signing_key.sign_pss(data, scheme.digest, scheme.mgf_digest)
            status = signing_key.verify_pss(
                data, signature_value, scheme.digest, scheme.mgf_digest
            )
        except (ValueError, TypeError, UnsupportedAlgorithm, AlgorithmError) as e:
            raise SignatureComputationError() from e

        # The verified value is the only one allowed out of this method.
        if not status:
            logger.warning(
                "Self-verification of %s signature failed",
                self._algorithm.signature_algorithm_name(),
            )
            raise SignatureComputationError()
        return signature_value

    def _compute_signature_with_pkcs1v15(self, signing_key, data):
        hash_name = keys.hash_for_legacy_id(self._algorithm.legacy_combined_algorithm_id())
        try:
            return signing_key.sign_pkcs1v15(data, hash_name)
        except (ValueError, TypeError, UnsupportedAlgorithm) as e:
            raise SignatureComputationError() from e

    def _compute_signature_with_ecdsa(self, data):
        private_key_pem = self._key_store.get_private_key_as_pem()
        if not private_key_pem:
            raise MissingKeyError()

        try:
            private_key = keys.load_private_key(private_key_pem)
        except (ValueError, TypeError, UnsupportedAlgorithm) as e:
            raise KeyStoreError("Invalid EC private key") from e
        if not isinstance(private_key, ec.EllipticCurvePrivateKey):
            raise KeyStoreError("ECDSA signing requires an elliptic-curve private key")

        try:
            hash_algorithm = keys.get_hash(self._algorithm.digest_algorithm_name())
            der_signature = private_key.sign(data, ec.ECDSA(hash_algorithm))
        except (ValueError, TypeError, UnsupportedAlgorithm, AlgorithmError) as e:
            raise SignatureComputationError() from e

        return ecdsa_der_to_raw(der_signature, private_key.curve)

    def compute_digest(self, data: bytes) -> bytes:
        """Returns the raw digest of data under the configured hash."""
        if isinstance(data, str):
            data = data.encode("utf-8")
        try:
            digest = hashes.Hash(keys.get_hash(self._algorithm.digest_algorithm_name()))
            digest.update(data)
            return digest.finalize()
        except (AlgorithmError, TypeError, UnsupportedAlgorithm) as e:
            raise InvalidDigestError() from e
