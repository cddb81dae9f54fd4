"""
Verifies signature and digest values produced by CryptoSigner.
"""
import hmac
import logging

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives.asymmetric import ec, padding, rsa
from cryptography.hazmat.primitives.asymmetric.utils import encode_dss_signature

from xmldsig_signer.crypto import keys
from xmldsig_signer.crypto.algorithm import Family
from xmldsig_signer.crypto.sign import CryptoSigner
from xmldsig_signer.exceptions import MissingKeyError, XmlSignerError

logger = logging.getLogger(__name__)


def ecdsa_raw_to_der(raw_signature, curve):
    """Converts fixed-width r || s back to a DER ECDSA signature."""
    size = (curve.key_size + 7) // 8
    if len(raw_signature) != 2 * size:
        return None
    r = int.from_bytes(raw_signature[:size], "big")
    s = int.from_bytes(raw_signature[size:], "big")
    return encode_dss_signature(r, s)


class CryptoVerifier:
    """Checks raw signature values against the public key of a key store."""

    def __init__(self, key_store, algorithm):
        self._key_store = key_store
        self._algorithm = algorithm

    def verify(self, data: bytes, signature: bytes) -> bool:
        if isinstance(data, str):
            data = data.encode("utf-8")

        public_key = self._key_store.get_public_key()
        if public_key is None:
            raise MissingKeyError("Undefined public key")

        scheme = self._algorithm.scheme
        if scheme.family is Family.ECDSA:
            if not isinstance(public_key, ec.EllipticCurvePublicKey):
                raise XmlSignerError("ECDSA verification requires an elliptic-curve key")
            der_signature = ecdsa_raw_to_der(signature, public_key.curve)
            if der_signature is None:
                return False
            try:
                hash_algorithm = keys.get_hash(scheme.digest)
                public_key.verify(der_signature, data, ec.ECDSA(hash_algorithm))
                return True
            except InvalidSignature:
                return False

        if not isinstance(public_key, rsa.RSAPublicKey):
            raise XmlSignerError(f"{scheme.name} verification requires an RSA key")

        if scheme.family is Family.PSS:
            pad = keys.pss_padding(scheme.digest, scheme.mgf_digest)
        else:
            pad = padding.PKCS1v15()
        result = keys.verify_rsa(public_key, data, signature, pad, scheme.digest)
        logger.debug("%s signature valid: %s", scheme.name, result)
        return result

    def verify_digest(self, data: bytes, digest: bytes) -> bool:
        expected = CryptoSigner(self._key_store, self._algorithm).compute_digest(data)
        return hmac.compare_digest(expected, digest)
