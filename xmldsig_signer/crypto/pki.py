"""
Handles X.509 certificate loading for the key store.
"""
from cryptography import x509
from cryptography.hazmat.primitives import hashes


def load_certs_from_pem(certs_pem):
    """Loads every certificate in a PEM bundle (bytes or str)."""
    if isinstance(certs_pem, str):
        certs_pem = certs_pem.encode("ascii")
    return x509.load_pem_x509_certificates(certs_pem)


def get_cert_fingerprint(cert):
    """Returns the SHA-256 fingerprint of a certificate."""
    return cert.fingerprint(hashes.SHA256()).hex()
