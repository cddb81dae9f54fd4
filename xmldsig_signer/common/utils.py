"""
Common helper/utility functions:
- Base64 encoding/decoding for signature transport
- SHA-256 hex fingerprints of payloads
"""

import base64
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.backends import default_backend


def b64e(data: bytes) -> str:
    """Base64 encodes bytes into a UTF-8 string."""
    return base64.b64encode(data).decode('utf-8')


def b64d(data: str) -> bytes:
    """Base64 decodes a string, ignoring line breaks; raises on bad input."""
    if isinstance(data, bytes):
        data = data.decode('ascii')
    return base64.b64decode("".join(data.split()), validate=True)


def sha256_hex(data: bytes) -> str:
    """Computes a SHA-256 hash of data and returns a hex string."""
    if isinstance(data, str):
        data = data.encode('utf-8')

    digest = hashes.Hash(hashes.SHA256(), backend=default_backend())
    digest.update(data)
    return digest.finalize().hex()
