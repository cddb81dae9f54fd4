"""
Settings for the signing scripts. Each value can be overridden from the environment.
"""
import os

ALGORITHM = os.getenv("XMLDSIG_ALGORITHM", "rsa-sha256")

KEY_FILE = os.getenv("XMLDSIG_KEY_FILE", "certs/signer.key")
CERT_FILE = os.getenv("XMLDSIG_CERT_FILE", "certs/signer.crt")

# Unset for unencrypted keys
KEY_PASSWORD = os.getenv("XMLDSIG_KEY_PASSWORD")
