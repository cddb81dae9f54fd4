import sys
import binascii
from colorama import Fore, init

import config
from xmldsig_signer.common import utils
from xmldsig_signer.crypto import pki
from xmldsig_signer.crypto.algorithm import Algorithm
from xmldsig_signer.crypto.verify import CryptoVerifier
from xmldsig_signer.exceptions import XmlSignerError
from xmldsig_signer.storage.key_store import PrivateKeyStore

init(autoreset=True)


def _load_key_store():
    """Prefers the certificate; falls back to the private key's public half."""
    key_store = PrivateKeyStore()
    try:
        with open(config.CERT_FILE, "rb") as f:
            key_store.add_certificates_from_x509_pem(f.read())
        cert = key_store.get_certificates()[0]
        print(f" - Loaded certificate: {config.CERT_FILE}")
        print(f"   SHA-256 fingerprint: {pki.get_cert_fingerprint(cert)}")
    except FileNotFoundError:
        print(Fore.YELLOW + f" - No certificate at {config.CERT_FILE}, using {config.KEY_FILE}")
        key_store.load_from_file(config.KEY_FILE, config.KEY_PASSWORD)
    return key_store


def verify_file(data_file, sig_file, algorithm_name):
    print(f"Verifying {data_file} against {sig_file}")

    try:
        algorithm = Algorithm(algorithm_name)
        key_store = _load_key_store()
        with open(data_file, "rb") as f:
            data = f.read()
        with open(sig_file, "r") as f:
            signature = utils.b64d(f.read())
    except FileNotFoundError as e:
        print(Fore.RED + f"Error: File not found. {e}")
        return 1
    except (binascii.Error, XmlSignerError) as e:
        print(Fore.RED + f"Error loading files: {e}")
        return 1

    verifier = CryptoVerifier(key_store, algorithm)

    print(f"\n--- Verifying {algorithm.signature_algorithm_name()} Signature ---")
    print(f"  - Payload SHA-256: {utils.sha256_hex(data)}")
    try:
        valid = verifier.verify(data, signature)
        tampered_valid = verifier.verify(data + b"\n!!TAMPERED!!", signature)
    except XmlSignerError as e:
        print(Fore.RED + f"  - Verification error: {e}")
        return 1

    if valid:
        print(Fore.GREEN + "  - Signature is VALID.")
    else:
        print(Fore.RED + "  - Signature is INVALID.")

    print("\n--- Tamper Test ---")
    if tampered_valid:
        print(Fore.RED + "  - FAILURE: Signature accepted a tampered payload?!")
        return 1
    print(Fore.GREEN + "  - SUCCESS: Tampered payload rejected.")

    print("\nVerification complete.")
    return 0 if valid else 1


if __name__ == "__main__":
    if len(sys.argv) not in (3, 4):
        print("Usage: python verify_signature.py <data_file> <sig_file.b64> [algorithm]")
        print("Example: python verify_signature.py invoice.xml invoice.xml.sig.b64 rsa-sha256")
        sys.exit(1)

    algorithm_name = sys.argv[3] if len(sys.argv) == 4 else config.ALGORITHM
    sys.exit(verify_file(sys.argv[1], sys.argv[2], algorithm_name))
