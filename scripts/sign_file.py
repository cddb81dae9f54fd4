# scripts/sign_file.py
import os
import sys
from colorama import Fore, init

sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import config
from xmldsig_signer.common import utils
from xmldsig_signer.crypto.algorithm import Algorithm
from xmldsig_signer.crypto.sign import CryptoSigner
from xmldsig_signer.exceptions import XmlSignerError
from xmldsig_signer.storage.key_store import PrivateKeyStore

init(autoreset=True)


def sign_file(data_file, algorithm_name):
    print(f"Signing {data_file} with {algorithm_name}")

    if not os.path.exists(config.KEY_FILE):
        print(Fore.RED + f"Private key not found: {config.KEY_FILE}")
        print(Fore.YELLOW + "Set XMLDSIG_KEY_FILE to the PEM key to sign with.")
        return 1

    try:
        algorithm = Algorithm(algorithm_name)
        key_store = PrivateKeyStore()
        key_store.load_from_file(config.KEY_FILE, config.KEY_PASSWORD)
        signer = CryptoSigner(key_store, algorithm)

        with open(data_file, "rb") as f:
            data = f.read()

        digest = signer.compute_digest(data)
        signature = signer.compute_signature(data)

        sig_file = f"{data_file}.sig.b64"
        with open(sig_file, "w") as f:
            f.write(utils.b64e(signature))
    except (OSError, XmlSignerError) as e:
        print(Fore.RED + f"Signing failed: {e}")
        return 1

    print(f"  - Digest ({algorithm.digest_algorithm_name()}): {utils.b64e(digest)}")
    print(f"  - Signature method: {algorithm.signature_algorithm_url()}")
    print(Fore.GREEN + f"Signature saved to {sig_file}")
    return 0


if __name__ == "__main__":
    if len(sys.argv) not in (2, 3):
        print("Usage: python scripts/sign_file.py <data_file> [algorithm]")
        print(f"Algorithms: {', '.join(Algorithm.names())}")
        sys.exit(1)

    algorithm_name = sys.argv[2] if len(sys.argv) == 3 else config.ALGORITHM
    sys.exit(sign_file(sys.argv[1], algorithm_name))
