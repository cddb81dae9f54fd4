"""
Exceptions raised while computing digests and signatures.
"""


class XmlSignerError(Exception):
    """Base class for every signing error."""


class AlgorithmError(XmlSignerError, ValueError):
    """Unknown scheme, or an identifier the scheme does not have."""


class CertificateError(XmlSignerError):
    """Key or certificate material is missing or unusable."""


class MissingKeyError(CertificateError):
    """The key store holds no key usable for the requested scheme."""

    def __init__(self, message="Undefined private key"):
        super().__init__(message)


class KeyStoreError(CertificateError):
    """PEM, PKCS#12 or certificate data could not be loaded."""


class SignatureComputationError(XmlSignerError):
    """The signing primitive failed or the PSS self-check rejected its output."""

    def __init__(self, message="Computing of the signature failed"):
        super().__init__(message)


class InvalidDigestError(XmlSignerError):
    """The digest primitive failed for the configured hash."""

    def __init__(self, message="Invalid digest value"):
        super().__init__(message)
