"""
Closed registry of the signature schemes the signer supports.

Each scheme belongs to exactly one family (PKCS#1 v1.5, PSS/MGF1 or ECDSA)
and is described by a frozen dataclass holding only what its family needs.
"""
import enum
from dataclasses import dataclass

from xmldsig_signer.exceptions import AlgorithmError

DIGEST_SHA1_URL = "http://www.w3.org/2000/09/xmldsig#sha1"
DIGEST_SHA256_URL = "http://www.w3.org/2001/04/xmlenc#sha256"
DIGEST_SHA512_URL = "http://www.w3.org/2001/04/xmlenc#sha512"

DIGEST_URLS = {
    "sha1": DIGEST_SHA1_URL,
    "sha256": DIGEST_SHA256_URL,
    "sha512": DIGEST_SHA512_URL,
}


class Family(enum.Enum):
    PKCS1V15 = "pkcs1v15"
    PSS = "pss"
    ECDSA = "ecdsa"


@dataclass(frozen=True)
class Pkcs1v15Scheme:
    name: str
    url: str
    digest: str
    legacy_id: str
    family = Family.PKCS1V15


@dataclass(frozen=True)
class PssScheme:
    name: str
    url: str
    digest: str
    mgf_digest: str
    family = Family.PSS


@dataclass(frozen=True)
class EcdsaScheme:
    name: str
    url: str
    digest: str
    family = Family.ECDSA


METHOD_RSA_SHA1 = "rsa-sha1"
METHOD_RSA_SHA256 = "rsa-sha256"
METHOD_RSA_SHA512 = "rsa-sha512"
METHOD_SHA256_MGF1 = "sha256-rsa-MGF1"
METHOD_SHA512_MGF1 = "sha512-rsa-MGF1"
METHOD_ECDSA_SHA256 = "ecdsa-sha256"

_SCHEMES = {
    scheme.name: scheme
    for scheme in (
        Pkcs1v15Scheme(
            METHOD_RSA_SHA1,
            "http://www.w3.org/2000/09/xmldsig#rsa-sha1",
            "sha1",
            "sha1WithRSAEncryption",
        ),
        Pkcs1v15Scheme(
            METHOD_RSA_SHA256,
            "http://www.w3.org/2001/04/xmldsig-more#rsa-sha256",
            "sha256",
            "sha256WithRSAEncryption",
        ),
        Pkcs1v15Scheme(
            METHOD_RSA_SHA512,
            "http://www.w3.org/2001/04/xmldsig-more#rsa-sha512",
            "sha512",
            "sha512WithRSAEncryption",
        ),
        PssScheme(
            METHOD_SHA256_MGF1,
            "http://www.w3.org/2007/05/xmldsig-more#sha256-rsa-MGF1",
            "sha256",
            "sha256",
        ),
        PssScheme(
            METHOD_SHA512_MGF1,
            "http://www.w3.org/2007/05/xmldsig-more#sha512-rsa-MGF1",
            "sha512",
            "sha512",
        ),
        EcdsaScheme(
            METHOD_ECDSA_SHA256,
            "http://www.w3.org/2001/04/xmldsig-more#ecdsa-sha256",
            "sha256",
        ),
    )
}

_SCHEMES_BY_URL = {scheme.url: scheme for scheme in _SCHEMES.values()}


class Algorithm:
    """
    Immutable descriptor for one supported signature scheme.

    Build it from a short method name (``Algorithm("rsa-sha256")``) or from
    the XML-DSig SignatureMethod URI (``Algorithm.from_url(...)``). Anything
    outside the registry is rejected here, so a constructed descriptor is
    always a consistent signature/digest pair.
    """

    __slots__ = ("_scheme",)

    def __init__(self, name: str):
        try:
            scheme = _SCHEMES[name]
        except KeyError:
            raise AlgorithmError(f"Unsupported signature algorithm: {name!r}") from None
        object.__setattr__(self, "_scheme", scheme)

    @classmethod
    def from_url(cls, url: str) -> "Algorithm":
        scheme = _SCHEMES_BY_URL.get(url)
        if scheme is None:
            raise AlgorithmError(f"Unsupported signature algorithm URL: {url!r}")
        return cls(scheme.name)

    @staticmethod
    def names():
        """Returns the short names of every supported scheme."""
        return list(_SCHEMES)

    def __setattr__(self, key, value):
        raise AttributeError("Algorithm is immutable")

    def __delattr__(self, key):
        raise AttributeError("Algorithm is immutable")

    def __eq__(self, other):
        if not isinstance(other, Algorithm):
            return NotImplemented
        return self._scheme == other._scheme

    def __hash__(self):
        return hash(self._scheme)

    def __repr__(self):
        return f"Algorithm({self._scheme.name!r})"

    @property
    def scheme(self):
        return self._scheme

    @property
    def family(self) -> Family:
        return self._scheme.family

    def signature_algorithm_name(self) -> str:
        return self._scheme.name

    def signature_algorithm_url(self) -> str:
        return self._scheme.url

    def digest_algorithm_name(self) -> str:
        return self._scheme.digest

    def digest_algorithm_url(self) -> str:
        return DIGEST_URLS[self._scheme.digest]

    def legacy_combined_algorithm_id(self) -> str:
        """Returns the OpenSSL combined name, e.g. ``sha256WithRSAEncryption``.

        Only PKCS#1 v1.5 schemes have one.
        """
        if self._scheme.family is not Family.PKCS1V15:
            raise AlgorithmError(
                f"{self._scheme.name} has no legacy combined algorithm id"
            )
        return self._scheme.legacy_id
