"""
HUTCH - Stateless site password generator

Derives a reproducible password from a master password, a website and an
account name. Nothing is stored: the same three inputs always give the
same password.
"""

from .buffers import SensitiveBuffer
from .entry import SecretEntry
from .errors import (
    EmptyAccount,
    EmptySecret,
    EncodingFailure,
    HutchError,
    InvalidSiteIdentifier,
)
from .hashing import SecretHasher
from .pipeline import DerivationPipeline, derive_password
from .salt import SaltBuilder
from .scheme import DerivationScheme, HUTCH_V1, STATIC_ALPHABET
from .scramble import AlphabetScrambler, scramble
from .sites import SiteIdentifier
from .stretch import KeyStretcher
from .version import __version__


def generate(secret, site: str, account: str):
    """
    Generate the password for one site/account pair.

    Args:
        secret: Master password (str) or bytes-like/SensitiveBuffer holding it
        site: Absolute website URL, e.g. "https://example.com/login"
        account: Account name on that site

    Returns:
        The derived password string

    Note:
        - Host comparison ignores case; account names do not
        - Writable secret buffers are zeroed once consumed
        - Raises a HutchError subclass on invalid input
    """
    return derive_password(secret, site, account)


__all__ = [
    "AlphabetScrambler",
    "DerivationPipeline",
    "DerivationScheme",
    "EmptyAccount",
    "EmptySecret",
    "EncodingFailure",
    "HUTCH_V1",
    "HutchError",
    "InvalidSiteIdentifier",
    "KeyStretcher",
    "STATIC_ALPHABET",
    "SaltBuilder",
    "SecretEntry",
    "SecretHasher",
    "SensitiveBuffer",
    "SiteIdentifier",
    "__version__",
    "derive_password",
    "generate",
    "scramble",
]
