"""Stateless site password derivation.

    secret -> SHA-512 digest -> personal alphabet
    (host, account) -> salt
    scramble(digest) -> PBKDF2-HMAC-SHA512 -> scramble -> password

Every secret-derived byte string lives in a ``SensitiveBuffer`` registered
on one ``ExitStack``, so all of them are zeroed whether the run returns or
raises.
"""

import contextlib
import logging
import typing

from .buffers import BytesLike, SensitiveBuffer
from .errors import EmptyAccount, EmptySecret, InvalidSiteIdentifier
from .hashing import SecretHasher
from .salt import SaltBuilder, encode_field
from .scheme import DerivationScheme, HUTCH_V1
from .scramble import AlphabetScrambler
from .sites import SiteIdentifier
from .stretch import KeyStretcher

logger = logging.getLogger(__name__)

SecretInput = typing.Union[str, SensitiveBuffer, BytesLike]


class DerivationPipeline:

    def __init__(
        self,
        scheme: DerivationScheme = HUTCH_V1,
        *,
        buffer_type: "typing.Type[SensitiveBuffer]" = SensitiveBuffer
    ):
        self.scheme = scheme
        self.buffer_type = buffer_type

    def acquire_secret(self, secret: SecretInput) -> SensitiveBuffer:
        """
        Take ownership of the master secret.

        Text is encoded with the scheme's secret encoding. Writable byte
        sources and ``SensitiveBuffer`` instances are zeroed once copied.
        """
        if isinstance(secret, str):
            return self.buffer_type(secret.encode(self.scheme.secret_encoding, "surrogatepass"))
        return self.buffer_type.take(secret)

    def _validate(self, master: SensitiveBuffer, site_host: str, account: str) -> None:
        if not site_host:
            raise InvalidSiteIdentifier(site_host, "empty host")
        if not account:
            raise EmptyAccount()
        encode_field(site_host, "Site", self.scheme)
        encode_field(account, "Account", self.scheme)
        if len(master) == 0:
            raise EmptySecret()

    def run(self, secret: SecretInput, site_host: str, account: str) -> str:
        """Derive the password for an already-normalized ``site_host``."""
        scheme = self.scheme
        buffer_type = self.buffer_type
        with contextlib.ExitStack() as stack:
            master = stack.enter_context(self.acquire_secret(secret))
            self._validate(master, site_host, account)
            logger.debug("deriving %s password for host %s", scheme.label, site_host.lower())

            digest = stack.enter_context(SecretHasher.digest(master.data, scheme, buffer_type=buffer_type))
            master.wipe()

            personal_alphabet = AlphabetScrambler.scramble(digest.data, scheme.static_alphabet)
            logger.debug("personal alphabet has %d symbols", len(personal_alphabet))

            salt = stack.enter_context(
                SaltBuilder.build_salt(site_host, account, personal_alphabet, scheme, buffer_type=buffer_type)
            )
            scrambled_secret = stack.enter_context(buffer_type(
                AlphabetScrambler.scramble(digest.data, personal_alphabet).encode(scheme.text_encoding)
            ))
            stretched = stack.enter_context(
                KeyStretcher.stretch(scrambled_secret.data, salt.data, scheme, buffer_type=buffer_type)
            )
            return AlphabetScrambler.scramble(stretched.data, personal_alphabet)

    def derive(self, secret: SecretInput, site: str, account: str) -> str:
        """Derive the password for ``site`` given as an absolute URI."""
        with self.acquire_secret(secret) as master:
            host = SiteIdentifier.host(site)
            return self.run(master, host, account)


def derive_password(
    secret: SecretInput,
    site: str,
    account: str,
    *,
    scheme: DerivationScheme = HUTCH_V1
) -> str:
    return DerivationPipeline(scheme).derive(secret, site, account)


__all__ = ["DerivationPipeline", "SecretInput", "derive_password"]
