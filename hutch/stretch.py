import logging
import time
import typing

from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.kdf.pbkdf2 import PBKDF2HMAC

from .buffers import BytesLike, SensitiveBuffer
from .scheme import DerivationScheme, HUTCH_V1

logger = logging.getLogger(__name__)


class KeyStretcher:

    @staticmethod
    def _algorithm(scheme: DerivationScheme) -> hashes.HashAlgorithm:
        try:
            return getattr(hashes, scheme.hash_name.upper())()
        except AttributeError:
            raise ValueError(f"Unsupported PBKDF2 hash: {scheme.hash_name}") from None

    @staticmethod
    def stretch(
        password: BytesLike,
        salt: BytesLike,
        scheme: DerivationScheme = HUTCH_V1,
        *,
        buffer_type: "typing.Type[SensitiveBuffer]" = SensitiveBuffer
    ) -> SensitiveBuffer:
        """PBKDF2-HMAC over ``password`` with the scheme's iteration count and output length."""
        if len(salt) != scheme.salt_length:
            raise ValueError(f"Salt must be {scheme.salt_length} bytes, got {len(salt)}")
        kdf = PBKDF2HMAC(
            algorithm=KeyStretcher._algorithm(scheme),
            length=scheme.key_length,
            # PBKDF2HMAC only takes bytes for the salt; this copy cannot be wiped
            salt=bytes(salt),
            iterations=scheme.iterations
        )
        start = time.perf_counter()
        derived = buffer_type(kdf.derive(password))
        logger.debug(
            "pbkdf2-%s x%d finished in %.2fms",
            scheme.hash_name, scheme.iterations, (time.perf_counter() - start) * 1000
        )
        return derived


__all__ = ["KeyStretcher"]
