import hashlib
import typing

from .buffers import BytesLike, SensitiveBuffer
from .scheme import DerivationScheme, HUTCH_V1


class SecretHasher:

    @staticmethod
    def digest(
        buffer: BytesLike,
        scheme: DerivationScheme = HUTCH_V1,
        *,
        buffer_type: "typing.Type[SensitiveBuffer]" = SensitiveBuffer
    ) -> SensitiveBuffer:
        """Hash ``buffer`` into a fresh sensitive buffer; the input is left for the caller to wipe."""
        hasher = hashlib.new(scheme.hash_name)
        hasher.update(buffer)
        out = buffer_type(hasher.digest())
        if len(out) != scheme.digest_size:
            out.wipe()
            raise ValueError(
                f"{scheme.hash_name} produced {len(out)} bytes, scheme expects {scheme.digest_size}"
            )
        return out


__all__ = ["SecretHasher"]
