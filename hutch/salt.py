import hashlib
import typing

from .buffers import BytesLike, SensitiveBuffer
from .errors import EncodingFailure
from .scheme import DerivationScheme, HUTCH_V1
from .scramble import AlphabetScrambler


def encode_field(value: str, field: str, scheme: DerivationScheme = HUTCH_V1) -> bytes:
    try:
        return value.encode(scheme.text_encoding)
    except UnicodeEncodeError as exc:
        raise EncodingFailure(field, exc) from exc


class SaltBuilder:

    @staticmethod
    def build_salt(
        site_host: str,
        account: str,
        personal_alphabet: typing.Sequence[str],
        scheme: DerivationScheme = HUTCH_V1,
        *,
        buffer_type: "typing.Type[SensitiveBuffer]" = SensitiveBuffer
    ) -> SensitiveBuffer:
        """
        Build the salt as ``H(scramble(host)) || H(scramble(account))``.

        Only the host is case-folded; account names stay case-sensitive.
        """
        parts = (
            encode_field(site_host.lower(), "Site", scheme),
            encode_field(account, "Account", scheme),
        )
        size = scheme.digest_size
        salt = buffer_type(bytes(scheme.salt_length))
        try:
            for index, plain in enumerate(parts):
                scrambled = AlphabetScrambler.scramble(plain, personal_alphabet)
                with buffer_type(scrambled.encode(scheme.text_encoding)) as stream:
                    salt.data[index * size:(index + 1) * size] = hashlib.new(
                        scheme.hash_name, stream.data
                    ).digest()
        except BaseException:
            salt.wipe()
            raise
        return salt


__all__ = ["SaltBuilder", "encode_field"]
