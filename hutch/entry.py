"""Master password capture for interactive and piped use."""

import getpass
import typing

from .buffers import SensitiveBuffer
from .scheme import DerivationScheme, HUTCH_V1


class SecretEntry:

    @staticmethod
    def _capture(text: str, scheme: DerivationScheme) -> SensitiveBuffer:
        return SensitiveBuffer(text.encode(scheme.secret_encoding, "surrogatepass"))

    @staticmethod
    def prompt(
        prompt: str = "Enter Master Password >",
        scheme: DerivationScheme = HUTCH_V1,
        *,
        stream: "typing.Optional[typing.TextIO]" = None
    ) -> SensitiveBuffer:
        """Read the secret without echo; the terminal line never shows it."""
        return SecretEntry._capture(getpass.getpass(prompt, stream=stream), scheme)

    @staticmethod
    def read_line(stream: typing.TextIO, scheme: DerivationScheme = HUTCH_V1) -> SensitiveBuffer:
        """Read one line from ``stream`` (e.g. a pipe), without its line terminator."""
        return SecretEntry._capture(stream.readline().rstrip("\r\n"), scheme)


__all__ = ["SecretEntry"]
