"""Base-N encoding of raw bytes over an arbitrary ordered alphabet."""

import typing

from .buffers import BytesLike


class AlphabetScrambler:

    @staticmethod
    def scramble(data: BytesLike, alphabet: typing.Sequence[str]) -> str:
        """
        Encode ``data`` as a big-endian number written in base ``len(alphabet)``.

        Works like Base58: the digits come from repeated division, then one
        ``alphabet[0]`` is prepended per leading zero byte so that byte-length
        information lost by the conversion survives. The output width follows
        the numeric magnitude of ``data``, not its length.
        """
        radix = len(alphabet)
        if radix < 2:
            raise ValueError("Alphabet needs at least 2 symbols")
        value = int.from_bytes(data, "big")
        digits = []
        while value > 0:
            value, remainder = divmod(value, radix)
            digits.append(alphabet[remainder])
        leading_zeros = 0
        for byte in data:
            if byte:
                break
            leading_zeros += 1
        digits.extend(alphabet[0] for _ in range(leading_zeros))
        return "".join(reversed(digits))


def scramble(data: BytesLike, alphabet: typing.Sequence[str]) -> str:
    return AlphabetScrambler.scramble(data, alphabet)


__all__ = ["AlphabetScrambler", "scramble"]
