"""Fixed constants of the derivation scheme.

Every value here feeds the output password. Changing one silently changes
every password ever generated, so a new set of constants gets a new
``DerivationScheme`` with its own label instead of editing ``HUTCH_V1``.
"""

from dataclasses import dataclass

STATIC_ALPHABET = "17Grb8fVyeD5&mUnYWtcqzdTK4LgBJA3Xx%MpR!hsiPvaSZ9NQCH=F$oj^Ekw6u_2"


@dataclass(frozen=True)
class DerivationScheme:
    label: str
    static_alphabet: str = STATIC_ALPHABET
    hash_name: str = "sha512"
    digest_size: int = 64
    iterations: int = 500_000
    key_length: int = 48
    # UTF-16 code units, as the secret was hashed by the first console release
    secret_encoding: str = "utf-16-le"
    text_encoding: str = "utf-8"

    @property
    def salt_length(self) -> int:
        return 2 * self.digest_size

    def __post_init__(self):
        if len(self.static_alphabet) < 2:
            raise ValueError("Static alphabet needs at least 2 symbols")
        if self.iterations <= 0:
            raise ValueError("Iteration count must be positive")
        if self.key_length <= 0:
            raise ValueError("Key length must be positive")


HUTCH_V1 = DerivationScheme(label="hutch-v1")

__all__ = ["DerivationScheme", "HUTCH_V1", "STATIC_ALPHABET"]
