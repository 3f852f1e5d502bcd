"""Self-zeroing containers for secret-derived bytes."""

import typing

BytesLike = typing.Union[bytes, bytearray, memoryview]


class SensitiveBuffer:
    """
    Best-effort in-memory secret container.

    Backed by a mutable bytearray so it can be zeroed in place. Use it as a
    context manager: the wipe then runs on normal return and on error paths
    alike. Immutable copies produced by libraries (hash outputs, ``str``
    objects) are outside its reach.
    """

    __slots__ = ("_buf", "_wiped")

    def __init__(self, data: BytesLike = b""):
        self._buf = bytearray(data)
        self._wiped = False

    @classmethod
    def take(cls, source: "typing.Union[SensitiveBuffer, BytesLike]") -> "SensitiveBuffer":
        """Copy ``source`` into a new buffer, then zero ``source`` when it is writable."""
        if isinstance(source, SensitiveBuffer):
            owned = cls(source.data)
            source.wipe()
            return owned
        if not isinstance(source, (bytes, bytearray, memoryview)):
            raise TypeError(f"Unsupported secret type: {type(source)!r}")
        owned = cls(source)
        if isinstance(source, bytearray):
            _zero(source)
        elif isinstance(source, memoryview) and not source.readonly:
            _zero(source.cast("B"))
        return owned

    @property
    def data(self) -> bytearray:
        if self._wiped:
            raise ValueError("SensitiveBuffer already wiped")
        return self._buf

    @property
    def wiped(self) -> bool:
        return self._wiped

    def wipe(self) -> None:
        if not self._wiped:
            _zero(self._buf)
            self._wiped = True

    def __len__(self) -> int:
        return len(self._buf)

    def __enter__(self) -> "SensitiveBuffer":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.wipe()

    def __del__(self):
        if getattr(self, "_buf", None) is not None:
            self.wipe()

    def __repr__(self) -> str:
        state = "wiped" if self._wiped else f"len={len(self._buf)}"
        return f"<{type(self).__name__} {state}>"


def _zero(buf) -> None:
    for i in range(len(buf)):
        buf[i] = 0


__all__ = ["BytesLike", "SensitiveBuffer"]
