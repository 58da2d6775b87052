"""The variable-length string type used throughout Highfleet's data structures."""

from __future__ import annotations

import functools
import json

INLINE_CAPACITY = 16
DEFAULT_MAX_LENGTH = INLINE_CAPACITY - 1


@functools.total_ordering
class EscadraString:
    """A null-terminated, variable-length string.

    Strings whose maximum length fits in 15 bytes live in a fixed 16-byte
    inline buffer. Longer strings move to a separately sized buffer whose
    capacity doubles until the text and its terminator fit. Once a string
    has grown out of the inline buffer it never moves back.
    """

    __slots__ = ("_buffer", "_length", "_max_length")

    def __init__(self, value: str = "") -> None:
        self._buffer = bytearray(INLINE_CAPACITY)
        self._length = 0
        self._max_length = DEFAULT_MAX_LENGTH
        self.set_string(value)

    def set_string(self, string: str) -> None:
        """Store ``string``, growing the buffer if it does not fit."""
        encoded = string.encode("utf-8")
        size_needed = len(encoded)

        if self._max_length > DEFAULT_MAX_LENGTH or size_needed > DEFAULT_MAX_LENGTH:
            size = self._max_length + 1
            while size <= size_needed:
                size *= 2
            buffer = bytearray(size)
            buffer[:size_needed] = encoded
            self._buffer = buffer
            self._max_length = size - 1
        else:
            buffer = bytearray(INLINE_CAPACITY)
            buffer[:size_needed] = encoded
            self._buffer = buffer

        self._length = size_needed

    @property
    def length(self) -> int:
        """Length of the stored string in bytes, without the terminator."""
        return self._length

    @property
    def max_length(self) -> int:
        """Largest string length the current buffer can hold."""
        return self._max_length

    @property
    def is_inline(self) -> bool:
        """Whether the string is held in the fixed 16-byte inline buffer."""
        return self._max_length <= DEFAULT_MAX_LENGTH

    @property
    def raw(self) -> bytes:
        """The whole underlying buffer, including the null terminator."""
        return bytes(self._buffer)

    def __str__(self) -> str:
        return self._buffer[: self._length].decode("utf-8")

    def __repr__(self) -> str:
        text = json.dumps(str(self), ensure_ascii=False)
        return (
            f"EscadraString {{ string: {text}, length: {self._length}, "
            f"max_length: {self._max_length} }}"
        )

    def __len__(self) -> int:
        return self._length

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EscadraString):
            return NotImplemented
        return str(self) == str(other)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, EscadraString):
            return NotImplemented
        return str(self) < str(other)

    def __hash__(self) -> int:
        return hash(str(self))

    def __copy__(self) -> EscadraString:
        return EscadraString(str(self))

    def __deepcopy__(self, memo: dict) -> EscadraString:
        return EscadraString(str(self))