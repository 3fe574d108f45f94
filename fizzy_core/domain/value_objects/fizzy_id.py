"""
FizzyId Value Object - Time-ordered primary key used by every entity.

Format:
- A UUIDv7 (48-bit unix millisecond timestamp in the high bits)
- Encoded as lowercase base36, left-padded with "0" to 25 characters
- Example: 03fbdr2l1ckvbl0sw3krzrnds

Fixed width is what keeps string order equal to numeric order, so ids
generated one after another also sort one after another.

Storage form:
- The same 128-bit value as a 16-byte big-endian blob (BINARY(16) columns)
- SQL statements bind and read it as hex text: UNHEX(?) / HEX(column)
"""

from __future__ import annotations

import os
import re
import threading
import time
from dataclasses import dataclass

from fizzy_core.domain.exceptions.validation_error import InvalidIdentifierError

_ALPHABET = "0123456789abcdefghijklmnopqrstuvwxyz"
_WIDTH = 25
_BYTE_LENGTH = 16
_MAX_VALUE = (1 << 128) - 1
_PATTERN = re.compile(r"[0-9a-z]{25}")

_RAND_BITS = 74
_RAND_B_BITS = 62

_clock_lock = threading.Lock()
_last_ms = 0
_last_rand = 0


def _next_uuid7() -> int:
    """
    Build the next UUIDv7 as an integer.

    Within one millisecond the 74 random bits act as a counter, so successive
    calls in this process are strictly increasing even if the clock stalls or
    steps backwards.
    """
    global _last_ms, _last_rand

    with _clock_lock:
        ms = time.time_ns() // 1_000_000
        rand = int.from_bytes(os.urandom(10), "big") >> 6
        if ms <= _last_ms:
            ms = _last_ms
            rand = _last_rand + 1
            if rand >> _RAND_BITS:
                ms += 1
                rand = 0
        _last_ms, _last_rand = ms, rand

    rand_a = rand >> _RAND_B_BITS
    rand_b = rand & ((1 << _RAND_B_BITS) - 1)
    return (ms << 80) | (0x7 << 76) | (rand_a << 64) | (0b10 << 62) | rand_b


def _encode(number: int) -> str:
    if number == 0:
        return "0" * _WIDTH

    digits = []
    while number:
        number, remainder = divmod(number, 36)
        digits.append(_ALPHABET[remainder])
    return "".join(reversed(digits)).rjust(_WIDTH, "0")


@dataclass(frozen=True, order=True)
class FizzyId:
    value: str  # 25-char base36 text form

    def __post_init__(self):
        if not isinstance(self.value, str) or not _PATTERN.fullmatch(self.value):
            raise InvalidIdentifierError(self.value)
        # 36**25 overshoots 2**128, so the widest strings are out of range
        if int(self.value, 36) > _MAX_VALUE:
            raise InvalidIdentifierError(self.value)

    @classmethod
    def generate(cls) -> FizzyId:
        """Generate a new UUIDv7-based id."""
        return cls.from_int(_next_uuid7())

    @classmethod
    def parse(cls, raw: str) -> FizzyId:
        """Parse user or database text, raising InvalidIdentifierError."""
        return cls(raw)

    @classmethod
    def from_int(cls, number: int) -> FizzyId:
        if not 0 <= number <= _MAX_VALUE:
            raise InvalidIdentifierError(number)
        return cls(_encode(number))

    def to_int(self) -> int:
        return int(self.value, 36)

    def to_storage_form(self) -> bytes:
        return self.to_int().to_bytes(_BYTE_LENGTH, "big")

    @classmethod
    def from_storage_form(cls, blob: bytes) -> FizzyId:
        if len(blob) != _BYTE_LENGTH:
            raise InvalidIdentifierError(blob)
        return cls.from_int(int.from_bytes(blob, "big"))

    def to_hex(self) -> str:
        return self.to_storage_form().hex()

    @classmethod
    def from_hex(cls, text: str) -> FizzyId:
        try:
            blob = bytes.fromhex(text)
        except (TypeError, ValueError):
            raise InvalidIdentifierError(text)
        return cls.from_storage_form(blob)

    def __str__(self) -> str:
        return self.value
