"""32-byte public keys and their base58 text form."""

from __future__ import annotations

from dataclasses import dataclass

PUBKEY_BYTES = 32

_ALPHABET = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"
_INDEX = {char: value for value, char in enumerate(_ALPHABET)}


def b58encode(data: bytes) -> str:
    """Encode bytes as base58 text."""
    data = bytes(data)
    stripped = data.lstrip(b"\x00")
    leading = len(data) - len(stripped)
    number = int.from_bytes(stripped, "big")
    digits = []
    while number:
        number, remainder = divmod(number, 58)
        digits.append(_ALPHABET[remainder])
    return "1" * leading + "".join(reversed(digits))


def b58decode(text: str) -> bytes:
    """Decode base58 text into bytes."""
    stripped = text.lstrip("1")
    leading = len(text) - len(stripped)
    number = 0
    for char in stripped:
        try:
            number = number * 58 + _INDEX[char]
        except KeyError:
            raise ValueError(f"invalid base58 character: {char!r}") from None
    body = number.to_bytes((number.bit_length() + 7) // 8, "big") if number else b""
    return b"\x00" * leading + body


@dataclass(frozen=True, order=True)
class Pubkey:
    """A 32-byte public key, ordered by its bytes."""

    data: bytes

    def __post_init__(self) -> None:
        if not isinstance(self.data, (bytes, bytearray)):
            raise TypeError("pubkey data must be bytes")
        if len(self.data) != PUBKEY_BYTES:
            raise ValueError(f"pubkey must be {PUBKEY_BYTES} bytes, got {len(self.data)}")
        object.__setattr__(self, "data", bytes(self.data))

    @classmethod
    def from_base58(cls, text: str) -> Pubkey:
        return cls(b58decode(text))

    def to_base58(self) -> str:
        return b58encode(self.data)

    @classmethod
    def default(cls) -> Pubkey:
        """The all-zero key."""
        return cls(bytes(PUBKEY_BYTES))

    def __bytes__(self) -> bytes:
        return self.data

    def __str__(self) -> str:
        return self.to_base58()