"""
Storage word and address helpers.

Storage keys and values are 32-byte words. Integers are stored right-aligned
(big-endian, left zero padded), addresses are stored right-aligned as well,
booleans as the integer 0 or 1.
"""

from __future__ import annotations

from eth_utils import is_address, to_canonical_address


# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

HASH_LENGTH = 32
ADDRESS_LENGTH = 20

ZERO_HASH = b"\x00" * HASH_LENGTH

UINT256_MAX = 2**256 - 1

# Largest integer a JSON consumer can hold without losing precision
MAX_SAFE_JS_INT = 2**53 - 2


class InvalidUintLiteral(ValueError):
    """Raised when a numeric literal is not a valid uint256."""

    def __init__(self, literal: str, reason: str) -> None:
        super().__init__(f"invalid uint256 literal {literal!r}: {reason}")
        self.literal = literal


# ---------------------------------------------------------------------------
# Byte helpers
# ---------------------------------------------------------------------------

def pad_left_or_trim(data: bytes, size: int) -> bytes:
    """Left-pad data with zeros to size bytes, or keep its last size bytes."""
    if len(data) >= size:
        return data[len(data) - size:]
    return b"\x00" * (size - len(data)) + data


def bytes_to_hash(data: bytes) -> bytes:
    """Normalise data to a 32-byte word.

    Short input is left padded. Long input keeps its last 32 bytes, so a
    value that overflowed 256 bits wraps around.
    """
    return pad_left_or_trim(data, HASH_LENGTH)


def int_to_bytes(value: int) -> bytes:
    """Minimal big-endian representation (empty for zero)."""
    if value < 0:
        raise ValueError(f"Negative value: {value}")
    return value.to_bytes((value.bit_length() + 7) // 8, "big")


def int_to_hash(value: int) -> bytes:
    """Encode a uint256 as a right-aligned 32-byte word."""
    if value < 0 or value > UINT256_MAX:
        raise ValueError(f"Value out of uint256 range: {value}")
    return value.to_bytes(HASH_LENGTH, "big")


def hash_to_int(word: bytes) -> int:
    return int.from_bytes(word, "big")


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------

def to_address(value: bytes | str) -> bytes:
    """Return the canonical 20-byte form of an address.

    Accepts raw 20-byte values and hex strings with or without the 0x
    prefix, in any case.
    """
    if isinstance(value, (bytes, bytearray)):
        if len(value) != ADDRESS_LENGTH:
            raise ValueError(
                f"Address must be {ADDRESS_LENGTH} bytes, got {len(value)}"
            )
        return bytes(value)
    if isinstance(value, str):
        text = value.strip()
        if not text.lower().startswith("0x"):
            text = "0x" + text
        # Mixed case input is accepted whether or not the checksum matches
        if not is_address(text.lower()):
            raise ValueError(f"Invalid address: {value!r}")
        return to_canonical_address(text.lower())
    raise ValueError(f"Unsupported address type: {type(value).__name__}")


def parse_uint256_or_hex(literal: str) -> int:
    """Parse a decimal or 0x-prefixed hex literal into a uint256."""
    text = literal.strip()
    if not text:
        raise InvalidUintLiteral(literal, "empty")
    try:
        if text.lower().startswith("0x"):
            value = int(text[2:], 16)
        else:
            value = int(text, 10)
    except ValueError:
        raise InvalidUintLiteral(literal, "not a number") from None
    if value < 0:
        raise InvalidUintLiteral(literal, "negative")
    if value > UINT256_MAX:
        raise InvalidUintLiteral(literal, "exceeds 256 bits")
    return value
