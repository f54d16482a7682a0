"""
Base32 codec for 80-bit identifiers.

Format: 10 bytes = 80 bits = 16 chars of 5 bits each, no padding.
The alphabet leaves out o, q, l and i so ids can be read aloud and retyped.
"""

ALPHABET = "0123456789abcdefghjkmnprstuvwxyz"
BYTE_LENGTH = 10
TEXT_LENGTH = 16
PATTERN = "^[0-9a-hjkmnpr-zA-HJKMNPR-Z]{16}$"

_INDEX = {char: index for index, char in enumerate(ALPHABET)}
_VALID_CHARS = frozenset(ALPHABET)


def encode(raw):
    """Render 10 bytes as a 16-character lowercase string."""
    n = int.from_bytes(raw, byteorder="big")
    
    chars = []
    for _ in range(TEXT_LENGTH):
        chars.append(ALPHABET[n & 0x1F])
        n >>= 5
    
    return "".join(reversed(chars))


def decode(text):
    """Inverse of encode(). Expects 16 validated lowercase characters."""
    n = 0
    for char in text:
        n = (n << 5) | _INDEX[char]
    return n.to_bytes(BYTE_LENGTH, byteorder="big")


def invalid_chars(text):
    """Characters of a lowercased string that are outside the alphabet, in order."""
    return [char for char in text if char not in _VALID_CHARS]


def is_valid(text):
    """True if text would parse as an identifier (case-insensitive)."""
    if not isinstance(text, str) or not text or text.isspace():
        return False
    text = text.lower()
    return len(text) == TEXT_LENGTH and _VALID_CHARS.issuperset(text)
