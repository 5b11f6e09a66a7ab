"""
Reversible keyed letter substitution for note content.

The key position is the UTF-8 byte offset of each character, so collection
files stay readable by byte-oriented tools using the same key.
"""

from typing import Iterator, Tuple

from notestool.config import Config


def _byte_width(char: str) -> int:
    """UTF-8 width of a character; escaped undecodable bytes count as one."""
    if "\udc80" <= char <= "\udcff":
        return 1
    return len(char.encode("utf-8", "surrogatepass"))


def _positions(message: str) -> Iterator[Tuple[int, str]]:
    """Yield (byte offset, character) pairs."""
    offset = 0
    for char in message:
        yield offset, char
        offset += _byte_width(char)


def _shift_for(key: str, position: int) -> int:
    """Shift derived from the key letter cycled at the given position (A=0)."""
    return ord(key[position % len(key)].upper()) - ord("A")


def _rotate(char: str, shift: int) -> str:
    """Rotate an ASCII letter within its own case; other characters pass."""
    if "A" <= char <= "Z":
        base = ord("A")
    elif "a" <= char <= "z":
        base = ord("a")
    else:
        return char
    size = Config.ALPHABET_SIZE
    offset = ((ord(char) - base + shift) % size + size) % size
    return chr(base + offset)


def encrypt(message: str, key: str = Config.CIPHER_KEY) -> str:
    """
    Encrypt message with a Vigenere-style substitution.

    Every character consumes key positions, including the ones left
    unchanged (digits, punctuation, spaces).

    Args:
        message: Plain text
        key: Uppercase key cycled by UTF-8 byte offset

    Returns:
        Ciphertext of the same length
    """
    return "".join(_rotate(char, _shift_for(key, i)) for i, char in _positions(message))


def decrypt(message: str, key: str = Config.CIPHER_KEY) -> str:
    """Inverse of encrypt() for the same key."""
    return "".join(_rotate(char, -_shift_for(key, i)) for i, char in _positions(message))
