"""
Hash functions used to key parsed intervals.

Every interval gets a 32-bit key derived from the file it was read from,
its coordinates and its line number, so keys stay unique across files and
are reproducible when the same file is parsed again.
"""

from enum import Enum
from typing import Callable, Union

_UINT32_MASK = 0xFFFFFFFF
_FNV_PRIME_32 = 16777619
_FNV_OFFSET_BASIS_32 = 2166136261
_ZERO_KEY_SUBSTITUTE = 1


class HashFunction(str, Enum):
    """Hash algorithms available for interval keys."""

    ONE_AT_A_TIME = "one_at_a_time"
    FNV = "fnv"


def one_at_a_time_hash(key: str) -> int:
    """
    Bob Jenkins' One-at-a-Time hash of a string.

    Parameters
    ----------
    key : str
        String to hash; each character contributes its code point.

    Returns
    -------
    int
        Unsigned 32-bit hash value.
    """
    h = 0
    for char in key:
        h = (h + ord(char)) & _UINT32_MASK
        h = (h + (h << 10)) & _UINT32_MASK
        h ^= h >> 6

    h = (h + (h << 3)) & _UINT32_MASK
    h ^= h >> 11
    h = (h + (h << 15)) & _UINT32_MASK
    return h


def fnv1a_hash(key: str) -> int:
    """
    32-bit FNV-1a hash (xor, then multiply) of a string.

    Parameters
    ----------
    key : str
        String to hash.

    Returns
    -------
    int
        Unsigned 32-bit hash value.
    """
    h = _FNV_OFFSET_BASIS_32
    for char in key:
        h ^= ord(char)
        h = (h * _FNV_PRIME_32) & _UINT32_MASK
    return h


_HASH_FUNCTIONS = {
    HashFunction.ONE_AT_A_TIME: one_at_a_time_hash,
    HashFunction.FNV: fnv1a_hash,
}


def get_hash_function(name: Union[str, HashFunction]) -> Callable[[str], int]:
    """
    Return the hash callable for a configured hash function name.

    Raises
    ------
    ValueError
        If the name does not match a known hash function.
    """
    try:
        return _HASH_FUNCTIONS[HashFunction(name)]
    except ValueError:
        valid = ", ".join(h.value for h in HashFunction)
        raise ValueError(f"Unknown hash function '{name}'. Expected one of: {valid}")


def file_hash_key(absolute_path: str) -> int:
    """Hash identifying a source file (One-at-a-Time over its absolute path)."""
    return one_at_a_time_hash(absolute_path)


def interval_hash_key(
    file_hash: int,
    left: int,
    right: int,
    line_number: int,
    hash_function: Callable[[str], int] = one_at_a_time_hash,
) -> int:
    """
    Hash key of one interval: ``<file>_<left>_<right>_<line>`` hashed.

    Keys are never zero; a zero hash is remapped to 1.
    """
    return hash_function(f"{file_hash}_{left}_{right}_{line_number}") or _ZERO_KEY_SUBSTITUTE
