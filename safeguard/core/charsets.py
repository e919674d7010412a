"""
Character Sets

Character sets are plain strings of allowed output characters.
The helpers here are pure and never mutate their inputs.
"""

from typing import Iterable


CharacterSet = str


def contains(chars: Iterable[str], c: str) -> bool:
    """
    Check whether a character set contains a character.

    Args:
        chars: Character set
        c: Character to look for

    Returns:
        bool: True if ``c`` is in ``chars``
    """
    return c in set(chars)


def union(a: Iterable[str], b: Iterable[str]) -> CharacterSet:
    """
    Union two character sets.

    Args:
        a: First character set
        b: Second character set

    Returns:
        str: Deduplicated characters of both sets in ascending order
    """
    return "".join(sorted(set(a) | set(b)))
