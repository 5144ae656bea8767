"""
Character pool construction.
"""

from __future__ import annotations

from .config import DIGITS, LOWERCASE, SYMBOLS, UPPERCASE, PasswordConfig

BASE_LETTERS = UPPERCASE + LOWERCASE


def build_pool(include_digits: bool = False, include_symbols: bool = False) -> str:
    """
    Return the ordered characters eligible for sampling.

    Always A-Z then a-z, followed by the digits and then the symbol
    literal when the matching flag is set. The result is one of
    52, 62, 79 or 89 characters long and never contains duplicates.
    """
    pool = BASE_LETTERS
    if include_digits:
        pool += DIGITS
    if include_symbols:
        pool += SYMBOLS
    return pool


def pool_for(config: PasswordConfig) -> str:
    return build_pool(config.include_digits, config.include_symbols)
