"""
Sampling logic: turn a character pool into a fixed-length password.
"""

from __future__ import annotations

import logging

from .config import MAX_LENGTH, MIN_LENGTH
from .errors import InvalidArgument
from .random_source import RandomSource, SystemRandomSource

logger = logging.getLogger(__name__)


def validate_length(length: object) -> int:
    # bool is an int subclass but never a meaningful length.
    if isinstance(length, bool) or not isinstance(length, int):
        raise InvalidArgument(f"Password length must be an integer, got {length!r}.")
    if not MIN_LENGTH <= length <= MAX_LENGTH:
        raise InvalidArgument(
            f"Password length must be between {MIN_LENGTH} and {MAX_LENGTH}, got {length}."
        )
    return length


def sample(pool: str, length: int, rng: RandomSource | None = None) -> str:
    """
    Draw `length` characters from `pool`, independently and with replacement.

    Each position uses an index drawn uniformly from [0, len(pool) - 1].
    Raises InvalidArgument for an empty pool, an out-of-range length, or a
    source that returns an index outside the pool.
    """
    if not isinstance(pool, str) or not pool:
        raise InvalidArgument("Character pool must be a non-empty string.")
    validate_length(length)

    source = rng if rng is not None else SystemRandomSource()
    size = len(pool)

    chars: list[str] = []
    for _ in range(length):
        index = source.randbelow(size)
        if not 0 <= index < size:
            raise InvalidArgument(
                f"Random source returned index {index} outside [0, {size - 1}]."
            )
        chars.append(pool[index])

    logger.debug("Sampled %d characters from a %d-character pool", length, size)
    return "".join(chars)
