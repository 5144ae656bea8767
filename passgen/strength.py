"""
Heuristic password strength scoring.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from enum import Enum

from .config import DIGITS, LOWERCASE, SYMBOLS, UPPERCASE

MIN_STRONG_LENGTH = 8

_UPPER_RE = re.compile(r"[A-Z]")
_DIGIT_RE = re.compile(r"[0-9]")
# Anything outside [A-Za-z0-9] counts, including whitespace and accented letters.
_SYMBOL_RE = re.compile(r"[^A-Za-z0-9]")


class Strength(str, Enum):
    WEAK = "Weak"
    MEDIUM = "Medium"
    STRONG = "Strong"


@dataclass(frozen=True)
class StrengthResult:
    score: int
    label: Strength


def score_password(password: str) -> int:
    """
    Count satisfied criteria (0-4): length >= 8, an uppercase letter,
    a digit, and a character that is neither letter nor digit.
    """
    return sum(
        (
            len(password) >= MIN_STRONG_LENGTH,
            bool(_UPPER_RE.search(password)),
            bool(_DIGIT_RE.search(password)),
            bool(_SYMBOL_RE.search(password)),
        )
    )


def label_for_score(score: int) -> Strength:
    if score <= 1:
        return Strength.WEAK
    if score == 2:
        return Strength.MEDIUM
    return Strength.STRONG


def evaluate(password: str) -> StrengthResult:
    score = score_password(password)
    return StrengthResult(score=score, label=label_for_score(score))


# ---------- entropy estimates (informational only) ----------

def pool_entropy_bits(pool_size: int, length: int) -> float:
    """
    Theoretical entropy of a password sampled uniformly from a pool.
    """
    if pool_size <= 0 or length <= 0:
        return 0.0
    return length * math.log2(pool_size)


def estimate_entropy_bits(password: str) -> float:
    """
    Rough entropy estimate in bits based on length and the character
    classes the password actually uses. Spaces, accented letters and
    other non-alphanumerics count toward the symbol class.
    """
    if not password:
        return 0.0

    classes = (UPPERCASE, LOWERCASE, DIGITS)
    pool_size = sum(len(chars) for chars in classes if any(c in chars for c in password))
    # Same symbol rule as score_password: anything outside [A-Za-z0-9].
    if _SYMBOL_RE.search(password):
        pool_size += len(SYMBOLS)
    return pool_entropy_bits(pool_size, len(password))
