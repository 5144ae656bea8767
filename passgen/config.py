"""
Configuration for the password generator.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

# Supported password length range (inclusive on both ends).
MIN_LENGTH = 6
MAX_LENGTH = 32

UPPERCASE = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
LOWERCASE = "abcdefghijklmnopqrstuvwxyz"
DIGITS = "0123456789"
# Fixed order; 27 characters.
SYMBOLS = "!@#$%^&*()_+[]{}|;:,.<>?/~`"


@dataclass
class PasswordConfig:
    # Desired password length in characters.
    # The caller keeps this inside [MIN_LENGTH, MAX_LENGTH]; see clamp_length().
    length: int = 12

    # Append 0-9 to the character pool.
    include_digits: bool = True

    # Append SYMBOLS to the character pool.
    include_symbols: bool = True


@dataclass
class QuantumSourceConfig:
    # Number of qubits prepared per circuit run; each gives one raw bit.
    # NOTE: Keep this <= backend limit (often 20-29 for local simulators).
    num_qubits: int = 20

    # Rounds of SHA-256 mixing applied to each combined bit batch.
    entropy_rounds: int = 2

    # Independent circuit runs XOR-combined into one batch.
    quantum_streams: int = 2


# Default configuration instances you can import elsewhere
DEFAULT_CONFIG = PasswordConfig()
DEFAULT_QUANTUM_CONFIG = QuantumSourceConfig()


def clamp_length(value: object) -> int:
    """
    Caller-side helper that turns raw user input into a usable length.

    Empty, non-numeric or too small values become MIN_LENGTH, values above
    MAX_LENGTH become MAX_LENGTH. The sampler itself never clamps.
    """
    try:
        number = float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return MIN_LENGTH

    if math.isnan(number) or number < MIN_LENGTH:
        return MIN_LENGTH
    if number > MAX_LENGTH:
        return MAX_LENGTH
    return int(number)
