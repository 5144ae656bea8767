"""
Random password generator with a heuristic strength classifier.
"""

from .config import (
    DEFAULT_CONFIG,
    MAX_LENGTH,
    MIN_LENGTH,
    SYMBOLS,
    PasswordConfig,
    QuantumSourceConfig,
    clamp_length,
)
from .errors import InvalidArgument, PassgenError
from .generator import GenerationResult, generate_password, generate_password_with_meta
from .pool import build_pool
from .random_source import (
    QuantumRandomSource,
    RandomSource,
    SeededRandomSource,
    SystemRandomSource,
    resolve_source,
)
from .sampler import sample
from .strength import Strength, StrengthResult, evaluate

__all__ = [
    "DEFAULT_CONFIG",
    "MAX_LENGTH",
    "MIN_LENGTH",
    "SYMBOLS",
    "PasswordConfig",
    "QuantumSourceConfig",
    "clamp_length",
    "InvalidArgument",
    "PassgenError",
    "GenerationResult",
    "generate_password",
    "generate_password_with_meta",
    "build_pool",
    "QuantumRandomSource",
    "RandomSource",
    "SeededRandomSource",
    "SystemRandomSource",
    "resolve_source",
    "sample",
    "Strength",
    "StrengthResult",
    "evaluate",
]
