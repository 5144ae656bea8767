"""
High-level generation pipeline: configuration -> pool -> password -> strength.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .config import DEFAULT_CONFIG, PasswordConfig
from .pool import pool_for
from .random_source import RandomSource
from .sampler import sample
from .strength import StrengthResult, evaluate, pool_entropy_bits

logger = logging.getLogger(__name__)


@dataclass
class GenerationResult:
    """
    Full result of one password generation.
    """
    # Final password
    password: str

    # Characters the password was drawn from
    pool: str

    # Heuristic score and label for the password
    strength: StrengthResult

    # Theoretical entropy: length * log2(pool size)
    entropy_bits: float
    config: PasswordConfig


def generate_password_with_meta(
    config: PasswordConfig | None = None,
    rng: RandomSource | None = None,
) -> GenerationResult:
    """
    Build the pool for `config`, sample a password from it and score it.

    Raises InvalidArgument when `config.length` is outside the supported range.
    """
    cfg = config or DEFAULT_CONFIG

    pool = pool_for(cfg)
    password = sample(pool, cfg.length, rng)
    strength = evaluate(password)

    logger.debug(
        "Generated %d-character password (pool=%d, score=%d)",
        cfg.length,
        len(pool),
        strength.score,
    )

    return GenerationResult(
        password=password,
        pool=pool,
        strength=strength,
        entropy_bits=pool_entropy_bits(len(pool), cfg.length),
        config=cfg,
    )


def generate_password(
    config: PasswordConfig | None = None,
    rng: RandomSource | None = None,
) -> str:
    return generate_password_with_meta(config, rng).password
