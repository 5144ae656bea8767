"""
Injectable sources of uniform random integers.

Every source exposes ``randbelow(upper)`` returning an integer in
``[0, upper - 1]``. The sampler only talks to this interface, so tests
can pass a seeded source and callers can opt into the quantum one.
"""

from __future__ import annotations

import logging
import random
import secrets
from typing import Protocol

from .config import DEFAULT_QUANTUM_CONFIG, QuantumSourceConfig
from .entropy import amplify_entropy, bits_to_int, xor_streams
from .errors import InvalidArgument
from .quantum_engine import QuantumEngine

logger = logging.getLogger(__name__)

SOURCE_NAMES = ("system", "seeded", "quantum")


class RandomSource(Protocol):
    def randbelow(self, upper: int) -> int:
        ...


def _check_upper(upper: int) -> None:
    if upper < 1:
        raise InvalidArgument(f"upper bound must be positive, got {upper}.")


class SystemRandomSource:
    """Operating-system CSPRNG via :mod:`secrets`."""

    def randbelow(self, upper: int) -> int:
        _check_upper(upper)
        return secrets.randbelow(upper)


class SeededRandomSource:
    """
    Deterministic Mersenne Twister source. Useful for tests and
    reproducible demos; not suitable for real passwords.
    """

    def __init__(self, seed: int | str | None = None) -> None:
        self.seed = seed
        self._random = random.Random(seed)

    def randbelow(self, upper: int) -> int:
        _check_upper(upper)
        return self._random.randrange(upper)


class QuantumRandomSource:
    """
    Uniform integers backed by simulated qubit measurements.

    Each refill runs ``quantum_streams`` independent circuits, XORs the
    outcomes, mixes them with SHA-256 and appends the result to a bit
    buffer. Integers are formed by rejection sampling so every value in
    the range is equally likely.
    """

    def __init__(
        self,
        config: QuantumSourceConfig | None = None,
        engine: QuantumEngine | None = None,
    ) -> None:
        self.config = config or DEFAULT_QUANTUM_CONFIG
        self.engine = engine or QuantumEngine(self.config)
        self._buffer: list[int] = []

    def _refill(self) -> None:
        streams = [self.engine.measure() for _ in range(max(1, self.config.quantum_streams))]
        combined = xor_streams(streams)
        self._buffer.extend(amplify_entropy(combined, self.config.entropy_rounds))
        logger.debug("Quantum buffer refilled to %d bits", len(self._buffer))

    def getrandbits(self, count: int) -> int:
        while len(self._buffer) < count:
            self._refill()
        bits, self._buffer = self._buffer[:count], self._buffer[count:]
        return bits_to_int(bits)

    def randbelow(self, upper: int) -> int:
        _check_upper(upper)
        width = (upper - 1).bit_length()
        while True:
            value = self.getrandbits(width)
            if value < upper:
                return value


def resolve_source(
    name: str = "system",
    seed: int | str | None = None,
    quantum_config: QuantumSourceConfig | None = None,
) -> RandomSource:
    """
    Build a randomness source by name: ``system``, ``seeded`` or ``quantum``.
    """
    if name == "system":
        return SystemRandomSource()
    if name == "seeded":
        return SeededRandomSource(seed)
    if name == "quantum":
        return QuantumRandomSource(quantum_config)
    raise InvalidArgument(
        f"Unknown randomness source {name!r}; expected one of {', '.join(SOURCE_NAMES)}."
    )
