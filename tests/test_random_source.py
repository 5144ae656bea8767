import pytest

from passgen.config import QuantumSourceConfig
from passgen.entropy import amplify_entropy, bits_to_bytes, bits_to_int, xor_streams
from passgen.errors import InvalidArgument
from passgen.random_source import (
    QuantumRandomSource,
    SeededRandomSource,
    SystemRandomSource,
    resolve_source,
)


class StubEngine:
    """Returns the same measurement every run."""

    def __init__(self, bits):
        self.bits = bits
        self.runs = 0

    def measure(self):
        self.runs += 1
        return list(self.bits)


def _quantum(bits, streams=1, rounds=0):
    config = QuantumSourceConfig(num_qubits=len(bits), entropy_rounds=rounds, quantum_streams=streams)
    return QuantumRandomSource(config, engine=StubEngine(bits))


@pytest.mark.parametrize("source", [SystemRandomSource(), SeededRandomSource(3)])
def test_randbelow_stays_in_range(source):
    for upper in (1, 2, 52, 89):
        for _ in range(200):
            assert 0 <= source.randbelow(upper) < upper


@pytest.mark.parametrize("source", [SystemRandomSource(), SeededRandomSource(3), _quantum([1, 0])])
def test_randbelow_rejects_non_positive_bound(source):
    with pytest.raises(InvalidArgument):
        source.randbelow(0)


def test_quantum_rejection_sampling():
    source = _quantum([1, 0, 1, 1, 0, 0, 1, 0])
    # 101 -> 5 is rejected, 100 -> 4 is kept.
    assert source.randbelow(5) == 4
    # Leftover [1, 0] plus a refill: 101 rejected, 011 -> 3.
    assert source.randbelow(5) == 3
    assert source.engine.runs == 2


def test_quantum_streams_are_xored():
    source = _quantum([1, 1, 0, 1], streams=2)
    assert all(source.randbelow(16) == 0 for _ in range(5))


def test_quantum_amplification_keeps_width():
    bits = [1, 0, 1, 1, 0, 0, 1, 0]
    source = _quantum(bits, rounds=2)
    assert source.getrandbits(8) == bits_to_int(amplify_entropy(bits, 2))
    assert source.engine.runs == 1


def test_quantum_engine_end_to_end():
    source = QuantumRandomSource(QuantumSourceConfig(num_qubits=4, entropy_rounds=1, quantum_streams=2))
    assert source.engine.measurement_basis == ["Z", "X", "Z", "X"]
    values = [source.randbelow(10) for _ in range(10)]
    assert all(0 <= v < 10 for v in values)


def test_resolve_source():
    assert isinstance(resolve_source("system"), SystemRandomSource)
    seeded = resolve_source("seeded", seed=9)
    assert isinstance(seeded, SeededRandomSource)
    assert seeded.seed == 9
    with pytest.raises(InvalidArgument):
        resolve_source("dice")


def test_bit_helpers():
    assert bits_to_int([1, 0, 1]) == 5
    assert bits_to_bytes([1]) == b"\x80"
    assert bits_to_bytes([]) == b""
    assert xor_streams([[1, 0, 1], [1, 1, 0]]) == [0, 1, 1]
    with pytest.raises(ValueError):
        xor_streams([[1], [1, 0]])
    assert amplify_entropy([1, 0, 1], rounds=0) == [1, 0, 1]
    assert len(amplify_entropy([1, 0] * 10, rounds=2)) == 20
