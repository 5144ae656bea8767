"""
Bit-level helpers for the quantum randomness source.

Raw measurement bits are combined across streams, mixed with SHA-256 and
consumed a few bits at a time to form uniform integers.
"""

from __future__ import annotations

import hashlib
from typing import List


def bits_to_bytes(bits: List[int]) -> bytes:
    """
    Pack bits (MSB first) into bytes, zero-padding the final byte.
    """
    if not bits:
        return b""

    padded = bits + [0] * ((8 - len(bits) % 8) % 8)
    return bytes(bits_to_int(padded[i : i + 8]) for i in range(0, len(padded), 8))


def bytes_to_bits(data: bytes) -> List[int]:
    out_bits: List[int] = []
    for byte in data:
        out_bits.extend((byte >> shift) & 1 for shift in range(7, -1, -1))
    return out_bits


def bits_to_int(bits: List[int]) -> int:
    value = 0
    for bit in bits:
        value = (value << 1) | bit
    return value


def xor_streams(streams: List[List[int]]) -> List[int]:
    """
    XOR several equally long bitstreams into one.
    """
    if not streams:
        return []

    combined = streams[0][:]
    for stream in streams[1:]:
        if len(stream) != len(combined):
            raise ValueError(
                f"Cannot combine bitstreams of different lengths "
                f"({len(stream)} != {len(combined)})."
            )
        combined = [a ^ b for a, b in zip(combined, stream)]
    return combined


def amplify_entropy(bits: List[int], rounds: int = 1) -> List[int]:
    """
    Mix bits through `rounds` of SHA-256.

    The output keeps the input length (at most 256 bits), so mixing never
    claims more entropy than was measured.
    """
    if rounds <= 0 or not bits:
        return bits

    data = bits_to_bytes(bits)
    for _ in range(rounds):
        data = hashlib.sha256(data).digest()

    return bytes_to_bits(data)[: min(len(bits), 256)]
