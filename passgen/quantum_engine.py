"""
Quantum engine: prepares qubits in superposition, measures them in
alternating bases and returns the raw outcome bits.
"""

from __future__ import annotations

import logging

from qiskit import QuantumCircuit, transpile
from qiskit_aer import AerSimulator

from .config import DEFAULT_QUANTUM_CONFIG, QuantumSourceConfig
from .errors import InvalidArgument

logger = logging.getLogger(__name__)


class QuantumEngine:
    """
    Runs one measurement circuit per call on the local Aer simulator.
    """

    def __init__(self, config: QuantumSourceConfig | None = None) -> None:
        self.config = config or DEFAULT_QUANTUM_CONFIG
        self.backend = AerSimulator()

        if self.config.num_qubits < 1:
            raise InvalidArgument(
                f"num_qubits must be positive, got {self.config.num_qubits}."
            )

        max_qubits = getattr(self.backend.configuration(), "num_qubits", None)
        if max_qubits is not None and self.config.num_qubits > max_qubits:
            raise InvalidArgument(
                f"Configured num_qubits={self.config.num_qubits} exceeds "
                f"backend limit ({max_qubits})."
            )

        self._circuit, self.measurement_basis = self._build_circuit()
        self._compiled = transpile(self._circuit, self.backend)

    def _build_circuit(self) -> tuple[QuantumCircuit, list[str]]:
        """
        H on every qubit, then measure even qubits in the Z basis and odd
        qubits in the X basis (extra H before measurement).
        """
        n = self.config.num_qubits
        qc = QuantumCircuit(n, n)
        basis: list[str] = []

        for i in range(n):
            qc.h(i)

        for i in range(n):
            if i % 2:
                qc.h(i)
                basis.append("X")
            else:
                basis.append("Z")
            qc.measure(i, i)

        return qc, basis

    def measure(self) -> list[int]:
        """
        Run the circuit with a single shot and return one bit per qubit.
        """
        counts = self.backend.run(self._compiled, shots=1).result().get_counts()
        bitstring = next(iter(counts))

        # Qiskit orders bits as [q_(n-1) ... q_0]; reverse so index 0 is the first qubit.
        bits = [int(b) for b in reversed(bitstring)]
        logger.debug("Measured %d qubits", len(bits))
        return bits
