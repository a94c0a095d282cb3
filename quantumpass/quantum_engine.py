"""
Quantum engine: builds a circuit, puts qubits in superposition,
measures them in alternating bases, and packs the outcomes into bytes.

Used as an offline byte source when no API key is at hand.
"""
from __future__ import annotations

import logging

from qiskit import QuantumCircuit, transpile
from qiskit_aer import AerSimulator

from .config import QuantumPassConfig, DEFAULT_CONFIG
from .errors import ConfigError

logger = logging.getLogger(__name__)


def bits_to_bytes(bits: list[int]) -> bytes:
    """
    Pack a list of bits [0,1,1,0,...] into bytes, MSB first.
    A trailing partial byte is padded with zeros.
    """
    if not bits:
        return b""

    pad_len = (8 - (len(bits) % 8)) % 8
    bits_padded = bits + [0] * pad_len

    byte_values = []
    for i in range(0, len(bits_padded), 8):
        byte = 0
        for bit in bits_padded[i : i + 8]:
            byte = (byte << 1) | bit
        byte_values.append(byte)

    return bytes(byte_values)


class QuantumEngine:
    """
    Encapsulates all quantum-circuit-related logic.
    """

    def __init__(self, config: QuantumPassConfig | None = None) -> None:
        self.config = config or DEFAULT_CONFIG
        self.backend = AerSimulator()

        if self.config.num_qubits < 1:
            raise ConfigError("num_qubits must be at least 1")

        # Safety: ensure requested num_qubits does not exceed backend capability.
        configuration = getattr(self.backend, "configuration", None)
        backend_cfg = configuration() if configuration else None
        max_qubits = getattr(backend_cfg, "n_qubits", None) or getattr(
            backend_cfg, "num_qubits", None
        )

        if max_qubits is not None and self.config.num_qubits > max_qubits:
            raise ConfigError(
                f"Configured num_qubits={self.config.num_qubits} exceeds "
                f"backend limit ({max_qubits}). "
                "Lower num_qubits in config.json."
            )

    def _build_circuit(self) -> QuantumCircuit:
        """
        Prepare N qubits, put them in superposition, then measure
        in alternating bases (Z, X, Z, X, …).
        """
        n = self.config.num_qubits
        qc = QuantumCircuit(n, n)

        for i in range(n):
            qc.h(i)

        # Odd indices get a second H, i.e. an X-basis measurement.
        for i in range(n):
            if i % 2 == 1:
                qc.h(i)
            qc.measure(i, i)

        return qc

    def get_raw_bits(self, count: int) -> list[int]:
        """
        Run as many shots as needed and return `count` bits.
        """
        if count <= 0:
            return []

        n = self.config.num_qubits
        shots = -(-count // n)

        tqc = transpile(self._build_circuit(), self.backend)
        result = self.backend.run(tqc, shots=shots, memory=True).result()

        bits: list[int] = []
        for bitstring in result.get_memory():
            # Qiskit orders bits as [q_(n-1) ... q_0]; reverse so index 0 is first qubit.
            bits.extend(int(b) for b in bitstring[::-1])

        logger.debug("Collected %d bits from %d shots", len(bits), shots)
        return bits[:count]

    def get_bytes(self, length: int) -> bytes:
        return bits_to_bytes(self.get_raw_bits(length * 8))
