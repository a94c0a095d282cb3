from __future__ import annotations

import pytest

pytest.importorskip("qiskit_aer")

from quantumpass.config import QuantumPassConfig
from quantumpass.errors import ConfigError
from quantumpass.quantum_engine import QuantumEngine, bits_to_bytes


def test_bits_to_bytes_msb_first():
    assert bits_to_bytes([0, 1, 1, 0, 0, 0, 1, 0]) == bytes([98])
    assert bits_to_bytes([1]) == bytes([128])
    assert bits_to_bytes([]) == b""


def test_get_bytes_length():
    engine = QuantumEngine(QuantumPassConfig(source="simulator", num_qubits=5))
    for length in (0, 1, 7, 32):
        assert len(engine.get_bytes(length)) == length


def test_invalid_qubit_count():
    # Bypasses model validation to reach the engine guard
    with pytest.raises(ConfigError):
        QuantumEngine(QuantumPassConfig.model_construct(num_qubits=0))
