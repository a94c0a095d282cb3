"""
quantumpass: passwords from quantum random numbers.
"""

from .config import QuantumPassConfig, DEFAULT_CONFIG, load_config
from .errors import QuantumPassError
from .generator import (
    AppContext,
    FormState,
    GeneratePasswordCommand,
    GenerationOutcome,
    PasswordOptions,
    generate_password,
)
from .mapping import format_password

__all__ = [
    "AppContext",
    "DEFAULT_CONFIG",
    "FormState",
    "GeneratePasswordCommand",
    "GenerationOutcome",
    "PasswordOptions",
    "QuantumPassConfig",
    "QuantumPassError",
    "format_password",
    "generate_password",
    "load_config",
]
