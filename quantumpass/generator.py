"""
Generation pipeline: validate input, load config, fetch quantum bytes,
format the password.

Everything here is independent of the GUI so the whole flow can be driven
from tests or the command line.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Optional, Protocol

from .anu_client import QuantumNumbersClient
from .config import (
    DEFAULT_CONFIG_PATH,
    SOURCE_ANU,
    SOURCE_SIMULATOR,
    QuantumPassConfig,
    load_config,
)
from .errors import (
    ConfigError,
    InvalidLengthError,
    QuantumNumbersApiError,
    QuantumNumbersTransportError,
    QuantumPassError,
)
from .mapping import format_password

logger = logging.getLogger(__name__)

MIN_LENGTH = 0
MAX_LENGTH = 255

_INT_RE = re.compile(r"[+-]?[0-9]+")

INVALID_LENGTH_MESSAGE = (
    f"Invalid length. Please enter a number between {MIN_LENGTH} and {MAX_LENGTH}."
)
MISSING_KEY_MESSAGE = "Add API key to config.json"
FETCH_ERROR_PREFIX = "Error fetching quantum numbers: "


@dataclass(frozen=True)
class PasswordOptions:
    length: int
    start_uppercase: bool = False
    include_special: bool = False
    include_numbers: bool = False


@dataclass(frozen=True)
class FormState:
    """Raw values as read from the input surface."""

    length_text: str
    start_uppercase: bool = False
    include_special: bool = False
    include_numbers: bool = False


@dataclass
class GenerationOutcome:
    password: Optional[str] = None
    error: Optional[QuantumPassError] = None
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.error is None


class ByteSource(Protocol):
    def fetch(self, length: int) -> bytes: ...


class AnuByteSource:
    """Fetches bytes from the ANU quantum numbers API."""

    def __init__(
        self,
        config: QuantumPassConfig,
        client: Optional[QuantumNumbersClient] = None,
    ) -> None:
        if not config.api_key:
            raise ConfigError("config has no api_key")
        self.config = config
        self._client = client

    def fetch(self, length: int) -> bytes:
        cfg = self.config
        if self._client is not None:
            return self._client.get_quantum_numbers(
                length, cfg.data_type, cfg.block_size
            )
        with QuantumNumbersClient(
            cfg.api_key, base_url=cfg.base_url, timeout=cfg.timeout
        ) as client:
            return client.get_quantum_numbers(length, cfg.data_type, cfg.block_size)


class SimulatorByteSource:
    """Draws bytes from the local qiskit simulator."""

    def __init__(self, config: QuantumPassConfig) -> None:
        self.config = config

    def fetch(self, length: int) -> bytes:
        # Imported lazily: qiskit is slow to import and only this source needs it.
        from .quantum_engine import QuantumEngine

        return QuantumEngine(self.config).get_bytes(length)


def make_byte_source(config: QuantumPassConfig) -> ByteSource:
    if config.source == SOURCE_ANU:
        return AnuByteSource(config)
    if config.source == SOURCE_SIMULATOR:
        return SimulatorByteSource(config)
    raise ConfigError(f"Unknown byte source {config.source!r}")


def parse_length(text: str) -> int:
    """
    Parse the requested password length.

    Accepts an optional sign followed by ASCII digits, nothing else (no
    surrounding whitespace), and only values in 0..255.
    """
    if not _INT_RE.fullmatch(text):
        raise InvalidLengthError(f"not an integer: {text!r}")
    # Bound the digit count before int() so huge inputs fail as out of range.
    significant = text.lstrip("+-").lstrip("0")
    if len(significant) > len(str(MAX_LENGTH)):
        raise InvalidLengthError(
            f"length has {len(significant)} digits, outside {MIN_LENGTH}..{MAX_LENGTH}"
        )
    length = int(text)
    if not MIN_LENGTH <= length <= MAX_LENGTH:
        raise InvalidLengthError(f"length {length} outside {MIN_LENGTH}..{MAX_LENGTH}")
    return length


def generate_password(
    options: PasswordOptions,
    config: QuantumPassConfig,
    source: Optional[ByteSource] = None,
) -> str:
    """
    Fetch bytes for `options.length` characters and format them.

    A zero-length request returns "" without touching the byte source.
    """
    source = source or make_byte_source(config)
    if options.length == 0:
        return ""
    data = source.fetch(options.length)
    return format_password(
        data,
        options.start_uppercase,
        options.include_special,
        options.include_numbers,
        options.length,
    )


def user_message(error: QuantumPassError) -> str:
    """Text shown to the user in place of a password."""
    if isinstance(error, InvalidLengthError):
        return INVALID_LENGTH_MESSAGE
    if isinstance(error, ConfigError):
        return MISSING_KEY_MESSAGE
    if isinstance(error, QuantumNumbersApiError):
        return FETCH_ERROR_PREFIX + (error.body.strip() or f"HTTP {error.status_code}")
    if isinstance(error, QuantumNumbersTransportError):
        return FETCH_ERROR_PREFIX + "could not reach the quantum number service."
    return FETCH_ERROR_PREFIX + str(error)


class GeneratePasswordCommand:
    """
    One generate action: FormState in, GenerationOutcome out.

    The config file is re-read on every call so edits take effect without a
    restart. Errors from the taxonomy never escape; they come back as a
    failed outcome with a display message.
    """

    def __init__(
        self,
        config_path: str | Path = DEFAULT_CONFIG_PATH,
        source_factory: Callable[[QuantumPassConfig], ByteSource] = make_byte_source,
    ) -> None:
        self.config_path = Path(config_path)
        self.source_factory = source_factory

    def __call__(self, form: FormState) -> GenerationOutcome:
        try:
            options = PasswordOptions(
                length=parse_length(form.length_text),
                start_uppercase=form.start_uppercase,
                include_special=form.include_special,
                include_numbers=form.include_numbers,
            )
            config = load_config(self.config_path)
            source = self.source_factory(config)
            password = generate_password(options, config, source)
        except QuantumPassError as exc:
            logger.warning("Password generation failed: %s", exc)
            return GenerationOutcome(error=exc, message=user_message(exc))

        logger.debug("Generated password of length %d", len(password))
        return GenerationOutcome(password=password, message=password)


@dataclass
class AppContext:
    """
    Everything the presentation layer needs, built once at startup.
    """

    config_path: Path = DEFAULT_CONFIG_PATH
    icon_path: Path = Path("icon.ico")
    window_title: str = "quantumpass"
    link_text: str = "Magic Industries"
    link_url: str = "https://patreon.com/magicindustriessoftware"
    command: GeneratePasswordCommand = field(init=False)

    def __post_init__(self) -> None:
        self.config_path = Path(self.config_path)
        self.icon_path = Path(self.icon_path)
        self.command = GeneratePasswordCommand(self.config_path)


__all__ = [
    "AnuByteSource",
    "AppContext",
    "ByteSource",
    "FormState",
    "GeneratePasswordCommand",
    "GenerationOutcome",
    "PasswordOptions",
    "SimulatorByteSource",
    "generate_password",
    "make_byte_source",
    "parse_length",
    "user_message",
]
