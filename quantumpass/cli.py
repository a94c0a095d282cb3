"""
Command-line interface: generate one password without opening a window.
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from .config import DEFAULT_CONFIG_PATH
from .generator import FormState, GeneratePasswordCommand
from .logs import configure_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="quantumpass-cli",
        description="Generate a password from quantum random numbers.",
    )
    parser.add_argument("--length", "-l", required=True, help="password length (0-255)")
    parser.add_argument("--upper", action="store_true", help="start with an uppercase letter")
    parser.add_argument("--special", action="store_true", help="include special characters")
    parser.add_argument("--numbers", action="store_true", help="include numbers")
    parser.add_argument(
        "--config",
        default=str(DEFAULT_CONFIG_PATH),
        help="path to config.json (default: %(default)s)",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="debug logging")
    return parser


def main(
    argv: Optional[Sequence[str]] = None,
    command: Optional[GeneratePasswordCommand] = None,
) -> int:
    """
    Entry point for `quantumpass-cli` or `python -m quantumpass.cli`.
    """
    args = build_parser().parse_args(argv)
    configure_logging(logging.DEBUG if args.verbose else logging.WARNING)

    command = command or GeneratePasswordCommand(args.config)
    outcome = command(
        FormState(
            length_text=args.length,
            start_uppercase=args.upper,
            include_special=args.special,
            include_numbers=args.numbers,
        )
    )
    if not outcome.ok:
        print(outcome.message, file=sys.stderr)
        return 1

    print(outcome.password)
    return 0


if __name__ == "__main__":
    sys.exit(main())
