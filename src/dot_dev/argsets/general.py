"""Argument definitions: general logging flags shared by every command."""

from __future__ import annotations

import argparse


def add_general_args(p: argparse.ArgumentParser) -> None:
    """Attach verbosity and logging arguments to the parser."""
    general = p.add_argument_group("General")
    general.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )
    general.add_argument(
        "--log-level",
        choices=["debug", "info", "warning", "error"],
        help="Explicit log level (overrides --verbose)",
    )
    general.add_argument("--log-file", help="Also write logs to this file")
    general.add_argument(
        "--log-json", action="store_true", help="Also emit JSON log lines to stdout"
    )


def add_file_arg(p: argparse.ArgumentParser) -> None:
    p.add_argument(
        "-f",
        "--file",
        required=True,
        help="Path to the JSON config file holding profiles",
    )


__all__ = ["add_general_args", "add_file_arg"]
