"""Aggregated CLI argument groups (argsets).

Small helpers that attach related arguments or subcommands to a parser,
keeping ``args.py`` minimal.

Public helpers:
  - add_general_args(parser)
  - add_file_arg(parser)
  - add_variable_commands(subparsers)
  - add_profile_commands(subparsers)
"""

from __future__ import annotations

from .general import add_general_args, add_file_arg
from .variables import add_variable_commands
from .profiles import add_profile_commands

__all__ = [
    "add_general_args",
    "add_file_arg",
    "add_variable_commands",
    "add_profile_commands",
]
