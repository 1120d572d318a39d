"""Argument parsing.

Builds the ``dot-dev`` parser from the argsets helpers. Values the user leaves
out remain ``None`` so flows can prompt for them interactively.
"""

from __future__ import annotations
import argparse
import sys
from typing import List, Optional

from .argsets import add_general_args, add_variable_commands, add_profile_commands


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="dot-dev",
        description="Manage profiles of environment variable definitions.",
    )
    add_general_args(p)
    p.set_defaults(command=None)
    sub = p.add_subparsers(title="commands")
    add_variable_commands(sub)
    add_profile_commands(sub)
    return p


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments (defaults to ``sys.argv[1:]``).

    The returned Namespace carries ``_usage``, a callable producing the usage
    text of the innermost parser that was selected.
    """
    p = build_parser()
    if argv is None:
        argv = sys.argv[1:]
    ns = p.parse_args(argv)
    if not hasattr(ns, "_usage"):
        ns._usage = p.format_usage
    return ns


__all__ = ["build_parser", "parse_args"]
