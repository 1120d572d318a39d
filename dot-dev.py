#!/usr/bin/env python3
"""Launcher for running dot-dev straight from a source checkout.

Prefers an installed ``dot_dev`` package; otherwise adds ``./src`` to
``sys.path`` and imports from there. Re-exports the CLI facade so scripts
and tests can import this file directly.
"""

import importlib
import sys
from pathlib import Path


def _load_cli():
    """Import ``dot_dev.cli``, falling back to the local ``./src`` tree."""
    try:
        return importlib.import_module("dot_dev.cli")
    except ImportError:
        pass

    src = Path(__file__).resolve().parent / "src"
    if src.exists() and str(src) not in sys.path:
        sys.path.insert(0, str(src))
    return importlib.import_module("dot_dev.cli")


_cli = _load_cli()

parse_args = _cli.parse_args
merge = _cli.merge
prompt_choice = _cli.prompt_choice
prompt_yes_no = _cli.prompt_yes_no
prompt_required = _cli.prompt_required
prompt_optional = _cli.prompt_optional
load_config = _cli.load_config
save_config = _cli.save_config
Config = _cli.Config
Profile = _cli.Profile
EnvironmentVariable = _cli.EnvironmentVariable
Interrupted = _cli.Interrupted
main = _cli.main

__all__ = [
    "parse_args",
    "merge",
    "prompt_choice",
    "prompt_yes_no",
    "prompt_required",
    "prompt_optional",
    "load_config",
    "save_config",
    "Config",
    "Profile",
    "EnvironmentVariable",
    "Interrupted",
    "main",
]


if __name__ == "__main__":
    sys.exit(main())
