"""Command flows used by :mod:`dot_dev.main_flow`.

Each flow takes the parsed arguments (and optionally a terminal session for
prompting), performs one command end to end and raises
:class:`~dot_dev.errors.DotDevError` subclasses on failure.
"""

from __future__ import annotations

from .variables import add_variable, list_variables, build_candidate, format_profile
from .profiles import add_profile, list_profiles

__all__ = [
    "add_variable",
    "list_variables",
    "build_candidate",
    "format_profile",
    "add_profile",
    "list_profiles",
]
