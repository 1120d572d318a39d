"""Flows for the ``add`` and ``list`` commands.

``add_variable`` turns parsed arguments into a candidate variable (prompting
for anything left out), merges it into the selected profile and saves the
whole config. Nothing is written unless every prompt completes.
"""

from __future__ import annotations

import argparse
import logging
from functools import partial
from typing import Optional

from ..logging_utils import log_event
from ..merge import merge
from ..models import EnvironmentVariable, Group, Profile, Variable
from ..prompts import prompt_optional, prompt_required, prompt_yes_no
from ..store import load_config, save_config
from ..terminal import TerminalSession
from ..ui import c, BOLD, GRAY, ok

logger = logging.getLogger(__name__)


def _given_or_prompted(
    value: Optional[str], label: str, session: Optional[TerminalSession]
) -> Optional[str]:
    if value is None:
        return prompt_optional(label, session)
    return value or None


def build_candidate(
    args: argparse.Namespace, session: Optional[TerminalSession] = None
) -> EnvironmentVariable:
    """Resolve the variable described by ``args``, prompting for gaps."""
    name = args.name or prompt_required("Variable name: ", session)
    description = _given_or_prompted(args.description, "Description: ", session)
    default_value = _given_or_prompted(
        args.default_value, "Default value: ", session
    )
    return EnvironmentVariable(
        name=name,
        description=description,
        required=bool(args.required),
        default_value=default_value,
    )


def add_variable(
    args: argparse.Namespace, session: Optional[TerminalSession] = None
) -> None:
    candidate = build_candidate(args, session)
    config = load_config(args.file)
    profile = config.require_profile(args.profile, args.file)

    updated = merge(profile, candidate, partial(prompt_yes_no, session=session))
    if updated is profile:
        logger.debug("Profile %s unchanged; nothing to save", profile.name)
        return

    if args.profile is None:
        config = config.update_default_profile(updated)
    else:
        config = config.upsert_profile(updated)
    save_config(config, args.file)
    log_event("config_saved", path=str(args.file), profile=updated.name)
    ok(f"Saved {candidate.name} to profile {updated.name}.")


def _describe(var: EnvironmentVariable) -> str:
    flags = "required" if var.required else "optional"
    parts = [f"{var.name} ({flags})"]
    if var.default_value is not None:
        parts.append(f"= {var.default_value}")
    line = " ".join(parts)
    if var.description:
        line += c(f"  – {var.description}", GRAY)
    return line


def format_profile(profile: Profile) -> str:
    lines = [c(f"Profile {profile.name}:", BOLD)]
    if profile.description:
        lines.append(c(f"  {profile.description}", GRAY))
    if not profile.definitions:
        lines.append("  (no variables)")
    for d in profile.definitions:
        if isinstance(d, Variable):
            lines.append(f"  {_describe(d.variable)}")
        elif isinstance(d, Group):
            lines.append(f"  [{d.name}]")
            lines.extend(f"    {_describe(m)}" for m in d.members)
    return "\n".join(lines)


def list_variables(args: argparse.Namespace) -> None:
    config = load_config(args.file)
    profile = config.require_profile(args.profile, args.file)
    print(format_profile(profile))


__all__ = ["build_candidate", "add_variable", "format_profile", "list_variables"]
