"""Flows for ``profile add`` and ``profile list``."""

from __future__ import annotations

import argparse
from typing import Optional

from ..logging_utils import log_event
from ..models import Profile
from ..prompts import prompt_required
from ..store import load_config, save_config
from ..terminal import TerminalSession
from ..ui import info, ok


def add_profile(
    args: argparse.Namespace, session: Optional[TerminalSession] = None
) -> None:
    """Create an empty profile; an existing name is reported and left alone."""
    name = args.name or prompt_required("Profile name: ", session)
    config = load_config(args.file)
    if config.has_profile(name):
        info(f'Profile, "{name}", already exists.')
        return
    config = config.add_profile(
        Profile(name=name, description=getattr(args, "description", None) or None)
    )
    save_config(config, args.file)
    log_event("profile_added", path=str(args.file), profile=name)
    ok(f'Added profile "{name}".')


def list_profiles(args: argparse.Namespace) -> None:
    config = load_config(args.file)
    print(f"Profiles: {', '.join(config.profile_names())}")


__all__ = ["add_profile", "list_profiles"]
