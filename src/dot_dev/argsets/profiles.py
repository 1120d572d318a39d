"""Argument definitions: ``profile add`` and ``profile list``."""

from __future__ import annotations

from .general import add_file_arg


def add_profile_commands(sub) -> None:
    """Register the ``profile`` command group on ``sub``."""
    profile = sub.add_parser(
        "profile",
        help="Commands for working with profiles. A profile is a named "
        "collection of environment variables.",
    )
    profile.set_defaults(command="profile", profile_command=None)
    profile.set_defaults(_usage=profile.format_usage)
    psub = profile.add_subparsers(title="profile commands")

    add = psub.add_parser("add", help="Add a new, empty profile")
    add.add_argument("-n", "--name", help="Name of the profile to add.")
    add.add_argument("--description", help="Optional profile description.")
    add_file_arg(add)
    add.set_defaults(profile_command="add")

    lst = psub.add_parser("list", help="List profile names")
    add_file_arg(lst)
    lst.set_defaults(profile_command="list")


__all__ = ["add_profile_commands"]
