"""Argument definitions: ``add`` and ``list`` for environment variables.

Options left out on the command line stay ``None`` so the flow can prompt for
them; an explicitly empty value (``-d ""``) means "no value" and skips the
prompt.
"""

from __future__ import annotations

from .general import add_file_arg


def add_variable_commands(sub) -> None:
    """Register the ``add`` and ``list`` subcommands on ``sub``."""
    add = sub.add_parser("add", help="Add a new environment variable")
    add.add_argument(
        "-n",
        "--name",
        help="Name for new environment variable, usually all upper case.",
    )
    add.add_argument("-d", "--description", help="Optional description.")
    add.add_argument(
        "-D",
        "--default-value",
        dest="default_value",
        help="What default value to present for this variable when generating the dot file.",
    )
    req = add.add_mutually_exclusive_group()
    req.add_argument(
        "-r",
        "--required",
        dest="required",
        action="store_true",
        help="Mark the variable as required",
    )
    req.add_argument(
        "-o",
        "--optional",
        dest="required",
        action="store_false",
        help="Mark the variable as optional (default)",
    )
    add.set_defaults(required=False)
    add.add_argument("-p", "--profile", help="Profile name (default profile if omitted)")
    add_file_arg(add)
    add.set_defaults(command="add")

    lst = sub.add_parser("list", help="List the variables defined in a profile")
    lst.add_argument("-p", "--profile", help="Profile name (default profile if omitted)")
    add_file_arg(lst)
    lst.set_defaults(command="list")


__all__ = ["add_variable_commands"]
