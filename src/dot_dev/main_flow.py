from __future__ import annotations
import logging
import sys
from typing import List, Optional

from .args import parse_args
from .errors import DotDevError, ErrorKind
from .flows import add_profile, add_variable, list_profiles, list_variables
from .logging_utils import configure_logging, log_event
from .ui import err

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_INTERRUPTED = 130


def dispatch(args) -> int:
    """Run the command selected by ``args`` and return an exit code."""
    if args.command == "add":
        add_variable(args)
    elif args.command == "list":
        list_variables(args)
    elif args.command == "profile":
        if args.profile_command == "add":
            add_profile(args)
        elif args.profile_command == "list":
            list_profiles(args)
        else:
            print(args._usage(), end="")
    else:
        print(args._usage(), end="")
        return EXIT_FAILURE
    return EXIT_OK


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the CLI tool."""
    args = parse_args(argv)
    configure_logging(args.verbose, args.log_file, args.log_json, args.log_level)
    try:
        return dispatch(args)
    except DotDevError as e:
        log_event(
            "command_failed",
            logging.DEBUG,
            error_type=e.kind.value,
        )
        if e.kind is ErrorKind.INTERRUPTED:
            print("^C", file=sys.stderr)
            return EXIT_INTERRUPTED
        err(str(e))
        return EXIT_FAILURE


__all__ = ["main", "dispatch", "EXIT_OK", "EXIT_FAILURE", "EXIT_INTERRUPTED"]
