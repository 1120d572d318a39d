"""CLI facade for dot-dev.

Collects the public building blocks (parsing, prompts, merge, store, UI) in
one namespace for scripts and the root launcher.
"""

from .args import parse_args, build_parser
from .errors import (
    DotDevError,
    ErrorKind,
    Interrupted,
    StorageError,
    TerminalIOError,
    ValidationError,
)
from .logging_utils import configure_logging, log_event
from .main_flow import main, dispatch
from .merge import merge
from .models import Config, EnvironmentVariable, Group, Profile, Variable
from .prompts import prompt_choice, prompt_optional, prompt_required, prompt_yes_no
from .store import load_config, save_config
from .terminal import Key, TerminalSession
from .ui import c, err, info, ok, supports_color

__all__ = [
    "parse_args",
    "build_parser",
    "DotDevError",
    "ErrorKind",
    "Interrupted",
    "StorageError",
    "TerminalIOError",
    "ValidationError",
    "configure_logging",
    "log_event",
    "main",
    "dispatch",
    "merge",
    "Config",
    "EnvironmentVariable",
    "Group",
    "Profile",
    "Variable",
    "prompt_choice",
    "prompt_optional",
    "prompt_required",
    "prompt_yes_no",
    "load_config",
    "save_config",
    "Key",
    "TerminalSession",
    "c",
    "err",
    "info",
    "ok",
    "supports_color",
]
