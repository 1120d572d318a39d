"""Merge a candidate variable into a profile, asking before replacing.

Collision detection only looks at top-level ``Variable`` definitions; a
variable of the same name inside a ``Group`` is not a conflict. On replace,
every matching ``Variable`` entry is dropped and the candidate is appended
at the end. Nothing is written to disk here.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional

from .logging_utils import log_event
from .models import EnvironmentVariable, Profile, Variable
from .prompts import prompt_yes_no

logger = logging.getLogger(__name__)

Confirm = Callable[[str], bool]


def replace_question(name: str) -> str:
    return f"{name} is already defined, replace it? "


def merge(
    profile: Profile,
    candidate: EnvironmentVariable,
    confirm: Optional[Confirm] = None,
) -> Profile:
    """Return ``profile`` with ``candidate`` merged in.

    ``confirm`` is asked the replace question on a name collision and defaults
    to :func:`~dot_dev.prompts.prompt_yes_no`. An ``Interrupted`` raised by it
    propagates unchanged.
    """
    logger.debug("Original profile %r", profile)
    if not profile.variables_named(candidate.name):
        merged = profile.with_definition(Variable(candidate))
        log_event(
            "variable_added",
            logging.DEBUG,
            profile=profile.name,
            variable=candidate.name,
        )
        logger.debug("Profile after adding %r", merged)
        return merged

    ask = confirm or prompt_yes_no
    if not ask(replace_question(candidate.name)):
        log_event(
            "variable_kept",
            logging.DEBUG,
            profile=profile.name,
            variable=candidate.name,
        )
        return profile

    merged = profile.without_variable(candidate.name).with_definition(
        Variable(candidate)
    )
    log_event(
        "variable_replaced",
        logging.DEBUG,
        profile=profile.name,
        variable=candidate.name,
    )
    logger.debug("Profile after replacing %r", merged)
    return merged


__all__ = ["merge", "replace_question"]
