"""Prompt helpers (facade).

Re-exports the text and choice prompts so callers can import from
``dot_dev.prompts`` directly. Implementations live in the sibling modules.
"""

from __future__ import annotations

from .text import prompt_required, prompt_optional
from .choice import (
    ChoiceState,
    Outcome,
    step,
    prompt_choice,
    prompt_yes_no,
)

__all__ = [
    "prompt_required",
    "prompt_optional",
    "ChoiceState",
    "Outcome",
    "step",
    "prompt_choice",
    "prompt_yes_no",
]
