#!/usr/bin/env python3
"""
Confirmation Engine

Runs the per-path yes/no conversation of interactive mode. Each target is
prompted at most once: the prompt is written to standard error and one line
is read back from the input stream.
"""

import logging
from enum import Enum
from typing import Optional, TextIO

from auxiliary import printable_path
from console_ui import ConsoleUI
from path_classifier import Target
from removal_errors import InputClosed

logger = logging.getLogger(__name__)

SKIP_REASON_ANSWER_NO = "Kept by user"
SKIP_REASON_ANSWER_UNKNOWN = "Unrecognized input"
SKIP_REASON_IO_ERROR = "I/O error"

_YES = ("", "y", "yes")
_NO = ("n", "no")


class State(Enum):
    PENDING = "pending"
    PROMPTED = "prompted"
    DECIDED = "decided"


class Confirmation:
    """Confirmation state for one target: PENDING -> PROMPTED -> DECIDED"""

    def __init__(self, target: Target):
        self.target = target
        self.state = State.PENDING
        self.accepted: Optional[bool] = None
        self.reason = ""

    @property
    def prompt_text(self) -> str:
        return f"Remove {self.target.description} {printable_path(self.target.path)}? [Y/n] "

    def decide(self, answer: str):
        """Interpret an answer line; an empty answer takes the default (yes)"""
        answer = answer.strip().lower()
        self.state = State.DECIDED
        self.accepted = answer in _YES
        if not self.accepted:
            self.reason = SKIP_REASON_ANSWER_NO if answer in _NO else SKIP_REASON_ANSWER_UNKNOWN


class ConfirmationEngine:
    """Asks the user about targets, one line of input per target"""

    def __init__(self, ui: ConsoleUI, stream: Optional[TextIO] = None):
        self.ui = ui
        self.stream = stream

    def confirm(self, target: Target) -> Confirmation:
        """Prompt for *target* and return the decided confirmation

        Raises:
            InputClosed: if the input stream reached end-of-file before an answer
        """
        confirmation = Confirmation(target)
        confirmation.state = State.PROMPTED
        try:
            line = self.ui.ask(confirmation.prompt_text, stream=self.stream)
        except OSError as e:
            logger.debug("could not read answer for %s: %s", target.path, e)
            confirmation.state = State.DECIDED
            confirmation.accepted = False
            confirmation.reason = SKIP_REASON_IO_ERROR
            return confirmation

        # readline() returns "" only at end-of-file, an empty answer is "\n"
        if not line:
            raise InputClosed(f"input closed while asking about {target.path}")

        confirmation.decide(line)
        logger.debug("answer for %s: %s", target.path, "yes" if confirmation.accepted else "no")
        return confirmation
