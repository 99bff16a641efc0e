#!/usr/bin/env python3
"""
Outcome Aggregation

Collects the result of every processed path, in the order the paths were
given, and derives the run summary and the process exit code from them.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from removal_errors import ErrorKind

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2

SKIP_REASON_INPUT_CLOSED = "Input closed"
SKIP_REASON_CANCELLED = "Cancelled: input closed"


class Result(Enum):
    """What happened to one path"""

    REMOVED = "removed"
    WOULD_REMOVE = "would_remove"
    SKIPPED = "skipped"
    FAILED = "failed"


class Action(Enum):
    """Action attempted for one path"""

    REMOVE = "remove"
    TRASH = "trash"
    NONE = "none"


@dataclass(frozen=True)
class Outcome:
    """Result recorded for one target"""

    path: str
    action_taken: Action
    result: Result
    error: Optional[ErrorKind] = None
    reason: str = ""  # skip reason, error tip, or note on a fallback

    @classmethod
    def failed(cls, path: str, error: ErrorKind, tip: str = "", action: Action = Action.NONE) -> "Outcome":
        return cls(path, action, Result.FAILED, error=error, reason=tip)

    @classmethod
    def skipped(cls, path: str, reason: str) -> "Outcome":
        return cls(path, Action.NONE, Result.SKIPPED, reason=reason)


@dataclass(frozen=True)
class Summary:
    """Read-only totals over all outcomes of a run"""

    removed: int = 0
    would_remove: int = 0
    skipped: int = 0
    failed: int = 0
    cancelled: bool = False

    @property
    def total(self) -> int:
        return self.removed + self.would_remove + self.skipped + self.failed

    @property
    def had_errors(self) -> bool:
        return self.failed > 0

    @property
    def exit_code(self) -> int:
        return EXIT_FAILURE if self.had_errors else EXIT_OK


class OutcomeAggregator:
    """Owns the ordered list of outcomes for one run"""

    def __init__(self):
        self._outcomes: list[Outcome] = []

    def record(self, outcome: Outcome):
        """Append an outcome; outcomes are never reordered or replaced"""
        self._outcomes.append(outcome)

    @property
    def outcomes(self) -> tuple[Outcome, ...]:
        return tuple(self._outcomes)

    def summary(self) -> Summary:
        counts = {result: 0 for result in Result}
        for outcome in self._outcomes:
            counts[outcome.result] += 1

        return Summary(
            removed=counts[Result.REMOVED],
            would_remove=counts[Result.WOULD_REMOVE],
            skipped=counts[Result.SKIPPED],
            failed=counts[Result.FAILED],
            cancelled=any(
                o.reason in (SKIP_REASON_INPUT_CLOSED, SKIP_REASON_CANCELLED) for o in self._outcomes
            ),
        )
