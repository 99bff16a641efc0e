#!/usr/bin/env python3
"""
Disposal Module

Decides what to do with one classified target and carries that decision out:
permanent removal, moving to the trash, or a preview that never touches the
filesystem. Per-path failures come back as FAILED outcomes instead of being
raised, so one bad path never stops the run.
"""

import logging
import os
import shutil
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from auxiliary import is_current_or_parent_dir, is_filesystem_root
from outcomes import Action, Outcome, Result
from path_classifier import Kind, Target
from removal_errors import ErrorKind, TrashError
from removal_options import Mode
from trash_service import TrashService

logger = logging.getLogger(__name__)

TIP_NOT_FOUND = "use '--blind' to ignore"
TIP_DIR_NOT_EMPTY = "use '--recursive' to remove"
TIP_ROOT = "use '--no-preserve-root' to remove"
SKIP_REASON_NOT_FOUND = "Not found"
NOTE_TRASH_FALLBACK = "trash unavailable, removed permanently"


class DecisionType(Enum):
    """Action resolved for one target"""

    REMOVE = "remove"
    MOVE_TO_TRASH = "move_to_trash"
    SKIP_NOOP = "skip_noop"
    ASK_USER = "ask_user"
    REJECT = "reject"


@dataclass(frozen=True)
class Decision:
    """Resolved decision, with the reason for a skip or the error of a rejection"""

    type: DecisionType
    error: Optional[ErrorKind] = None
    reason: str = ""

    @classmethod
    def reject(cls, error: ErrorKind, tip: str = "") -> "Decision":
        return cls(DecisionType.REJECT, error=error, reason=tip)

    @classmethod
    def skip(cls, reason: str) -> "Decision":
        return cls(DecisionType.SKIP_NOOP, reason=reason)


def disposal_for(mode: Mode) -> Decision:
    """Decision used once a target is cleared for disposal"""
    return Decision(DecisionType.MOVE_TO_TRASH if mode.trash else DecisionType.REMOVE)


def decide(mode: Mode, target: Target) -> Decision:
    """Resolve exactly one decision for *target*; pure, no filesystem access"""
    if target.error is not None:
        return Decision.reject(target.error)
    if is_current_or_parent_dir(target.path):
        return Decision.reject(ErrorKind.REFUSED)
    if mode.preserve_root and is_filesystem_root(target.path):
        return Decision.reject(ErrorKind.REFUSED, TIP_ROOT)

    if target.kind is Kind.MISSING:
        if mode.blind:
            return Decision.skip(SKIP_REASON_NOT_FOUND)
        return Decision.reject(ErrorKind.NOT_FOUND, TIP_NOT_FOUND)

    if target.is_dir and not target.empty and not mode.recursive:
        return Decision.reject(ErrorKind.DIRECTORY_NOT_EMPTY, TIP_DIR_NOT_EMPTY)

    if mode.interactive:
        return Decision(DecisionType.ASK_USER)
    return disposal_for(mode)


class DisposalExecutor:
    """Executes decisions for targets, one attempt per target"""

    def __init__(self, mode: Mode, trash: Optional[TrashService] = None):
        self.mode = mode
        self.trash = trash

    def execute(self, target: Target, decision: Decision) -> Outcome:
        """Execute *decision* for *target* and return its outcome"""
        if decision.type is DecisionType.REJECT:
            return Outcome.failed(target.path, decision.error, decision.reason)
        if decision.type is DecisionType.SKIP_NOOP:
            logger.debug("skipped %s: %s", target.path, decision.reason)
            return Outcome.skipped(target.path, decision.reason)
        if decision.type is DecisionType.ASK_USER:
            raise ValueError(f"{target.path} must be confirmed before it is executed")

        action = Action.TRASH if decision.type is DecisionType.MOVE_TO_TRASH else Action.REMOVE
        if self.mode.dry_run:
            return self._preview(target, action)
        if action is Action.TRASH:
            return self._dispose(target)
        return self._remove(target)

    def _preview(self, target: Target, action: Action) -> Outcome:
        """Report what would happen; never mutates the filesystem"""
        parent = os.path.dirname(os.path.abspath(target.path))
        if not os.access(parent, os.W_OK | os.X_OK):
            return Outcome.failed(target.path, ErrorKind.PERMISSION_DENIED, action=action)
        return Outcome(target.path, action, Result.WOULD_REMOVE)

    def _remove(self, target: Target, note: str = "") -> Outcome:
        logger.debug("remove %s", target.path)
        try:
            if target.is_dir and not target.empty:
                # One action for the whole tree, descendants are not reported
                shutil.rmtree(target.path)
            elif target.is_dir:
                os.rmdir(target.path)
            else:
                os.unlink(target.path)
        except OSError as e:
            logger.debug("failed to remove %s: %s", target.path, e)
            return Outcome.failed(target.path, ErrorKind.from_os_error(e), action=Action.REMOVE)

        return Outcome(target.path, Action.REMOVE, Result.REMOVED, reason=note)

    def _dispose(self, target: Target) -> Outcome:
        logger.debug("dispose of %s", target.path)
        try:
            if self.trash is None:
                raise TrashError(None, "No trash service available", target.path)
            self.trash.dispose(target.path)
        except TrashError as e:
            logger.debug("trash failed for %s: %s", target.path, e)
            if self.mode.blind:
                return self._remove(target, note=NOTE_TRASH_FALLBACK)
            return Outcome.failed(target.path, ErrorKind.TRASH_UNAVAILABLE, action=Action.TRASH)

        return Outcome(target.path, Action.TRASH, Result.REMOVED)
