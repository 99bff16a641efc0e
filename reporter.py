#!/usr/bin/env python3
"""
Reporter

Streams one line per processed path and the final summary line. The message
wording is a contract that scripts may depend on; only the styling is left to
the console.
"""

from auxiliary import printable_path
from console_ui import ConsoleUI
from outcomes import Action, Outcome, Result, Summary
from removal_options import Mode

DRY_RUN_HINT = "(use '--force' to remove)"
CANCELLED_NOTE = "Run cancelled: input closed before all paths were processed"


def describe(outcome: Outcome) -> list[tuple[str, str]]:
    """Return the (content, style) parts of the line for one outcome"""
    path = (printable_path(outcome.path), "bold")

    if outcome.result is Result.REMOVED:
        if outcome.action_taken is Action.TRASH:
            return [("Moved ", ""), path, (" to trash", "")]
        note = f" ({outcome.reason})" if outcome.reason else ""
        return [("Removed ", ""), path, (note, "italic")]

    if outcome.result is Result.WOULD_REMOVE:
        if outcome.action_taken is Action.TRASH:
            return [("Would move ", ""), path, (" to trash", "")]
        return [("Would remove ", ""), path]

    if outcome.result is Result.SKIPPED:
        return [("Skipped ", ""), path, (f": {outcome.reason}", "")]

    message = outcome.error.value if outcome.error else "Unknown error"
    tip = f" ({outcome.reason})" if outcome.reason else ""
    return [path, (f": {message}", ""), (tip, "italic")]


def summary_line(summary: Summary, dry_run: bool) -> str:
    if dry_run:
        return f"{summary.would_remove} would be removed {DRY_RUN_HINT}, {summary.failed} errors occurred"
    return f"{summary.removed} removed, {summary.failed} errors occurred"


class Reporter:
    """Writes outcome lines as they become known"""

    def __init__(self, ui: ConsoleUI, mode: Mode):
        self.ui = ui
        self.mode = mode

    def report(self, outcome: Outcome):
        """Emit the line for one outcome; failures are written even when quiet"""
        line = self.ui.styled(*describe(outcome))

        if outcome.result is Result.FAILED:
            self.ui.print_error(line)
            return
        if self.mode.quiet:
            return

        if outcome.result is Result.SKIPPED:
            self.ui.print_skipped(line)
        elif outcome.result is Result.REMOVED:
            self.ui.print_success(line)
        else:
            self.ui.print_plain(line)

    def finish(self, summary: Summary):
        """Emit the summary line, regardless of quiet mode, and flag an incomplete run"""
        self.ui.print_plain(self.ui.styled((summary_line(summary, self.mode.dry_run), "")))
        if summary.cancelled:
            self.ui.print_error(self.ui.styled((CANCELLED_NOTE, "")))
