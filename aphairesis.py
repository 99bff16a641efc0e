#!/usr/bin/env python3
"""
Aphairesis: Ancient Greek ἀφαίρεσις (taking away, removal)

A safer rm(1). Nothing is removed unless --force or --interactive is given;
without either, every path is previewed. Directories with content need
--recursive, and --trash moves entries to the platform trash instead of
removing them.

Usage:
    aphairesis <path>...               # Preview what would be removed
    aphairesis -f <path>...            # Remove
    aphairesis -i <path>...            # Ask before removing each path
    aphairesis -f -t <path>...         # Move to the trash
    aphairesis -rf <dir>               # Remove a directory and its contents

Set APHAIRESIS_GNU_MODE to behave like GNU rm(1) for use in existing scripts.
"""

import argparse
import logging
import os
import sys
from collections.abc import Iterable, Mapping
from typing import Optional, TextIO

from confirmation import ConfirmationEngine
from console_ui import ConsoleUI
from disposal import Decision, DecisionType, DisposalExecutor, decide, disposal_for
from outcomes import EXIT_USAGE, SKIP_REASON_CANCELLED, SKIP_REASON_INPUT_CLOSED, Outcome, OutcomeAggregator, Summary
from path_classifier import Target, classify
from removal_config import BUILD_FEATURES, Environment, Features
from removal_errors import ConfigError, InputClosed
from removal_options import Mode, RawOptions, resolve_mode
from reporter import Reporter
from trash_service import Send2TrashService, TrashService

logger = logging.getLogger("aphairesis")


# ---------------------------------------------------------------------------
# Aphairesis
# ---------------------------------------------------------------------------


class Aphairesis:
    """Processes the given paths one at a time, start to finish"""

    def __init__(
        self,
        mode: Mode,
        ui: Optional[ConsoleUI] = None,
        trash: Optional[TrashService] = None,
        stdin: Optional[TextIO] = None,
    ):
        self.mode = mode
        self.ui = ui or ConsoleUI()
        self.reporter = Reporter(self.ui, mode)
        self.executor = DisposalExecutor(mode, trash)
        self.confirmation = ConfirmationEngine(self.ui, stdin)
        self.aggregator = OutcomeAggregator()

    def _record(self, outcome: Outcome):
        self.aggregator.record(outcome)
        self.reporter.report(outcome)

    def _confirm(self, decision: Decision, target: Target) -> Decision:
        """Replace an ASK_USER decision by the user's answer"""
        if decision.type is not DecisionType.ASK_USER:
            return decision
        answer = self.confirmation.confirm(target)
        if answer.accepted:
            return disposal_for(self.mode)
        return Decision.skip(answer.reason)

    def process(self, path: str) -> Outcome:
        """Classify, decide, confirm and execute for one path

        Raises:
            InputClosed: if standard input closed during a confirmation
        """
        target = classify(path)
        decision = self._confirm(decide(self.mode, target), target)
        return self.executor.execute(target, decision)

    def run(self, paths: Iterable[str]) -> Summary:
        logger.debug("start processing")
        remaining = list(paths)

        while remaining:
            path = remaining.pop(0)
            try:
                outcome = self.process(path)
            except InputClosed as e:
                logger.debug("%s, cancelling %d remaining paths", e, len(remaining))
                self._record(Outcome.skipped(path, SKIP_REASON_INPUT_CLOSED))
                for cancelled in remaining:
                    self._record(Outcome.skipped(cancelled, SKIP_REASON_CANCELLED))
                break
            self._record(outcome)

        summary = self.aggregator.summary()
        self.reporter.finish(summary)
        return summary


# ---------------------------------------------------------------------------
# CLI
# ---------------------------------------------------------------------------


def build_parser(features: Features = BUILD_FEATURES) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="aphairesis",
        description=(
            "Remove (unlink) the PATH(s). Does not remove anything unless --force or --interactive "
            "is given, and does not remove directories with content unless --recursive is given."
        ),
    )
    parser.add_argument("paths", nargs="*", metavar="PATH", help="Paths to remove")
    parser.add_argument("-b", "--blind", action="store_true", help="Ignore nonexistent files and directories")
    parser.add_argument("-f", "--force", action="store_true", help="Remove without prompt")
    parser.add_argument(
        "-i",
        "--interactive",
        action="store_true",
        help="Prompt to remove; answer 'y' or 'yes' (or nothing) to remove, anything else keeps the entry",
    )
    parser.add_argument(
        "--no-preserve-root", action="store_true", help="Do not treat the file system root specially"
    )
    parser.add_argument(
        "-q", "--quiet", action="store_true", help="Don't output to stdout (only has an effect with --force)"
    )
    parser.add_argument(
        "-r", "--recursive", action="store_true", help="Recursively remove directories and their contents"
    )
    if features.trash:
        parser.add_argument("-t", "--trash", action="store_true", help="Move to the trash bin instead of removing")
    parser.add_argument("-v", "--verbose", action="store_true", help="Explain what is being done")
    return parser


def parse_options(args: argparse.Namespace) -> RawOptions:
    return RawOptions(
        blind=args.blind,
        force=args.force,
        interactive=args.interactive,
        no_preserve_root=args.no_preserve_root,
        quiet=args.quiet,
        recursive=args.recursive,
        trash=getattr(args, "trash", False),
        verbose=args.verbose,
    )


def configure_logging(ui: ConsoleUI, verbose: bool):
    """Route trace logging to the stderr console; silent unless verbose"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        handlers=[ui.create_log_handler()],
        force=True,
    )


def main(
    argv: Optional[Iterable[str]] = None,
    environ: Optional[Mapping[str, str]] = None,
    stdin: Optional[TextIO] = None,
    trash: Optional[TrashService] = None,
    features: Features = BUILD_FEATURES,
) -> int:
    parser = build_parser(features)
    args = parser.parse_args(list(argv) if argv is not None else None)
    env = Environment.from_environ(os.environ if environ is None else environ, features)

    ui = ConsoleUI()
    try:
        mode = resolve_mode(parse_options(args), env, features)
    except ConfigError as e:
        ui.print_error(ui.styled((f"{parser.prog}: error: {e}", "")))
        return EXIT_USAGE

    configure_logging(ui, mode.verbose)
    if mode.trash and trash is None:
        trash = Send2TrashService()

    app = Aphairesis(mode, ui=ui, trash=trash, stdin=stdin)
    summary = app.run(args.paths)
    return summary.exit_code


if __name__ == "__main__":
    sys.exit(main())
