#!/usr/bin/env python3
"""
Option Resolution for Aphairesis

Turns the raw command-line flags and the startup environment into one
canonical, immutable Mode. Nothing after resolution looks at raw flags again.

Resolution order:
    1. conflicts that no mode can resolve (--force with --interactive, ...)
    2. GNU compatibility overrides, when the environment asks for them
    3. explicit flags for every field the overrides left alone
    4. derived fields (dry_run, effective quiet/verbose)
"""

import logging
from dataclasses import dataclass

from removal_config import BUILD_FEATURES, Environment, Features
from removal_errors import ConfigError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RawOptions:
    """Flag values exactly as given on the command line"""

    blind: bool = False
    force: bool = False
    interactive: bool = False
    no_preserve_root: bool = False
    quiet: bool = False
    recursive: bool = False
    trash: bool = False
    verbose: bool = False


@dataclass(frozen=True)
class Mode:
    """Canonical configuration for one invocation"""

    dry_run: bool
    force: bool
    interactive: bool
    quiet: bool
    verbose: bool
    trash: bool
    blind: bool
    recursive: bool
    legacy: bool
    preserve_root: bool = True


def _check_conflicts(raw: RawOptions, features: Features):
    if raw.force and raw.interactive:
        raise ConfigError("options --force and --interactive cannot be used together")
    if raw.quiet and raw.verbose:
        raise ConfigError("options --quiet and --verbose cannot be used together")
    if raw.trash and not features.trash:
        raise ConfigError("option --trash not supported by this installation")


def _apply_gnu_mode(raw: RawOptions) -> dict[str, bool]:
    """Return the fields fixed by GNU compatibility mode"""
    if raw.interactive:
        raise ConfigError("option --interactive not supported in GNU mode")

    # rm(1) only accepts these together with --force
    if not raw.force:
        for name in ("blind", "quiet", "trash"):
            if getattr(raw, name):
                raise ConfigError(f"option --{name} not supported in GNU mode")

    return {
        "blind": raw.force,
        "force": True,
        "interactive": False,
        "quiet": True,
        "trash": False,
    }


def resolve_mode(raw: RawOptions, env: Environment = Environment(), features: Features = BUILD_FEATURES) -> Mode:
    """Resolve raw flags and the environment into a Mode

    Raises:
        ConfigError: if the flags cannot be combined
    """
    _check_conflicts(raw, features)

    legacy = env.gnu_mode and features.gnu_mode
    fixed = _apply_gnu_mode(raw) if legacy else {}

    force = fixed.get("force", raw.force)
    interactive = fixed.get("interactive", raw.interactive)
    dry_run = not force and not interactive

    # --quiet only silences actual removals, a preview always shows what it would do
    quiet = fixed.get("quiet", raw.quiet) and not dry_run
    verbose = (raw.verbose or env.debug) and not quiet

    mode = Mode(
        dry_run=dry_run,
        force=force,
        interactive=interactive,
        quiet=quiet,
        verbose=verbose,
        trash=fixed.get("trash", raw.trash),
        blind=fixed.get("blind", raw.blind),
        recursive=raw.recursive,
        legacy=legacy,
        preserve_root=not raw.no_preserve_root,
    )
    logger.debug("resolved mode %s", mode)
    return mode
