from __future__ import annotations

import itertools
from typing import Optional

import pytest

from removal_config import Environment, Features
from removal_errors import ConfigError
from removal_options import Mode, RawOptions, resolve_mode

FLAGS = ("blind", "force", "interactive", "quiet", "recursive", "trash", "verbose")
COMBINATIONS = [
    (dict(zip(FLAGS, values)), legacy)
    for values in itertools.product((False, True), repeat=len(FLAGS))
    for legacy in (False, True)
]


def _expected(flags: dict[str, bool], legacy: bool) -> Optional[Mode]:
    """Precedence table written out case by case; None means a ConfigError"""
    if flags["force"] and flags["interactive"]:
        return None
    if flags["quiet"] and flags["verbose"]:
        return None

    if legacy:
        if flags["interactive"]:
            return None
        if not flags["force"] and (flags["blind"] or flags["quiet"] or flags["trash"]):
            return None
        return Mode(
            dry_run=False,
            force=True,
            interactive=False,
            quiet=True,
            verbose=False,
            trash=False,
            blind=flags["force"],
            recursive=flags["recursive"],
            legacy=True,
        )

    dry_run = not flags["force"] and not flags["interactive"]
    quiet = flags["quiet"] and not dry_run
    return Mode(
        dry_run=dry_run,
        force=flags["force"],
        interactive=flags["interactive"],
        quiet=quiet,
        verbose=flags["verbose"] and not quiet,
        trash=flags["trash"],
        blind=flags["blind"],
        recursive=flags["recursive"],
        legacy=False,
    )


@pytest.mark.parametrize(("flags", "legacy"), COMBINATIONS)
def test_precedence_table(flags: dict[str, bool], legacy: bool) -> None:
    expected = _expected(flags, legacy)
    env = Environment(gnu_mode=legacy)

    if expected is None:
        with pytest.raises(ConfigError):
            resolve_mode(RawOptions(**flags), env)
    else:
        assert resolve_mode(RawOptions(**flags), env) == expected


def test_default_is_dry_run() -> None:
    mode = resolve_mode(RawOptions())
    assert mode.dry_run
    assert not mode.force
    assert not mode.interactive
    assert mode.preserve_root


def test_quiet_has_no_effect_on_dry_run() -> None:
    assert not resolve_mode(RawOptions(quiet=True)).quiet
    assert resolve_mode(RawOptions(quiet=True, force=True)).quiet


def test_debug_environment_enables_verbose() -> None:
    mode = resolve_mode(RawOptions(force=True), Environment(debug=True))
    assert mode.verbose


def test_debug_environment_yields_to_quiet() -> None:
    mode = resolve_mode(RawOptions(force=True, quiet=True), Environment(debug=True))
    assert mode.quiet
    assert not mode.verbose


def test_gnu_mode_rejects_interactive_with_message() -> None:
    with pytest.raises(ConfigError, match="--interactive not supported in GNU mode"):
        resolve_mode(RawOptions(interactive=True), Environment(gnu_mode=True))


def test_gnu_mode_rejects_trash_without_force() -> None:
    with pytest.raises(ConfigError, match="--trash"):
        resolve_mode(RawOptions(trash=True), Environment(gnu_mode=True))


def test_gnu_mode_ignored_when_not_built_in() -> None:
    features = Features(gnu_mode=False)
    mode = resolve_mode(RawOptions(), Environment(gnu_mode=True), features)
    assert not mode.legacy
    assert mode.dry_run


def test_trash_rejected_when_not_built_in() -> None:
    with pytest.raises(ConfigError, match="--trash"):
        resolve_mode(RawOptions(force=True, trash=True), features=Features(trash=False))


def test_no_preserve_root() -> None:
    assert not resolve_mode(RawOptions(no_preserve_root=True)).preserve_root


def test_environment_from_environ() -> None:
    env = Environment.from_environ({"APHAIRESIS_GNU_MODE": "", "DEBUG": "1"})
    assert env.gnu_mode
    assert env.debug

    env = Environment.from_environ({"PATH": "/bin"})
    assert not env.gnu_mode
    assert not env.debug


def test_environment_ignores_gnu_mode_without_feature() -> None:
    env = Environment.from_environ({"APHAIRESIS_GNU_MODE": "1"}, Features(gnu_mode=False))
    assert not env.gnu_mode
