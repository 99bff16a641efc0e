#!/usr/bin/env python3
"""
Path Classifier

Inspects one filesystem path with a single lstat call (symbolic links are
never followed) and reports what kind of entry lives there.
"""

import logging
import os
import stat
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from auxiliary import format_bytes
from removal_errors import ErrorKind

logger = logging.getLogger(__name__)


class Kind(Enum):
    """Kind of filesystem entry at a path"""

    FILE = "file"
    DIRECTORY = "directory"
    SYMLINK = "symlink"
    MISSING = "missing"


@dataclass(frozen=True)
class Target:
    """One input path and its classification"""

    path: str
    kind: Optional[Kind]
    empty: bool = True
    size: int = 0
    error: Optional[ErrorKind] = None

    @property
    def is_dir(self) -> bool:
        return self.kind is Kind.DIRECTORY

    @property
    def description(self) -> str:
        """Human-readable kind, as used in confirmation prompts"""
        if self.kind is Kind.DIRECTORY:
            return "empty directory" if self.empty else "directory"
        if self.kind is Kind.SYMLINK:
            return "symbolic link"
        if self.kind is Kind.FILE:
            return "regular file"
        return "entry"


def _dir_is_empty(path: str) -> bool:
    """Return True if the directory has no entries; unreadable counts as filled"""
    try:
        with os.scandir(path) as entries:
            return next(entries, None) is None
    except OSError:
        return False


def classify(path: str) -> Target:
    """Classify *path* without following symbolic links

    Only confirmed nonexistence yields Kind.MISSING. Any other lookup failure is
    recorded on the target as an error so it is rejected rather than skipped.
    """
    try:
        st = os.lstat(path)
    except (FileNotFoundError, NotADirectoryError):
        logger.debug("found nothing at %s", path)
        return Target(path, Kind.MISSING)
    except OSError as e:
        logger.debug("could not inspect %s: %s", path, e)
        return Target(path, None, error=ErrorKind.from_os_error(e))

    if stat.S_ISLNK(st.st_mode):
        logger.debug("found symbolic link at %s", path)
        return Target(path, Kind.SYMLINK)
    if stat.S_ISDIR(st.st_mode):
        empty = _dir_is_empty(path)
        logger.debug("found %s directory at %s", "empty" if empty else "filled", path)
        return Target(path, Kind.DIRECTORY, empty=empty)

    logger.debug("found file at %s (%s)", path, format_bytes(st.st_size))
    return Target(path, Kind.FILE, size=st.st_size)
