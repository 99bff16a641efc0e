#!/usr/bin/env python3
"""
Auxiliary utility functions for Aphairesis

Small path and formatting helpers shared by the classifier and the
decision logic.
"""

import os


def format_bytes(size_bytes: int) -> str:
    """Format byte size into human-readable string

    Args:
        size_bytes: Size in bytes to format

    Returns:
        Formatted string like "1.2 GiB", "345 MiB", "12 KiB", or "789 B"
    """
    if size_bytes >= 1024**3:
        return f"{size_bytes / (1024**3):.1f} GiB"
    if size_bytes >= 1024**2:
        return f"{size_bytes / (1024**2):.1f} MiB"
    if size_bytes >= 1024:
        return f"{size_bytes / 1024:.1f} KiB"
    return f"{size_bytes} B"


def is_current_or_parent_dir(path: str) -> bool:
    """Check whether the last component of *path* is "." or ".."

    Args:
        path: Path as given on the command line, e.g. "foo/.." or "./"
    """
    last = path.rstrip("/" + (os.altsep or "")).rsplit(os.sep, 1)[-1]
    if os.altsep:
        last = last.rsplit(os.altsep, 1)[-1]
    return last in (os.curdir, os.pardir)


def is_filesystem_root(path: str) -> bool:
    """Check whether *path* names the filesystem root (e.g. "/" or "//")"""
    absolute = os.path.abspath(path)
    return os.path.dirname(absolute) == absolute


def printable_path(path: str) -> str:
    """Return *path* unchanged, or quoted with escapes if it holds unprintable characters

    Tabs, newlines and other control characters would otherwise be expanded or
    dropped by the console, so such names are shown as a Python string literal,
    e.g. "a\\tb" becomes 'a\\tb'.
    """
    if path.isprintable():
        return path
    return repr(path)
