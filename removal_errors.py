#!/usr/bin/env python3
"""
Error types for Aphairesis

Per-path failures are described by an ErrorKind and recorded, never raised
past the executor. The exceptions here cover the run-level conditions.
"""

import errno
from enum import Enum


class ErrorKind(Enum):
    """Kind of per-path failure, valued by its human-readable message"""

    NOT_FOUND = "Not found"
    PERMISSION_DENIED = "Permission denied"
    DIRECTORY_NOT_EMPTY = "Directory not empty"
    TRASH_UNAVAILABLE = "Trash unavailable"
    REFUSED = "Refused to remove"
    IO_ERROR = "I/O error"

    @classmethod
    def from_os_error(cls, error: OSError) -> "ErrorKind":
        """Map an OSError raised by a filesystem call to an ErrorKind"""
        if isinstance(error, (FileNotFoundError, NotADirectoryError)):
            return cls.NOT_FOUND
        if isinstance(error, PermissionError):
            return cls.PERMISSION_DENIED
        if error.errno in (errno.ENOTEMPTY, errno.EEXIST):
            return cls.DIRECTORY_NOT_EMPTY
        return cls.IO_ERROR


class ConfigError(ValueError):
    """Invalid combination of options, detected before touching the filesystem"""


class InputClosed(EOFError):
    """Standard input was closed while waiting for a confirmation"""


class TrashError(OSError):
    """The trash service could not dispose of a path"""
