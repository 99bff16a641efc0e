#!/usr/bin/env python3
"""
Trash Service

Moving a path to the platform trash is delegated to send2trash. The rest of
Aphairesis only sees the single dispose operation of the TrashService protocol.
"""

import logging
from typing import Protocol

from send2trash import send2trash

from removal_errors import TrashError

logger = logging.getLogger(__name__)


class TrashService(Protocol):
    """Capability to move one path to a recoverable trash"""

    def dispose(self, path: str) -> None:
        """Move *path* to the trash, raising TrashError on failure"""
        ...


class Send2TrashService:
    """TrashService backed by the send2trash library"""

    def dispose(self, path: str) -> None:
        logger.debug("send %s to trash", path)
        try:
            send2trash(path)
        except OSError as e:
            raise TrashError(e.errno, f"Could not move to trash: {e}", path) from e
