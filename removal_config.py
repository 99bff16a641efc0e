#!/usr/bin/env python3
"""
Aphairesis Build Features and Environment

Holds the switches that decide which optional capabilities are built into
this installation, and the environment values read once at startup.
"""

from collections.abc import Mapping
from dataclasses import dataclass

# Presence of the variable (any value, even empty) turns the setting on
GNU_MODE_VAR = "APHAIRESIS_GNU_MODE"
DEBUG_VAR = "DEBUG"


@dataclass(frozen=True)
class Features:
    """Optional capabilities built into this installation"""

    gnu_mode: bool = True
    trash: bool = True


BUILD_FEATURES = Features()


@dataclass(frozen=True)
class Environment:
    """Environment configuration values, read once at startup"""

    debug: bool = False
    gnu_mode: bool = False

    @classmethod
    def from_environ(cls, environ: Mapping[str, str], features: Features = BUILD_FEATURES) -> "Environment":
        """Create from an environment mapping such as os.environ

        The GNU mode variable has no effect unless the gnu_mode feature is built in.
        """
        return cls(
            debug=DEBUG_VAR in environ,
            gnu_mode=features.gnu_mode and GNU_MODE_VAR in environ,
        )
