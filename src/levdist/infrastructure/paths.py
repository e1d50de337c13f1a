"""Path resolution for levdist storage."""

from __future__ import annotations

import os
from pathlib import Path

__all__ = ["HOME_ENV_VAR", "PathResolver", "default_resolver"]

# Overrides the storage base when set
HOME_ENV_VAR = "LEVDIST_HOME"


class PathResolver:
    """Resolves paths for levdist storage.

    Storage layout:
        ~/.levdist/
        └── config.json
    """

    def __init__(self, base: Path | None = None) -> None:
        """Initialize path resolver.

        Args:
            base: Base directory for storage. Defaults to $LEVDIST_HOME,
                then ~/.levdist.
        """
        if base is None:
            env_base = os.environ.get(HOME_ENV_VAR)
            base = Path(env_base) if env_base else Path.home() / ".levdist"
        self.base = base

    def global_config(self) -> Path:
        """Path to global configuration file."""
        return self.base / "config.json"


# Default resolver instance
default_resolver = PathResolver()
