"""Staging directory resolution.

The staging root is where published artifacts are laid out before the
host collects them. It is resolved once per session:

  1. BUILD_STAGINGDIRECTORY, when set and non-empty (created if missing)
  2. otherwise a new temporary directory, under AGENT_TEMPDIRECTORY when
     that is set, else under the system temp dir

The fallback logs the full process environment for diagnosis.
Directory creation errors propagate to the caller.
"""

import logging
import os
import tempfile
from pathlib import Path
from typing import Callable, Optional

from buildtask.core.config import Settings, get_settings

logger = logging.getLogger(__name__)

TEMP_DIR_PREFIX = "buildtask-staging-"


class StagingDirectoryResolver:
    def __init__(self, settings_factory: Callable[[], Settings] = get_settings) -> None:
        self._settings_factory = settings_factory
        self._root: Optional[Path] = None

    @property
    def is_resolved(self) -> bool:
        return self._root is not None

    def resolve(self) -> Path:
        """Return the staging root, resolving it on first use."""
        if self._root is None:
            self._root = self._resolve_uncached()
        return self._root

    def _resolve_uncached(self) -> Path:
        settings = self._settings_factory()

        if settings.build_stagingdirectory:
            root = Path(settings.build_stagingdirectory)
            root.mkdir(parents=True, exist_ok=True)
            logger.info("Using staging directory %s", root)
            return root

        temp_base = settings.agent_tempdirectory or None
        if temp_base:
            Path(temp_base).mkdir(parents=True, exist_ok=True)
        root = Path(tempfile.mkdtemp(prefix=TEMP_DIR_PREFIX, dir=temp_base))

        logger.warning(
            "BUILD_STAGINGDIRECTORY is not set; staging into temporary directory %s\n"
            "Process environment:\n%s",
            root,
            dump_environment(),
        )
        return root


def dump_environment(environ: Optional[dict[str, str]] = None) -> str:
    """Render the environment as sorted KEY=value lines."""
    env = os.environ if environ is None else environ
    return "\n".join(f"{key}={env[key]}" for key in sorted(env))
