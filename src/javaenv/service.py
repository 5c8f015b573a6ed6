"""Process-wide Java environment: the public entry points used by the host tool.

One :class:`JavaEnvironment` owns the executable cache and the
``javaconfig.json`` caches.  It is meant to be used from a single thread;
callers running it from several threads must serialize access themselves.
"""

from __future__ import annotations

import logging
import os
from functools import lru_cache

from javaenv.core.models import JavaConfig
from javaenv.executables.locator import ExecutableLocator
from javaenv.project.resolver import ConfigResolver

logger = logging.getLogger(__name__)


class JavaEnvironment:
    def __init__(
        self,
        locator: ExecutableLocator | None = None,
        resolver: ConfigResolver | None = None,
    ) -> None:
        self.locator = locator or ExecutableLocator()
        self.resolver = resolver or ConfigResolver()

    def find_executable(self, name: str) -> str:
        return self.locator.find_executable(name)

    def resolve_config(
        self,
        workspace_root: str | os.PathLike[str],
        source_file: str | os.PathLike[str],
    ) -> JavaConfig:
        return self.resolver.resolve_config(workspace_root, source_file)

    def invalidate_all(self) -> None:
        """Drop cached config locations and contents; executable paths are kept."""
        logger.info("Invalidating javaconfig.json caches")
        self.resolver.invalidate()

    def reset(self) -> None:
        """Drop every cache, executable paths included."""
        self.resolver.invalidate()
        self.locator.clear()


@lru_cache(maxsize=1)
def get_environment() -> JavaEnvironment:
    """Return the shared process-wide environment."""
    return JavaEnvironment()


def find_executable(name: str) -> str:
    """Locate *name* on JAVA_HOME, then PATH; see :class:`ExecutableLocator`."""
    return get_environment().find_executable(name)


def resolve_config(
    workspace_root: str | os.PathLike[str],
    source_file: str | os.PathLike[str],
) -> JavaConfig:
    """Return the configuration governing *source_file* inside *workspace_root*."""
    return get_environment().resolve_config(workspace_root, source_file)


def invalidate_all() -> None:
    get_environment().invalidate_all()
