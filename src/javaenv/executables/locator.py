"""Executable lookup: find ``java``/``javac`` and friends on JAVA_HOME, then PATH.

Lookups are memoized for the life of the locator, including misses: a name
that could not be found is remembered as the bare (platform-adjusted) name,
which the caller may still hand to the OS and let it fail there.
"""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import Callable, Iterator, Mapping

from javaenv.config import JAVA_HOME_VAR, PATH_VAR, WINDOWS_EXECUTABLE_SUFFIX

logger = logging.getLogger(__name__)


class ExecutableLocator:
    """Resolve logical binary names to filesystem paths.

    Not thread-safe: the cache is a plain dict.
    """

    def __init__(
        self,
        environ: Mapping[str, str] | None = None,
        platform: str | None = None,
        exists: Callable[[str], bool] = os.path.exists,
    ) -> None:
        self._environ = os.environ if environ is None else environ
        self._platform = sys.platform if platform is None else platform
        self._exists = exists
        self._cache: dict[str, str] = {}
        self._found: set[str] = set()

    def executable_name(self, name: str) -> str:
        """Return *name* as it appears on disk for this platform."""
        if self._platform == "win32":
            return name + WINDOWS_EXECUTABLE_SUFFIX
        return name

    def find_executable(self, name: str) -> str:
        """Return the path of *name*, or the bare adjusted name when nothing matches."""
        binary = self.executable_name(name)
        cached = self._cache.get(binary)
        if cached is not None:
            logger.debug("Executable cache hit: %s -> %s", binary, cached)
            return cached

        path = self._search(binary)
        if path is None:
            logger.info(
                "%s not found under %s or %s; falling back to bare name",
                binary, JAVA_HOME_VAR, PATH_VAR,
            )
            path = binary
        else:
            logger.debug("Located %s at %s", binary, path)
            self._found.add(binary)

        self._cache[binary] = path
        return path

    def was_found(self, name: str) -> bool:
        """True when the last lookup of *name* was a search hit, not the bare-name fallback."""
        return self.executable_name(name) in self._found

    def clear(self) -> None:
        self._cache.clear()
        self._found.clear()

    def _search(self, binary: str) -> str | None:
        for home in self._entries(JAVA_HOME_VAR):
            candidate = os.path.join(home, "bin", binary)
            if self._exists(candidate):
                return candidate

        for directory in self._entries(PATH_VAR):
            candidate = os.path.join(directory, binary)
            if self._exists(candidate):
                return candidate

        return None

    def _entries(self, var: str) -> Iterator[str]:
        value = self._environ.get(var, "")
        for entry in value.split(os.pathsep):
            if entry:
                yield entry

