"""javaconfig.json discovery and loading.

A source file is governed by the nearest ``javaconfig.json`` found by walking
up from its directory, never looking above the workspace root.  Both the
location of that file (per source file) and its parsed contents (per config
file) are cached until :meth:`ConfigResolver.invalidate` is called.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from javaenv.config import CLASS_PATH_SEPARATOR, CONFIG_FILE_NAME, DEFAULT_OUTPUT_DIRECTORY
from javaenv.core.models import (
    DEFAULT_JAVA_CONFIG,
    NOT_FOUND,
    ConfigLocation,
    Found,
    JavaConfig,
    JavaConfigFile,
)
from javaenv.core.paths import normalize_workspace_root, resolve_source, walk_up

logger = logging.getLogger(__name__)


class ConfigResolver:
    """Find and parse the ``javaconfig.json`` governing a source file.

    Not thread-safe: both caches are plain dicts.
    """

    def __init__(self) -> None:
        self._configs: dict[Path, JavaConfig] = {}
        self._locations: dict[Path, ConfigLocation] = {}

    def resolve_config(
        self,
        workspace_root: str | os.PathLike[str],
        source_file: str | os.PathLike[str],
    ) -> JavaConfig:
        """Return the configuration for *source_file*, or the defaults if none applies."""
        return self.load(self.locate(workspace_root, source_file))

    def locate(
        self,
        workspace_root: str | os.PathLike[str],
        source_file: str | os.PathLike[str],
    ) -> ConfigLocation:
        """Return where the governing ``javaconfig.json`` lives, if anywhere."""
        root = normalize_workspace_root(workspace_root)
        source = resolve_source(root, source_file)

        if source not in self._locations:
            self._locations[source] = self._search(root, source)
        return self._locations[source]

    def load(self, location: ConfigLocation) -> JavaConfig:
        """Return the parsed configuration at *location* (defaults for ``NOT_FOUND``)."""
        if not isinstance(location, Found):
            return DEFAULT_JAVA_CONFIG

        if location.path not in self._configs:
            self._configs[location.path] = read_config(location.path)
        return self._configs[location.path]

    def invalidate(self) -> None:
        """Forget every cached location and parsed configuration."""
        logger.debug(
            "Invalidating %d config(s) and %d location(s)",
            len(self._configs), len(self._locations),
        )
        self._configs.clear()
        self._locations.clear()

    @staticmethod
    def _search(root: Path, source: Path) -> ConfigLocation:
        for directory in walk_up(source.parent, root):
            candidate = directory / CONFIG_FILE_NAME
            if candidate.exists():
                logger.debug("%s is governed by %s", source, candidate)
                return Found(candidate)
        logger.debug("No %s between %s and %s", CONFIG_FILE_NAME, source, root)
        return NOT_FOUND


def read_config(config_path: Path) -> JavaConfig:
    """Read *config_path* and resolve its relative paths against its directory.

    Raises ``FileNotFoundError`` when the file (or its ``classPathFile``) is
    missing and ``pydantic.ValidationError`` when the JSON is malformed or
    lacks ``sourcePath``.
    """
    logger.debug("Loading %s", config_path)
    base = config_path.parent
    raw = JavaConfigFile.model_validate_json(config_path.read_text(encoding="utf-8"))

    class_path: tuple[str, ...] = ()
    if raw.class_path_file is not None:
        class_path_text = _resolve(base, raw.class_path_file).read_text(encoding="utf-8")
        class_path = tuple(class_path_text.split(CLASS_PATH_SEPARATOR))

    output_directory = raw.output_directory
    if output_directory is None:
        logger.debug("%s has no outputDirectory, using %r", config_path, DEFAULT_OUTPUT_DIRECTORY)
        output_directory = DEFAULT_OUTPUT_DIRECTORY

    return JavaConfig(
        source_path=tuple(_resolve(base, p) for p in raw.source_path),
        output_directory=_resolve(base, output_directory),
        class_path=class_path,
    )


def _resolve(base: Path, relative: str) -> Path:
    return Path(os.path.abspath(base / relative))
