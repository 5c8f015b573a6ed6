"""Compiler options derived from a resolved JavaConfig."""

from __future__ import annotations

from javaenv.config import CLASS_PATH_SEPARATOR
from javaenv.core.models import JavaConfig


def compiler_options(config: JavaConfig) -> list[str]:
    """Return the ``-classpath``/``-sourcepath``/``-d`` options for *config*."""
    return [
        "-classpath", CLASS_PATH_SEPARATOR.join(config.class_path),
        "-sourcepath", CLASS_PATH_SEPARATOR.join(str(p) for p in config.source_path),
        "-d", str(config.output_directory),
    ]
