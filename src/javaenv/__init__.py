"""Locate Java executables and resolve per-project javaconfig.json settings."""

from __future__ import annotations

from javaenv.core.models import DEFAULT_JAVA_CONFIG, JavaConfig
from javaenv.service import (
    JavaEnvironment,
    find_executable,
    get_environment,
    invalidate_all,
    resolve_config,
)

__all__ = [
    "DEFAULT_JAVA_CONFIG",
    "JavaConfig",
    "JavaEnvironment",
    "find_executable",
    "get_environment",
    "invalidate_all",
    "resolve_config",
]
