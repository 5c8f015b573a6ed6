from __future__ import annotations

from javaenv.executables.locator import ExecutableLocator

__all__ = ["ExecutableLocator"]
