from __future__ import annotations

from javaenv.project.resolver import ConfigResolver, read_config

__all__ = ["ConfigResolver", "read_config"]
