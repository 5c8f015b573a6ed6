from __future__ import annotations

from javaenv.compiler.options import compiler_options

__all__ = ["compiler_options"]
