"""Path normalization shared by the workspace-aware resolvers."""

from __future__ import annotations

import os
from collections.abc import Iterator
from pathlib import Path


def normalize_workspace_root(workspace_root: str | os.PathLike[str]) -> Path:
    """Return *workspace_root* as an absolute path with ``.``/``..`` collapsed.

    Symlinks are deliberately left alone so the boundary compares equal to
    the directories produced by walking up from a source file.
    """
    return Path(os.path.abspath(workspace_root))


def resolve_source(workspace_root: Path, source_file: str | os.PathLike[str]) -> Path:
    """Resolve *source_file* against *workspace_root* unless it is already absolute."""
    return Path(os.path.abspath(os.path.join(workspace_root, source_file)))


def walk_up(start: Path, boundary: Path) -> Iterator[Path]:
    """Yield *start* and its parents, stopping after *boundary* or the filesystem root."""
    current = start
    while True:
        yield current
        if current == boundary or current == current.parent:
            return
        current = current.parent
