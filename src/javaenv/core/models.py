from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Union

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from javaenv.config import DEFAULT_OUTPUT_DIRECTORY, DEFAULT_SOURCE_PATH


# ---------------------------------------------------------------------------
# javaconfig.json as written on disk
# ---------------------------------------------------------------------------

class JavaConfigFile(BaseModel):
    """Raw ``javaconfig.json`` contents; paths are relative to the file's directory."""

    model_config = ConfigDict(alias_generator=to_camel)

    source_path: list[str]
    class_path_file: str | None = None
    output_directory: str | None = None


# ---------------------------------------------------------------------------
# Resolved configuration
# ---------------------------------------------------------------------------

class JavaConfig(BaseModel):
    """Normalized settings for the files governed by one ``javaconfig.json``."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    source_path: tuple[Path, ...]
    output_directory: Path
    class_path: tuple[str, ...] = ()


DEFAULT_JAVA_CONFIG = JavaConfig(
    source_path=tuple(Path(p) for p in DEFAULT_SOURCE_PATH),
    output_directory=Path(DEFAULT_OUTPUT_DIRECTORY),
)


# ---------------------------------------------------------------------------
# Outcome of the upward javaconfig.json search
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Found:
    path: Path


@dataclass(frozen=True)
class NotFound:
    pass


NOT_FOUND = NotFound()

ConfigLocation = Union[Found, NotFound]
