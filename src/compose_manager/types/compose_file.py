"""Compose file type definitions."""

from __future__ import annotations

import os
from collections.abc import Sequence
from typing import Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ComposeFile(BaseModel):
    """A single compose file reference.

    Attributes:
        file_name: Path or name of the compose file, passed to ``-f`` as-is.
    """

    model_config = ConfigDict(frozen=True)

    file_name: str = Field(description="Path or name of the compose file")

    @field_validator("file_name", mode="before")
    @classmethod
    def coerce_path(cls, value: object) -> object:
        """Accept ``os.PathLike`` values (e.g. ``pathlib.Path``)."""
        if isinstance(value, os.PathLike):
            return os.fspath(value)
        return value

    @field_validator("file_name")
    @classmethod
    def validate_non_empty(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("file_name must be non-empty")
        return value

    def __str__(self) -> str:
        return self.file_name


ComposeFileLike = Union[str, os.PathLike, ComposeFile]


class ComposeFileCollection(BaseModel):
    """Ordered compose files plus an optional project name.

    Order is significant: later files override earlier ones when compose
    merges them. An empty collection lets docker-compose discover
    ``docker-compose.yml`` in the working directory.

    Attributes:
        files: Compose files in merge order.
        project_name: Optional ``--project-name`` value.

    Example:
        >>> files = ComposeFileCollection.from_input(["base.yml", "override.yml"])
        >>> files.with_project_name("demo").file_names
        ('base.yml', 'override.yml')
    """

    model_config = ConfigDict(frozen=True)

    files: tuple[ComposeFile, ...] = Field(default=(), description="Compose files in merge order")
    project_name: str | None = Field(default=None, description="Optional project name")

    @field_validator("files", mode="before")
    @classmethod
    def coerce_files(cls, value: object) -> object:
        """Wrap plain names into ``ComposeFile`` instances."""
        if isinstance(value, (str, os.PathLike, ComposeFile)):
            value = (value,)
        if isinstance(value, Sequence):
            return tuple(item if isinstance(item, ComposeFile) else ComposeFile(file_name=item) for item in value)
        return value

    @classmethod
    def from_input(
        cls,
        compose_files: ComposeFileCollection | ComposeFileLike | Sequence[ComposeFileLike] | None = None,
    ) -> ComposeFileCollection:
        """Normalize the accepted compose file inputs into a collection.

        Args:
            compose_files: An existing collection (returned unchanged), a single
                file name, a sequence of file names, or None for an empty collection.

        Returns:
            ComposeFileCollection preserving the given order.
        """
        if isinstance(compose_files, ComposeFileCollection):
            return compose_files
        if compose_files is None:
            return cls()
        if isinstance(compose_files, (str, os.PathLike, ComposeFile)):
            return cls(files=(compose_files,))
        return cls(files=tuple(compose_files))

    @property
    def file_names(self) -> tuple[str, ...]:
        """Compose file names in merge order."""
        return tuple(compose_file.file_name for compose_file in self.files)

    def add(self, compose_file: ComposeFileLike) -> ComposeFileCollection:
        """Return a new collection with ``compose_file`` appended."""
        return ComposeFileCollection(files=(*self.files, compose_file), project_name=self.project_name)

    def with_project_name(self, project_name: str | None) -> ComposeFileCollection:
        """Return a new collection using ``project_name``."""
        return ComposeFileCollection(files=self.files, project_name=project_name)


__all__ = [
    "ComposeFile",
    "ComposeFileCollection",
    "ComposeFileLike",
]
