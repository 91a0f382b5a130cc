"""Filesystem access used by the catalog loader and icon validator."""

from __future__ import annotations
from pathlib import Path
from typing import Protocol, Union

PathLike = Union[str, Path]


class FileAccess(Protocol):
    def exists(self, path: PathLike) -> bool: ...

    def read_text(self, path: PathLike) -> str: ...

    def read_bytes(self, path: PathLike) -> bytes: ...


class LocalFileAccess:
    """Reads straight from disk."""

    def exists(self, path: PathLike) -> bool:
        return Path(path).exists()

    def read_text(self, path: PathLike) -> str:
        with Path(path).open("r", encoding="utf-8") as f:
            return f.read()

    def read_bytes(self, path: PathLike) -> bytes:
        return Path(path).read_bytes()


__all__ = ["FileAccess", "LocalFileAccess", "PathLike"]
