from __future__ import annotations

import os
from pathlib import Path

from wgmint.logging import get_logger

logger = get_logger(__name__)


class ArtifactStore:
    """
    Saves rendered configs under a chosen file name in one directory.

    Files are written with mode 0o600 since they carry a private key.
    """

    content_type = "text/plain"

    def __init__(self, directory: str | os.PathLike[str] = ".") -> None:
        self._directory = Path(directory)

    @property
    def directory(self) -> Path:
        return self._directory

    def _path(self, name: str) -> Path:
        if not name or name in {".", ".."} or "/" in name or "\\" in name:
            raise ValueError(f"Invalid file name {name!r}")
        return self._directory / name

    def save(self, name: str, content: str) -> Path:
        """Write `content` as UTF-8 text and return the file's path."""
        path = self._path(name)
        self._directory.mkdir(parents=True, exist_ok=True)
        fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
        with os.fdopen(fd, "w", encoding="utf-8", newline="\n") as f:
            f.write(content)
        os.chmod(path, 0o600)
        logger.info("Saved %s (%s)", path, self.content_type)
        return path
