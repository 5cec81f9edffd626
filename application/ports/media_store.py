from __future__ import annotations

from typing import Protocol


class MediaStore(Protocol):
    """Port for the filesystem holding the titles' media files."""

    def exists(self, path: str) -> bool: ...

    def delete(self, path: str) -> None:
        """Delete the file at ``path``.

        Raises ``FileNotFoundError`` if the file does not exist.
        """
        ...
