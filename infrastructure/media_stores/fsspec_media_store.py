from __future__ import annotations

import fsspec

from application.ports.media_store import MediaStore


class FsspecMediaStore(MediaStore):
    """Media store over any fsspec filesystem.

    Paths are plain local paths or fsspec URLs such as ``s3://bucket/movies/x.mp4``.
    """

    def __init__(self, *, storage_options: dict | None = None) -> None:
        self.storage_options = storage_options or {}

    def exists(self, path: str) -> bool:
        fs, fs_path = fsspec.core.url_to_fs(path, **self.storage_options)
        return fs.exists(fs_path)

    def delete(self, path: str) -> None:
        fs, fs_path = fsspec.core.url_to_fs(path, **self.storage_options)
        fs.rm(fs_path)
