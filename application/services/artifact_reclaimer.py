"""Best-effort removal of the media file attached to a title."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

import structlog

from domain.services.artifact_candidates import ArtifactCandidates

if TYPE_CHECKING:
    from application.ports.media_store import MediaStore
    from domain.value_objects.title_kind import TitleKind

logger = structlog.get_logger()

DEFAULT_MOVIE_DIR = "./movies"
DEFAULT_SERIES_DIR = "./series"


@dataclass(frozen=True)
class ArtifactDirectories:
    """Base directories of the media files, one per title kind."""

    movie_dir: str = DEFAULT_MOVIE_DIR
    series_dir: str = DEFAULT_SERIES_DIR


class ArtifactReclaimer:
    """Locate and delete a title's media file by probing candidate extensions.

    Extensions are probed in a fixed order and the first existing file is
    deleted; the remaining candidates are not checked. A missing file is not
    an error.
    """

    def __init__(
        self,
        media_store: MediaStore,
        directories: ArtifactDirectories | None = None,
    ) -> None:
        self._media_store = media_store
        self._directories = directories or ArtifactDirectories()

    def reclaim(self, artifact_ref: str, kind: TitleKind) -> str | None:
        """Delete the first existing media file for ``artifact_ref``.

        Args:
            artifact_ref: Logical file name stored on the title
            kind: Title kind, selects the base directory

        Returns:
            The deleted path, or None when no candidate existed

        Raises:
            OSError: If deleting an existing file fails for any reason other
                than the file having vanished in the meantime

        """
        base_directory = ArtifactCandidates.base_directory(
            kind,
            movie_dir=self._directories.movie_dir,
            series_dir=self._directories.series_dir,
        )

        for path in ArtifactCandidates.paths(base_directory, artifact_ref):
            if not self._media_store.exists(path):
                continue
            try:
                self._media_store.delete(path)
            except FileNotFoundError:
                # Removed concurrently between the check and the delete
                logger.info("artifact_vanished_before_delete", path=path)
                return None
            logger.info("artifact_reclaimed", path=path, kind=kind.value)
            return path

        logger.info(
            "artifact_not_found",
            artifact_ref=artifact_ref,
            base_directory=base_directory,
        )
        return None
