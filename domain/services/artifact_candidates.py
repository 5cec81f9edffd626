"""Domain service listing the candidate file paths of a title's media."""

from __future__ import annotations

from typing import TYPE_CHECKING

from domain.value_objects.title_kind import TitleKind

if TYPE_CHECKING:
    from collections.abc import Iterator

# Probing order, first match wins
ARTIFACT_EXTENSIONS: tuple[str, ...] = (".mp4", ".mov", ".avi", ".mkv", ".webm")


class ArtifactCandidates:
    """Derive the paths a title's media file may live at."""

    @staticmethod
    def base_directory(kind: TitleKind, movie_dir: str, series_dir: str) -> str:
        """Series live in their own directory, every other kind in the movie directory."""
        return series_dir if kind == TitleKind.SERIES else movie_dir

    @staticmethod
    def paths(base_directory: str, artifact_ref: str) -> Iterator[str]:
        """Yield ``<base_directory>/<artifact_ref><ext>`` for each extension in order."""
        base = base_directory.rstrip("/") or "/"
        separator = "" if base.endswith("/") else "/"
        for extension in ARTIFACT_EXTENSIONS:
            yield f"{base}{separator}{artifact_ref}{extension}"
