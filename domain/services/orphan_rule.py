"""Domain service deciding whether an actor has become an orphan."""

from __future__ import annotations


class ActorOrphanRule:
    """Business rule for garbage-collecting actors.

    Movies and series are counted as separate categories so that reporting can
    tell them apart. The deletion decision is the union of both: an actor is an
    orphan only when it has no remaining movie AND no remaining series.
    """

    @staticmethod
    def is_orphan(movie_count: int, series_count: int) -> bool:
        """Return True when both per-kind association counts are zero.

        Args:
            movie_count: Remaining associations to titles of kind ``Movie``
            series_count: Remaining associations to titles of kind ``Serie``

        Raises:
            ValueError: If either count is negative

        """
        if movie_count < 0 or series_count < 0:
            msg = f"Association counts cannot be negative: {movie_count}, {series_count}"
            raise ValueError(msg)
        return movie_count == 0 and series_count == 0
