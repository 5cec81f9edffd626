from enum import Enum


class TitleKind(str, Enum):
    """Enumerate the two catalog sub-types sharing the title schema."""

    MOVIE = "Movie"
    SERIES = "Serie"
