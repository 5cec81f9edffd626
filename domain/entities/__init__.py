from .actor import Actor
from .title import Title

__all__ = ["Actor", "Title"]
