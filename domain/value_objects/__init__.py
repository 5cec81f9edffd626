from .identity import Identity
from .severity import Severity
from .title_kind import TitleKind
from .user_role import UserRole

__all__ = [
    "Identity",
    "Severity",
    "TitleKind",
    "UserRole",
]
