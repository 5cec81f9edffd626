from enum import Enum


class UserRole(str, Enum):
    """Enumerate the roles an authenticated caller can hold."""

    ADMIN = "ADMIN"
    USER = "USER"
