"""Database model exports."""

from .profile import MAX_SQL_INTEGER, MIN_SQL_INTEGER, Profile, ProfileCreate

__all__ = ["MAX_SQL_INTEGER", "MIN_SQL_INTEGER", "Profile", "ProfileCreate"]
