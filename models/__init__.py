"""Pacote de modelos do gerenciador de contas."""

from .entities import Admin, Profile, User
from .enums import Gender
from .logged_profile import LoggedProfile, logged_profile

__all__ = [
    "Admin",
    "Gender",
    "LoggedProfile",
    "Profile",
    "User",
    "logged_profile",
]
