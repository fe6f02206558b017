from __future__ import annotations

from typing import Optional

from models.entities import Profile


class LoggedProfile:
    """Guarda o perfil autenticado durante a vida do processo."""

    def __init__(self) -> None:
        self._profile: Optional[Profile] = None

    def set_profile(self, profile: Optional[Profile]) -> None:
        self._profile = profile

    def get_profile(self) -> Optional[Profile]:
        return self._profile

    def clear(self) -> None:
        self._profile = None

    @property
    def is_authenticated(self) -> bool:
        return self._profile is not None


logged_profile = LoggedProfile()


__all__ = ["LoggedProfile", "logged_profile"]
