from __future__ import annotations

from typing import Iterable, Optional, Protocol, Sequence

from ..core.enums import Role
from .model import UserProfile


class ProfileRepository(Protocol):
    """Repository interface for user profiles.

    Note (DIP): services depend on this interface, not on a concrete DB.
    """

    def get_by_id(self, user_id: int) -> Optional[UserProfile]:
        raise NotImplementedError

    def get_by_email(self, email: str) -> Optional[UserProfile]:
        raise NotImplementedError

    def list_by_ids(self, user_ids: Iterable[int]) -> Sequence[UserProfile]:
        raise NotImplementedError

    def create_profile(
        self,
        *,
        name: str,
        email: str,
        password_hash: str,
        role: Role,
        site_location: Optional[str],
    ) -> int:
        raise NotImplementedError

    def update_profile(
        self,
        *,
        user_id: int,
        name: str,
        email: str,
        site_location: Optional[str],
    ) -> None:
        """Overwrite editable fields; MySQL reports 0 affected rows when nothing changed."""

        raise NotImplementedError
