from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import Role


@dataclass(frozen=True)
class UserProfile:
    """Domain entity: an admin or site supervisor account.

    Note: Plain data object (no DB access code). ``site_location`` is only
    meaningful for supervisors.
    """

    user_id: int
    name: str
    email: str
    password_hash: str
    role: Role
    site_location: Optional[str] = None
