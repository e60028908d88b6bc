from __future__ import annotations

from typing import Iterable, Optional, Sequence

from ..core.enums import Role
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, unique_violation_as
from .model import UserProfile
from .repository import ProfileRepository

_COLUMNS = "user_id, name, email, password_hash, role, site_location"


def _to_profile(row: dict) -> UserProfile:
    return UserProfile(
        user_id=int(row["user_id"]),
        name=row["name"],
        email=row["email"],
        password_hash=row["password_hash"],
        role=Role(row["role"]),
        site_location=row.get("site_location"),
    )


class MySQLProfileRepository(ProfileRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, user_id: int) -> Optional[UserProfile]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM profiles WHERE user_id=%s", (int(user_id),))
            row = fetchone(cur)
            return _to_profile(row) if row else None

    def get_by_email(self, email: str) -> Optional[UserProfile]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM profiles WHERE email=%s", (email,))
            row = fetchone(cur)
            return _to_profile(row) if row else None

    def list_by_ids(self, user_ids: Iterable[int]) -> Sequence[UserProfile]:
        ids = sorted({int(i) for i in user_ids})
        if not ids:
            return []
        placeholders = ",".join(["%s"] * len(ids))
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM profiles WHERE user_id IN ({placeholders})", tuple(ids))
            return [_to_profile(r) for r in fetchall(cur)]

    def create_profile(
        self,
        *,
        name: str,
        email: str,
        password_hash: str,
        role: Role,
        site_location: Optional[str],
    ) -> int:
        with unique_violation_as("Email already registered"):
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    """
                    INSERT INTO profiles(name, email, password_hash, role, site_location)
                    VALUES(%s,%s,%s,%s,%s)
                    """,
                    (name, email, password_hash, role.value, site_location),
                )
                return int(cur.lastrowid)

    def update_profile(
        self,
        *,
        user_id: int,
        name: str,
        email: str,
        site_location: Optional[str],
    ) -> None:
        with unique_violation_as("Email already registered"):
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    """
                    UPDATE profiles
                    SET name=%s, email=%s, site_location=%s
                    WHERE user_id=%s
                    """,
                    (name, email, site_location, int(user_id)),
                )
