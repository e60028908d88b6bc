from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from werkzeug.security import check_password_hash, generate_password_hash

from ..common.validators import require_min_length, require_non_empty
from ..core.constants import MIN_PASSWORD_LENGTH
from ..core.enums import Role
from ..core.exceptions import AuthenticationError, DuplicateRecordError, ValidationError
from .model import UserProfile
from .repository import ProfileRepository
from .scope import AccessScope

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class SessionUser:
    """What we store into Flask session after login."""

    user_id: int
    name: str
    email: str
    role: Role
    site_location: Optional[str]
    scope: AccessScope


def _normalize_email(email: str) -> str:
    return require_non_empty(email, "Email").lower()


def _session_user(profile: UserProfile) -> SessionUser:
    return SessionUser(
        user_id=profile.user_id,
        name=profile.name,
        email=profile.email,
        role=profile.role,
        site_location=profile.site_location,
        scope=AccessScope.for_role(profile.role, profile.site_location),
    )


class AuthService:
    """Use case: sign in and self sign-up."""

    def __init__(self, profiles: ProfileRepository):
        self._profiles = profiles

    def authenticate(self, email: str, password: str) -> SessionUser:
        if not (email or "").strip() or not (password or "").strip():
            raise AuthenticationError("Please enter both email and password.")

        profile = self._profiles.get_by_email(_normalize_email(email))
        if not profile:
            raise AuthenticationError("Invalid email or password.")

        try:
            ok = check_password_hash(profile.password_hash, password)
        except ValueError:
            # e.g. placeholder hashes like 'CHANGE_ME' or corrupted values
            ok = False

        if not ok:
            raise AuthenticationError("Invalid email or password.")

        log.info("profile %s signed in (%s)", profile.user_id, profile.role.value)
        return _session_user(profile)

    def sign_up(
        self,
        *,
        email: str,
        password: str,
        name: str,
        role: Role = Role.SUPERVISOR,
        site_location: Optional[str] = None,
    ) -> int:
        email = _normalize_email(email)
        name = require_non_empty(name, "Name")
        require_min_length(password, "Password", MIN_PASSWORD_LENGTH)

        if role == Role.ADMIN:
            raise ValidationError("Admin accounts cannot be created from this screen")

        site = require_non_empty(site_location, "Site location")

        if self._profiles.get_by_email(email):
            raise DuplicateRecordError("Email already registered")

        user_id = self._profiles.create_profile(
            name=name,
            email=email,
            password_hash=generate_password_hash(password),
            role=role,
            site_location=site,
        )
        log.info("profile %s signed up as %s at %r", user_id, role.value, site)
        return user_id


class ProfileService:
    """Use case: view and edit the signed-in user's own profile."""

    def __init__(self, profiles: ProfileRepository):
        self._profiles = profiles

    def get_profile(self, user_id: int) -> UserProfile:
        profile = self._profiles.get_by_id(int(user_id))
        if not profile:
            raise ValidationError("Profile not found")
        return profile

    def update_profile(
        self,
        *,
        user_id: int,
        name: str,
        email: str,
        site_location: Optional[str] = None,
    ) -> SessionUser:
        profile = self.get_profile(user_id)

        name = require_non_empty(name, "Name")
        email = _normalize_email(email)

        other = self._profiles.get_by_email(email)
        if other and other.user_id != profile.user_id:
            raise DuplicateRecordError("Email already registered")

        if profile.role == Role.SUPERVISOR:
            site = (site_location or "").strip() or None
        else:
            site = None

        self._profiles.update_profile(user_id=profile.user_id, name=name, email=email, site_location=site)
        updated = self.get_profile(profile.user_id)
        log.info("profile %s updated", updated.user_id)
        return _session_user(updated)
