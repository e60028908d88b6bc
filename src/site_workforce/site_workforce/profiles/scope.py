from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from ..core.enums import Role


@dataclass(frozen=True)
class AccessScope:
    """Which sites a signed-in user may see and affect.

    Computed once at login and passed explicitly into every service call that
    reads or writes employee-derived data.
    """

    can_see_all_sites: bool
    scope_site: Optional[str] = None

    @classmethod
    def for_role(cls, role: Role, site_location: Optional[str]) -> "AccessScope":
        if role == Role.ADMIN:
            return cls(can_see_all_sites=True, scope_site=None)
        site = (site_location or "").strip() or None
        return cls(can_see_all_sites=False, scope_site=site)

    def allows_site(self, site_location: Optional[str]) -> bool:
        if self.can_see_all_sites:
            return True
        # A supervisor without a site sees nothing.
        return self.scope_site is not None and site_location == self.scope_site

    def allows(self, employee) -> bool:
        return self.allows_site(employee.site_location)

    def to_session(self) -> dict:
        return {"all_sites": self.can_see_all_sites, "site": self.scope_site}

    @classmethod
    def from_session(cls, data: Optional[Mapping[str, Any]]) -> "AccessScope":
        data = data or {}
        return cls(can_see_all_sites=bool(data.get("all_sites", False)), scope_site=data.get("site"))
