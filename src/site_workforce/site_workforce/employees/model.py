from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Optional


@dataclass(frozen=True)
class Employee:
    """Domain entity: a site worker.

    ``employee_code`` is the human-readable, unique code shown on screens
    and exports; ``employee_id`` is the storage identity.
    """

    employee_id: int
    employee_code: str
    name: str
    job_category: str
    daily_wage: Decimal
    site_location: str
    added_by: Optional[int] = None
    created_at: Optional[datetime] = None
