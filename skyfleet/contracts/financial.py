"""Financial records (SkyBucks ledger).

Stored at: ``/financial_records/{record_id}``

A record belongs to a user or an airline. Child records itemise a parent
(e.g. fuel + landing fees under one flight) and reference it through
``parent_record_id``.
"""

import uuid

from pydantic import Field

from skyfleet.contracts.common import FirestoreModel, UtcDateTime, utc_now
from skyfleet.contracts.enums import FinancialCategory


def _new_id() -> str:
    return uuid.uuid4().hex


class FinancialRecord(FirestoreModel):
    id: str = Field(default_factory=_new_id)
    timestamp: UtcDateTime = Field(default_factory=utc_now)
    category: FinancialCategory = FinancialCategory.NONE
    description: str = Field(..., min_length=1)
    income: int = Field(default=0, ge=0)
    expense: int = Field(default=0, ge=0)
    user_id: str | None = None
    airline_id: str | None = None
    aircraft_registry: str | None = None
    parent_record_id: str | None = None


class CategoryTotals(FirestoreModel):
    category: FinancialCategory
    income: int = 0
    expense: int = 0

    @property
    def net(self) -> int:
        return self.income - self.expense
