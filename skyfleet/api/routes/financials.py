"""Account statements built from financial records."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from skyfleet.api.deps import get_financial_repo
from skyfleet.contracts.financial import FinancialRecord
from skyfleet.persistence.repositories.financial_repo import FinancialRecordRepository
from skyfleet.services.financials import account_totals, balance

router = APIRouter(prefix="/financials", tags=["financials"])


def _statement(records: list[FinancialRecord]) -> dict:
    return {
        "categories": [
            {**t.model_dump(mode="json"), "net": t.net} for t in account_totals(records)
        ],
        "balance": balance(records),
    }


@router.get("/users/{user_id}")
async def user_statement(
    user_id: str,
    repo: FinancialRecordRepository = Depends(get_financial_repo),
) -> dict:
    return _statement(await repo.list_for_user(user_id))


@router.get("/airlines/{icao}")
async def airline_statement(
    icao: str,
    repo: FinancialRecordRepository = Depends(get_financial_repo),
) -> dict:
    return _statement(await repo.list_for_airline(icao.upper()))
