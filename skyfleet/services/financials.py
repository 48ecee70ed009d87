"""Ledger summaries over financial records."""

from __future__ import annotations

from collections.abc import Iterable

from skyfleet.contracts.enums import FinancialCategory
from skyfleet.contracts.financial import CategoryTotals, FinancialRecord


def account_totals(records: Iterable[FinancialRecord]) -> list[CategoryTotals]:
    """Income/expense per category.

    Child records itemise their parent and are counted under the parent's
    category; a parent that has children only contributes through them.
    """
    records = list(records)
    by_id = {r.id: r for r in records}
    parents_with_children = {r.parent_record_id for r in records if r.parent_record_id in by_id}

    totals: dict[str, CategoryTotals] = {}
    for record in records:
        if record.id in parents_with_children:
            continue
        parent = by_id.get(record.parent_record_id) if record.parent_record_id else None
        category = FinancialCategory((parent or record).category)
        entry = totals.setdefault(category.value, CategoryTotals(category=category))
        entry.income += record.income
        entry.expense += record.expense
    return sorted(totals.values(), key=lambda t: t.category)


def balance(records: Iterable[FinancialRecord]) -> int:
    return sum(t.net for t in account_totals(records))
