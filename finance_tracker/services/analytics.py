"""
Derived views over a user's transactions.

Every function here is pure: it takes rows that are already in memory
(ORM-backed response models or plain dicts) and returns new values. The
service layer fetches, these functions shape.
"""
import math
from datetime import date, datetime, timedelta
from typing import Any, Iterable

import pandas as pd

from finance_tracker.services.catalog import resolve_icon
from finance_tracker.services.formatting import format_date_label, weekday_labels

UNCATEGORIZED = {"es": "Sin categoría", "en": "Uncategorized"}
UNCATEGORIZED_COLOR = "#9ca3af"


def _get(item: Any, name: str):
    if isinstance(item, dict):
        return item.get(name)
    return getattr(item, name, None)


def calendar_day(value) -> date:
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone()
        return value.date()
    if isinstance(value, date):
        return value
    return date.fromisoformat(str(value)[:10])


def _amounts(transactions: Iterable, tx_type: str) -> list[float]:
    return [float(_get(t, "amount")) for t in transactions if _get(t, "type") == tx_type]


def aggregate(transactions: Iterable) -> dict:
    transactions = list(transactions)
    # fsum is exactly rounded, so the totals do not depend on input order
    total_income = math.fsum(_amounts(transactions, "income"))
    total_expenses = math.fsum(_amounts(transactions, "expense"))
    return {
        "total_income": total_income,
        "total_expenses": total_expenses,
        "balance": total_income - total_expenses,
    }


def income_expense_share(totals: dict) -> dict:
    income = totals["total_income"]
    expenses = totals["total_expenses"]
    whole = income + expenses
    if whole <= 0:
        return {"income_pct": 50.0, "expense_pct": 50.0}
    return {
        "income_pct": round(income / whole * 100, 1),
        "expense_pct": round(expenses / whole * 100, 1),
    }


def week_start(now) -> date:
    today = calendar_day(now)
    # weekday() is 0 for Monday and 6 for Sunday
    return today - timedelta(days=today.weekday())


def bucket_by_week(transactions: Iterable, now=None, locale: str | None = None) -> list[dict]:
    """
    Income and expense totals for each day, Monday to Sunday, of the week
    that contains ``now``. Rows dated outside that week are ignored.
    """
    monday = week_start(now if now is not None else datetime.now())
    labels = weekday_labels(locale)

    per_day: dict[date, dict[str, list[float]]] = {
        monday + timedelta(days=i): {"income": [], "expense": []} for i in range(7)
    }
    for t in transactions:
        slot = per_day.get(calendar_day(_get(t, "date")))
        tx_type = _get(t, "type")
        if slot is not None and tx_type in slot:
            slot[tx_type].append(float(_get(t, "amount")))

    return [
        {
            "day": labels[i],
            "date": day,
            "income": math.fsum(slot["income"]),
            "expense": math.fsum(slot["expense"]),
        }
        for i, (day, slot) in enumerate(per_day.items())
    ]


def _matches(transaction: Any, needle: str) -> bool:
    description = _get(transaction, "description")
    if description and needle in description.casefold():
        return True
    category_name = _get(_get(transaction, "categories"), "name")
    return bool(category_name) and needle in category_name.casefold()


def filter_transactions(transactions: Iterable, filter_type: str = "all", search_query: str = "") -> list:
    filtered = list(transactions)

    if filter_type != "all":
        filtered = [t for t in filtered if _get(t, "type") == filter_type]

    if search_query:
        needle = search_query.casefold()
        filtered = [t for t in filtered if _matches(t, needle)]

    return filtered


def group_by_date(transactions: Iterable, locale: str | None = None) -> dict[str, list]:
    """Groups keep the order in which their first row appears."""
    grouped: dict[str, list] = {}
    for t in transactions:
        label = format_date_label(calendar_day(_get(t, "date")), locale)
        grouped.setdefault(label, []).append(t)
    return grouped


def filter_and_group(transactions: Iterable, filter_type: str = "all", search_query: str = "",
                     locale: str | None = None) -> dict[str, list]:
    return group_by_date(filter_transactions(transactions, filter_type, search_query), locale)


def category_breakdown(transactions: Iterable, tx_type: str = "expense", locale: str | None = None) -> list[dict]:
    rows = []
    for t in transactions:
        if _get(t, "type") != tx_type:
            continue
        snapshot = _get(t, "categories")
        rows.append({
            "category_id": _get(t, "category_id") if snapshot else "",
            "name": _get(snapshot, "name") or UNCATEGORIZED.get(locale, UNCATEGORIZED["es"]),
            "icon": _get(snapshot, "icon") or resolve_icon(None).name,
            "color": _get(snapshot, "color") or UNCATEGORIZED_COLOR,
            "amount": float(_get(t, "amount")),
        })
    if not rows:
        return []

    df = pd.DataFrame(rows)
    grouped = (
        df.groupby(["category_id", "name", "icon", "color"], sort=False)["amount"]
        .agg(total="sum", entries="count")
        .reset_index()
        .sort_values("total", ascending=False, kind="stable")
    )
    grand_total = grouped["total"].sum()

    return [
        {
            "category_id": r.category_id or None,
            "name": r.name,
            "icon": r.icon,
            "component": resolve_icon(r.icon).component,
            "color": r.color,
            "total": round(float(r.total), 2),
            "share": round(float(r.total) / grand_total * 100, 1) if grand_total else 0.0,
            "count": int(r.entries),
        }
        for r in grouped.itertuples(index=False)
    ]
