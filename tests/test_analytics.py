import random
from datetime import date, datetime, timedelta

from finance_tracker.schemas.transaction import CategorySnapshot, TransactionResponse
from finance_tracker.services.analytics import (
    aggregate,
    bucket_by_week,
    category_breakdown,
    filter_and_group,
    filter_transactions,
    group_by_date,
    income_expense_share,
    week_start,
)


def trx(amount, type, day, description=None, category=None, **extra):
    row = {"amount": amount, "type": type, "date": day, "description": description}
    if category:
        row["categories"] = {"name": category, "icon": "money", "color": "#3b82f6"}
        row["category_id"] = f"cat-{category.lower()}"
    row.update(extra)
    return row


def scenario():
    return [
        trx(100, "income", date(2024, 3, 4)),
        trx(40, "expense", date(2024, 3, 4)),
        trx(20, "expense", date(2024, 3, 6)),
    ]


def test_aggregate_empty_is_zero():
    assert aggregate([]) == {"total_income": 0, "total_expenses": 0, "balance": 0}


def test_aggregate_scenario():
    assert aggregate(scenario()) == {"total_income": 100, "total_expenses": 60, "balance": 40}


def test_balance_is_income_minus_expenses():
    rows = [trx(0.1, "income", date(2024, 1, 1)), trx(0.2, "income", date(2024, 1, 2)),
            trx(0.3, "expense", date(2024, 1, 3)), trx(1234.56, "expense", date(2024, 1, 4))]
    result = aggregate(rows)
    assert result["balance"] == result["total_income"] - result["total_expenses"]


def test_aggregate_ignores_order():
    rows = [trx(round(random.uniform(1, 1000), 2), random.choice(["income", "expense"]), date(2024, 1, 1))
            for _ in range(200)]
    expected = aggregate(rows)
    for _ in range(5):
        random.shuffle(rows)
        assert aggregate(rows) == expected


def test_aggregate_accepts_response_models():
    now = datetime(2024, 3, 1, 10, 0)
    rows = [
        TransactionResponse(id="1", user_id="u", amount=50, type="income", date=date(2024, 3, 1),
                            category_id="c", created_at=now, updated_at=now),
        TransactionResponse(id="2", user_id="u", amount=20, type="expense", date=date(2024, 3, 1),
                            category_id="c", created_at=now, updated_at=now),
    ]
    assert aggregate(rows)["balance"] == 30


def test_income_expense_share():
    assert income_expense_share({"total_income": 0, "total_expenses": 0}) == {"income_pct": 50.0, "expense_pct": 50.0}
    assert income_expense_share({"total_income": 300, "total_expenses": 100}) == {"income_pct": 75.0, "expense_pct": 25.0}


def test_week_start_is_monday():
    assert week_start(date(2024, 3, 7)) == date(2024, 3, 4)
    assert week_start(date(2024, 3, 4)) == date(2024, 3, 4)
    # Sunday belongs to the week that started six days earlier
    assert week_start(date(2024, 3, 10)) == date(2024, 3, 4)


def test_week_has_seven_days_in_fixed_order():
    start = date(2024, 3, 4)
    for offset in range(7):
        buckets = bucket_by_week([], start + timedelta(days=offset), locale="en")
        assert [b["day"] for b in buckets] == ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]
        assert [b["date"] for b in buckets] == [start + timedelta(days=i) for i in range(7)]


def test_week_labels_default_to_spanish():
    buckets = bucket_by_week([], date(2024, 3, 7))
    assert [b["day"] for b in buckets] == ["Lun", "Mar", "Mié", "Jue", "Vie", "Sáb", "Dom"]


def test_bucket_scenario():
    buckets = bucket_by_week(scenario(), datetime(2024, 3, 7, 18, 30), locale="en")
    by_day = {b["day"]: (b["income"], b["expense"]) for b in buckets}
    assert by_day["Mon"] == (100, 40)
    assert by_day["Wed"] == (0, 20)
    for day in ("Tue", "Thu", "Fri", "Sat", "Sun"):
        assert by_day[day] == (0, 0)


def test_today_counts_once_by_calendar_day():
    now = datetime(2024, 3, 7, 23, 59)
    rows = [trx(15, "expense", date(2024, 3, 7))]
    buckets = bucket_by_week(rows, now, locale="en")
    assert [b["expense"] for b in buckets] == [0, 0, 0, 15, 0, 0, 0]


def test_rows_outside_week_are_dropped():
    rows = [trx(500, "income", date(2024, 3, 3)), trx(70, "expense", date(2024, 3, 11))]
    buckets = bucket_by_week(rows, date(2024, 3, 7))
    assert all(b["income"] == 0 and b["expense"] == 0 for b in buckets)


def test_bucket_is_idempotent():
    now = date(2024, 3, 7)
    assert bucket_by_week(scenario(), now) == bucket_by_week(scenario(), now)


def test_filter_income_keeps_order():
    rows = [
        trx(1, "income", date(2024, 3, 5), "a"),
        trx(2, "expense", date(2024, 3, 5), "b"),
        trx(3, "income", date(2024, 3, 4), "c"),
    ]
    assert [r["description"] for r in filter_transactions(rows, "income", "")] == ["a", "c"]

    grouped = filter_and_group(rows, "income", "")
    assert [r["amount"] for items in grouped.values() for r in items] == [1, 3]


def test_search_is_case_insensitive():
    rows = [trx(10, "expense", date(2024, 3, 1), "Supermercado")]
    assert filter_transactions(rows, "all", "super") == rows
    assert filter_transactions(rows, "all", "SUPER") == rows
    assert filter_transactions(rows, "all", "farmacia") == []


def test_search_matches_category_name():
    rows = [
        trx(10, "expense", date(2024, 3, 1), None, category="Transporte"),
        trx(20, "expense", date(2024, 3, 1), "Taxi"),
    ]
    assert [r["amount"] for r in filter_transactions(rows, "all", "transp")] == [10]


def test_missing_description_never_matches():
    rows = [trx(10, "expense", date(2024, 3, 1))]
    assert filter_transactions(rows, "all", "a") == []
    assert filter_transactions(rows, "all", "") == rows


def test_group_by_date_uses_calendar_day():
    rows = [
        trx(1, "expense", datetime(2024, 3, 1, 8, 0), "breakfast"),
        trx(2, "expense", datetime(2024, 3, 1, 21, 45), "dinner"),
        trx(3, "income", date(2024, 2, 29), "salary"),
    ]
    grouped = group_by_date(rows)
    assert list(grouped) == ["viernes, 1 de marzo de 2024", "jueves, 29 de febrero de 2024"]
    assert [r["description"] for r in grouped["viernes, 1 de marzo de 2024"]] == ["breakfast", "dinner"]


def test_group_labels_in_english():
    grouped = group_by_date([trx(1, "income", date(2024, 3, 1))], locale="en")
    assert list(grouped) == ["Friday, 1 March 2024"]


def test_category_breakdown():
    rows = [
        trx(30, "expense", date(2024, 3, 1), category="Mercado"),
        trx(10, "expense", date(2024, 3, 2), category="Transporte"),
        trx(60, "expense", date(2024, 3, 3), category="Mercado"),
        trx(999, "income", date(2024, 3, 3), category="Salario"),
    ]
    breakdown = category_breakdown(rows, "expense")
    assert [(b["name"], b["total"], b["share"], b["count"]) for b in breakdown] == [
        ("Mercado", 90.0, 90.0, 2),
        ("Transporte", 10.0, 10.0, 1),
    ]
    assert breakdown[0]["category_id"] == "cat-mercado"


def test_category_breakdown_without_category():
    breakdown = category_breakdown([trx(5, "expense", date(2024, 3, 1))])
    assert breakdown == [{
        "category_id": None, "name": "Sin categoría", "icon": "question", "component": "Question",
        "color": "#9ca3af",
        "total": 5.0, "share": 100.0, "count": 1,
    }]


def test_category_breakdown_empty():
    assert category_breakdown([], "income") == []


def test_search_reads_snapshot_models():
    now = datetime(2024, 3, 1, 10, 0)
    row = TransactionResponse(id="1", user_id="u", amount=50, type="expense", date=date(2024, 3, 1),
                              category_id="c", created_at=now, updated_at=now,
                              categories=CategorySnapshot(name="Salud", icon="pill", color="#f43f5e"))
    assert filter_transactions([row], "expense", "SAL") == [row]
