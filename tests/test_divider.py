import pytest

from salarysplit.divider import IncomeBelowCapError, divide_expenses
from salarysplit.models import Expense, FinancialConfig


def _config(salary, expenses, currency="NPR", cap=0.0):
    return FinancialConfig(salary_currency=currency, current_salary=salary, cap_income_limit=cap, expenses=expenses)


def _rows(result):
    return {row.name: row for row in result}


def _base_expenses(fund_max=0.0):
    return [
        Expense(name="Rent", is_fixed=True, max=400.0, type="Liabilities", active=True),
        Expense(name="Fund", min=100.0, max=fund_max, type="Investment", active=True),
        Expense(name="Bank", min=100.0, type="Saving", active=True),
    ]


def test_below_cap_raises():
    with pytest.raises(IncomeBelowCapError):
        divide_expenses(_config(100.0, [], cap=200.0))


def test_even_split_of_remaining():
    rows = _rows(divide_expenses(_config(1000.0, _base_expenses())))
    assert rows["Fund"].amount == rows["Bank"].amount == 300.0
    assert rows["Rent"].amount == 400.0


def test_row_order_and_total_types():
    result = divide_expenses(_config(1000.0, _base_expenses()))
    names = [row.name for row in result]
    assert names == [
        "Fund", "Total Investment", "Bank", "Total Saving", "Rent", "Total Liabilities", "Total Salary",
    ]
    types = {row.name: row.type for row in result}
    assert types["Total Investment"] == "L"
    assert types["Total Liabilities"] == "I"
    assert types["Total Salary"] == "T"
    assert result[-1].ratio == 100


def test_max_limit_moves_extra_to_others():
    rows = _rows(divide_expenses(_config(1000.0, _base_expenses(fund_max=150.0))))
    assert rows["Fund"].amount == 150.0
    total = rows["Fund"].amount + rows["Bank"].amount + rows["Rent"].amount
    assert total == 1000.0


def test_discrepancy_resolved_after_flooring():
    expenses = [
        Expense(name="A", min=100.0, type="Investment", active=True),
        Expense(name="B", min=100.0, type="Saving", active=True),
        Expense(name="C", min=100.0, type="Liabilities", active=True),
    ]
    rows = _rows(divide_expenses(_config(1000.0, expenses)))
    assert rows["A"].amount + rows["B"].amount + rows["C"].amount == 1000.0
    assert all(rows[name].amount == int(rows[name].amount) for name in "ABC")


def test_inactive_expenses_left_out():
    expenses = _base_expenses() + [Expense(name="Old", min=50.0, type="Saving", active=False)]
    rows = _rows(divide_expenses(_config(1000.0, expenses)))
    assert "Old" not in rows
    assert rows["Total Saving"].amount == rows["Bank"].amount


def test_totals_match_sections():
    rows = _rows(divide_expenses(_config(1000.0, _base_expenses(fund_max=150.0))))
    assert rows["Total Investment"].amount == rows["Fund"].amount
    assert rows["Total Liabilities"].ratio == rows["Rent"].ratio
    assert rows["Total Salary"].amount == 1000.0


def test_input_not_mutated():
    expenses = _base_expenses()
    config = _config(1000.0, expenses)
    divide_expenses(config)
    assert [e.amount for e in config.expenses] == [0.0, 0.0, 0.0]