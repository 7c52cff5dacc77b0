import json

import pytest

from salarysplit.divider import divide_expenses
from salarysplit.divider_service import handle
from salarysplit.models import FinancialConfig


def _config():
    return FinancialConfig.from_dict(
        {
            "SalaryCurrency": "NPR",
            "CurrentSalary": 1000,
            "CapIncomeLimit": 500,
            "Expenses": [
                {"Name": "Rent", "IsFixed": True, "Max": 400, "Type": "Liabilities", "Active": True},
                {"Name": "Savings", "Min": 100, "Type": "Saving", "Active": True},
            ],
        }
    )


@pytest.mark.parametrize("method", ["GET", "PUT", "DELETE"])
def test_only_post_is_allowed(method):
    response = handle(method, b"")
    assert response.status == 405
    assert response.body == b"Only POST method is allowed\n"


@pytest.mark.parametrize("body", [b"", b"{not json", b"[1, 2]", b'{"CurrentSalary": "lots"}'])
def test_invalid_payload(body):
    response = handle("POST", body)
    assert response.status == 400
    assert response.body == b"Invalid payload\n"


def test_salary_below_cap_fails():
    body = json.dumps({"CurrentSalary": 100, "CapIncomeLimit": 500}).encode()
    response = handle("POST", body)
    assert response.status == 500
    assert response.body == b"Failed to generate monthly expenses\n"


def test_division_matches_divider():
    config = _config()
    response = handle("POST", json.dumps(config.to_dict()).encode())
    assert response.status == 200
    assert response.headers["Content-Type"] == "application/json"
    rows = json.loads(response.body)
    assert rows == [row.to_dict() for row in divide_expenses(config)]


def test_last_row_is_total_salary():
    config = _config()
    rows = json.loads(handle("POST", json.dumps(config.to_dict()).encode()).body)
    assert rows[-1]["Name"] == "Total Salary"
    assert rows[-1]["Amount"] == config.current_salary
    assert rows[-1]["Ratio"] == 100


def test_unrepresentable_ratio_fails_to_marshal():
    body = json.dumps(
        {"CurrentSalary": 0, "Expenses": [{"Name": "x", "Type": "Saving", "Active": True}]}
    ).encode()
    response = handle("POST", body)
    assert response.status == 500
    assert response.body == b"Failed to marshal response\n"