"""Data types shared by the salary-splitting services."""

from __future__ import annotations

from dataclasses import MISSING, dataclass, field, fields
from typing import Any, Mapping

LIABILITIES = "Liabilities"
SAVING = "Saving"
INVESTMENT = "Investment"
LIABILITIES_SHORT_HAND = "L"
SAVING_SHORT_HAND = "S"
INVESTMENT_SHORT_HAND = "I"
TOTAL_SALARY = "Total Salary"
TOTAL_LIABILITIES = "Total Liabilities"
TOTAL_SAVING = "Total Saving"
TOTAL_INVESTMENT = "Total Investment"


def _wire_name(attribute: str) -> str:
    return "".join(part.capitalize() for part in attribute.split("_"))


def _decode(cls: type, data: Any) -> dict[str, Any]:
    """Read the scalar fields of cls from a wire object, matching keys case-insensitively."""
    if not isinstance(data, Mapping):
        raise ValueError(f"expected an object, got {type(data).__name__}")
    lowered = {k.lower(): v for k, v in data.items() if isinstance(k, str)}
    values: dict[str, Any] = {}
    for f in fields(cls):
        if f.default is MISSING:
            continue
        key = _wire_name(f.name)
        value = data[key] if key in data else lowered.get(key.lower())
        if value is None:
            continue
        kind = type(f.default)
        if kind is float:
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ValueError(f"field {key!r} must be a number")
            value = float(value)
        elif not isinstance(value, kind):
            raise ValueError(f"field {key!r} must be a {kind.__name__}")
        values[f.name] = value
    return values


def _encode(obj: Any) -> dict[str, Any]:
    return {_wire_name(f.name): getattr(obj, f.name) for f in fields(obj)}


@dataclass
class Expense:
    """One expense line of a financial configuration."""

    name: str = ""
    is_fixed: bool = False
    min: float = 0.0
    max: float = 0.0
    type: str = ""
    amount: float = 0.0
    expected_amount: float = 0.0
    is_max_reached: bool = False
    is_min_reached: bool = False
    active: bool = False

    @classmethod
    def from_dict(cls, data: Any) -> "Expense":
        return cls(**_decode(cls, data))

    def to_dict(self) -> dict[str, Any]:
        return _encode(self)


@dataclass
class FinancialConfig:
    """Salary details and the expenses it is divided between."""

    salary_currency: str = ""
    current_salary: float = 0.0
    cap_income_limit: float = 0.0
    expenses: list[Expense] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> "FinancialConfig":
        values = _decode(cls, data)
        raw = {k.lower(): v for k, v in data.items() if isinstance(k, str)}.get("expenses")
        if raw is None:
            raw = []
        if not isinstance(raw, list):
            raise ValueError("field 'Expenses' must be a list")
        return cls(expenses=[Expense.from_dict(item) for item in raw], **values)

    def to_dict(self) -> dict[str, Any]:
        data = _encode(self)
        data["Expenses"] = [expense.to_dict() for expense in self.expenses]
        return data


@dataclass
class MonthlyExpenseDivision:
    """One row of the monthly division report."""

    name: str = ""
    amount: float = 0.0
    type: str = ""
    ratio: float = 0.0

    @classmethod
    def from_dict(cls, data: Any) -> "MonthlyExpenseDivision":
        return cls(**_decode(cls, data))

    def to_dict(self) -> dict[str, Any]:
        return _encode(self)