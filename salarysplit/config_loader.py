"""Load the financial preferences file."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping

import yaml

from .models import FinancialConfig

DEFAULT_CONFIG_PATH = Path("../config/preferences.yml")

_CONFIG_KEYS = {
    "salary_currency": "SalaryCurrency",
    "current_salary": "CurrentSalary",
    "cap_income_limit": "CapIncomeLimit",
}
_EXPENSE_KEYS = {
    "name": "Name",
    "is_fixed": "IsFixed",
    "min": "Min",
    "max": "Max",
    "type": "Type",
    "expected_amount": "ExpectedAmount",
    "active": "Active",
}


class ConfigError(Exception):
    """The preferences file is missing or malformed."""


def _rename(data: Any, keys: Mapping[str, str], what: str) -> dict[str, Any]:
    if not isinstance(data, Mapping):
        raise ConfigError(f"{what} must be a mapping")
    return {new: data[old] for old, new in keys.items() if old in data}


def parse_config(text: str) -> FinancialConfig:
    """Parse preferences YAML into a FinancialConfig."""
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"invalid YAML: {exc}") from exc
    if data is None:
        return FinancialConfig()
    wire = _rename(data, _CONFIG_KEYS, "preferences")
    expenses = data.get("expenses") or []
    if not isinstance(expenses, list):
        raise ConfigError("'expenses' must be a list")
    wire["Expenses"] = [_rename(item, _EXPENSE_KEYS, "each expense") for item in expenses]
    try:
        return FinancialConfig.from_dict(wire)
    except ValueError as exc:
        raise ConfigError(str(exc)) from exc


def load_config(path: str | Path = DEFAULT_CONFIG_PATH) -> FinancialConfig:
    """Read and parse the preferences file at path."""
    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Config file not found: {exc}") from exc
    return parse_config(text)