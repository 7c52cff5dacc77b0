"""Divide a monthly salary between fixed and varying expenses."""

from __future__ import annotations

import logging
import math
from dataclasses import replace
from typing import Iterator

from .models import (
    INVESTMENT,
    INVESTMENT_SHORT_HAND,
    LIABILITIES,
    LIABILITIES_SHORT_HAND,
    SAVING,
    SAVING_SHORT_HAND,
    TOTAL_INVESTMENT,
    TOTAL_LIABILITIES,
    TOTAL_SALARY,
    TOTAL_SAVING,
    Expense,
    FinancialConfig,
    MonthlyExpenseDivision,
)

log = logging.getLogger(__name__)

_ALLOCATION_ORDER = (INVESTMENT, SAVING, LIABILITIES)


class IncomeBelowCapError(ValueError):
    """The current salary is below the configured income cap."""


def _div(a: float, b: float) -> float:
    """IEEE division: dividing by zero yields infinity or NaN instead of raising."""
    if b != 0:
        return a / b
    if a == 0 or math.isnan(a):
        return math.nan
    return math.copysign(math.inf, a) * math.copysign(1.0, b)


def _floor(x: float) -> float:
    return float(math.floor(x)) if math.isfinite(x) else x


def _fmin(a: float, b: float) -> float:
    if math.isnan(a) or math.isnan(b):
        return math.nan
    return min(a, b)


def _round(x: float) -> float:
    """Round half away from zero."""
    if not math.isfinite(x):
        return x
    return math.copysign(math.floor(abs(x) + 0.5), x)


def _varying(expenses: list[Expense]) -> Iterator[Expense]:
    return (e for e in expenses if e.active and not e.is_fixed)


def _apply_base_amounts(expenses: list[Expense]) -> tuple[float, float]:
    total_fixed = 0.0
    total_varying = 0.0
    for expense in expenses:
        if not expense.active:
            continue
        if expense.is_fixed:
            expense.amount = expense.max
            total_fixed += expense.max
        else:
            expense.amount = expense.min
            total_varying += expense.min
    return total_fixed, total_varying


def _allocate_remaining(expenses: list[Expense], remaining: float, total_varying: float) -> None:
    if remaining == 0:
        return

    equal_division = 0.0
    for expense in _varying(expenses):
        expense.amount += _floor(remaining * _div(expense.amount, total_varying))
        equal_division += 1

    extra = 0.0
    for expense in _varying(expenses):
        if expense.amount == 0:
            continue
        if expense.max != 0 and expense.amount > expense.max:
            extra += expense.amount - expense.max
            expense.amount = expense.max
            expense.is_max_reached = True
            equal_division -= 1

    remaining_division = 0.0
    for round_index, expense_type in enumerate(_ALLOCATION_ORDER):
        if extra <= 0:
            return
        for expense in _varying(expenses):
            if expense.is_max_reached:
                continue
            if expense.max == 0 and round_index == 1:
                remaining_division += 1
            if expense.type != expense_type:
                continue
            share = _floor(extra * _div(1.0, equal_division))
            if expense.max > 0:
                gap = expense.max - expense.amount
                addition = _fmin(gap, share)
                if addition == gap:
                    expense.is_max_reached = True
                expense.amount += addition
                extra -= addition
            else:
                expense.amount += share
                extra -= share
            if extra <= 0:
                return

    if extra > 0:
        share = _floor(extra * _div(1.0, remaining_division))
        for expense in _varying(expenses):
            if expense.is_max_reached or expense.max != 0:
                continue
            expense.amount += share
            extra -= share
            if extra <= 0:
                return


def _adjust_for_discrepancy(salary: float, expenses: list[Expense]) -> None:
    discrepancy = sum(e.amount for e in expenses) - salary
    for expense in _varying(expenses):
        if discrepancy > 0:
            if expense.amount - discrepancy < expense.min:
                continue
            expense.amount -= abs(discrepancy)
            break
        if discrepancy < 0:
            if expense.max != 0:
                continue
            expense.amount += abs(discrepancy)
            break

    discrepancy = sum(e.amount for e in expenses) - salary
    if discrepancy != 0:
        log.warning("Discrepancy not resolved: %f", discrepancy)


def _summarise(salary: float, expenses: list[Expense]) -> list[MonthlyExpenseDivision]:
    sections = (
        (INVESTMENT, TOTAL_INVESTMENT, LIABILITIES_SHORT_HAND),
        (SAVING, TOTAL_SAVING, SAVING_SHORT_HAND),
        (LIABILITIES, TOTAL_LIABILITIES, INVESTMENT_SHORT_HAND),
    )
    rows: list[MonthlyExpenseDivision] = []
    for expense_type, total_name, total_type in sections:
        total_amount = 0.0
        total_ratio = 0.0
        for expense in expenses:
            if not expense.active or expense.type != expense_type:
                continue
            ratio = _round(_div(expense.amount, salary) * 100)
            rows.append(MonthlyExpenseDivision(expense.name, expense.amount, expense.type, ratio))
            total_amount += expense.amount
            total_ratio += ratio
        rows.append(MonthlyExpenseDivision(total_name, total_amount, total_type, total_ratio))
    rows.append(MonthlyExpenseDivision(TOTAL_SALARY, salary, "T", 100.0))
    return rows


def divide_expenses(config: FinancialConfig) -> list[MonthlyExpenseDivision]:
    """Work out the monthly amount for each expense and the per-type totals.

    The input configuration is left unchanged.
    """
    if config.current_salary < config.cap_income_limit:
        raise IncomeBelowCapError("Current salary is less than cap limit")

    expenses = [replace(expense) for expense in config.expenses]
    total_fixed, total_varying = _apply_base_amounts(expenses)
    remaining = config.current_salary - (total_fixed + total_varying)
    _allocate_remaining(expenses, remaining, total_varying)

    if config.salary_currency == "NPR":
        for expense in expenses:
            expense.amount = _floor(expense.amount)

    _adjust_for_discrepancy(config.current_salary, expenses)
    return _summarise(config.current_salary, expenses)