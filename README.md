# salarysplit

Split a monthly salary across your expenses and get the result as a
table or a one-page PDF report.

Each active expense is either **fixed** (it always takes its `max`) or
**varying** (it starts at its `min`). Whatever is left of the salary is
shared among the varying expenses in proportion to their `min`, in whole
units. Any amount that pushes a varying expense past a non-zero `max` is
capped and the excess is handed on, in order, to Investment, then Saving,
then Liabilities entries, and finally to expenses with no upper limit
(`max: 0`). For salaries in `NPR` amounts are floored to whole units.
A remaining difference between the total and the salary is settled on
the first varying expense that can take it; if none can, a warning is
logged.

## Installation

```
pip install salarysplit
```

## Preferences file

Preferences are written in YAML:

```yaml
salary_currency: NPR
current_salary: 100000
cap_income_limit: 50000
expenses:
  - name: Rent
    type: Liabilities
    is_fixed: true
    max: 20000
    active: true
  - name: Mutual fund
    type: Investment
    is_fixed: false
    min: 10000
    max: 30000
    active: true
  - name: Emergency fund
    type: Saving
    is_fixed: false
    min: 5000
    max: 0        # 0 means no upper limit
    active: true
```

`type` is one of `Investment`, `Saving` or `Liabilities`. An expense may
also carry `expected_amount`, which is shown on the view page only.
Inactive expenses are ignored. `cap_income_limit` is the lowest salary
the division is made for.

## Using it from Python

```python
from salarysplit.config_loader import load_config
from salarysplit.divider import divide_expenses, IncomeBelowCapError
from salarysplit.pdfreport import render_report

config = load_config("preferences.yml")

try:
    rows = divide_expenses(config)
except IncomeBelowCapError:
    raise SystemExit("salary is below the cap income limit")

for row in rows:
    print(f"{row.name:20} {row.amount:>12.2f} {row.ratio:>5.0f}%")

with open("report.pdf", "wb") as fh:
    fh.write(render_report(rows))
```

- `load_config(path)` reads a preferences file (by default
  `../config/preferences.yml`, relative to the working directory);
  `parse_config(text)` does the same for YAML text in memory. A missing
  file or malformed preferences raise `ConfigError`.
- `divide_expenses(config)` leaves `config` unchanged and returns a list
  of `MonthlyExpenseDivision` rows: the Investment entries followed by
  their total, then Saving and its total, then Liabilities and its
  total, and finally `Total Salary` at 100. Each ratio is the share of
  the salary in percent, rounded to a whole number. It raises
  `IncomeBelowCapError` when the salary is below `cap_income_limit`.
- `render_report(rows)` returns the PDF bytes of an A4 table with the
  columns Expenses List, Amount, Types, % of Total Salary, Done and
  Dates, the total rows coloured; `encode_report(rows)` returns the same
  PDF as base64 text. `PdfDocument` is the small PDF writer behind them.

`FinancialConfig`, `Expense` and `MonthlyExpenseDivision` (in
`salarysplit.models`) offer `from_dict` and `to_dict` for exchanging
them as JSON, with keys such as `CurrentSalary` and `Expenses`.

## Running the services

The package also ships as a set of small HTTP services that work
together:

| Command               | Role                                                     | Default address          |
|-----------------------|----------------------------------------------------------|--------------------------|
| `salarysplit-builder` | serves the preferences file as JSON (GET)                | `json_builder:8002`      |
| `salarysplit-divider` | takes a configuration and returns the division (POST)    | `expenses_divider:8001`  |
| `salarysplit-report`  | takes a division and returns a base64 PDF (POST)         | `report_generator:8003`  |
| `salarysplit-hub`     | chains the three above and returns the PDF (GET)         | `hub:8000`               |
| `salarysplit-view`    | a web page showing the preferences with a report button  | `view:3000`              |

The default host names suit a setup where each service runs under that
name. Every command takes `--host` and `--port`; `salarysplit-builder`
also takes `--config`, and `salarysplit-hub` takes `--builder-url`,
`--divider-url` and `--report-url`. To run everything on one machine,
start each in its own terminal:

```
salarysplit-builder --host localhost --config preferences.yml
salarysplit-divider --host localhost
salarysplit-report --host localhost
salarysplit-hub --host localhost --builder-url http://localhost:8002/ --divider-url http://localhost:8001/ --report-url http://localhost:8003/
salarysplit-view --host localhost
```

Open `http://localhost:3000/` and press **View Income Division** to get
the PDF report from the hub. The page always fetches the preferences
from `http://localhost:8002` and opens the report at
`http://localhost:8000`, so the builder and the hub must be reachable
there.

## What it does not do

The preferences are only read: there is no way to edit them from the
page or over HTTP, and no reports are stored. The Done and Dates columns
of the report are left blank for filling in by hand.

## Running the tests

```
pip install "salarysplit[test]"
pytest
```