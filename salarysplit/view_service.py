"""HTTP service serving the browser page that shows the preferences."""

from __future__ import annotations

import argparse
import contextlib
import logging

from .web import Response, make_server

log = logging.getLogger(__name__)

_COLUMNS = ("Expense", "Expected Amount", "Is Fixed", "Min", "Max", "Type", "Active")

_STYLE = (
    "body{font-family:Arial,sans-serif;margin:0;background:#f4f4f9;color:#333}"
    "header{background:#4CAF50;color:#fff;padding:1rem;text-align:center}"
    ".container{padding:2rem}"
    "table{width:100%;border-collapse:collapse;margin:1rem 0}"
    "th,td{border:1px solid #ddd;padding:.75rem;text-align:left}"
    "th{background:#4CAF50;color:#fff}"
    ".button{padding:.5rem 1rem;margin-top:1rem;background:#4CAF50;color:#fff;"
    "border:0;border-radius:5px;cursor:pointer}"
    ".button:hover{background:#45a049}"
)

_SCRIPT = """
const byId = id => document.getElementById(id);
const yesNo = flag => (flag ? "Yes" : "No");
fetch("http://localhost:8002")
  .then(response => response.json())
  .then(config => {
    byId("salaryCurrency").textContent = config.SalaryCurrency;
    byId("currentSalary").textContent = config.CurrentSalary;
    byId("capIncomeLimit").textContent = config.CapIncomeLimit;
    const body = byId("expensesTable");
    body.replaceChildren(...config.Expenses.map(e => {
      const tr = document.createElement("tr");
      for (const value of [e.Name, e.ExpectedAmount || "N/A", yesNo(e.IsFixed),
                           e.Min, e.Max, e.Type, yesNo(e.Active)]) {
        tr.appendChild(document.createElement("td")).textContent = value;
      }
      return tr;
    }));
  })
  .catch(error => console.error("Error fetching data:", error));
byId("callBtn").onclick = () => window.open("http://localhost:8000", "_blank");
"""


def render_index() -> str:
    """The page listing the preferences, with a button opening the report."""
    head_cells = "".join(f"<th>{name}</th>" for name in _COLUMNS)
    summary = "".join(
        f'<p>{label}: <span id="{ident}">Loading...</span></p>'
        for label, ident in (
            ("Salary Currency", "salaryCurrency"),
            ("Current Salary", "currentSalary"),
            ("Cap Income Limit", "capIncomeLimit"),
        )
    )
    return (
        '<!DOCTYPE html>\n<html lang="en">\n<head><meta charset="UTF-8">'
        f"<title>Monthly Income Division</title><style>{_STYLE}</style></head>\n<body>"
        "<header><h1>Monthly Income Division Per Expenses List</h1></header>"
        f'<div class="container">{summary}'
        f"<table><thead><tr>{head_cells}</tr></thead>"
        f'<tbody id="expensesTable"><tr><td colspan="{len(_COLUMNS)}">Loading...</td></tr></tbody></table>'
        '<button class="button" id="callBtn">View Income Division</button></div>'
        f"<script>{_SCRIPT}</script>\n</body>\n</html>\n"
    )


def handle(method: str, body: bytes) -> Response:
    """Answer any request with the index page."""
    return Response(200, render_index().encode("utf-8"), {"Content-Type": "text/html; charset=utf-8"})


def main(argv: list[str] | None = None) -> int:
    """Run the page service."""
    parser = argparse.ArgumentParser(description="Serve the preferences page.")
    parser.add_argument("--host", default="view")
    parser.add_argument("--port", type=int, default=3000)
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO)
    with make_server(handle, args.host, args.port) as server, contextlib.suppress(KeyboardInterrupt):
        log.info("Frontend running at http://%s:%d/", args.host, args.port)
        server.serve_forever()
    return 0