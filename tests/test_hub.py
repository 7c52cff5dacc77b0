import threading
from contextlib import contextmanager

import pytest

from salarysplit import divider_service, report_service
from salarysplit.builder_service import make_app as make_builder_app
from salarysplit.config_loader import parse_config
from salarysplit.divider import divide_expenses
from salarysplit.hub import HubError, generate_finance, make_app
from salarysplit.pdfreport import render_report
from salarysplit.web import Response, make_server

PREFERENCES = """\
salary_currency: NPR
current_salary: 100000
cap_income_limit: 50000
expenses:
  - name: Rent
    is_fixed: true
    max: 30000
    type: Liabilities
    active: true
  - name: Index Fund
    min: 10000
    max: 0
    type: Investment
    active: true
  - name: Emergency Fund
    min: 5000
    max: 20000
    type: Saving
    active: true
"""


@contextmanager
def _serving(app):
    server = make_server(app, "127.0.0.1", 0)
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    try:
        yield f"http://127.0.0.1:{server.server_address[1]}/"
    finally:
        server.shutdown()
        server.server_close()
        thread.join()


def _closed_url():
    server = make_server(lambda method, body: Response(), "127.0.0.1", 0)
    port = server.server_address[1]
    server.server_close()
    return f"http://127.0.0.1:{port}/"


@pytest.fixture
def services(tmp_path):
    def start(preferences=PREFERENCES, report_app=report_service.handle):
        path = tmp_path / "preferences.yml"
        path.write_text(preferences, encoding="utf-8")
        return path

    return start


@contextmanager
def _pipeline(path, report_app=report_service.handle):
    with _serving(make_builder_app(path)) as builder, _serving(
        divider_service.handle
    ) as divider, _serving(report_app) as report:
        yield builder, divider, report


def test_generate_finance_produces_expected_pdf(services):
    path = services()
    with _pipeline(path) as urls:
        pdf = generate_finance(*urls)
    assert pdf.startswith(b"%PDF-")
    assert pdf == render_report(divide_expenses(parse_config(PREFERENCES)))


def test_app_serves_pdf_inline(services):
    path = services()
    with _pipeline(path) as urls:
        response = make_app(*urls)("GET", b"")
    assert response.status == 200
    assert response.headers["Content-Type"] == "application/pdf"
    assert response.headers["Content-Disposition"] == "inline; filename=report.pdf"
    assert response.body.startswith(b"%PDF-")


def test_non_get_is_not_found():
    response = make_app(_closed_url(), _closed_url(), _closed_url())("POST", b"")
    assert response.status == 404
    assert response.body == b"404 page not found"


def test_unreachable_builder():
    url = _closed_url()
    with pytest.raises(HubError, match="Error calling json_builder"):
        generate_finance(url, url, url)


def test_app_reports_failure_as_server_error():
    url = _closed_url()
    response = make_app(url, url, url)("GET", b"")
    assert response.status == 500
    assert response.body.startswith(b"Error calling json_builder")


def test_divider_refusal_is_unmarshal_error(services):
    path = services(PREFERENCES.replace("cap_income_limit: 50000", "cap_income_limit: 500000"))
    with _pipeline(path) as urls:
        with pytest.raises(HubError, match="Error unmarshalling response from expenses_divider"):
            generate_finance(*urls)


def test_bad_base64_from_report(services):
    path = services()

    def broken_report(method, body):
        return Response(status=200, body=b"!!not base64!!")

    with _pipeline(path, broken_report) as urls:
        with pytest.raises(HubError, match="Error decoding base64 PDF content"):
            generate_finance(*urls)