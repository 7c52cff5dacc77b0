"""Render the monthly division as a one-table PDF report."""

from __future__ import annotations

import base64
from typing import Iterable

from .models import TOTAL_INVESTMENT, TOTAL_LIABILITIES, TOTAL_SALARY, TOTAL_SAVING, MonthlyExpenseDivision

_K = 72 / 25.4  # points per millimetre
_PAGE_W, _PAGE_H = 210.0, 297.0
_MARGIN, _BOTTOM_MARGIN = 10.0, 20.0

# Helvetica-Bold advance widths for the printable ASCII characters.
_WIDTHS = dict(zip(map(chr, range(32, 127)), [
    278, 333, 474, 556, 556, 889, 722, 238, 333, 333, 389, 584, 278, 333, 278, 278,
    556, 556, 556, 556, 556, 556, 556, 556, 556, 556, 333, 333, 584, 584, 584, 611,
    975, 722, 722, 722, 722, 667, 611, 778, 722, 278, 556, 722, 611, 833, 722, 778,
    667, 778, 722, 667, 611, 722, 667, 944, 667, 667, 611, 333, 278, 333, 584, 556,
    333, 556, 611, 556, 611, 556, 333, 611, 611, 278, 278, 556, 278, 889, 611, 611,
    611, 611, 389, 556, 333, 611, 556, 778, 556, 556, 500, 389, 280, 389, 584,
]))

_HEADER = (
    ("Expenses List", 40), ("Amount", 40), ("Types", 30),
    ("% of Total Salary", 30), ("Done", 20), ("Dates", 25),
)
_WHITE = (255, 255, 255)
_ROW_COLOURS = {
    TOTAL_INVESTMENT: (133, 255, 149),
    TOTAL_SAVING: (145, 255, 255),
    TOTAL_LIABILITIES: (254, 85, 78),
    TOTAL_SALARY: (220, 151, 255),
}


class PdfDocument:
    """A minimal A4 portrait PDF writer drawing bordered, filled, centred cells."""

    def __init__(self, font_size: float = 10.0) -> None:
        self.font_size = font_size
        self._fill = _WHITE
        self._pages: list[list[str]] = []
        self._x = self._y = _MARGIN
        self._last_height = 0.0
        self._add_page()

    def _add_page(self) -> None:
        self._pages.append([f"{0.2 * _K:.2f} w", self._fill_op()])
        self._x = self._y = _MARGIN

    def _fill_op(self) -> str:
        return " ".join(f"{c / 255:.3f}" for c in self._fill) + " rg"

    def set_fill_color(self, red: int, green: int, blue: int) -> None:
        self._fill = (red, green, blue)
        self._pages[-1].append(self._fill_op())

    def cell(self, width: float, height: float, text: str) -> None:
        """Draw a bordered, filled cell with centred text and move right."""
        if self._y + height > _PAGE_H - _BOTTOM_MARGIN:
            x = self._x
            self._add_page()
            self._x = x
        ops = self._pages[-1]
        ops.append(f"{self._x * _K:.2f} {(_PAGE_H - self._y) * _K:.2f} {width * _K:.2f} {-height * _K:.2f} re B")
        if text:
            text_width = sum(_WIDTHS.get(ch, 556) for ch in text) * self.font_size / 1000 / _K
            tx = self._x + (width - text_width) / 2
            ty = _PAGE_H - (self._y + 0.5 * height + 0.3 * self.font_size / _K)
            safe = text.encode("latin-1", "replace").decode("latin-1")
            safe = safe.replace("\\", "\\\\").replace("(", "\\(").replace(")", "\\)")
            ops.append(f"BT /F1 {self.font_size:.2f} Tf {tx * _K:.2f} {ty * _K:.2f} Td ({safe}) Tj ET")
        self._x += width
        self._last_height = height

    def line_break(self) -> None:
        self._x = _MARGIN
        self._y += self._last_height

    def output(self) -> bytes:
        """Serialise the document to PDF bytes."""
        count = len(self._pages)
        kids = " ".join(f"{4 + 2 * i} 0 R" for i in range(count))
        objects = [
            b"<< /Type /Catalog /Pages 2 0 R >>",
            f"<< /Type /Pages /Kids [{kids}] /Count {count} "
            f"/MediaBox [0 0 {_PAGE_W * _K:.2f} {_PAGE_H * _K:.2f}] >>".encode(),
            b"<< /Type /Font /Subtype /Type1 /BaseFont /Helvetica-Bold /Encoding /WinAnsiEncoding >>",
        ]
        for i, ops in enumerate(self._pages):
            stream = "\n".join(ops).encode("latin-1")
            objects.append(
                f"<< /Type /Page /Parent 2 0 R /Resources << /Font << /F1 3 0 R >> >> "
                f"/Contents {5 + 2 * i} 0 R >>".encode()
            )
            objects.append(f"<< /Length {len(stream)} >>\nstream\n".encode() + stream + b"\nendstream")

        out = bytearray(b"%PDF-1.3\n")
        offsets = []
        for number, body in enumerate(objects, start=1):
            offsets.append(len(out))
            out += f"{number} 0 obj\n".encode() + body + b"\nendobj\n"
        xref_at = len(out)
        out += f"xref\n0 {len(objects) + 1}\n0000000000 65535 f \n".encode()
        out += "".join(f"{offset:010d} 00000 n \n" for offset in offsets).encode()
        out += f"trailer\n<< /Size {len(objects) + 1} /Root 1 0 R >>\nstartxref\n{xref_at}\n%%EOF\n".encode()
        return bytes(out)


def render_report(divisions: Iterable[MonthlyExpenseDivision]) -> bytes:
    """Build the monthly finance report PDF."""
    pdf = PdfDocument()
    pdf.set_fill_color(254, 180, 120)
    for title, width in _HEADER:
        pdf.cell(width, 10, title)
    pdf.line_break()
    for row in divisions:
        pdf.set_fill_color(*_ROW_COLOURS.get(row.name, _WHITE))
        values = (row.name, f"{row.amount:.2f}", row.type, f"{row.ratio:.2f}%", "", "")
        for (_, width), value in zip(_HEADER, values):
            pdf.cell(width, 10, value)
        pdf.line_break()
    return pdf.output()


def encode_report(divisions: Iterable[MonthlyExpenseDivision]) -> str:
    """Build the report PDF and return it base64-encoded."""
    return base64.b64encode(render_report(divisions)).decode("ascii")