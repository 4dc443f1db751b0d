"""Spreadsheet extractors.

Only the first sheet of a workbook is read; additional sheets are ignored.
The sheet is serialized as comma-delimited text, one line per row.
"""

import csv
import io
from collections.abc import Iterable

import openpyxl
import xlrd

from docanalyst.extraction.base import BaseTextExtractor
from docanalyst.extraction.exceptions import ExtractionError


def _cell_value(cell: object) -> object:
    if cell is None:
        return ""
    # xlrd reports every number as float
    if isinstance(cell, float) and cell.is_integer():
        return int(cell)
    return cell


def rows_to_csv(rows: Iterable[Iterable[object]]) -> str:
    """Serialize sheet rows to CSV text.

    Empty cells become empty fields and whole-number floats are written
    without a fractional part.
    """
    buf = io.StringIO()
    writer = csv.writer(buf, lineterminator="\n")
    for row in rows:
        writer.writerow([_cell_value(cell) for cell in row])
    return buf.getvalue()


class XlsxAdapter(BaseTextExtractor):
    """Reads the first sheet of an .xlsx workbook using openpyxl."""

    def extract(self, data: bytes) -> str:
        try:
            workbook = openpyxl.load_workbook(
                io.BytesIO(data), read_only=True, data_only=True
            )
        except Exception as exc:
            raise ExtractionError(f"xlsx extraction failed: {exc}") from exc
        try:
            if not workbook.worksheets:
                return ""
            sheet = workbook.worksheets[0]
            return rows_to_csv(sheet.iter_rows(values_only=True))
        finally:
            workbook.close()


class XlsAdapter(BaseTextExtractor):
    """Reads the first sheet of a legacy .xls workbook using xlrd."""

    def extract(self, data: bytes) -> str:
        try:
            workbook = xlrd.open_workbook(file_contents=data)
        except Exception as exc:
            raise ExtractionError(f"xls extraction failed: {exc}") from exc
        if workbook.nsheets == 0:
            return ""
        sheet = workbook.sheet_by_index(0)
        return rows_to_csv(sheet.row_values(i) for i in range(sheet.nrows))
