import csv
import io
from typing import Any

from openpyxl import load_workbook

from doc_intake.extraction.base import BaseTextExtractor
from doc_intake.extraction.exceptions import ExtractionError


class XlsxAdapter(BaseTextExtractor):
    """Converts every sheet of a workbook to CSV, in sheet order.

    Sheets are joined with a single newline.
    """

    def extract(self, content: bytes) -> str:
        try:
            workbook = load_workbook(io.BytesIO(content), data_only=True)
            sheets = [self._sheet_to_csv(workbook[name]) for name in workbook.sheetnames]
        except Exception as exc:
            raise ExtractionError(f"Could not read XLSX workbook ({exc})") from exc
        return "\n".join(sheets)

    def _sheet_to_csv(self, sheet: Any) -> str:
        buffer = io.StringIO()
        writer = csv.writer(buffer, lineterminator="\n")
        for row in sheet.iter_rows(values_only=True):
            cells = [_cell_to_str(value) for value in row]
            if any(cells):
                writer.writerow(cells)
            else:
                # csv quotes a lone empty field; blank rows stay blank lines
                buffer.write("\n")
        return buffer.getvalue().rstrip("\n")


def _cell_to_str(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)
