"""
Cell-level helpers: value kinds, header styling, KPI cards, column fitting.
"""
from __future__ import annotations

from openpyxl.cell.cell import Cell, MergedCell
from openpyxl.utils import get_column_letter
from openpyxl.worksheet.worksheet import Worksheet

from simpledata.excel import styles

# Column kind -> Excel number format. "text" has none.
NUMBER_FORMATS = {
    "count": "#,##0",
    "money": '"$"#,##0.00',
    "id": "0",
}


def blank_for(kind: str):
    return "" if kind == "text" else 0


def style_header(cell: Cell) -> None:
    cell.font = styles.HEADER_FONT
    cell.fill = styles.HEADER_FILL
    cell.border = styles.HEADER_BORDER
    cell.alignment = styles.CENTER


def write_cell(ws: Worksheet, row: int, col: int, value, kind: str, flag: str | None = None) -> Cell:
    """Write one table cell, striping even rows unless the row is flagged."""
    cell = ws.cell(row=row, column=col, value=value)
    cell.font = styles.CELL_FONT
    cell.border = styles.CELL_BORDER
    fmt = NUMBER_FORMATS.get(kind)
    if fmt:
        cell.number_format = fmt
        cell.alignment = styles.RIGHT
    else:
        cell.alignment = styles.LEFT
    if flag in styles.FLAG_FILLS:
        cell.fill = styles.FLAG_FILLS[flag]
    elif row % 2 == 0:
        cell.fill = styles.STRIPE_FILL
    return cell


def write_kpi(ws: Worksheet, row: int, col: int, value, label: str, kind: str = "count") -> None:
    """Big number on `row`, caption underneath."""
    top = ws.cell(row=row, column=col, value=value)
    top.font = styles.KPI_VALUE_FONT
    top.alignment = styles.CENTER
    if kind in NUMBER_FORMATS:
        top.number_format = NUMBER_FORMATS[kind]

    caption = ws.cell(row=row + 1, column=col, value=label)
    caption.font = styles.KPI_LABEL_FONT
    caption.alignment = styles.CENTER


def fit_columns(ws: Worksheet, floor: int = 10, ceiling: int = 48) -> None:
    widths: dict[int, int] = {}
    for row in ws.iter_rows():
        for cell in row:
            if cell.value is None or isinstance(cell, MergedCell):
                continue
            widths[cell.column] = max(widths.get(cell.column, 0), len(str(cell.value)))
    for col, width in widths.items():
        ws.column_dimensions[get_column_letter(col)].width = min(max(width + 2, floor), ceiling)
