"""
Fonts, fills, borders and alignments shared by every report sheet.
"""
from openpyxl.styles import Alignment, Border, Font, PatternFill, Side

NAVY = "1F3864"
SLATE = "595959"
GRID = "D0D7E5"
STRIPE = "EEF2F8"
TOP_AGENT = "FFF4CC"
NO_AGENTS = "FDE9E7"


def solid(color: str) -> PatternFill:
    return PatternFill(start_color=color, end_color=color, fill_type="solid")


def _font(size: int, color: str = "000000", **kw) -> Font:
    return Font(name="Calibri", size=size, color=color, **kw)


TITLE_FONT = _font(20, NAVY, bold=True)
SUBTITLE_FONT = _font(11, SLATE, italic=True)
SECTION_FONT = _font(13, NAVY, bold=True)
HEADER_FONT = _font(11, "FFFFFF", bold=True)
CELL_FONT = _font(10)
KPI_VALUE_FONT = _font(24, NAVY, bold=True)
KPI_LABEL_FONT = _font(9, SLATE)

HEADER_FILL = solid(NAVY)
STRIPE_FILL = solid(STRIPE)

# Row flag name -> fill, used by ExcelWriter.write_table(flag=...)
FLAG_FILLS = {
    "top": solid(TOP_AGENT),
    "empty": solid(NO_AGENTS),
}

_grid = Side(style="thin", color=GRID)
CELL_BORDER = Border(left=_grid, right=_grid, top=_grid, bottom=_grid)
HEADER_BORDER = Border(bottom=Side(style="medium", color=NAVY))

CENTER = Alignment(horizontal="center", vertical="center", wrap_text=True)
LEFT = Alignment(horizontal="left", vertical="center")
RIGHT = Alignment(horizontal="right", vertical="center")
