"""
Column mapping and type coercion for raw record CSVs.
"""
from __future__ import annotations

import numpy as np
import pandas as pd

from simpledata.config import RECORD_COLUMNS, TRUE_VALUES, FALSE_VALUES


# ---------------------------------------------------------------------------
# Column normalisation
# ---------------------------------------------------------------------------

def normalize_columns(df: pd.DataFrame, record_type: str) -> pd.DataFrame:
    """Rename raw CSV headers to record attributes and coerce each column's type.

    Expects a frame read with every cell as a string. Unknown columns are
    dropped, absent optional columns are filled with "". Raises ValueError
    on a missing required column or a cell that cannot be coerced.
    """
    spec = RECORD_COLUMNS[record_type]
    df = df.rename(columns=lambda c: str(c).strip())

    missing = [col for col, _, _, required in spec if required and col not in df.columns]
    if missing:
        raise ValueError(f"missing required column(s): {', '.join(missing)}")

    out = pd.DataFrame(index=df.index)
    for col, attr, kind, required in spec:
        if col in df.columns:
            raw = df[col].fillna("").astype(str)
        else:
            raw = pd.Series("", index=df.index, dtype=object)
        out[attr] = coerce_column(raw, kind, col, required)
    return out.reset_index(drop=True)


# ---------------------------------------------------------------------------
# Per-kind coercion
# ---------------------------------------------------------------------------

def _first_bad_row(mask: pd.Series) -> int:
    """1-based data row (header excluded) of the first flagged row.

    Not a file line number: read_csv skips blank lines and quoted cells may
    span several lines.
    """
    return int(mask[mask].index[0]) + 1


def coerce_column(raw: pd.Series, kind: str, col: str, required: bool) -> pd.Series:
    if kind == "str":
        return raw

    stripped = raw.str.strip()
    empty = stripped == ""

    if kind == "bool":
        lowered = stripped.str.lower()
        bad = ~lowered.isin(TRUE_VALUES | FALSE_VALUES)
        if bad.any():
            raise ValueError(
                f"column '{col}' has a non-boolean value {raw[bad].iloc[0]!r} on data row {_first_bad_row(bad)}"
            )
        return lowered.isin(TRUE_VALUES)

    if required and empty.any():
        raise ValueError(f"column '{col}' is empty on data row {_first_bad_row(empty)}")

    if kind == "int":
        bad = ~empty & ~stripped.str.fullmatch(r"[+-]?\d+")
        if bad.any():
            raise ValueError(
                f"column '{col}' has a non-integer value {raw[bad].iloc[0]!r} on data row {_first_bad_row(bad)}"
            )
        return stripped.where(~empty, "0").map(int).astype("int64")

    if kind == "float":
        bad = pd.to_numeric(stripped.where(~empty), errors="coerce").isna() & ~empty
        if bad.any():
            raise ValueError(
                f"column '{col}' has a non-numeric value {raw[bad].iloc[0]!r} on data row {_first_bad_row(bad)}"
            )
        # Python float() parses each cell exactly as written
        values = stripped.where(~empty, "0").map(float).astype("float64")
        bad = ~np.isfinite(values) | (values < 0)
        if bad.any():
            raise ValueError(
                f"column '{col}' needs a finite, non-negative amount, got {raw[bad].iloc[0]!r} "
                f"on data row {_first_bad_row(bad)}"
            )
        return values

    raise ValueError(f"unknown column kind '{kind}' for column '{col}'")
