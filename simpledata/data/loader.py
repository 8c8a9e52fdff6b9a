"""
CSV discovery and loading of typed record collections.
"""
from __future__ import annotations

import os
from pathlib import Path
from typing import Union

import pandas as pd

from simpledata.config import DATA_DIR, DATA_FILES
from simpledata.data.errors import LoadFailure
from simpledata.data.normalize import normalize_columns
from simpledata.data.schemas import RECORD_TYPES

Source = Union[str, "os.PathLike[str]"]


def _type_name(record_type) -> str:
    name = record_type if isinstance(record_type, str) else record_type.__name__
    if name not in RECORD_TYPES:
        raise ValueError(f"Unknown record type '{name}'. Valid: {list(RECORD_TYPES)}")
    return name


# ---------------------------------------------------------------------------
# CSV discovery
# ---------------------------------------------------------------------------

def discover_csvs(data_dir: Path = DATA_DIR) -> dict[str, Path]:
    """Map each record type name to its CSV path inside data_dir.

    Paths are returned whether or not the files exist; loading a missing
    one raises LoadFailure.
    """
    data_dir = Path(data_dir)
    return {name: data_dir / filename for name, filename in DATA_FILES.items()}


# ---------------------------------------------------------------------------
# Loading
# ---------------------------------------------------------------------------

def load_frame(path: Source, record_type) -> pd.DataFrame:
    """Load one CSV into a normalised DataFrame (one row per record, file order)."""
    name = _type_name(record_type)
    path = Path(path)
    if not path.is_file():
        raise LoadFailure(path, name, "file not found")

    try:
        raw = pd.read_csv(path, dtype=str, keep_default_na=False)
    except pd.errors.EmptyDataError:
        raise LoadFailure(path, name, "file is empty (no header row)")
    except (pd.errors.ParserError, UnicodeDecodeError, OSError) as exc:
        raise LoadFailure(path, name, f"unreadable CSV: {exc}") from exc

    try:
        return normalize_columns(raw, name)
    except ValueError as exc:
        raise LoadFailure(path, name, str(exc)) from exc


def read_records(path: Source, record_type) -> list:
    """Read a CSV into a list of typed records, preserving file order."""
    name = _type_name(record_type)
    cls = RECORD_TYPES[name]
    df = load_frame(path, name)
    return [cls.from_row(row) for row in df.to_dict("records")]


def load_records(source, record_type) -> list:
    """Return records from a CSV location, or from an already-loaded collection.

    A str/PathLike source goes through read_records; anything else is
    taken as an iterable of records and materialised as a list.
    """
    if isinstance(source, (str, os.PathLike)):
        return read_records(source, record_type)
    return list(source)
