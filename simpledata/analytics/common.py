"""
Numeric and JSON helpers shared by summaries, reports and the API.
"""
from __future__ import annotations

import math

import numpy as np
import pandas as pd


def safe_divide(numerator: float, denominator: float, default: float = 0.0) -> float:
    """numerator / denominator, or `default` when that is undefined."""
    if pd.isna(denominator) or denominator == 0:
        return default
    result = numerator / denominator
    return default if pd.isna(result) else result


def _finite(value: float) -> float:
    return value if math.isfinite(value) else 0.0


def sanitize_for_json(obj):
    """Turn numpy scalars/arrays into plain Python; NaN/inf become 0.0, NA becomes None."""
    if isinstance(obj, dict):
        return {_json_key(k): sanitize_for_json(v) for k, v in obj.items() if k is not None}
    if isinstance(obj, (list, tuple, np.ndarray)):
        return [sanitize_for_json(v) for v in obj]
    if isinstance(obj, (bool, np.bool_)):
        return bool(obj)
    if isinstance(obj, np.integer):
        return int(obj)
    if isinstance(obj, (float, np.floating)):
        return _finite(float(obj))
    if pd.api.types.is_scalar(obj) and pd.isna(obj):
        return None
    return obj


def _json_key(key):
    if isinstance(key, np.integer):
        return int(key)
    return key if isinstance(key, (str, int)) else str(key)
