"""
Simple Data Tool — Configuration: paths, file names, column maps.
"""
import os
from pathlib import Path

# ---------------------------------------------------------------------------
# Paths — override with SIMPLEDATA_DATA_DIR / SIMPLEDATA_REPORTS_DIR
# ---------------------------------------------------------------------------
_data_dir = Path(os.environ.get("SIMPLEDATA_DATA_DIR", str(Path.home() / "simpledata" / "data")))
DATA_DIR = _data_dir
REPORTS_FOLDER = Path(os.environ.get("SIMPLEDATA_REPORTS_DIR", str(_data_dir.parent / "reports")))

# ---------------------------------------------------------------------------
# Default file name per record type
# ---------------------------------------------------------------------------
DATA_FILES = {
    "Customer": "customers.csv",
    "Agent": "agents.csv",
    "Policy": "policies.csv",
    "Claim": "claims.csv",
}

# ---------------------------------------------------------------------------
# Column mapping from raw CSV headers → record attributes
#   (csv column, attribute, kind, required)
# kind is one of "int", "float", "bool", "str"; "float" cells must be finite
# and non-negative (premiums)
# ---------------------------------------------------------------------------
RECORD_COLUMNS = {
    "Customer": [
        ("id", "id", "int", True),
        ("firstName", "first_name", "str", True),
        ("lastName", "last_name", "str", True),
        ("agentId", "agent_id", "int", True),
        ("state", "state", "str", True),
        ("primaryLanguage", "primary_language", "str", True),
        ("secondaryLanguage", "secondary_language", "str", False),
    ],
    "Agent": [
        ("id", "id", "int", True),
        ("state", "state", "str", True),
        ("firstName", "first_name", "str", False),
        ("lastName", "last_name", "str", False),
    ],
    "Policy": [
        ("id", "id", "int", True),
        ("customerId", "customer_id", "int", True),
        ("premiumPerMonth", "premium_per_month", "float", True),
    ],
    "Claim": [
        ("id", "id", "int", True),
        ("policyId", "policy_id", "int", True),
        ("isClaimOpen", "is_claim_open", "bool", True),
    ],
}

# Boolean cell spellings (compared case-insensitively; empty cell → False)
TRUE_VALUES = {"true", "t", "yes", "y", "1"}
FALSE_VALUES = {"false", "f", "no", "n", "0", ""}

# ---------------------------------------------------------------------------
# Query constants
# ---------------------------------------------------------------------------
EXCLUDED_LANGUAGE = "English"
