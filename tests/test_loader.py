"""
Tests for CSV loading: column mapping, type coercion, and load failures.
"""

import pandas as pd
import pytest

from simpledata.data.errors import LoadFailure
from simpledata.data.loader import discover_csvs, load_frame, load_records, read_records
from simpledata.data.normalize import normalize_columns
from simpledata.data.schemas import Agent, Claim, Customer, Policy


# ============================================================================
# read_records
# ============================================================================

class TestReadRecords:

    def test_customers_in_file_order(self, data_dir):
        customers = read_records(data_dir / "customers.csv", Customer)
        assert [c.id for c in customers] == [1, 2, 3, 4, 5, 6]
        assert customers[0] == Customer(1, "Jane", "Doe", 9, "TX", "Spanish", "")

    def test_empty_optional_field_becomes_empty_string(self, data_dir):
        customers = read_records(data_dir / "customers.csv", Customer)
        assert customers[0].secondary_language == ""
        assert customers[1].secondary_language == "Spanish"

    def test_agents_keep_optional_names(self, data_dir):
        agents = read_records(data_dir / "agents.csv", Agent)
        assert agents[0] == Agent(9, "TX", "Alice", "Agent")

    def test_policy_premium_is_float(self, data_dir):
        policies = read_records(data_dir / "policies.csv", Policy)
        assert policies[0].premium_per_month == 120.50
        assert isinstance(policies[0].premium_per_month, float)
        assert isinstance(policies[0].id, int)

    def test_claim_flag_is_bool(self, data_dir):
        claims = read_records(data_dir / "claims.csv", Claim)
        assert [c.is_claim_open for c in claims] == [True, False, True, True, False, True]
        assert all(type(c.is_claim_open) is bool for c in claims)

    def test_record_type_by_name(self, data_dir):
        assert len(read_records(data_dir / "claims.csv", "Claim")) == 6

    def test_header_only_file_is_empty_list(self, tmp_path):
        path = tmp_path / "claims.csv"
        path.write_text("id,policyId,isClaimOpen\n")
        assert read_records(path, Claim) == []

    def test_unknown_record_type(self, data_dir):
        with pytest.raises(ValueError):
            read_records(data_dir / "claims.csv", "Vehicle")


# ============================================================================
# Load failures
# ============================================================================

class TestLoadFailure:

    def test_missing_file(self, tmp_path):
        with pytest.raises(LoadFailure) as excinfo:
            read_records(tmp_path / "customers.csv", Customer)
        assert excinfo.value.record_type == "Customer"
        assert "not found" in str(excinfo.value)

    def test_empty_file(self, tmp_path):
        path = tmp_path / "agents.csv"
        path.write_text("")
        with pytest.raises(LoadFailure):
            read_records(path, Agent)

    def test_missing_required_column(self, tmp_path):
        path = tmp_path / "policies.csv"
        path.write_text("id,customerId\n1,1\n")
        with pytest.raises(LoadFailure) as excinfo:
            read_records(path, Policy)
        assert "premiumPerMonth" in str(excinfo.value)

    def test_non_integer_id(self, tmp_path):
        path = tmp_path / "claims.csv"
        path.write_text("id,policyId,isClaimOpen\n1,abc,true\n")
        with pytest.raises(LoadFailure) as excinfo:
            read_records(path, Claim)
        assert "data row 1" in str(excinfo.value)

    def test_non_numeric_premium(self, tmp_path):
        path = tmp_path / "policies.csv"
        path.write_text("id,customerId,premiumPerMonth\n1,1,12.00\n2,1,lots\n")
        with pytest.raises(LoadFailure) as excinfo:
            read_records(path, Policy)
        assert "data row 2" in str(excinfo.value)

    @pytest.mark.parametrize("premium", ["inf", "-inf", "-5", "-0.01"])
    def test_premium_must_be_finite_and_non_negative(self, tmp_path, premium):
        path = tmp_path / "policies.csv"
        path.write_text(f"id,customerId,premiumPerMonth\n1,1,12.00\n2,1,{premium}\n")
        with pytest.raises(LoadFailure) as excinfo:
            read_records(path, Policy)
        assert "finite, non-negative" in str(excinfo.value)
        assert "data row 2" in str(excinfo.value)

    def test_zero_premium_allowed(self, tmp_path):
        path = tmp_path / "policies.csv"
        path.write_text("id,customerId,premiumPerMonth\n1,1,0\n")
        assert read_records(path, Policy) == [Policy(1, 1, 0.0)]

    def test_bad_cell_counted_by_data_row_past_blank_lines(self, tmp_path):
        path = tmp_path / "claims.csv"
        path.write_text("id,policyId,isClaimOpen\n1,100,true\n\n2,101,maybe\n")
        with pytest.raises(LoadFailure) as excinfo:
            read_records(path, Claim)
        assert "data row 2" in str(excinfo.value)
        assert "'maybe'" in str(excinfo.value)

    def test_empty_required_number(self, tmp_path):
        path = tmp_path / "policies.csv"
        path.write_text("id,customerId,premiumPerMonth\n1,,12.00\n")
        with pytest.raises(LoadFailure):
            read_records(path, Policy)

    def test_bad_boolean(self, tmp_path):
        path = tmp_path / "claims.csv"
        path.write_text("id,policyId,isClaimOpen\n1,1,maybe\n")
        with pytest.raises(LoadFailure):
            read_records(path, Claim)

    def test_path_is_directory(self, tmp_path):
        with pytest.raises(LoadFailure):
            read_records(tmp_path, Claim)


# ============================================================================
# normalize_columns
# ============================================================================

class TestNormalizeColumns:

    def test_renames_and_drops_unknown_columns(self):
        raw = pd.DataFrame({"id": ["1"], "state": ["TX"], "region": ["South"]})
        df = normalize_columns(raw, "Agent")
        assert list(df.columns) == ["id", "state", "first_name", "last_name"]
        assert df.loc[0, "first_name"] == ""

    def test_header_whitespace_is_ignored(self):
        raw = pd.DataFrame({" id ": ["3"], "policyId ": ["4"], "isClaimOpen": ["False"]})
        df = normalize_columns(raw, "Claim")
        assert df.loc[0, "policy_id"] == 4
        assert not df.loc[0, "is_claim_open"]

    def test_numeric_cells_are_stripped(self):
        raw = pd.DataFrame({"id": [" 7 "], "customerId": ["2"], "premiumPerMonth": [" 9.99"]})
        df = normalize_columns(raw, "Policy")
        assert df.loc[0, "id"] == 7
        assert df.loc[0, "premium_per_month"] == 9.99

    def test_string_cells_are_kept_verbatim(self):
        raw = pd.DataFrame({"id": ["1"], "state": ["tx "]})
        assert normalize_columns(raw, "Agent").loc[0, "state"] == "tx "

    def test_empty_boolean_is_false(self):
        raw = pd.DataFrame({"id": ["1"], "policyId": ["1"], "isClaimOpen": [""]})
        assert not normalize_columns(raw, "Claim").loc[0, "is_claim_open"]


# ============================================================================
# discovery and source resolution
# ============================================================================

def test_discover_csvs_maps_every_record_type(tmp_path):
    paths = discover_csvs(tmp_path)
    assert paths == {
        "Customer": tmp_path / "customers.csv",
        "Agent": tmp_path / "agents.csv",
        "Policy": tmp_path / "policies.csv",
        "Claim": tmp_path / "claims.csv",
    }


def test_load_frame_row_per_record(data_dir):
    df = load_frame(data_dir / "policies.csv", Policy)
    assert len(df) == 6
    assert df["premium_per_month"].dtype == "float64"


def test_load_records_passes_collections_through():
    claims = (Claim(1, 1, True),)
    assert load_records(claims, Claim) == [Claim(1, 1, True)]


def test_load_records_reads_string_paths(data_dir):
    assert len(load_records(str(data_dir / "agents.csv"), Agent)) == 4
