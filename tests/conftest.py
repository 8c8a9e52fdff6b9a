"""Pytest configuration and shared fixtures."""

from pathlib import Path

import pytest

from simpledata.data.schemas import Agent, Claim, Customer, Policy
from simpledata.data.store import DataStore


CUSTOMERS_CSV = """id,firstName,lastName,age,agentId,state,primaryLanguage,secondaryLanguage
1,Jane,Doe,34,9,TX,Spanish,
2,John,Smith,51,9,TX,English,Spanish
3,Ana,Lopez,28,7,AZ,Spanish,English
4,Li,Wei,45,7,TX,Mandarin,
5,Jane,Doe,60,5,IL,Polish,
6,Sam,Lee,22,5,IL,English,
"""

AGENTS_CSV = """id,firstName,lastName,state,region
9,Alice,Agent,TX,South
7,Bob,Broker,AZ,West
5,Carol,Cole,IL,Midwest
8,Dan,Dole,TX,South
"""

POLICIES_CSV = """id,customerId,premiumPerMonth
100,1,120.50
101,2,80.25
102,2,19.75
103,3,200.00
104,4,50.00
105,5,10.00
"""

CLAIMS_CSV = """id,policyId,isClaimOpen
1000,100,true
1001,100,false
1002,101,true
1003,102,true
1004,103,false
1005,105,TRUE
"""


def write_dataset(folder: Path, **overrides: str) -> Path:
    """Write the four sample CSVs into folder; keyword overrides replace a file's text."""
    files = {
        "customers": CUSTOMERS_CSV,
        "agents": AGENTS_CSV,
        "policies": POLICIES_CSV,
        "claims": CLAIMS_CSV,
    }
    files.update(overrides)
    folder.mkdir(parents=True, exist_ok=True)
    for name, text in files.items():
        (folder / f"{name}.csv").write_text(text)
    return folder


@pytest.fixture
def data_dir(tmp_path) -> Path:
    """Directory holding the sample customers/agents/policies/claims CSVs."""
    return write_dataset(tmp_path / "data")


@pytest.fixture
def store(data_dir) -> DataStore:
    return DataStore().load(data_dir)


@pytest.fixture
def jane_doe_records():
    """The single-customer scenario: Jane Doe in TX with one policy and two claims."""
    customers = [Customer(1, "Jane", "Doe", 9, "TX", "Spanish", "")]
    policies = [Policy(100, 1, 120.50)]
    claims = [Claim(1000, 100, True), Claim(1001, 100, False)]
    return customers, policies, claims


@pytest.fixture
def agents():
    return [Agent(1, "TX"), Agent(2, "AZ"), Agent(3, "TX")]
