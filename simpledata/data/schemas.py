"""
Record schemas for the four CSV collections: Customer, Agent, Policy, Claim.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Customer:
    id: int
    first_name: str
    last_name: str
    agent_id: int
    state: str                           # 2-letter code
    primary_language: str
    secondary_language: str = ""         # "" means none

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> "Customer":
        return cls(
            id=int(row["id"]),
            first_name=str(row["first_name"]),
            last_name=str(row["last_name"]),
            agent_id=int(row["agent_id"]),
            state=str(row["state"]),
            primary_language=str(row["primary_language"]),
            secondary_language=str(row.get("secondary_language", "")),
        )


@dataclass(frozen=True)
class Agent:
    id: int
    state: str
    first_name: str = ""
    last_name: str = ""

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> "Agent":
        return cls(
            id=int(row["id"]),
            state=str(row["state"]),
            first_name=str(row.get("first_name", "")),
            last_name=str(row.get("last_name", "")),
        )


@dataclass(frozen=True)
class Policy:
    id: int
    customer_id: int
    premium_per_month: float

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> "Policy":
        return cls(
            id=int(row["id"]),
            customer_id=int(row["customer_id"]),
            premium_per_month=float(row["premium_per_month"]),
        )


@dataclass(frozen=True)
class Claim:
    id: int
    policy_id: int
    is_claim_open: bool

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> "Claim":
        return cls(
            id=int(row["id"]),
            policy_id=int(row["policy_id"]),
            is_claim_open=bool(row["is_claim_open"]),
        )


RECORD_TYPES = {cls.__name__: cls for cls in (Customer, Agent, Policy, Claim)}
