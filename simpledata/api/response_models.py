"""
Pydantic response schemas for the API.
"""
from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel


class HealthResponse(BaseModel):
    status: str
    loaded: bool
    data_dir: Optional[str] = None
    customers: int
    agents: int
    policies: int
    claims: int
    last_error: Optional[str] = None


class StatesResponse(BaseModel):
    states: list[str]


class CountResponse(BaseModel):
    count: int


class PremiumResponse(BaseModel):
    customer_id: int
    premium_per_month: float


class CustomerOpenClaimsResponse(BaseModel):
    first_name: str
    last_name: str
    open_claims: int


class LanguageResponse(BaseModel):
    state: str
    language: str


class CustomerResponse(BaseModel):
    id: int
    first_name: str
    last_name: str
    agent_id: int
    state: str
    primary_language: str
    secondary_language: str


class AgentPremium(BaseModel):
    agent_id: int
    total_premium: float


class AgentPremiumsResponse(BaseModel):
    agents: list[AgentPremium]


class ReportResponse(BaseModel):
    """Generic wrapper for any JSON report."""
    data: dict[str, Any]
