"""
Query endpoints — one per query engine operation.
"""
from __future__ import annotations

from dataclasses import asdict

from fastapi import APIRouter, Depends, HTTPException, Query

from simpledata.data.errors import EmptyAggregateError, NotFoundError
from simpledata.data.store import Snapshot
from simpledata.analytics import queries
from simpledata.api.dependencies import get_snapshot
from simpledata.api.response_models import (
    AgentPremium,
    AgentPremiumsResponse,
    CountResponse,
    CustomerOpenClaimsResponse,
    CustomerResponse,
    LanguageResponse,
    PremiumResponse,
)

router = APIRouter(prefix="/api", tags=["queries"])


@router.get("/claims/open/count", response_model=CountResponse)
def open_claims_count(snap: Snapshot = Depends(get_snapshot)):
    return CountResponse(count=queries.count_open_claims(snap.claims))


@router.get("/agents/premiums", response_model=AgentPremiumsResponse)
def agent_premiums(snap: Snapshot = Depends(get_snapshot)):
    premiums = queries.build_agent_premium_map(snap.customers, snap.policies)
    return AgentPremiumsResponse(
        agents=[AgentPremium(agent_id=a, total_premium=p) for a, p in premiums.items()]
    )


@router.get("/agents/{agent_id}/customers/count", response_model=CountResponse)
def agent_customer_count(agent_id: int, snap: Snapshot = Depends(get_snapshot)):
    return CountResponse(count=queries.count_customers_for_agent(snap.customers, agent_id))


@router.get("/states/{state}/agents/count", response_model=CountResponse)
def state_agent_count(state: str, snap: Snapshot = Depends(get_snapshot)):
    return CountResponse(count=queries.count_agents_for_state(snap.agents, state))


@router.get("/states/{state}/language", response_model=LanguageResponse)
def state_language(state: str, snap: Snapshot = Depends(get_snapshot)):
    try:
        language = queries.most_spoken_language_for_state(snap.customers, state)
    except EmptyAggregateError as e:
        raise HTTPException(404, str(e))
    return LanguageResponse(state=state, language=language)


@router.get("/states/{state}/open-claims", response_model=CountResponse)
def state_open_claims(state: str, snap: Snapshot = Depends(get_snapshot)):
    return CountResponse(
        count=queries.open_claims_for_state(snap.customers, snap.policies, snap.claims, state)
    )


@router.get("/customers/open-claims", response_model=CustomerOpenClaimsResponse)
def customer_open_claims(
    first_name: str = Query(..., description="Exact, case-sensitive first name"),
    last_name: str = Query(..., description="Exact, case-sensitive last name"),
    snap: Snapshot = Depends(get_snapshot),
):
    count = queries.open_claims_for_customer_name(
        snap.customers, snap.policies, snap.claims, first_name, last_name
    )
    if count is None:
        raise HTTPException(404, f"Customer not found: '{first_name} {last_name}'")
    return CustomerOpenClaimsResponse(first_name=first_name, last_name=last_name, open_claims=count)


@router.get("/customers/top-premium", response_model=CustomerResponse)
def top_premium_customer(snap: Snapshot = Depends(get_snapshot)):
    try:
        customer = queries.customer_with_highest_total_premium(snap.customers, snap.policies)
    except NotFoundError as e:
        raise HTTPException(404, str(e))
    return CustomerResponse(**asdict(customer))


@router.get("/customers/{customer_id}/premium", response_model=PremiumResponse)
def customer_premium(customer_id: int, snap: Snapshot = Depends(get_snapshot)):
    return PremiumResponse(
        customer_id=customer_id,
        premium_per_month=queries.sum_monthly_premium(snap.policies, customer_id),
    )
