"""
Agent and state roll-ups built on the query engine.
"""
from __future__ import annotations

import pandas as pd

from simpledata.analytics.common import safe_divide
from simpledata.analytics.queries import (
    build_agent_premium_map,
    count_agents_for_state,
    count_open_claims,
    most_spoken_language_for_state,
    open_claims_for_state,
)
from simpledata.data.errors import EmptyAggregateError
from simpledata.data.store import Snapshot

AGENT_COLUMNS = [
    "agent_id", "agent_name", "state", "customers",
    "total_premium", "avg_premium", "open_claims",
]


def agent_summary(snap: Snapshot) -> pd.DataFrame:
    """One row per agent serving at least one customer, highest premium first."""
    premiums = build_agent_premium_map(snap.customers, snap.policies)
    if not premiums:
        return pd.DataFrame(columns=AGENT_COLUMNS)

    cust = pd.DataFrame({
        "customer_id": [c.id for c in snap.customers],
        "agent_id": [c.agent_id for c in snap.customers],
    })
    open_by_customer = {
        c.id: count_open_claims(snap.index.claims_for_customer(c.id)) for c in snap.customers
    }
    cust["open_claims"] = cust["customer_id"].map(open_by_customer)

    agents = cust.groupby("agent_id", sort=False).agg(
        customers=("customer_id", "count"),
        open_claims=("open_claims", "sum"),
    ).reset_index()

    agents["total_premium"] = agents["agent_id"].map(premiums)
    agents["avg_premium"] = [
        round(safe_divide(total, n), 2) for total, n in zip(agents["total_premium"], agents["customers"])
    ]

    def _agent_field(agent_id, attr):
        agent = snap.index.agent(agent_id)
        if agent is None:
            return ""
        if attr == "name":
            return f"{agent.first_name} {agent.last_name}".strip()
        return getattr(agent, attr)

    agents["agent_name"] = agents["agent_id"].map(lambda a: _agent_field(a, "name"))
    agents["state"] = agents["agent_id"].map(lambda a: _agent_field(a, "state"))

    agents = agents.sort_values("total_premium", ascending=False, kind="mergesort")
    return agents[AGENT_COLUMNS].reset_index(drop=True)


def state_summary(snap: Snapshot) -> list[dict]:
    """Agents, customers, open-claim customers and top language per state."""
    rows = []
    for state in snap.states():
        try:
            language = most_spoken_language_for_state(snap.customers, state)
        except EmptyAggregateError:
            language = None
        rows.append({
            "state": state,
            "agents": count_agents_for_state(snap.agents, state),
            "customers": sum(1 for c in snap.customers if c.state == state),
            "open_claim_customers": open_claims_for_state(
                snap.customers, snap.policies, snap.claims, state
            ),
            "top_language": language,
        })
    return rows


def portfolio_summary(snap: Snapshot) -> dict:
    """Dataset-wide KPIs."""
    total_premium = sum(build_agent_premium_map(snap.customers, snap.policies).values())
    counts = snap.row_counts()
    return {
        **counts,
        "open_claims": count_open_claims(snap.claims),
        "total_premium": float(total_premium),
        "premium_per_customer": round(safe_divide(total_premium, counts["customers"]), 2),
    }
