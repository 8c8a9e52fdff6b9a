"""
Query engine — fixed aggregate and lookup queries over the record collections.

Every function is pure: collection arguments are either loaded records or a
CSV location (str / PathLike) that is read first. Load errors propagate as
LoadFailure.
"""
from __future__ import annotations

from typing import Iterable, Optional

from simpledata.config import EXCLUDED_LANGUAGE
from simpledata.data.errors import EmptyAggregateError, NoCustomersError
from simpledata.data.joins import RelationIndex, premium_total
from simpledata.data.loader import load_records
from simpledata.data.schemas import Agent, Claim, Customer, Policy


# ---------------------------------------------------------------------------
# Counts & sums
# ---------------------------------------------------------------------------

def count_open_claims(claims: Iterable[Claim]) -> int:
    """Number of claims flagged open."""
    return sum(1 for claim in load_records(claims, Claim) if claim.is_claim_open)


def count_customers_for_agent(customers, agent_id: int) -> int:
    """Number of customers served by agent_id."""
    return sum(1 for c in load_records(customers, Customer) if c.agent_id == agent_id)


def count_agents_for_state(agents, state: str) -> int:
    """Number of agents whose state equals state exactly (case-sensitive)."""
    return sum(1 for a in load_records(agents, Agent) if a.state == state)


def sum_monthly_premium(policies: Iterable[Policy], customer_id: int) -> float:
    """Total monthly premium across one customer's policies; 0.0 when none."""
    return premium_total(p for p in load_records(policies, Policy) if p.customer_id == customer_id)


# ---------------------------------------------------------------------------
# Joined lookups
# ---------------------------------------------------------------------------

def open_claims_for_customer_name(
    customers,
    policies,
    claims,
    first_name: str,
    last_name: str,
) -> Optional[int]:
    """Open claims for the first customer named first_name last_name.

    Returns None when no customer has that exact name, so callers can tell
    an unknown customer apart from one with zero open claims.
    """
    customers = load_records(customers, Customer)
    match = next(
        (c for c in customers if c.first_name == first_name and c.last_name == last_name),
        None,
    )
    if match is None:
        return None

    index = RelationIndex(
        customers=customers,
        policies=load_records(policies, Policy),
        claims=load_records(claims, Claim),
    )
    return count_open_claims(index.claims_for_customer(match.id))


def most_spoken_language_for_state(customers, state: str) -> str:
    """Most common non-English language among customers in state.

    Primary and secondary languages are tallied together. On a tie the
    language that entered the tally first wins.
    """
    tally: dict[str, int] = {}
    for customer in load_records(customers, Customer):
        if customer.state != state:
            continue
        for language in (customer.primary_language, customer.secondary_language):
            if language and language != EXCLUDED_LANGUAGE:
                tally[language] = tally.get(language, 0) + 1

    if not tally:
        raise EmptyAggregateError(f"No non-{EXCLUDED_LANGUAGE} language data for state '{state}'")

    best, best_count = None, 0
    for language, count in tally.items():
        if best is None or count > best_count:
            best, best_count = language, count
    return best


def premium_by_customer(customers, policies) -> dict[int, float]:
    """Total premium per customer id, in first-seen customer order.

    A customer id listed more than once accumulates its premium again for
    each listing.
    """
    index = RelationIndex(policies=load_records(policies, Policy))
    totals: dict[int, float] = {}
    for customer in load_records(customers, Customer):
        totals[customer.id] = totals.get(customer.id, 0.0) + index.premium_for(customer.id)
    return totals


def customer_with_highest_total_premium(customers, policies) -> Customer:
    """Customer record with the largest total premium.

    Ties go to the id seen first; the first record carrying the winning id
    is returned. Raises NoCustomersError on an empty collection.
    """
    customers = load_records(customers, Customer)
    if not customers:
        raise NoCustomersError()

    best_id, best_total = None, 0.0
    for customer_id, total in premium_by_customer(customers, policies).items():
        if best_id is None or total > best_total:
            best_id, best_total = customer_id, total

    return next(c for c in customers if c.id == best_id)


def open_claims_for_state(customers, policies, claims, state: str) -> int:
    """Customers in state holding at least one open claim (each counted once)."""
    index = RelationIndex(
        customers=load_records(customers, Customer),
        policies=load_records(policies, Policy),
        claims=load_records(claims, Claim),
    )
    open_claims = [c for c in index.claims if c.is_claim_open]
    owners = index.customers_for_policies(index.policies_for_claims(open_claims))
    return sum(1 for c in owners if c.state == state)


def build_agent_premium_map(customers, policies) -> dict[int, float]:
    """Agent id → total premium of the customers that agent serves.

    Every agent id seen among customers gets an entry, 0.0 if none of its
    customers hold a policy.
    """
    index = RelationIndex(policies=load_records(policies, Policy))
    premiums: dict[int, float] = {}
    for customer in load_records(customers, Customer):
        premiums[customer.agent_id] = premiums.get(customer.agent_id, 0.0) + index.premium_for(customer.id)
    return premiums
