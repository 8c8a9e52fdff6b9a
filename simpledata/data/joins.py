"""
Relationship traversal between record collections.

Customer → Agent (agent_id), Policy → Customer (customer_id),
Claim → Policy (policy_id). Every index keeps records in load order, so a
traversal returns exactly what a nested linear scan would.
"""
from __future__ import annotations

from typing import Callable, Hashable, Iterable, Optional, TypeVar

from simpledata.data.schemas import Agent, Claim, Customer, Policy

T = TypeVar("T")


def index_by(records: Iterable[T], key: Callable[[T], Hashable]) -> dict[Hashable, list[T]]:
    """Group records by key, preserving load order within and across groups."""
    index: dict[Hashable, list[T]] = {}
    for record in records:
        index.setdefault(key(record), []).append(record)
    return index


def first_by(records: Iterable[T], key: Callable[[T], Hashable]) -> dict[Hashable, T]:
    """First record (load order) for each key."""
    index: dict[Hashable, T] = {}
    for record in records:
        index.setdefault(key(record), record)
    return index


def premium_total(policies: Iterable[Policy]) -> float:
    """Left-to-right sum of premium_per_month."""
    total = 0.0
    for policy in policies:
        total += policy.premium_per_month
    return total


class RelationIndex:
    """Foreign-key lookups over one set of loaded collections."""

    def __init__(
        self,
        customers: Iterable[Customer] = (),
        policies: Iterable[Policy] = (),
        claims: Iterable[Claim] = (),
        agents: Iterable[Agent] = (),
    ) -> None:
        self.customers = tuple(customers)
        self.policies = tuple(policies)
        self.claims = tuple(claims)
        self.agents = tuple(agents)

        self._customer_by_id = first_by(self.customers, lambda c: c.id)
        self._agent_by_id = first_by(self.agents, lambda a: a.id)
        self._policies_by_customer = index_by(self.policies, lambda p: p.customer_id)
        self._claims_by_policy = index_by(self.claims, lambda c: c.policy_id)

    # ------------------------------------------------------------------
    # Single-hop traversals
    # ------------------------------------------------------------------

    def customer(self, customer_id: int) -> Optional[Customer]:
        return self._customer_by_id.get(customer_id)

    def agent(self, agent_id: int) -> Optional[Agent]:
        return self._agent_by_id.get(agent_id)

    def agent_for(self, customer: Customer) -> Optional[Agent]:
        return self._agent_by_id.get(customer.agent_id)

    def policies_for(self, customer_id: int) -> list[Policy]:
        return list(self._policies_by_customer.get(customer_id, ()))

    def customer_for(self, policy: Policy) -> Optional[Customer]:
        return self._customer_by_id.get(policy.customer_id)

    def claims_for(self, policies: Iterable[Policy]) -> list[Claim]:
        """Claims referencing any of the given policies, in claim load order."""
        policy_ids = {p.id for p in policies}
        return [c for c in self.claims if c.policy_id in policy_ids]

    # ------------------------------------------------------------------
    # Multi-hop traversals
    # ------------------------------------------------------------------

    def claims_for_customer(self, customer_id: int) -> list[Claim]:
        return self.claims_for(self.policies_for(customer_id))

    def policies_for_claims(self, claims: Iterable[Claim]) -> list[Policy]:
        """Policies referenced by any of the claims, in policy load order."""
        policy_ids = {c.policy_id for c in claims}
        return [p for p in self.policies if p.id in policy_ids]

    def customers_for_policies(self, policies: Iterable[Policy]) -> list[Customer]:
        """Customer records owning any of the policies, in customer load order."""
        owner_ids = {p.customer_id for p in policies}
        return [c for c in self.customers if c.id in owner_ids]

    def premium_for(self, customer_id: int) -> float:
        return premium_total(self._policies_by_customer.get(customer_id, ()))
