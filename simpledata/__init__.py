"""Simple Data Tool — in-memory queries over customer, agent, policy and claim CSVs."""
from simpledata.data import (
    Agent, Claim, Customer, Policy,
    DataStore, Snapshot, RelationIndex,
    DataToolError, LoadFailure, NotFoundError, EmptyAggregateError, NoCustomersError,
    load_records, read_records,
)
from simpledata.analytics.queries import (
    count_open_claims,
    count_customers_for_agent,
    count_agents_for_state,
    sum_monthly_premium,
    open_claims_for_customer_name,
    most_spoken_language_for_state,
    customer_with_highest_total_premium,
    open_claims_for_state,
    build_agent_premium_map,
)

__version__ = "1.0.0"
