"""Record loading, relationship index, and in-memory store."""
from .errors import DataToolError, LoadFailure, NotFoundError, EmptyAggregateError, NoCustomersError
from .schemas import Customer, Agent, Policy, Claim
from .loader import discover_csvs, load_frame, read_records, load_records
from .joins import RelationIndex
from .store import DataStore, Snapshot
