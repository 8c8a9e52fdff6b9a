"""
DataStore — In-memory record collections loaded from one data directory.

Loaded once at startup, queried on every request. The four collections and
their index live in one immutable Snapshot; reload builds a new Snapshot
and replaces the old one in a single assignment, so a reader holding
`store.snapshot` never sees customers from one load and policies from another.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable

from simpledata.config import DATA_DIR
from simpledata.data.joins import RelationIndex
from simpledata.data.loader import discover_csvs, read_records
from simpledata.data.schemas import Agent, Claim, Customer, Policy


@dataclass(frozen=True)
class Snapshot:
    """One consistent set of collections plus the index built over them."""
    customers: tuple[Customer, ...] = ()
    agents: tuple[Agent, ...] = ()
    policies: tuple[Policy, ...] = ()
    claims: tuple[Claim, ...] = ()
    index: RelationIndex = field(default_factory=RelationIndex)

    @classmethod
    def build(cls, customers=(), agents=(), policies=(), claims=()) -> "Snapshot":
        customers, agents = tuple(customers), tuple(agents)
        policies, claims = tuple(policies), tuple(claims)
        return cls(customers, agents, policies, claims,
                   RelationIndex(customers, policies, claims, agents))

    def row_counts(self) -> dict[str, int]:
        return {
            "customers": len(self.customers),
            "agents": len(self.agents),
            "policies": len(self.policies),
            "claims": len(self.claims),
        }

    def states(self) -> list[str]:
        """Unique state codes across customers and agents, sorted."""
        found = {c.state for c in self.customers} | {a.state for a in self.agents}
        return sorted(s for s in found if s)


class DataStore:
    """Customers, agents, policies and claims with a shared relation index."""

    def __init__(self) -> None:
        self.data_dir: Path | None = None
        self.last_error: str | None = None
        self.snapshot = Snapshot()
        self._loaded = False

    # ------------------------------------------------------------------
    # Views onto the current snapshot
    # ------------------------------------------------------------------

    @property
    def customers(self) -> tuple[Customer, ...]:
        return self.snapshot.customers

    @property
    def agents(self) -> tuple[Agent, ...]:
        return self.snapshot.agents

    @property
    def policies(self) -> tuple[Policy, ...]:
        return self.snapshot.policies

    @property
    def claims(self) -> tuple[Claim, ...]:
        return self.snapshot.claims

    @property
    def index(self) -> RelationIndex:
        return self.snapshot.index

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    def load(self, data_dir: Path = DATA_DIR) -> "DataStore":
        """Load all four CSVs from data_dir.

        Every file is read and indexed before the snapshot is replaced, so a
        LoadFailure leaves the previous collections untouched.
        """
        print(f"Loading records from {data_dir}...")
        paths = discover_csvs(data_dir)
        loaded = {}
        for name, path in paths.items():
            loaded[name] = read_records(path, name)
            print(f"  {path.name}: {len(loaded[name]):,} rows")

        self.snapshot = Snapshot.build(
            loaded["Customer"], loaded["Agent"], loaded["Policy"], loaded["Claim"]
        )
        self.data_dir = Path(data_dir)
        self.last_error = None
        self._loaded = True
        return self

    @classmethod
    def from_records(
        cls,
        customers: Iterable[Customer] = (),
        agents: Iterable[Agent] = (),
        policies: Iterable[Policy] = (),
        claims: Iterable[Claim] = (),
    ) -> "DataStore":
        """Build a loaded store from in-memory collections."""
        store = cls()
        store.snapshot = Snapshot.build(customers, agents, policies, claims)
        store._loaded = True
        return store

    @property
    def is_loaded(self) -> bool:
        return self._loaded

    # ------------------------------------------------------------------
    # Metadata queries
    # ------------------------------------------------------------------

    def row_counts(self) -> dict[str, int]:
        return self.snapshot.row_counts()

    def states(self) -> list[str]:
        return self.snapshot.states()

    def agent_ids(self) -> list[int]:
        """Agent ids seen among customers, first-seen order."""
        return list(dict.fromkeys(c.agent_id for c in self.customers))
