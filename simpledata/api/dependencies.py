"""
FastAPI dependencies — the process-wide DataStore.
"""
from __future__ import annotations

from fastapi import Depends, HTTPException

from simpledata.data.store import DataStore, Snapshot

# Installed by the app lifespan (or directly by tests)
_store: DataStore | None = None


def set_store(store: DataStore | None) -> None:
    global _store
    _store = store


def get_store_or_empty() -> DataStore:
    """The installed store whether or not its CSVs loaded (health, reload)."""
    if _store is None:
        raise HTTPException(503, "Server is still starting up")
    return _store


def get_store(store: DataStore = Depends(get_store_or_empty)) -> DataStore:
    """The installed store; 503 with the last load error until records are in."""
    if not store.is_loaded:
        raise HTTPException(503, store.last_error or "Records not loaded yet")
    return store


def get_snapshot(store: DataStore = Depends(get_store)) -> Snapshot:
    """The collections as of this request; a concurrent reload does not affect them."""
    return store.snapshot
