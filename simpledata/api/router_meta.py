"""
Meta endpoints: health, states, reload.
"""
from __future__ import annotations

import threading

from fastapi import APIRouter, Depends

from simpledata.data.errors import LoadFailure
from simpledata.data.store import DataStore
from simpledata.api.dependencies import get_store, get_store_or_empty
from simpledata.api.response_models import HealthResponse, StatesResponse

router = APIRouter(prefix="/api", tags=["meta"])


@router.get("/health", response_model=HealthResponse)
def health(store: DataStore = Depends(get_store_or_empty)):
    return HealthResponse(
        status="ok" if store.is_loaded else "not_loaded",
        loaded=store.is_loaded,
        data_dir=str(store.data_dir) if store.data_dir else None,
        last_error=store.last_error,
        **store.row_counts(),
    )


@router.get("/states", response_model=StatesResponse)
def list_states(store: DataStore = Depends(get_store)):
    return StatesResponse(states=store.states())


def reload_store(store: DataStore) -> None:
    """Reload the store from its data directory, recording any LoadFailure."""
    try:
        if store.data_dir is not None:
            store.load(store.data_dir)
        else:
            store.load()
        print(f"  Reload complete — {store.row_counts()}")
    except LoadFailure as exc:
        store.last_error = str(exc)
        print(f"  Reload failed: {exc}")


@router.post("/reload")
def reload_data(store: DataStore = Depends(get_store_or_empty)):
    """Re-read all CSVs.

    Returns immediately, reload happens in background. A failed reload keeps
    the previous records and reports the error on /api/health.
    """
    threading.Thread(target=reload_store, args=(store,), daemon=True).start()
    return {
        "status": "reloading",
        "message": "Data reload started in background. Check /api/health for updated row counts.",
    }
