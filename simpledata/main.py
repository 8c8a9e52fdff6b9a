"""
Simple Data Tool — FastAPI app factory with startup data loading.
"""
from __future__ import annotations

import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from simpledata.data.errors import LoadFailure
from simpledata.data.store import DataStore
from simpledata.api.dependencies import set_store
from simpledata.api.router_meta import router as meta_router
from simpledata.api.router_queries import router as queries_router
from simpledata.api.router_reports import router as reports_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Load all records at startup."""
    from simpledata.config import DATA_DIR, REPORTS_FOLDER
    REPORTS_FOLDER.mkdir(parents=True, exist_ok=True)

    print(f"  SIMPLEDATA_DATA_DIR = {os.environ.get('SIMPLEDATA_DATA_DIR', '(not set)')}")
    print(f"  DATA_DIR = {DATA_DIR}")

    store = DataStore()
    try:
        store.load(DATA_DIR)
        print(f"\nSimple Data Tool ready — {store.row_counts()}\n")
    except LoadFailure as exc:
        store.data_dir = DATA_DIR
        store.last_error = str(exc)
        print(f"\nSimple Data Tool started without data — {exc}\n")
    set_store(store)
    yield


def create_app() -> FastAPI:
    app = FastAPI(
        title="Simple Data Tool API",
        description="Insurance customer, agent, policy and claim queries over CSV data",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(meta_router)
    app.include_router(queries_router)
    app.include_router(reports_router)

    return app


app = create_app()
