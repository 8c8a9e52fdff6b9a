"""
Agent Premium Report — per-agent premium totals, state roll-up, portfolio KPIs.
"""
from __future__ import annotations

from pathlib import Path

import pandas as pd

from simpledata.data.store import DataStore
from simpledata.analytics.common import sanitize_for_json
from simpledata.analytics.summary import agent_summary, state_summary, portfolio_summary
from simpledata.excel import Column, ExcelWriter


AGENT_COLS = [
    Column("agent_id", "Agent ID", "id"),
    Column("agent_name", "Agent"),
    Column("state", "State"),
    Column("customers", "Customers", "count"),
    Column("total_premium", "Monthly Premium", "money"),
    Column("avg_premium", "Premium/Customer", "money"),
    Column("open_claims", "Open Claims", "count"),
]

STATE_COLS = [
    Column("state", "State"),
    Column("agents", "Agents", "count"),
    Column("customers", "Customers", "count"),
    Column("open_claim_customers", "Customers w/ Open Claims", "count"),
    Column("top_language", "Top Non-English Language"),
]

TOP_AGENTS = 10


def generate_json(store: DataStore) -> dict:
    snap = store.snapshot
    agents = agent_summary(snap)
    return sanitize_for_json({
        "data_dir": str(store.data_dir) if store.data_dir else None,
        "summary": portfolio_summary(snap),
        "agents": agents.to_dict("records"),
        "states": state_summary(snap),
    })


def generate_excel(store: DataStore, output_path: str | Path) -> Path:
    data = generate_json(store)
    s = data["summary"]
    ew = ExcelWriter()

    ws = ew.add_sheet("Summary")
    row = ew.write_title(ws, "AGENT PREMIUM REPORT", f"Generated {pd.Timestamp.now():%B %d, %Y}")
    row = ew.write_section(ws, row, "PORTFOLIO")
    row = ew.write_kpi_row(ws, row, [
        (s["customers"], "CUSTOMERS", "count"),
        (s["agents"], "AGENTS", "count"),
        (s["policies"], "POLICIES", "count"),
        (s["open_claims"], "OPEN CLAIMS", "count"),
    ])
    row = ew.write_section(ws, row, "PREMIUM")
    ew.write_kpi_row(ws, row, [
        (s["total_premium"], "MONTHLY PREMIUM", "money"),
        (s["premium_per_customer"], "PREMIUM/CUSTOMER", "money"),
    ])

    # agents come sorted by premium, highest first
    ew.write_table(ew.add_sheet("Agents"), 1, AGENT_COLS, data["agents"],
                   flag=lambda i, r: "top" if i < TOP_AGENTS else None)
    ew.write_table(ew.add_sheet("States"), 1, STATE_COLS, data["states"],
                   flag=lambda i, r: "empty" if r["agents"] == 0 else None)

    return ew.save(output_path)
