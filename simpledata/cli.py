#!/usr/bin/env python3
"""
Simple Data Tool CLI — queries, the agent premium report, and the API server.

USAGE:
  python -m simpledata.cli query open-claims                 # Open claims overall
  python -m simpledata.cli query agent-customers 9           # Customers of agent 9
  python -m simpledata.cli query state-agents TX             # Agents in TX
  python -m simpledata.cli query premium 1                   # Monthly premium of customer 1
  python -m simpledata.cli query customer-claims Jane Doe    # Open claims for a customer
  python -m simpledata.cli query language TX                 # Top non-English language in TX
  python -m simpledata.cli query top-customer                # Highest total premium customer
  python -m simpledata.cli query state-claims TX             # Customers with open claims in TX
  python -m simpledata.cli query agent-premiums              # Premium per agent

  python -m simpledata.cli report                            # Agent premium Excel report
  python -m simpledata.cli report --output ./out

  python -m simpledata.cli serve --port 8000                 # Start API server

  --data-dir DIR overrides SIMPLEDATA_DATA_DIR for any command.
"""
from __future__ import annotations

import argparse
import sys
from datetime import datetime
from pathlib import Path

from simpledata.config import DATA_DIR, REPORTS_FOLDER
from simpledata.data.errors import DataToolError
from simpledata.data.loader import discover_csvs
from simpledata.analytics import queries


def _run_query(args) -> str:
    """Run one query against the CSVs in args.data_dir and format the answer."""
    paths = discover_csvs(args.data_dir)
    customers, agents = paths["Customer"], paths["Agent"]
    policies, claims = paths["Policy"], paths["Claim"]
    name = args.name

    if name == "open-claims":
        return f"Open claims: {queries.count_open_claims(claims)}"
    if name == "agent-customers":
        agent_id = int(args.values[0])
        return f"Customers for agent {agent_id}: {queries.count_customers_for_agent(customers, agent_id)}"
    if name == "state-agents":
        state = args.values[0]
        return f"Agents in {state}: {queries.count_agents_for_state(agents, state)}"
    if name == "premium":
        customer_id = int(args.values[0])
        total = queries.sum_monthly_premium(policies, customer_id)
        return f"Monthly premium for customer {customer_id}: ${total:,.2f}"
    if name == "customer-claims":
        first, last = args.values[0], args.values[1]
        count = queries.open_claims_for_customer_name(customers, policies, claims, first, last)
        if count is None:
            return f"Customer not found: '{first} {last}'"
        return f"Open claims for {first} {last}: {count}"
    if name == "language":
        state = args.values[0]
        return f"Most spoken non-English language in {state}: {queries.most_spoken_language_for_state(customers, state)}"
    if name == "top-customer":
        c = queries.customer_with_highest_total_premium(customers, policies)
        return f"Highest total premium: #{c.id} {c.full_name} ({c.state}, agent {c.agent_id})"
    if name == "state-claims":
        state = args.values[0]
        return f"Customers with open claims in {state}: {queries.open_claims_for_state(customers, policies, claims, state)}"
    if name == "agent-premiums":
        premiums = queries.build_agent_premium_map(customers, policies)
        lines = [f"AGENT PREMIUMS ({len(premiums)}):", ""]
        for agent_id, total in sorted(premiums.items(), key=lambda kv: kv[1], reverse=True):
            lines.append(f"{agent_id:<8}${total:>14,.2f}")
        return "\n".join(lines)
    raise ValueError(f"Unknown query: {name}")


_QUERY_ARITY = {
    "open-claims": 0,
    "agent-customers": 1,
    "state-agents": 1,
    "premium": 1,
    "customer-claims": 2,
    "language": 1,
    "top-customer": 0,
    "state-claims": 1,
    "agent-premiums": 0,
}


def cmd_query(args) -> int:
    expected = _QUERY_ARITY[args.name]
    if len(args.values) != expected:
        print(f"  '{args.name}' takes {expected} argument(s), got {len(args.values)}")
        return 2
    try:
        print(_run_query(args))
    except (DataToolError, ValueError) as exc:
        print(f"  Error: {exc}")
        return 1
    return 0


def cmd_report(args) -> int:
    """Generate the agent premium Excel report."""
    from simpledata.data.store import DataStore
    from simpledata.reports.agent_report import generate_excel

    print("\n" + "=" * 70)
    print("  SIMPLE DATA TOOL — AGENT PREMIUM REPORT")
    print("=" * 70)

    try:
        store = DataStore().load(args.data_dir)
    except DataToolError as exc:
        print(f"  Error: {exc}")
        return 1

    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    out = Path(args.output) / f"Agent_Premium_Report_{timestamp}.xlsx"
    generate_excel(store, out)
    print(f"\n  Report saved to: {out}\n")
    return 0


def cmd_serve(args) -> int:
    """Start the FastAPI server."""
    import os
    import uvicorn
    from simpledata import config

    # Same-process import reads config.DATA_DIR, reload subprocesses read the env var
    config.DATA_DIR = Path(args.data_dir)
    os.environ["SIMPLEDATA_DATA_DIR"] = str(args.data_dir)
    print(f"\n  Starting Simple Data Tool API on http://localhost:{args.port}")
    print(f"  API docs: http://localhost:{args.port}/docs\n")
    uvicorn.run("simpledata.main:app", host=args.host, port=args.port, reload=args.reload)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="simpledata",
        description="Simple Data Tool — insurance CSV queries",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--data-dir", type=Path, default=DATA_DIR, help="Directory holding the four CSVs")
    sub = parser.add_subparsers(dest="command")

    # query
    q = sub.add_parser("query", help="Run one query")
    q.add_argument("name", choices=list(_QUERY_ARITY), help="Query to run")
    q.add_argument("values", nargs="*", help="Query arguments")

    # report
    r = sub.add_parser("report", help="Generate the agent premium Excel report")
    r.add_argument("--output", default=str(REPORTS_FOLDER), help="Output directory")

    # serve
    sv = sub.add_parser("serve", help="Start API server")
    sv.add_argument("--host", default="0.0.0.0", help="Bind host")
    sv.add_argument("--port", type=int, default=8000, help="Port number")
    sv.add_argument("--reload", action="store_true", help="Auto-reload on code changes")

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == "query":
        return cmd_query(args)
    if args.command == "report":
        return cmd_report(args)
    if args.command == "serve":
        return cmd_serve(args)
    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
