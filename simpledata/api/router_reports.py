"""
Report endpoints — agent premium report as JSON + Excel.
"""
from __future__ import annotations

from fastapi import APIRouter, Depends
from fastapi.responses import FileResponse

from simpledata.config import REPORTS_FOLDER
from simpledata.data.store import DataStore
from simpledata.reports import agent_report
from simpledata.api.dependencies import get_store
from simpledata.api.response_models import ReportResponse

router = APIRouter(prefix="/api/reports", tags=["reports"])


@router.get("/agents", response_model=ReportResponse)
def agent_report_json(store: DataStore = Depends(get_store)):
    """Agent premium report as JSON."""
    return ReportResponse(data=agent_report.generate_json(store))


@router.get("/agents/excel")
def agent_report_excel(store: DataStore = Depends(get_store)):
    """Agent premium report as Excel download."""
    out_path = REPORTS_FOLDER / "Agent_Premium_Report.xlsx"
    agent_report.generate_excel(store, out_path)
    return FileResponse(
        path=str(out_path),
        filename=out_path.name,
        media_type="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
    )
