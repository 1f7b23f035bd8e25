"""Alarm report API — read-only views over the loaded alarm data.

GET  /alarms                   — alarm catalog
GET  /alarmLog                 — raw event log, oldest first
GET  /activations_per_alarm    — activations per station + alarm text
GET  /activations_per_station  — activations per station
GET  /status_summary           — active alarms, activations, pagings sent
"""
from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Request

from alarm_reports.engine import AlarmReportEngine
from alarm_reports.schemas import (
    AlarmActivationCount,
    AlarmLogEntryOut,
    AlarmView,
    StationActivationCount,
    StatusSummary,
)

router = APIRouter(tags=["alarm-reports"])
logger = logging.getLogger("alarmlog.reports.router")


def get_engine(request: Request) -> AlarmReportEngine:
    engine = getattr(request.app.state, "report_engine", None)
    if engine is None:
        raise HTTPException(status_code=503, detail="Alarm data not loaded")
    return engine


# ---------------------------------------------------------------------------
# ENDPOINTS
# ---------------------------------------------------------------------------

@router.get("/alarms", response_model=list[AlarmView], name="Alarms")
async def list_alarms(engine: AlarmReportEngine = Depends(get_engine)):
    return engine.list_alarms()


@router.get("/alarmLog", response_model=list[AlarmLogEntryOut], name="AlarmLog")
async def list_alarm_log(engine: AlarmReportEngine = Depends(get_engine)):
    return [AlarmLogEntryOut(**entry.model_dump()) for entry in engine.list_log()]


@router.get(
    "/activations_per_alarm",
    response_model=list[AlarmActivationCount],
    name="Activations_per_alarm",
)
async def activations_per_alarm(engine: AlarmReportEngine = Depends(get_engine)):
    """Activation count for every (station, alarm text), most active first."""
    return engine.activations_per_alarm()


@router.get(
    "/activations_per_station",
    response_model=list[StationActivationCount],
    name="Activations_per_station",
)
async def activations_per_station(engine: AlarmReportEngine = Depends(get_engine)):
    """Activation count for every station, most active first."""
    return engine.activations_per_station()


@router.get("/status_summary", response_model=StatusSummary, name="Status_summary")
async def status_summary(engine: AlarmReportEngine = Depends(get_engine)):
    summary = engine.status_summary()
    logger.debug(
        "Status summary: active=%d activations=%d pagings=%d",
        summary.currently_active_count, summary.total_activations,
        summary.total_pagings_sent,
    )
    return summary
