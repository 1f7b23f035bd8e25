"""Report views returned by the aggregation engine and rendered as JSON.

Kept out of router.py because the engine builds these models too.
"""
from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from models import LoggedAlarmEvent


class AlarmView(BaseModel):
    id: int
    station: str
    number: int
    alarm_class: str = Field(alias="class")
    text: str

    model_config = {"populate_by_name": True}


class AlarmLogEntryOut(BaseModel):
    alarm_id: int
    event: LoggedAlarmEvent
    acknowledged_by: str
    timestamp: datetime


class AlarmActivationCount(BaseModel):
    station: str
    text: str
    count: int


class StationActivationCount(BaseModel):
    station_label: str
    count: int


class StatusSummary(BaseModel):
    currently_active_count: int = 0
    total_activations: int = 0
    total_pagings_sent: int = 0
