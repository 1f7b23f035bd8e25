"""Alarm catalog and alarm event log records.

Both collections are read from JSON once at startup and never change afterwards,
so every model here is frozen. On disk the keys are PascalCase
(``AlarmId``, ``AckBy``, ``Date`` ...); the Python field names are accepted too.
"""
from __future__ import annotations

import enum
from datetime import datetime

from pydantic import BaseModel, Field, field_validator


class LoggedAlarmEvent(enum.IntEnum):
    Off = 0
    On = 1
    Acked = 2
    Blocked = 3
    UnBlocked = 4
    AckedLocally = 5
    Cause = 6
    Reset = 7
    PagingSentToUser = 8
    PagingUserSMSReceived = 9
    PagingSentSMSToUser = 10
    PagingSentMailToUser = 11
    PagingSentPushToUser = 12
    PagingUserPushReceived = 13
    PagingUserPushRead = 14


# Outbound notifications only; 9 sits inside 8..12 but is an inbound receipt.
PAGING_SENT_EVENTS = frozenset({
    LoggedAlarmEvent.PagingSentToUser,
    LoggedAlarmEvent.PagingSentSMSToUser,
    LoggedAlarmEvent.PagingSentMailToUser,
    LoggedAlarmEvent.PagingSentPushToUser,
})


class Alarm(BaseModel):
    alarm_id: int = Field(alias="AlarmId")
    station: str = Field(alias="Station")
    alarm_number: int = Field(alias="AlarmNumber")
    alarm_class: str = Field(alias="AlarmClass")
    alarm_text: str = Field(alias="AlarmText")

    model_config = {"frozen": True, "populate_by_name": True}


class AlarmLogEntry(BaseModel):
    alarm_id: int = Field(alias="AlarmId")
    event: LoggedAlarmEvent = Field(alias="Event")
    acknowledged_by: str = Field("", alias="AckBy")
    timestamp: datetime = Field(alias="Date")

    model_config = {"frozen": True, "populate_by_name": True}

    @field_validator("event", mode="before")
    @classmethod
    def _event_by_name(cls, value):
        """Allow ``"PagingSentToUser"`` as well as ``8``."""
        if isinstance(value, str):
            if value.isdigit():
                return int(value)
            try:
                return LoggedAlarmEvent[value]
            except KeyError:
                raise ValueError(f"unknown alarm event: {value!r}") from None
        return value

    @field_validator("acknowledged_by", mode="before")
    @classmethod
    def _ack_by_none(cls, value):
        return "" if value is None else value
