"""Aggregation engine — derives the report views from the alarm catalog and log.

The engine is built once from the two collections produced by the loader and
never mutates them. Every query walks the in-memory data again, so two calls
with the same input always return equal results.

Activation counting:
  - one counter per catalog key, seeded at 0 so silent alarms still show up
  - a counter moves only on ``On`` events whose alarm id resolves in the catalog
  - output sorted by count descending, ties keep catalog order (stable sort)
"""
from __future__ import annotations

import logging
from typing import Callable, Hashable, Iterable, Optional

from models import PAGING_SENT_EVENTS, Alarm, AlarmLogEntry, LoggedAlarmEvent
from alarm_reports.schemas import (
    AlarmActivationCount,
    AlarmView,
    StationActivationCount,
    StatusSummary,
)

logger = logging.getLogger("alarmlog.reports.engine")


class AlarmReportEngine:

    def __init__(self, alarms: Iterable[Alarm], log: Iterable[AlarmLogEntry]):
        self.alarms: tuple[Alarm, ...] = tuple(alarms)
        self.log: tuple[AlarmLogEntry, ...] = tuple(log)
        self._by_id: dict[int, Alarm] = {}
        for alarm in self.alarms:
            # first definition wins on duplicate ids
            self._by_id.setdefault(alarm.alarm_id, alarm)

    def find_alarm(self, alarm_id: int) -> Optional[Alarm]:
        """Catalog lookup. Returns None for ids the catalog does not define."""
        return self._by_id.get(alarm_id)

    # ------------------------------------------------------------------
    # Raw views
    # ------------------------------------------------------------------

    def list_alarms(self) -> list[AlarmView]:
        return [
            AlarmView(
                id=alarm.alarm_id,
                station=alarm.station,
                number=alarm.alarm_number,
                alarm_class=alarm.alarm_class,
                text=alarm.alarm_text,
            )
            for alarm in self.alarms
        ]

    def list_log(self) -> list[AlarmLogEntry]:
        return list(self.log)

    # ------------------------------------------------------------------
    # Activation counts
    # ------------------------------------------------------------------

    def _count_activations(
        self, key: Callable[[Alarm], Hashable]
    ) -> dict[Hashable, int]:
        counts: dict[Hashable, int] = {}
        for alarm in self.alarms:
            counts.setdefault(key(alarm), 0)

        skipped = 0
        for entry in self.log:
            if entry.event != LoggedAlarmEvent.On:
                continue
            alarm = self.find_alarm(entry.alarm_id)
            if alarm is None:
                skipped += 1
                continue
            k = key(alarm)
            if k in counts:
                counts[k] = counts[k] + 1

        if skipped:
            logger.debug("Skipped %d activations with unknown alarm id", skipped)
        return counts

    def activations_per_alarm(self) -> list[AlarmActivationCount]:
        """Activations per (station, alarm text), most active first.

        Alarms sharing station and text collapse into one counter.
        """
        counts = self._count_activations(lambda a: (a.station, a.alarm_text))
        rows = [
            AlarmActivationCount(station=station, text=text, count=count)
            for (station, text), count in counts.items()
        ]
        return sorted(rows, key=lambda r: r.count, reverse=True)

    def activations_per_station(self) -> list[StationActivationCount]:
        """Activations per station, most active first."""
        counts = self._count_activations(lambda a: a.station)
        rows = [
            StationActivationCount(station_label=station, count=count)
            for station, count in counts.items()
        ]
        return sorted(rows, key=lambda r: r.count, reverse=True)

    # ------------------------------------------------------------------
    # Status summary
    # ------------------------------------------------------------------

    def status_summary(self) -> StatusSummary:
        """Active alarm count, activation total and pagings sent.

        Walks the log newest first. Per alarm id the tracker is a two-state
        machine: Off -> On on an ``On`` event (counts an activation),
        On -> Off on an ``Off`` event; repeats in the same state do nothing.
        """
        active: set[int] = set()
        currently_active = 0
        activations = 0
        pagings = 0

        for entry in reversed(self.log):
            if self.find_alarm(entry.alarm_id) is None:
                continue

            if entry.event == LoggedAlarmEvent.On:
                if entry.alarm_id not in active:
                    active.add(entry.alarm_id)
                    currently_active += 1
                    activations += 1
            elif entry.event == LoggedAlarmEvent.Off:
                if entry.alarm_id in active:
                    active.remove(entry.alarm_id)
                    currently_active -= 1
            elif entry.event in PAGING_SENT_EVENTS:
                pagings += 1

        return StatusSummary(
            currently_active_count=currently_active,
            total_activations=activations,
            total_pagings_sent=pagings,
        )
