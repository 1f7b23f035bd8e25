from __future__ import annotations

import json
from datetime import datetime, timedelta

from models import Alarm, AlarmLogEntry, LoggedAlarmEvent

_T0 = datetime(2022, 3, 1, 6, 0, 0)


def _alarm(alarm_id: int, station: str = "A", text: str = "Overheat",
           number: int = 100, alarm_class: str = "A") -> Alarm:
    return Alarm(
        alarm_id=alarm_id,
        station=station,
        alarm_number=number,
        alarm_class=alarm_class,
        alarm_text=text,
    )


def _log(*events: tuple[int, LoggedAlarmEvent]) -> list[AlarmLogEntry]:
    """Build a log from (alarm_id, event) pairs, oldest first, one minute apart."""
    return [
        AlarmLogEntry(
            alarm_id=alarm_id,
            event=event,
            acknowledged_by="",
            timestamp=_T0 + timedelta(minutes=i),
        )
        for i, (alarm_id, event) in enumerate(events)
    ]


def _write_json(path, data) -> str:
    path.write_text(json.dumps(data), encoding="utf-8")
    return str(path)
