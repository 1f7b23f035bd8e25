from models.alarm import Alarm, AlarmLogEntry, LoggedAlarmEvent, PAGING_SENT_EVENTS

__all__ = [
    "Alarm",
    "AlarmLogEntry",
    "LoggedAlarmEvent",
    "PAGING_SENT_EVENTS",
]
