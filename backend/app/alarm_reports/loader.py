"""Startup loader for the alarm catalog and the alarm event log.

Both files hold a JSON array. They are read once when the app starts; any
problem with either file is fatal and surfaces as DataLoadError.
"""
from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from models import Alarm, AlarmLogEntry

logger = logging.getLogger("alarmlog.reports.loader")

_ALARMS = TypeAdapter(list[Alarm])
_ALARM_LOG = TypeAdapter(list[AlarmLogEntry])


class DataLoadError(RuntimeError):
    """A source data file is missing or does not hold the expected records."""


@dataclass(frozen=True)
class AlarmDataset:
    alarms: tuple[Alarm, ...]
    log: tuple[AlarmLogEntry, ...]


def _read_json_array(path: Path) -> list:
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except OSError as e:
        raise DataLoadError(f"Cannot read {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise DataLoadError(f"Invalid JSON in {path}: {e}") from e
    if not isinstance(data, list):
        raise DataLoadError(f"{path}: expected a JSON array, got {type(data).__name__}")
    return data


def load_alarms(path: Path | str) -> tuple[Alarm, ...]:
    path = Path(path)
    try:
        return tuple(_ALARMS.validate_python(_read_json_array(path)))
    except ValidationError as e:
        raise DataLoadError(f"Invalid alarm definition in {path}: {e}") from e


def load_alarm_log(path: Path | str) -> tuple[AlarmLogEntry, ...]:
    """Load the event log, keeping the stored (oldest first) order."""
    path = Path(path)
    try:
        return tuple(_ALARM_LOG.validate_python(_read_json_array(path)))
    except ValidationError as e:
        raise DataLoadError(f"Invalid alarm log entry in {path}: {e}") from e


def load_dataset(alarms_path: Path | str, log_path: Path | str) -> AlarmDataset:
    alarms = load_alarms(alarms_path)
    log = load_alarm_log(log_path)
    logger.info(
        "Loaded %d alarms from %s, %d log entries from %s",
        len(alarms), alarms_path, len(log), log_path,
    )
    return AlarmDataset(alarms=alarms, log=log)
