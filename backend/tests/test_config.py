from __future__ import annotations

from pathlib import Path

from config import DATA_DIR, Settings


def test_defaults_point_at_shipped_data(monkeypatch):
    monkeypatch.delenv("ALARMS_FILE", raising=False)
    monkeypatch.delenv("ALARM_LOG_FILE", raising=False)
    s = Settings(_env_file=None)
    assert s.ALARMS_FILE == DATA_DIR / "alarms.json"
    assert s.ALARM_LOG_FILE == DATA_DIR / "alarmlog.json"
    assert s.ALARMS_FILE.is_file()
    assert s.ALARM_LOG_FILE.is_file()


def test_env_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("ALARMS_FILE", str(tmp_path / "a.json"))
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    s = Settings(_env_file=None)
    assert s.ALARMS_FILE == Path(tmp_path / "a.json")
    assert s.LOG_LEVEL == "DEBUG"


def test_data_dir_ships_inside_alarm_reports_package():
    import alarm_reports

    package_dir = Path(alarm_reports.__file__).resolve().parent
    assert DATA_DIR == package_dir / "data"
    assert sorted(p.name for p in DATA_DIR.glob("*.json")) == ["alarmlog.json", "alarms.json"]


def test_app_starts_with_default_data(monkeypatch, tmp_path):
    from fastapi.testclient import TestClient

    from config import settings
    from main import app

    monkeypatch.setattr(settings, "ALARMS_FILE", Settings(_env_file=None).ALARMS_FILE)
    monkeypatch.setattr(settings, "ALARM_LOG_FILE", Settings(_env_file=None).ALARM_LOG_FILE)
    monkeypatch.chdir(tmp_path)
    with TestClient(app) as client:
        body = client.get("/health").json()
    assert body["status"] == "ok"
    assert body["alarms"] > 0
    assert body["log_entries"] > 0
