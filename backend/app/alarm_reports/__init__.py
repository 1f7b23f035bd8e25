"""Alarm reports — read-only reporting over a static alarm catalog and event log.

loader.py loads both JSON files once at startup, engine.py derives the report
views, router.py exposes them over HTTP.

Integration points:
  1. main.py lifespan: load_dataset() -> AlarmReportEngine -> app.state.report_engine
  2. main.py: include router
"""
