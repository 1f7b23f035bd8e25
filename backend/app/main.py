import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from config import settings
from alarm_reports.engine import AlarmReportEngine
from alarm_reports.loader import DataLoadError, load_dataset
from alarm_reports.router import router as alarm_reports_router

VERSION = "0.1.0"

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL, logging.INFO),
    format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
)
logger = logging.getLogger("alarmlog.main")


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Alarm Log API starting... DEBUG=%s", settings.DEBUG)

    # Source data is loaded once and stays read-only for the process lifetime
    try:
        dataset = load_dataset(settings.ALARMS_FILE, settings.ALARM_LOG_FILE)
    except DataLoadError as exc:
        logger.error("Startup aborted: %s", exc)
        raise
    app.state.report_engine = AlarmReportEngine(dataset.alarms, dataset.log)

    yield

    logger.info("Alarm Log API shutting down...")
    app.state.report_engine = None
    logger.info("Shutdown complete")


app = FastAPI(
    title="Alarm Log Reporting API",
    version=VERSION,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(alarm_reports_router)


@app.get("/health")
async def health():
    engine = getattr(app.state, "report_engine", None)
    return {
        "status": "ok" if engine is not None else "loading",
        "version": VERSION,
        "alarms": len(engine.alarms) if engine else 0,
        "log_entries": len(engine.log) if engine else 0,
    }
