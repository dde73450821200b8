"""
Polyglot Backend - Main Application

This is the entry point for the FastAPI application.
It handles:
- REST API endpoints (auth, translation, speech, summaries, history)
- Construction and teardown of the shared GhanaNLP client, the
  summary engine and the background activity logger
"""
from contextlib import asynccontextmanager
import logging
from datetime import datetime, UTC
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from polyglot import __version__
from polyglot.api import router as api_router
from polyglot.config.settings import settings
from polyglot.models import database
from polyglot.services.activity.logger import ActivityLogger
from polyglot.services.ghananlp.client import GhanaNLPClient
from polyglot.services.metrics import start_metrics_server
from polyglot.services.protocols import SummaryEngineProtocol
from polyglot.services.speech.synthesis import SynthesisService
from polyglot.services.speech.transcription import TranscriptionService
from polyglot.services.summary.engine import VertexGeminiEngine
from polyglot.services.summary.summarizer import Summarizer
from polyglot.services.translation.orchestrator import TranslationOrchestrator

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def configure_services(
    app: FastAPI,
    *,
    ghananlp_client: GhanaNLPClient,
    summary_engine: SummaryEngineProtocol,
    activity_logger: Optional[ActivityLogger] = None,
) -> None:
    """Wire the shared collaborators into every service and store them on app.state."""
    if activity_logger is None:
        activity_logger = ActivityLogger(database.AsyncSessionLocal)

    app.state.ghananlp_client = ghananlp_client
    app.state.activity_logger = activity_logger
    app.state.translation_orchestrator = TranslationOrchestrator(ghananlp_client, activity_logger)
    app.state.transcription_service = TranscriptionService(ghananlp_client, activity_logger)
    app.state.synthesis_service = SynthesisService(ghananlp_client, activity_logger)
    app.state.summarizer = Summarizer(summary_engine, activity_logger)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.

    Handles startup and shutdown events using the modern FastAPI pattern.
    """
    # === STARTUP ===
    logger.info("🚀 Starting Polyglot Backend...")

    await database.init_db()
    logger.info("✅ Database tables created")

    ghananlp_client = GhanaNLPClient.from_settings()
    if not ghananlp_client.is_configured:
        logger.warning("⚠️ No GhanaNLP API key configured; translation and speech routes will fail")
    configure_services(
        app,
        ghananlp_client=ghananlp_client,
        summary_engine=VertexGeminiEngine(),
    )
    logger.info("✅ Services configured")

    if settings.METRICS_PORT:
        start_metrics_server(settings.METRICS_PORT)

    yield  # Application runs here

    # === SHUTDOWN ===
    logger.info("🛑 Shutting down...")
    await app.state.activity_logger.drain()
    await app.state.ghananlp_client.aclose()


app = FastAPI(
    title="Polyglot Backend",
    description="Translation, speech and summaries for Ghanaian languages",
    version=__version__,
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origin_regex=r"http://(localhost|127\.0\.0\.1)(:\d+)?",
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(api_router, prefix="/api")


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "name": "Polyglot Backend",
        "version": __version__,
        "status": "running"
    }


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {
        "status": "ok",
        "timestamp": datetime.now(UTC).isoformat(),
        "ghananlp_configured": app.state.ghananlp_client.is_configured,
        "pending_log_writes": app.state.activity_logger.pending_count,
    }
