"""FastAPI application: match, share-create and share-view endpoints."""

from __future__ import annotations

import logging
import sqlite3
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import HTMLResponse, JSONResponse

from api.schemas import ErrorResponse, HealthResponse, MatchRequest, ShareCreateRequest, ShareCreateResponse
from api.share_page import render_not_found_page, render_share_page
from config.settings import Settings, get_settings
from db import schema
from db.connection import connection_scope
from db.repos.shares_repo import SharesRepo
from models.enriched import MatchResponse
from models.shared_recommendation import SharedRecommendation
from pipelines.match_coaches import run_match
from ports.llm import LLMClientPort
from services.coach_dataset import CoachDataset, get_dataset
from services.errors import CoachMatcherError, StorageError
from services.llm_client import LLMClient
from services.share_service import create_share, get_share, snapshots_from_coach_ids
from utils.logging_setup import init_logging


logger = logging.getLogger(__name__)


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=ErrorResponse(error=message).model_dump())


_ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Invalid request"},
    500: {"model": ErrorResponse, "description": "Downstream or storage failure"},
}


def create_app(
    settings: Optional[Settings] = None,
    dataset: Optional[CoachDataset] = None,
    llm: Optional[LLMClientPort] = None,
) -> FastAPI:
    """Build the app. The dataset is loaded and the share table bootstrapped here, once."""
    settings = settings or get_settings()
    init_logging(settings.log_level)

    if dataset is None:
        dataset = get_dataset(settings.coaches_path)
    if llm is None:
        llm = LLMClient(settings)
    with connection_scope(settings.db_path) as conn:
        schema.bootstrap(conn)

    app = FastAPI(
        title="Coach Matcher",
        description="Rank coaches for a free-text coaching request and share the picks",
        version="0.1.0",
    )
    app.state.settings = settings
    app.state.dataset = dataset
    app.state.llm = llm

    @app.exception_handler(CoachMatcherError)
    async def _matcher_error(request: Request, exc: CoachMatcherError) -> JSONResponse:
        if isinstance(exc, StorageError):
            # Original error already logged where it was raised
            return _error(exc.status_code, exc.client_message())
        if exc.status_code >= 500:
            logger.error(
                f"{request.url.path} failed",
                extra={"step": "api", "status": "error", "error": str(exc) or type(exc).__name__},
            )
        return _error(exc.status_code, exc.client_message())

    @app.exception_handler(Exception)
    async def _unexpected_error(request: Request, exc: Exception) -> JSONResponse:
        logger.exception(
            f"{request.url.path} failed",
            extra={"step": "api", "status": "error", "error": str(exc) or type(exc).__name__},
        )
        return _error(500, str(exc) or "Failed to process request")

    @app.exception_handler(RequestValidationError)
    async def _validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
        first = exc.errors()[0] if exc.errors() else {}
        loc = ".".join(str(p) for p in first.get("loc", ()) if p != "body")
        message = f"Invalid request: {loc}: {first.get('msg')}" if loc else "Invalid request body"
        return _error(400, message)

    @app.get("/healthz", response_model=HealthResponse)
    def healthz() -> HealthResponse:
        return HealthResponse(coaches=len(app.state.dataset))

    @app.post("/api/match", response_model=MatchResponse, responses=_ERROR_RESPONSES)
    def match(body: MatchRequest) -> MatchResponse:
        return run_match(
            body.request_text,
            coaches=app.state.dataset,
            llm=app.state.llm,
            active_only=body.active_only,
            num_matches=body.num_matches,
            settings=app.state.settings,
        )

    @app.post("/api/share", response_model=ShareCreateResponse, responses=_ERROR_RESPONSES)
    def share_create(body: ShareCreateRequest) -> ShareCreateResponse:
        snapshots = list(body.recommendations)
        if not snapshots and body.coach_ids:
            snapshots = snapshots_from_coach_ids(body.coach_ids, app.state.dataset)
        try:
            with connection_scope(app.state.settings.db_path) as conn:
                slug = create_share(SharesRepo(conn), snapshots, body.request_summary)
        except sqlite3.Error as e:
            logger.error("Share store unavailable", extra={"step": "create_share", "status": "error", "error": str(e)})
            raise StorageError(str(e)) from e
        return ShareCreateResponse(slug=slug, url=f"{app.state.settings.public_base_url}/share/{slug}")

    def _load_share(slug: str) -> Optional[SharedRecommendation]:
        try:
            with connection_scope(app.state.settings.db_path) as conn:
                return get_share(SharesRepo(conn), slug)
        except sqlite3.Error as e:
            logger.error("Share store unavailable", extra={"step": "get_share", "status": "error", "slug": slug, "error": str(e)})
            return None

    @app.get(
        "/api/share/{slug}",
        response_model=SharedRecommendation,
        responses={404: {"model": ErrorResponse, "description": "Share not found"}},
    )
    def share_get(slug: str):
        share = _load_share(slug)
        if share is None:
            return _error(404, "Share not found")
        return share

    @app.get("/share/{slug}", response_class=HTMLResponse)
    def share_page(slug: str) -> HTMLResponse:
        share = _load_share(slug)
        if share is None:
            return HTMLResponse(render_not_found_page(), status_code=404)
        return HTMLResponse(render_share_page(share))

    return app
