"""
FastAPI application for marketdesk.

Every data endpoint follows the same shape: read the settings document,
try the configured providers in priority order, fall back to mock data.
OpenAPI documentation is served at /docs, the client assets at /.
"""

import logging
from typing import Any, Optional

from fastapi import APIRouter, Body, Depends, FastAPI, HTTPException, Query, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from marketdesk.api.config import ServerConfig, config as default_config
from marketdesk.api.models import (
    EconResponse,
    ErrorResponse,
    HealthResponse,
    NewsResponse,
    QuoteResponse,
    SentimentRequest,
    SettingsErrorResponse,
    SettingsResponse,
)
from marketdesk.models import SentimentResult
from marketdesk.sentiment import LexiconSentimentScorer
from marketdesk.settings_store import SettingsStore
from marketdesk.sources.econ.lookup import lookup_econ
from marketdesk.sources.news.lookup import lookup_news
from marketdesk.sources.quotes.lookup import lookup_quote
from marketdesk.utils.session import RequestSession

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

SYMBOL_REQUIRED = "symbol query param required"

router = APIRouter(prefix="/api")


# ----------------------------------------------------------------
# Dependencies
# ----------------------------------------------------------------

def get_config(request: Request) -> ServerConfig:
    return request.app.state.config


def get_store(request: Request) -> SettingsStore:
    return request.app.state.store


def get_session(request: Request) -> RequestSession:
    return request.app.state.session


def get_scorer(request: Request) -> LexiconSentimentScorer:
    return request.app.state.scorer


# ----------------------------------------------------------------
# Health
# ----------------------------------------------------------------

@router.get("/health", response_model=HealthResponse, tags=["Health"])
async def health(
    cfg: ServerConfig = Depends(get_config),
    store: SettingsStore = Depends(get_store),
):
    """
    Service status and which providers are configured.

    Credentials themselves are never returned.
    """
    creds = cfg.credentials(await run_in_threadpool(store.read))
    return {
        "service": cfg.API_TITLE,
        "version": cfg.API_VERSION,
        "status": "healthy",
        "providers": {
            "finnhub": bool(creds["finnhubKey"]),
            "newsapi": bool(creds["newsApiKey"]),
            "fxfactory": bool(creds["fxFactoryRss"]),
            "tradingeconomics": bool(creds["tradingEconomicsUser"] and creds["tradingEconomicsKey"]),
        },
    }


# ----------------------------------------------------------------
# Market data
# ----------------------------------------------------------------

@router.get(
    "/quote",
    responses={200: {"model": QuoteResponse}, 400: {"model": ErrorResponse}},
    tags=["Market Data"],
)
async def get_quote(
    symbol: Optional[str] = Query(None, description="Symbol, e.g. XAUUSD or ^GDAXI"),
    cfg: ServerConfig = Depends(get_config),
    store: SettingsStore = Depends(get_store),
    session: RequestSession = Depends(get_session),
):
    """
    Latest quote for a symbol.

    Tries each alias candidate against Finnhub (when a key is set) and
    falls back to the mock table.
    """
    if not symbol:
        raise HTTPException(status_code=400, detail=SYMBOL_REQUIRED)
    settings = await run_in_threadpool(store.read)
    return await lookup_quote(symbol, settings, cfg.credentials(settings), session)


@router.get(
    "/news",
    responses={200: {"model": NewsResponse}, 400: {"model": ErrorResponse}},
    tags=["Market Data"],
)
async def get_news(
    symbol: Optional[str] = Query(None, description="Symbol to fetch headlines for"),
    cfg: ServerConfig = Depends(get_config),
    store: SettingsStore = Depends(get_store),
    session: RequestSession = Depends(get_session),
):
    """
    Recent headlines for a symbol.

    Cascade: Finnhub company news, NewsAPI search, RSS feed, mock.
    """
    if not symbol:
        raise HTTPException(status_code=400, detail=SYMBOL_REQUIRED)
    settings = await run_in_threadpool(store.read)
    return await lookup_news(symbol, cfg.credentials(settings), session)


@router.get("/econ", response_model=EconResponse, tags=["Market Data"])
async def get_econ(
    cfg: ServerConfig = Depends(get_config),
    store: SettingsStore = Depends(get_store),
    session: RequestSession = Depends(get_session),
):
    """Economic calendar from TradingEconomics, or three mock events."""
    settings = await run_in_threadpool(store.read)
    return await lookup_econ(cfg.credentials(settings), session)


# ----------------------------------------------------------------
# Settings
# ----------------------------------------------------------------

# File I/O; plain def so FastAPI runs these in its threadpool

@router.get("/settings", response_model=SettingsResponse, tags=["Settings"])
def get_settings(store: SettingsStore = Depends(get_store)):
    return {"ok": True, "data": store.read()}


@router.post(
    "/settings",
    response_model=SettingsResponse,
    responses={500: {"model": SettingsErrorResponse}},
    tags=["Settings"],
)
def update_settings(
    payload: Any = Body(None),
    store: SettingsStore = Depends(get_store),
):
    """
    Merge a partial settings document into settings.json.

    Unknown fields are dropped; top-level fields replace stored values.
    Values are stored as sent. A body that is not a JSON object is
    treated as an empty update.
    """
    update = payload if isinstance(payload, dict) else {}
    if not store.write(update):
        return JSONResponse(status_code=500, content={"ok": False, "error": "failed to write settings"})
    return {"ok": True, "data": store.read()}


# ----------------------------------------------------------------
# Sentiment
# ----------------------------------------------------------------

@router.post(
    "/sentiment",
    response_model=SentimentResult,
    responses={500: {"model": ErrorResponse}},
    tags=["Sentiment"],
)
async def analyze_sentiment(
    payload: Optional[SentimentRequest] = None,
    scorer: LexiconSentimentScorer = Depends(get_scorer),
):
    """Lexicon sentiment for a piece of text. Blank text scores zero."""
    text = (payload.text if payload is not None else None) or ""
    if not text.strip():
        return SentimentResult()
    try:
        return scorer.analyze(text)
    except Exception as e:
        logger.warning(f"Sentiment analysis failed: {e}")
        raise HTTPException(status_code=500, detail="sentiment analysis failed")


# ----------------------------------------------------------------
# Application
# ----------------------------------------------------------------

async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"error": exc.detail}, headers=exc.headers)


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.info(f"Rejected request to {request.url.path}: {exc.errors()}")
    return JSONResponse(status_code=400, content={"error": "invalid request body"})


def create_app(
    server_config: Optional[ServerConfig] = None,
    store: Optional[SettingsStore] = None,
    session: Optional[RequestSession] = None,
    scorer: Optional[LexiconSentimentScorer] = None,
) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        server_config: Server configuration (defaults to the environment)
        store: Settings store (defaults to SETTINGS_FILE)
        session: Outbound HTTP session shared by all providers
        scorer: Sentiment scorer
    """
    cfg = server_config or default_config

    app = FastAPI(
        title=cfg.API_TITLE,
        description=cfg.API_DESCRIPTION,
        version=cfg.API_VERSION,
        docs_url="/docs",
        redoc_url="/redoc",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=cfg.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.state.config = cfg
    app.state.store = store or SettingsStore(cfg.SETTINGS_FILE)
    app.state.session = session or RequestSession(timeout=cfg.REQUEST_TIMEOUT)
    app.state.scorer = scorer or LexiconSentimentScorer()

    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.include_router(router)

    @app.on_event("shutdown")
    async def shutdown_event():
        """Close the outbound HTTP client on shutdown."""
        await app.state.session.close()
        logger.info("HTTP session closed")

    # Routes above take precedence over the static mount
    if cfg.STATIC_DIR.is_dir():
        app.mount("/", StaticFiles(directory=str(cfg.STATIC_DIR), html=True), name="static")
    else:
        logger.warning(f"Static directory {cfg.STATIC_DIR} not found, client assets disabled")

    return app


app = create_app()
