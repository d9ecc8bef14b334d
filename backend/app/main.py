import logging
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from datetime import datetime, timezone

from app.config import get_settings, setup_logging
from app.middleware.error_handler import install_error_handlers
from app.routes import energy
from services.self_check import SELF_CHECK_RESULTS, summarize

settings = get_settings()
setup_logging(settings.debug)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Envelope Energy API",
    version="1.3.0",
    description="Whole-wall R, annual envelope loads and estimated HERS index for two design scenarios"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_methods=["*"],
    allow_headers=["*"],
    allow_credentials=True,
)

install_error_handlers(app, debug=settings.debug)


# Request logging middleware
@app.middleware("http")
async def log_requests(request: Request, call_next):
    response = await call_next(request)
    logger.info(f"{request.method} {request.url.path} -> {response.status_code}")
    return response


@app.on_event("startup")
async def startup_event():
    """Report the self-check battery that ran at import"""
    summary = summarize(SELF_CHECK_RESULTS)
    if summary["failed"]:
        logger.warning(f"Self-check: {summary['failed']} of {summary['total']} failed")
    else:
        logger.info(f"Self-check: {summary['passed']}/{summary['total']} passed")


app.include_router(energy.router, prefix="/api/v1/energy")


@app.get("/healthz")
async def healthz():
    """Health check endpoint"""
    return {
        "status": "ok",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "service": "envelope-energy-api",
        "self_check": summarize(SELF_CHECK_RESULTS),
    }
