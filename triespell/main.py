"""
Main FastAPI application for the triespell spell-check service.
"""
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from triespell import __version__
from triespell.config import settings
from triespell.middleware.logging import RequestLoggingMiddleware
from triespell.routes import health, spellcheck
from triespell.services.spellcheck import initialize_spellcheck, reset_spellcheck
from triespell.utils.logger import get_logger

logger = get_logger("main")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.
    Loads the dictionary at startup and drops it at shutdown.
    """
    logger.info("Starting triespell service", version=__version__)
    logger.info(f"Log level: {settings.LOG_LEVEL}")

    # Dictionary is optional - the API answers 503 on spell-check routes without it
    if settings.SPELLCHECK_ENABLED:
        if initialize_spellcheck():
            logger.info("Spell-check service initialized")
        else:
            logger.warning("Spell-check service failed to initialize (spell-check disabled)")
    else:
        logger.info("Spell-check service disabled via configuration")

    yield

    logger.info("Shutting down triespell service")
    reset_spellcheck()


app = FastAPI(
    title="triespell",
    description="Trie-backed spell-checking with budgeted fuzzy corrections",
    version=__version__,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_middleware(RequestLoggingMiddleware)

app.include_router(health.router, tags=["Health"])
app.include_router(spellcheck.router)


@app.get("/", include_in_schema=False)
async def root():
    """Root endpoint pointing at docs."""
    return {
        "message": "triespell spell-check service",
        "docs": "/docs",
        "health": "/health"
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "triespell.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.RELOAD,
        log_level=settings.LOG_LEVEL.lower()
    )
