# cardsmith/main.py
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException
from contextlib import asynccontextmanager
from concurrent.futures import ThreadPoolExecutor
from http import HTTPStatus
import logging
import os

from cardsmith.config.settings import settings
from cardsmith.config.database import create_engine_and_sessions, init_db
from cardsmith.delivery.api import accounts, assets, cards, export, preview, stats, templates
from cardsmith.domain.errors import AuthenticationError, CardsmithError
from cardsmith.infrastructure.painting.html_painter import HtmlPainter
from cardsmith.infrastructure.rendering.client import RenderClient
from cardsmith.seed import seed_default_templates

logger = logging.getLogger("uvicorn.error")


def error_body(status_code: int, message, error: str = None) -> dict:
    try:
        phrase = HTTPStatus(status_code).phrase
    except ValueError:
        phrase = "Error"
    return {"statusCode": status_code, "message": message, "error": error or phrase}


@asynccontextmanager
async def lifespan(app: FastAPI):
    max_workers = min(4, os.cpu_count() or 1)  # Conservative limit
    app.state.executor = ThreadPoolExecutor(max_workers=max_workers)
    app.state.engine, app.state.session_factory = create_engine_and_sessions()
    app.state.render_client = RenderClient()
    app.state.painter = HtmlPainter()

    await init_db(app.state.engine)
    if settings.SEED_DEFAULT_TEMPLATES:
        async with app.state.session_factory() as session:
            seeded = await seed_default_templates(session)
        logger.info(f"Default templates ready ({seeded} seeded).")

    logger.info(f"API '{settings.PROJECT_NAME}' started (mode: {settings.ENVIRONMENT}).")
    logger.info(f"Rendering service: {settings.RENDERING_SERVICE_URL}")
    yield
    logger.info("Shutting down ThreadPoolExecutor...")
    app.state.executor.shutdown(wait=True)
    await app.state.engine.dispose()
    logger.info("API stopped.")


app = FastAPI(
    title=settings.PROJECT_NAME,
    description="Baseball card designer: templates, cards, live preview and print-quality export",
    version="1.0.0",
    lifespan=lifespan,
    docs_url="/docs" if settings.ENVIRONMENT != "production" else None,
    redoc_url="/redoc" if settings.ENVIRONMENT != "production" else None,
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_HOSTS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["Content-Disposition"],
)


@app.exception_handler(CardsmithError)
async def cardsmith_error_handler(request: Request, exc: CardsmithError):
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    headers = {"WWW-Authenticate": "Basic"} if isinstance(exc, AuthenticationError) else None
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(exc.status_code, exc.message, exc.error),
        headers=headers,
    )


@app.exception_handler(HTTPException)
async def http_error_handler(request: Request, exc: HTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(exc.status_code, exc.detail),
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=422,
        content=error_body(422, [error.get("msg") for error in exc.errors()], "Validation Failed"),
    )


for module in (accounts, templates, cards, preview, export, assets, stats):
    app.include_router(module.router, prefix=settings.API_V1_STR)


@app.get("/")
async def root():
    return {"message": f"{settings.PROJECT_NAME} API", "version": "1.0.0", "status": "ok"}


@app.get("/health")
async def health_check():
    return {"status": "ok", "service": settings.PROJECT_NAME, "renderingService": settings.RENDERING_SERVICE_URL}
