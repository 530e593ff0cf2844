# cardsmith/render_main.py
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
import logging

from cardsmith.config.settings import settings
from cardsmith.delivery.api.render import router
from cardsmith.infrastructure.browser.rasterizer import PlaywrightRasterizer
from cardsmith.infrastructure.painting.html_painter import HtmlPainter

logger = logging.getLogger("uvicorn.error")


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Chromium itself is launched lazily on the first render.
    app.state.rasterizer = PlaywrightRasterizer()
    app.state.painter = HtmlPainter()
    logger.info(f"Rendering service started (scale={settings.RENDER_SCALE}, jpeg quality={settings.JPEG_QUALITY}).")
    yield
    logger.info("Closing browser...")
    await app.state.rasterizer.close()
    logger.info("Rendering service stopped.")


app = FastAPI(
    title=f"{settings.PROJECT_NAME} Rendering Service",
    description="Rasterizes composed card documents to PNG, JPEG or PDF",
    version="1.0.0",
    lifespan=lifespan,
    docs_url="/docs" if settings.ENVIRONMENT != "production" else None,
    redoc_url="/redoc" if settings.ENVIRONMENT != "production" else None,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(router)


@app.get("/")
async def root():
    return {
        "service": f"{settings.PROJECT_NAME} Rendering Service",
        "version": "1.0.0",
        "endpoints": {"health": "GET /health", "render": "POST /render"},
    }


@app.get("/health")
async def health_check():
    return {"status": "ok"}
