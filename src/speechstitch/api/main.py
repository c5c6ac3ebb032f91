import logging

from fastapi import FastAPI

from speechstitch.settings import get_settings

from .middleware import LoggingMiddleware
from .stitch import router as stitch_router

settings = get_settings()

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="speechstitch API", version="0.1.0")
app.add_middleware(LoggingMiddleware)

app.include_router(stitch_router)


@app.get("/api/health", tags=["Utility"])
async def health() -> dict[str, str]:
    """Return basic service health status."""
    return {"status": "ok"}


@app.get("/up", tags=["Utility"])
async def up() -> dict[str, str]:
    """Health check endpoint for load balancers."""
    return {"status": "ok"}
