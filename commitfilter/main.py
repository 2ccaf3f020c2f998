from fastapi import FastAPI

from .apps.api import router
from .config.settings import get_settings

settings = get_settings()

app = FastAPI(
    title="Commit Filter API",
    version="0.1.0",
    description="Per-commit file changes and Signed-off-by lookups for a git repository",
    debug=settings.DEBUG,
)

app.include_router(router.router, prefix="/api")


@app.get("/health")
async def health_check():
    """
    Simple health check endpoint to confirm the API is running.
    """
    return {"status": "ok"}
