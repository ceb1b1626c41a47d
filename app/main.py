from fastapi import FastAPI

from app.api.errors import register_error_handlers
from app.api.jeeps import router as jeeps_router
from app.core.config import settings
from app.core.logging import configure_logging

configure_logging(settings.log_level)

app = FastAPI(
    title=settings.project_name,
    version=settings.version,
)

@app.get("/health")
def health_check():
    return {"status": "ok"}

register_error_handlers(app)

app.include_router(jeeps_router)
