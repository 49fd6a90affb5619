import logging

from fastapi import FastAPI
from shiftboard.api.routes import board, catalog
from shiftboard.core.config import settings

logging.getLogger("shiftboard").setLevel(settings.LOG_LEVEL)

app = FastAPI(title="ShiftBoard API", version="0.1.0")

app.include_router(board.router, prefix="/api/v1")
app.include_router(catalog.router, prefix="/api/v1")


@app.get("/health")
def health_check():
    return {"status": "ok"}
