import logging
import os

from fastapi import FastAPI

from src.base.errors import register_error_handlers
from src.inspection.router import router as inspection_router

logging.basicConfig(level=os.environ.get("STI_LOG_LEVEL", "INFO").upper())

app = FastAPI(title="STI Inspections")
app.include_router(inspection_router)
register_error_handlers(app)


@app.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}
