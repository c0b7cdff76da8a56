from fastapi import FastAPI
from fastapi.responses import FileResponse
from fastapi.middleware.cors import CORSMiddleware
import logging
import os

from .config import settings
from .routers import estimate

logger = logging.getLogger("costslicer")
logger.setLevel(settings.LOG_LEVEL)

app = FastAPI(
    title="Cost Slicer",
    description="3D print cost calculator — electricity, filament and printer depreciation",
    version="1.0.0"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# API routes
app.include_router(estimate.router, prefix="/api")

# Serve the estimate form
frontend_path = os.path.join(os.path.dirname(__file__), "..", "frontend")
if os.path.exists(os.path.join(frontend_path, "index.html")):

    @app.get("/")
    def serve_frontend():
        return FileResponse(os.path.join(frontend_path, "index.html"))
else:
    logger.info("frontend/index.html not found, serving API only")


@app.get("/health")
def health():
    return {"status": "ok", "app": settings.APP_NAME}
