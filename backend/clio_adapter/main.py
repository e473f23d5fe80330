import sys

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger

from clio_adapter.config import settings
from clio_adapter.routers import clio_auth, health, node, webhook

logger.remove()
logger.add(sys.stderr, level=settings.log_level.upper())

app = FastAPI(
    title="Clio Integration Adapter",
    description="Clio Manage API v4 actions and webhook receiver for workflow hosts",
    version="0.1.0",
)

# CORS: allow a local host UI
app.add_middleware(
    CORSMiddleware,
    allow_origins=[
        "http://localhost:3000",
        "http://127.0.0.1:3000",
    ],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register routers
app.include_router(health.router)
app.include_router(clio_auth.router)
app.include_router(node.router)
app.include_router(webhook.router)

logger.info("Clio integration adapter started (region={})", settings.clio_region)


def run() -> None:
    """Serve the adapter with uvicorn on the configured host and port."""
    import uvicorn

    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    run()
