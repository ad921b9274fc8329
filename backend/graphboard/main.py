from fastapi import FastAPI

from graphboard.api.routes import router
from graphboard.logging_config import configure_logging

configure_logging()

app = FastAPI(
    title="Call Graph Board Renderer",
    version="0.1.0",
)

app.include_router(router)
