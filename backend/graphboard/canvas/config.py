from graphboard.canvas.client import CanvasClient
from graphboard.canvas.rate_limit import RateLimiter
from graphboard.config import (
    CANVAS_BASE_URL,
    CANVAS_RATE_LIMIT,
    CANVAS_RATE_PERIOD,
    CANVAS_TIMEOUT,
    CANVAS_TOKEN,
)


def get_canvas_client() -> CanvasClient:
    return CanvasClient(
        base_url=CANVAS_BASE_URL,
        token=CANVAS_TOKEN,
        limiter=RateLimiter(max_calls=CANVAS_RATE_LIMIT, period=CANVAS_RATE_PERIOD),
        timeout=CANVAS_TIMEOUT,
    )
