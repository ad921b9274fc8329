from graphboard.canvas.client import CanvasClient
from graphboard.canvas.rate_limit import RateLimiter

__all__ = ["CanvasClient", "RateLimiter"]
