import time
from typing import Callable, Optional

import requests
from tenacity import (
    Retrying,
    retry_if_exception_type,
    retry_if_result,
    stop_after_attempt,
)

from graphboard.canvas.rate_limit import RateLimiter
from graphboard.errors import CanvasError
from graphboard.logging_config import get_logger
from graphboard.visual.visual_style import frame_fill_hex, note_color

logger = get_logger(__name__)

RATE_EXCEEDED = 429
TRANSPORT_ERRORS = (requests.ConnectionError, requests.Timeout)


class CanvasClient:
    """
    Thin REST client for a whiteboard canvas (Miro v2 shaped endpoints).

    Each create call goes through the shared RateLimiter. A 429 answer or
    a dropped connection sleeps and retries instead of failing the
    caller; anything else becomes a CanvasError.
    """

    def __init__(
        self,
        base_url: str,
        token: str,
        limiter: Optional[RateLimiter] = None,
        timeout: float = 30,
        max_retries: int = 5,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.base_url = base_url.rstrip("/")
        self.token = token
        self.limiter = limiter or RateLimiter()
        self.timeout = timeout
        self.max_retries = max_retries
        self._sleep = sleep

    def _headers(self) -> dict:
        return {
            "Authorization": f"Bearer {self.token}",
            "Accept": "application/json",
            "Content-Type": "application/json",
        }

    @staticmethod
    def _is_rate_exceeded(response) -> bool:
        return response.status_code == RATE_EXCEEDED

    def _retry_wait(self, retry_state) -> float:
        """Honour Retry-After on a 429, otherwise wait one limiter period."""
        outcome = retry_state.outcome
        if outcome is not None and not outcome.failed:
            retry_after = outcome.result().headers.get("Retry-After")
            if retry_after:
                try:
                    return float(retry_after)
                except ValueError:
                    pass
        return self.limiter.period

    def _log_retry(self, retry_state) -> None:
        outcome = retry_state.outcome
        logger.warning(
            "canvas call retrying",
            attempt=retry_state.attempt_number,
            retry_in=retry_state.next_action.sleep,
            reason=(
                repr(outcome.exception()) if outcome.failed
                else f"HTTP {outcome.result().status_code}"
            ),
        )

    def _send(self, url: str, payload: dict):
        self.limiter.acquire()
        return requests.post(
            url,
            json=payload,
            headers=self._headers(),
            timeout=self.timeout,
        )

    def _post(self, path: str, payload: dict) -> str:
        url = f"{self.base_url}{path}"
        retrying = Retrying(
            stop=stop_after_attempt(self.max_retries + 1),
            wait=self._retry_wait,
            retry=(
                retry_if_exception_type(TRANSPORT_ERRORS)
                | retry_if_result(self._is_rate_exceeded)
            ),
            sleep=self._sleep,
            before_sleep=self._log_retry,
            # hand back the last response (or raise the last error) once
            # attempts run out
            retry_error_callback=lambda state: state.outcome.result(),
        )

        try:
            response = retrying(self._send, url, payload)
        except TRANSPORT_ERRORS as e:
            raise CanvasError(f"Canvas call {url} failed: {e!r}") from e

        if self._is_rate_exceeded(response):
            raise CanvasError(
                f"Canvas call {url} still rate limited after "
                f"{self.max_retries} retries",
                status_code=RATE_EXCEEDED,
            )

        try:
            response.raise_for_status()
        except requests.HTTPError as e:
            raise CanvasError(
                f"Canvas call {url} failed: {response.text}",
                status_code=response.status_code,
            ) from e

        try:
            return str(response.json()["id"])
        except (ValueError, KeyError, TypeError) as e:
            raise CanvasError(
                f"Canvas call {url} returned no item id: {response.text}",
                status_code=response.status_code,
            ) from e

    # ---------- creation ----------

    def create_frame(self, board_id, title, color, x, y, width, height) -> str:
        return self._post(
            f"/boards/{board_id}/frames",
            {
                "data": {"title": title, "format": "custom", "type": "freeform"},
                "style": {"fillColor": frame_fill_hex(color)},
                "position": {"x": x, "y": y, "origin": "center"},
                "geometry": {"width": width, "height": height},
            },
        )

    def create_note(self, board_id, frame_id, text, color, x, y, width) -> str:
        return self._post(
            f"/boards/{board_id}/sticky_notes",
            {
                "data": {"content": text, "shape": "rectangle"},
                "style": {"fillColor": note_color(color)},
                "position": {"x": x, "y": y, "origin": "center"},
                "geometry": {"width": width},
                "parent": {"id": frame_id},
            },
        )

    def create_connector(self, board_id, source_id, target_id, stroke_color) -> str:
        return self._post(
            f"/boards/{board_id}/connectors",
            {
                "startItem": {"id": source_id},
                "endItem": {"id": target_id},
                "style": {"strokeColor": stroke_color},
            },
        )
