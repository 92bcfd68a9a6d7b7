"""Gemini Client — one-shot async wrapper over the generateContent REST endpoint.

Invariants:
    - Exactly one POST per generate_content() call, no retries
    - API key sent only as the "key" query parameter, never logged
    - Non-2xx status → UpstreamAPIError carrying the status code in its message
    - Request failures (connect, timeout, decoding, redirects) → UpstreamAPIError
      without status
    - Body shape errors → UpstreamResponseError (via core.generate_content)

Design Decisions:
    - httpx over a vendor SDK: the wire contract (key as query param, raw JSON body)
      is fixed, and httpx.MockTransport makes the upstream trivially fakeable in tests
    - Async context manager owns the AsyncClient: one connection pool per handler
      invocation, closed on exit
"""

import logging

import httpx

from app.core.errors import ErrorContext, UpstreamAPIError, UpstreamResponseError
from app.core.generate_content import (
    build_generate_content_url,
    build_generate_payload,
    extract_candidate_text,
)

logger = logging.getLogger(__name__)


class GeminiClient:
    """Calls models/<model>:generateContent and returns the first candidate's text."""

    def __init__(
        self,
        api_key: str,
        model: str,
        base_url: str,
        timeout_seconds: float = 120.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.api_key = api_key
        self.model = model
        self.url = build_generate_content_url(base_url, model)
        self.client = httpx.AsyncClient(
            timeout=timeout_seconds, transport=transport,
        )

    async def __aenter__(self) -> "GeminiClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self.client.aclose()

    async def generate_content(self, prompt: str) -> str:
        """Send the prompt as a single user turn. Returns generated text."""
        response = await self._post(build_generate_payload(prompt))

        if not response.is_success:
            logger.warning(
                "Google API returned non-success status",
                extra={"upstream_status": response.status_code, "model": self.model},
            )
            raise UpstreamAPIError(
                f"Google API request failed with status {response.status_code}",
                status_code=response.status_code,
                context=ErrorContext(model=self.model),
            )

        try:
            result = response.json()
        except ValueError as e:
            raise UpstreamResponseError(
                f"Google API returned invalid JSON: {e}",
                context=ErrorContext(
                    upstream_status=response.status_code, model=self.model,
                ),
            ) from e

        text = extract_candidate_text(result, model=self.model)
        logger.info(
            "Google API success",
            extra={
                "upstream_status": response.status_code,
                "model": self.model,
                "prompt_chars": len(prompt),
            },
        )
        return text

    async def _post(self, payload: dict) -> httpx.Response:
        try:
            return await self.client.post(
                self.url,
                params={"key": self.api_key},
                json=payload,
                headers={"Content-Type": "application/json"},
            )
        except httpx.TimeoutException as e:
            raise UpstreamAPIError(
                f"Google API request timed out: {e}",
                context=ErrorContext(model=self.model),
            ) from e
        except httpx.RequestError as e:
            raise UpstreamAPIError(
                f"Google API request failed: {e}",
                context=ErrorContext(model=self.model),
            ) from e


def get_upstream_transport() -> httpx.AsyncBaseTransport | None:
    """FastAPI dependency. None selects httpx's default network transport;
    tests override it with httpx.MockTransport."""
    return None
