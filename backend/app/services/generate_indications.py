"""Generate Indications — request → prompt → Gemini → generated text.

Invariants:
    - API key checked after the body is parsed and before any network IO
    - Exactly one upstream call per invocation; errors propagate unchanged
    - Returns only the generated text (never a partial result)
"""

import logging

import httpx

from app.config import Settings
from app.core.errors import ConfigurationError
from app.core.indications_prompt import build_indications_prompt
from app.infrastructure.gemini_client import GeminiClient
from app.schemas.indications import IndicationsRequest

logger = logging.getLogger(__name__)

MISSING_KEY_MESSAGE = "API key is not configured on the server."


def require_api_key(settings: Settings) -> str:
    """Return the upstream key or raise ConfigurationError."""
    if not settings.gemini_api_key:
        raise ConfigurationError(MISSING_KEY_MESSAGE, setting="GEMINI_API_KEY")
    return settings.gemini_api_key


async def generate_indications(
    body: IndicationsRequest,
    settings: Settings,
    transport: httpx.AsyncBaseTransport | None = None,
) -> str:
    """Produce a "Propuesta de Indicaciones" for the two texts."""
    api_key = require_api_key(settings)
    prompt = build_indications_prompt(body.original_text, body.final_text)
    logger.info(
        "Requesting indications",
        extra={"model": settings.gemini_model, "prompt_chars": len(prompt)},
    )
    async with GeminiClient(
        api_key=api_key,
        model=settings.gemini_model,
        base_url=settings.gemini_base_url,
        timeout_seconds=settings.gemini_timeout_seconds,
        transport=transport,
    ) as gemini:
        return await gemini.generate_content(prompt)
