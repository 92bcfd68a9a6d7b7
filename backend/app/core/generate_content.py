"""generateContent Wire Format — pure builders/parsers for the Gemini REST body.

Invariants:
    - build_generate_payload wraps the prompt as a single "user" turn with one text part
    - extract_candidate_text returns candidates[0].content.parts[0].text or raises
      UpstreamResponseError; it never returns a partial or default value
    - No IO: the httpx client lives in infrastructure/gemini_client.py
"""

from typing import Any

from app.core.errors import ErrorContext, UpstreamResponseError


def build_generate_content_url(base_url: str, model: str) -> str:
    """Endpoint for a model. The API key is sent separately as a query param."""
    return f"{base_url.rstrip('/')}/models/{model}:generateContent"


def build_generate_payload(prompt: str) -> dict:
    return {
        "contents": [{
            "role": "user",
            "parts": [{"text": prompt}],
        }],
    }


def extract_candidate_text(result: Any, model: str | None = None) -> str:
    """Pull the first candidate's first text part out of a generateContent result."""
    try:
        text = result["candidates"][0]["content"]["parts"][0]["text"]
    except (KeyError, IndexError, TypeError) as e:
        raise UpstreamResponseError(
            f"Unexpected response shape from Google API ({type(e).__name__}: {e})",
            context=ErrorContext(model=model),
        ) from e
    if not isinstance(text, str):
        raise UpstreamResponseError(
            "Unexpected response shape from Google API: candidate text is not a string",
            context=ErrorContext(model=model),
        )
    return text
