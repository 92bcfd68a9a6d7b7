"""generateContent wire format tests — payload builder, URL builder, text extraction.

Tests cover:
    - Payload is a single user turn with one text part
    - URL joins base and model, tolerating a trailing slash
    - Extraction of candidates[0].content.parts[0].text
    - Every missing/malformed level raises UpstreamResponseError
"""

import pytest

from app.core.errors import UpstreamResponseError
from app.core.generate_content import (
    build_generate_content_url,
    build_generate_payload,
    extract_candidate_text,
)


def test_payload_single_user_turn():
    assert build_generate_payload("hola") == {
        "contents": [{"role": "user", "parts": [{"text": "hola"}]}],
    }


def test_payload_keeps_prompt_unchanged():
    prompt = 'línea 1\n"dos" {tres}'
    payload = build_generate_payload(prompt)
    assert payload["contents"][0]["parts"][0]["text"] is prompt


def test_url_includes_model():
    url = build_generate_content_url(
        "https://generativelanguage.googleapis.com/v1beta", "gemini-x",
    )
    assert url == (
        "https://generativelanguage.googleapis.com/v1beta/models/gemini-x:generateContent"
    )


def test_url_tolerates_trailing_slash():
    assert build_generate_content_url("http://h/v1beta/", "m") == (
        "http://h/v1beta/models/m:generateContent"
    )


def test_extracts_first_candidate_text():
    result = {
        "candidates": [
            {"content": {"parts": [{"text": "primero"}, {"text": "ignorado"}]}},
            {"content": {"parts": [{"text": "segundo"}]}},
        ],
    }
    assert extract_candidate_text(result) == "primero"


@pytest.mark.parametrize("result", [
    {},
    {"candidates": []},
    {"candidates": [{}]},
    {"candidates": [{"content": {}}]},
    {"candidates": [{"content": {"parts": []}}]},
    {"candidates": [{"content": {"parts": [{}]}}]},
    {"candidates": None},
    None,
    [],
    "text",
])
def test_malformed_shapes_raise(result):
    with pytest.raises(UpstreamResponseError) as exc_info:
        extract_candidate_text(result)
    assert "Unexpected response shape" in exc_info.value.message


def test_non_string_text_raises():
    result = {"candidates": [{"content": {"parts": [{"text": 42}]}}]}
    with pytest.raises(UpstreamResponseError):
        extract_candidate_text(result)


def test_error_carries_model_for_logging():
    with pytest.raises(UpstreamResponseError) as exc_info:
        extract_candidate_text({}, model="gemini-x")
    assert exc_info.value.context.model == "gemini-x"
