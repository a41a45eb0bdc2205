"""
Shared fixtures for the RoleFit test-suite.
"""

import json
from typing import Any, Dict
from unittest.mock import MagicMock

import fitz
import pytest
import requests

from config import Settings


def make_pdf(text: str) -> bytes:
    """Build a one-page PDF containing `text`."""
    doc = fitz.open()
    page = doc.new_page()
    page.insert_text((72, 72), text)
    data = doc.tobytes()
    doc.close()
    return data


def gemini_body(text: str) -> Dict[str, Any]:
    """generateContent response with a single candidate carrying `text`."""
    return {"candidates": [{"content": {"role": "model", "parts": [{"text": text}]}}]}


def http_response(status: int, body: Any = None) -> MagicMock:
    """A requests.Response stand-in with working raise_for_status()/json()."""
    response = MagicMock(spec=requests.Response)
    response.status_code = status
    response.text = json.dumps(body) if body is not None else ""
    response.json.return_value = body
    if status >= 400:
        response.raise_for_status.side_effect = requests.exceptions.HTTPError(
            f"{status} Error", response=response
        )
    else:
        response.raise_for_status.return_value = None
    return response


@pytest.fixture
def good_reply() -> str:
    return json.dumps({
        "score": 85,
        "summary": "s",
        "strengths": "a",
        "gaps": "b",
        "suggestions": "c",
    })


@pytest.fixture
def settings() -> Settings:
    return Settings(
        gemini_api_url="https://gemini.example.test/v1/models/gemini:generateContent",
        gemini_api_key="test-key",
    )


@pytest.fixture
def cv_pdf() -> bytes:
    return make_pdf("Jane Doe - Senior Python Developer, 6 years FastAPI and AWS")


@pytest.fixture
def jd_pdf() -> bytes:
    return make_pdf("We are hiring a Backend Engineer: Python, FastAPI, Kubernetes")


@pytest.fixture
def env(monkeypatch):
    """Environment for an app start-up with the required variables present."""
    monkeypatch.setenv("GEMINI_API_URL", "https://gemini.example.test/v1/models/gemini:generateContent")
    monkeypatch.setenv("GEMINI_API_KEY", "test-key")
    monkeypatch.delenv("PORT", raising=False)
    monkeypatch.delenv("GEMINI_TIMEOUT", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    return monkeypatch
