"""Shared pytest fixtures for prompt expander tests."""

import json
from typing import Any, Optional

import pytest
import requests

from prompt_expander.api.handler import PromptExpansionHandler
from prompt_expander.llm.provider_config import load_settings


def make_response(
    status_code: int = 200,
    payload: Any = None,
    text: Optional[str] = None,
    reason: str = "OK",
) -> requests.Response:
    """Build a real `requests.Response` without touching the network.

    Args:
        status_code: HTTP status to report.
        payload: JSON-serializable body; ignored when `text` is given.
        text: Raw body text.
        reason: Reason phrase (`response.reason`).
    """
    response = requests.Response()
    response.status_code = status_code
    response.reason = reason
    if text is None:
        text = json.dumps(payload) if payload is not None else ""
    response._content = text.encode("utf-8")
    response.encoding = "utf-8"
    return response


def openai_payload(content: Optional[str]) -> dict:
    return {
        "id": "chatcmpl-test",
        "model": "gpt-3.5-turbo-0125",
        "choices": [
            {
                "index": 0,
                "message": {"role": "assistant", "content": content},
                "finish_reason": "stop",
            }
        ],
    }


def gemini_payload(text: Optional[str]) -> dict:
    return {
        "candidates": [
            {
                "content": {"role": "model", "parts": [{"text": text}]},
                "finishReason": "STOP",
            }
        ]
    }


class FakeSession:
    """Stand-in for `requests` recording every `post` call.

    Args:
        response: Returned from `post`.
        error: Raised from `post` instead of returning.
    """

    def __init__(self, response=None, error: Optional[Exception] = None):
        self.response = response
        self.error = error
        self.calls = []

    def post(self, url, **kwargs):
        self.calls.append({"url": url, **kwargs})
        if self.error is not None:
            raise self.error
        return self.response


@pytest.fixture
def openai_settings():
    """OpenAI settings with a fake credential, independent of the process env."""
    return load_settings("openai", environ={"OPENAI_API_KEY": "sk-test"})


@pytest.fixture
def gemini_settings():
    return load_settings("gemini", environ={"GEMINI_API_KEY": "gm-test"})


@pytest.fixture
def make_handler(openai_settings):
    """Factory building a handler around a `FakeSession`.

    Returns:
        Callable `(response=None, error=None, settings=None) -> (handler, session)`.
    """

    def _make(response=None, error=None, settings=None):
        session = FakeSession(response=response, error=error)
        handler = PromptExpansionHandler(
            settings=settings or openai_settings,
            session=session,
        )
        return handler, session

    return _make
