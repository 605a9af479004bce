"""Pytest configuration and shared fixtures.

Provides a scripted stand-in for the chat-completion API (served through
httpx.MockTransport, so the real OpenAI SDK code path runs), ready-made
providers and storage, and sample debate content.
"""

import json
from typing import Any, Callable

import httpx
import pytest

from config.settings import AppConfig, GenerationConfig, GroqConfig
from models.groq_provider import GroqProvider
from storage import MemoryStorage


# =============================================================================
# FAKE CHAT-COMPLETION API
# =============================================================================


def chat_completion(content: str) -> dict[str, Any]:
    """Build a chat-completion payload whose first choice carries content."""
    return {
        "id": "chatcmpl-test",
        "object": "chat.completion",
        "created": 1700000000,
        "model": "llama3-8b-8192",
        "choices": [
            {
                "index": 0,
                "message": {"role": "assistant", "content": content},
                "finish_reason": "stop",
            }
        ],
        "usage": {"prompt_tokens": 10, "completion_tokens": 20, "total_tokens": 30},
    }


def rate_limit_response(message: str = "Rate limit reached. Please try again in 1.5s.") -> httpx.Response:
    return httpx.Response(429, json={"error": {"message": message, "type": "tokens"}})


class FakeChatAPI:
    """Replays scripted responses and records every request it receives.

    Items may be a string (returned as completion content) or a ready
    httpx.Response. The last item repeats once the script runs out.
    """

    def __init__(self, *responses: str | httpx.Response):
        if not responses:
            raise ValueError("FakeChatAPI needs at least one response")
        self._responses = list(responses)
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        index = min(len(self.requests) - 1, len(self._responses) - 1)
        item = self._responses[index]
        if isinstance(item, httpx.Response):
            # Fresh copy so a repeated item is never handed out twice
            return httpx.Response(item.status_code, headers=item.headers, content=item.content)
        return httpx.Response(200, json=chat_completion(item))

    @property
    def payloads(self) -> list[dict[str, Any]]:
        return [json.loads(request.content) for request in self.requests]


# =============================================================================
# SHARED FIXTURES
# =============================================================================


@pytest.fixture
def sample_debate_topic() -> str:
    """Provide a standard debate topic for testing."""
    return "Should AI be regulated?"


@pytest.fixture
def debate_points_payload() -> dict[str, Any]:
    """A complete, valid debate points object as the model would return it."""
    return {
        "proposition": ["Regulation protects consumers", "It builds public trust"],
        "opposition": ["Rules slow innovation", "Regulators lack expertise"],
        "propositionRebuttals": ["Innovation thrives under clear rules"],
        "oppositionRebuttals": ["Trust comes from results, not rules"],
        "evidence": [
            {
                "point": "Most adults support AI oversight",
                "sources": ["Pew Research Center, 2023"],
            }
        ],
        "language": "english",
    }


@pytest.fixture
def app_config() -> AppConfig:
    """Configuration with a dummy API key."""
    return AppConfig(groq=GroqConfig(api_key="test-key"))


@pytest.fixture
def make_provider(app_config: AppConfig) -> Callable[..., GroqProvider]:
    """Factory building a GroqProvider wired to a FakeChatAPI."""

    def _make(api: FakeChatAPI, retries: int = 2) -> GroqProvider:
        groq_config = app_config.groq.model_copy(update={"max_rate_limit_retries": retries})
        return GroqProvider(
            groq_config,
            GenerationConfig(),
            http_client=httpx.AsyncClient(transport=httpx.MockTransport(api)),
        )

    return _make


@pytest.fixture
def memory_storage() -> MemoryStorage:
    return MemoryStorage()


@pytest.fixture
def no_sleep(monkeypatch: pytest.MonkeyPatch) -> list[float]:
    """Replace the backoff sleep and collect requested delays."""
    sleeps: list[float] = []

    async def fake_sleep(delay: float) -> None:
        sleeps.append(delay)

    monkeypatch.setattr("models.groq_provider.asyncio.sleep", fake_sleep)
    return sleeps


# =============================================================================
# PYTEST CONFIGURATION HOOKS
# =============================================================================


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "integration: marks tests that exercise the full HTTP app"
    )
    config.addinivalue_line("markers", "unit: marks tests as unit tests")
