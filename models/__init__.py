"""Model gateway: chat-completion calls, response recovery and caching."""

from .cache_manager import ResponseCache
from .debate_generator import DebateGenerator
from .exceptions import (
    GatewayError,
    MalformedResponseError,
    ProviderConfigurationError,
    RateLimitedError,
    UpstreamError,
)
from .groq_provider import GroqProvider, parse_retry_after
from .json_repair import extract_json, repair_json

__all__ = [
    "DebateGenerator",
    "GatewayError",
    "GroqProvider",
    "MalformedResponseError",
    "ProviderConfigurationError",
    "RateLimitedError",
    "ResponseCache",
    "UpstreamError",
    "extract_json",
    "parse_retry_after",
    "repair_json",
]
