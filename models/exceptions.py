"""Errors raised while obtaining structured content from the model service."""

from typing import Optional


class GatewayError(Exception):
    """Base class for model gateway failures."""


class ProviderConfigurationError(GatewayError):
    """The provider cannot be used as configured (e.g. no API key)."""


class RateLimitedError(GatewayError):
    """The upstream service kept rate limiting after the retry budget ran out."""

    def __init__(self, provider: str, model: str, attempts: int, detail: str = ""):
        self.provider = provider
        self.model = model
        self.attempts = attempts
        self.detail = detail
        super().__init__(
            f"{provider} rate limited model {model} after {attempts} attempts"
            + (f": {detail}" if detail else "")
        )


class UpstreamError(GatewayError):
    """The upstream service answered with a non-success status or was unreachable."""

    def __init__(self, status_code: Optional[int], body: str = ""):
        self.status_code = status_code
        self.body = body
        status = status_code if status_code is not None else "no response"
        super().__init__(f"Upstream API error: {status} {body}".rstrip())


class MalformedResponseError(GatewayError):
    """Model output could not be recovered into the requested structure."""

    def __init__(self, message: str, content: str = ""):
        self.content = content
        super().__init__(message)
