import asyncio
import json
import logging
import math
import os
import re
from typing import Any, Dict, List, Optional

import httpx
from openai import APIConnectionError, APIStatusError, AsyncOpenAI, RateLimitError
from pydantic import TypeAdapter, ValidationError

from config.settings import GenerationConfig, GroqConfig
from debate_engine.models import DebatePoint
from debate_engine.types import ResponseShape

from .exceptions import (
    MalformedResponseError,
    ProviderConfigurationError,
    RateLimitedError,
    UpstreamError,
)
from .json_repair import extract_json

logger = logging.getLogger(__name__)

RETRY_AFTER_PATTERN = re.compile(r"try again in ([0-9.]+)\s*s", re.IGNORECASE)

_STRING_LIST = TypeAdapter(List[str])


def parse_retry_after(
    body: str, default: float, header_value: Optional[str] = None
) -> float:
    """Work out how long to wait after a 429.

    Looks for "try again in N s" in the error payload (rounded up to whole
    seconds), then a Retry-After header, then falls back to default.
    """
    message = body
    try:
        payload = json.loads(body)
        if isinstance(payload, dict) and isinstance(payload.get("error"), dict):
            message = str(payload["error"].get("message", ""))
    except ValueError:
        logger.debug("Could not parse rate limit payload, searching raw text")

    match = RETRY_AFTER_PATTERN.search(message)
    if match:
        try:
            return float(math.ceil(float(match.group(1))))
        except ValueError:
            pass

    if header_value:
        try:
            return max(float(header_value), 0.0)
        except ValueError:
            pass

    return default


class GroqProvider:
    """Chat-completion gateway for Groq's OpenAI-compatible API.

    Retries rate-limited requests itself (the SDK's own retries are
    disabled) and turns the model's free text into validated structures.
    """

    def __init__(
        self,
        groq_config: GroqConfig,
        generation_config: GenerationConfig,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        self.groq_config = groq_config
        self.generation_config = generation_config

        api_key = groq_config.api_key or os.getenv("GROQ_API_KEY")

        if not api_key:
            logger.warning(
                "No Groq API key found. Set GROQ_API_KEY or configure it in the groq settings."
            )
            self._client: Optional[AsyncOpenAI] = None
        else:
            self._client = AsyncOpenAI(
                base_url=groq_config.base_url,
                api_key=api_key,
                timeout=groq_config.timeout,
                max_retries=0,
                http_client=http_client,
            )

    @property
    def provider_name(self) -> str:
        return "groq"

    async def complete(
        self,
        messages: List[Dict[str, str]],
        max_tokens: int,
        retries: Optional[int] = None,
    ) -> str:
        """Send one chat completion, retrying on 429 up to retries more times."""
        if not self._client:
            raise ProviderConfigurationError("Groq client not initialized - check API key")

        if retries is None:
            retries = self.groq_config.max_rate_limit_retries

        attempt = 0
        while True:
            attempt += 1
            try:
                response = await self._client.chat.completions.create(
                    model=self.groq_config.model,
                    messages=messages,  # type: ignore
                    temperature=self.generation_config.temperature,
                    max_tokens=max_tokens,
                )
                break
            except RateLimitError as exc:
                body = exc.response.text
                if attempt > retries:
                    logger.error(f"Groq rate limit persisted after {attempt} attempts: {body}")
                    raise RateLimitedError(
                        provider=self.provider_name,
                        model=self.groq_config.model,
                        attempts=attempt,
                        detail=body,
                    ) from exc

                delay = parse_retry_after(
                    body,
                    self.groq_config.default_retry_after,
                    exc.response.headers.get("retry-after"),
                )
                logger.warning(
                    f"Rate limit reached, retrying after {delay} seconds "
                    f"(attempt {attempt} of {retries + 1})"
                )
                await asyncio.sleep(delay)
            except APIStatusError as exc:
                logger.error(f"Groq API error: {exc.status_code} {exc.response.text}")
                raise UpstreamError(exc.status_code, exc.response.text) from exc
            except APIConnectionError as exc:
                logger.error(f"Could not reach Groq API: {exc}")
                raise UpstreamError(None, str(exc)) from exc

        if not response.choices:
            raise MalformedResponseError("Model response contained no choices")

        content = response.choices[0].message.content or ""
        if not content.strip():
            logger.warning(f"Groq model {self.groq_config.model} returned empty content")
        else:
            logger.debug(f"Generated {len(content)} chars from Groq model {self.groq_config.model}")

        return content

    async def generate_structured(
        self,
        messages: List[Dict[str, str]],
        shape: ResponseShape,
        retries: Optional[int] = None,
        max_tokens: Optional[int] = None,
    ) -> Any:
        """Generate content and recover a value of the requested shape from it.

        Object shape yields a DebatePoint, array shape a list of strings.
        """
        if max_tokens is None:
            if shape is ResponseShape.OBJECT:
                max_tokens = self.generation_config.debate_max_tokens
            else:
                max_tokens = self.generation_config.list_max_tokens

        content = await self.complete(messages, max_tokens=max_tokens, retries=retries)

        try:
            value = extract_json(content, shape)
            if shape is ResponseShape.OBJECT:
                return DebatePoint.model_validate(value)
            return _STRING_LIST.validate_python(value)
        except MalformedResponseError as e:
            logger.error(f"JSON parsing error: {e}")
            logger.debug(f"Raw content: {content}")
            raise
        except ValidationError as e:
            logger.error(f"Model output did not match the expected {shape.value} shape: {e}")
            logger.debug(f"Raw content: {content}")
            raise MalformedResponseError(
                f"Model output did not match the expected {shape.value} shape",
                content=content,
            ) from e

    async def generate_debate_points(
        self, messages: List[Dict[str, str]], retries: Optional[int] = None
    ) -> DebatePoint:
        return await self.generate_structured(messages, ResponseShape.OBJECT, retries=retries)

    async def generate_string_list(
        self, messages: List[Dict[str, str]], retries: Optional[int] = None
    ) -> List[str]:
        return await self.generate_structured(messages, ResponseShape.ARRAY, retries=retries)

    async def close(self) -> None:
        """Release the underlying HTTP connections."""
        if self._client:
            await self._client.close()
