"""Generation service combining prompts, the model gateway and the response cache."""

import logging
from typing import List, Optional

from config.settings import GenerationConfig
from debate_engine.models import DebatePoint
from debate_engine.types import Complexity, Side
from prompts import (
    build_counter_argument_messages,
    build_debate_messages,
    build_rebuttal_messages,
)
from storage import DebateStorage

from .cache_manager import ResponseCache
from .groq_provider import GroqProvider

logger = logging.getLogger(__name__)

DEFAULT_LANGUAGE = "english"


class DebateGenerator:
    """Produces debate points, rebuttals and counter-arguments."""

    def __init__(
        self,
        provider: GroqProvider,
        storage: DebateStorage,
        cache: ResponseCache,
        generation_config: GenerationConfig,
    ):
        self.provider = provider
        self.storage = storage
        self.cache = cache
        self.generation_config = generation_config

    async def generate_debate_points(
        self, topic: str, language: str, complexity: Complexity
    ) -> DebatePoint:
        """Generate the full set of points for a topic, reusing cached results.

        The cache check and the write are separated by the upstream call, so
        concurrent identical requests may each reach the model.
        """
        cache_params = {
            "topic": topic,
            "language": language,
            "complexity": complexity.value,
        }
        cached = self.cache.get("debate", cache_params)
        if cached is not None:
            logger.info(f"Serving cached debate points for: {topic[:60]}")
            return cached

        messages = build_debate_messages(topic, language, complexity)
        points = await self.provider.generate_debate_points(messages)

        self.cache.set("debate", cache_params, points)
        return points

    async def generate_rebuttals(
        self, topic: str, side: Side, count: Optional[int] = None
    ) -> List[str]:
        """Generate rebuttals for one side in the language of a matching saved debate."""
        count = count or self.generation_config.default_count
        language = await self._resolve_language(topic)
        messages = build_rebuttal_messages(topic, side, count, language)
        return await self.provider.generate_string_list(messages)

    async def generate_counter_arguments(
        self, argument: str, topic: Optional[str] = None, count: Optional[int] = None
    ) -> List[str]:
        """Generate counter-arguments against a single argument."""
        count = count or self.generation_config.default_count
        language = await self._resolve_language(topic) if topic else DEFAULT_LANGUAGE
        messages = build_counter_argument_messages(argument, topic, count, language)
        return await self.provider.generate_string_list(messages)

    async def _resolve_language(self, topic: str) -> str:
        """Use the language of a saved debate with the same topic, else English."""
        try:
            debate = await self.storage.find_debate_by_topic(topic)
        except Exception as e:
            logger.warning(f"Error finding debate language, defaulting to English: {e}")
            return DEFAULT_LANGUAGE

        if debate and debate.language:
            return debate.language
        return DEFAULT_LANGUAGE
