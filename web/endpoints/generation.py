"""Debate point, rebuttal and counter-argument generation endpoints."""

import logging

from fastapi import APIRouter, Depends, HTTPException

from debate_engine.models import DebatePoint
from models.debate_generator import DebateGenerator
from models.exceptions import GatewayError, RateLimitedError
from web.counter_argument_request import CounterArgumentRequest
from web.debate_topic_request import DebateTopicRequest
from web.dependencies import get_generator
from web.generation_responses import CounterArgumentsResponse, RebuttalsResponse
from web.rebuttal_request import RebuttalRequest

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api")

RATE_LIMIT_MESSAGE = "API rate limit reached. Please try again in a few seconds."


def generation_failure(exc: Exception, message: str) -> HTTPException:
    """Map a generation failure to a client-safe 500 error."""
    if isinstance(exc, RateLimitedError):
        return HTTPException(status_code=500, detail=RATE_LIMIT_MESSAGE)
    if not isinstance(exc, GatewayError):
        logger.exception(f"Unexpected generation failure: {exc}")
    return HTTPException(status_code=500, detail=message)


@router.post("/debate", response_model=DebatePoint)
async def generate_debate(
    request: DebateTopicRequest,
    generator: DebateGenerator = Depends(get_generator),
):
    """Generate debate points for a topic."""
    try:
        return await generator.generate_debate_points(
            request.topic, request.language, request.complexity
        )
    except Exception as e:
        logger.error(f"Error generating debate points: {e}")
        raise generation_failure(
            e, "Failed to generate debate points. Please try again later."
        ) from e


@router.post("/rebuttals", response_model=RebuttalsResponse)
async def generate_rebuttals(
    request: RebuttalRequest,
    generator: DebateGenerator = Depends(get_generator),
):
    """Generate additional rebuttals for one side of a topic."""
    try:
        rebuttals = await generator.generate_rebuttals(
            request.topic, request.side, request.count
        )
        return RebuttalsResponse(rebuttals=rebuttals)
    except Exception as e:
        logger.error(f"Error generating rebuttals: {e}")
        raise generation_failure(e, "Failed to generate rebuttals from AI service") from e


@router.post("/counter-arguments", response_model=CounterArgumentsResponse)
async def generate_counter_arguments(
    request: CounterArgumentRequest,
    generator: DebateGenerator = Depends(get_generator),
):
    """Generate counter-arguments against an argument."""
    try:
        counter_arguments = await generator.generate_counter_arguments(
            request.argument, request.topic, request.count
        )
        return CounterArgumentsResponse(counter_arguments=counter_arguments)
    except Exception as e:
        logger.error(f"Error generating counter-arguments: {e}")
        raise generation_failure(
            e, "Failed to generate counter-arguments from AI service"
        ) from e
