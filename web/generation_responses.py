from debate_engine.models import CamelModel


class RebuttalsResponse(CamelModel):
    """Response model for generated rebuttals."""

    rebuttals: list[str]


class CounterArgumentsResponse(CamelModel):
    """Response model for generated counter-arguments."""

    counter_arguments: list[str]
