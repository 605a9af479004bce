"""Prompt construction for debate generation requests.

Every builder is a pure function returning the chat messages for one
request. Language and complexity are inserted verbatim; callers are
expected to have validated them already.
"""

from typing import Dict, List, Optional

Message = Dict[str, str]

DEBATE_COACH_SYSTEM_PROMPT = (
    "You are an expert debate coach who provides comprehensive analysis of debate "
    "topics with well-structured arguments and rebuttals."
)

REBUTTAL_SYSTEM_PROMPT = (
    "You are an expert debate coach specializing in creating effective rebuttals."
)

COUNTER_ARGUMENT_SYSTEM_PROMPT = (
    "You are an expert debater specializing in identifying weaknesses in arguments "
    "and creating effective counter-arguments."
)

COMPLEXITY_GUIDANCE = {
    "beginner": "Use plain language and everyday examples suitable for someone new to debating.",
    "intermediate": "Assume familiarity with basic debate structure and use moderately detailed reasoning.",
    "advanced": "Use nuanced reasoning, anticipate sophisticated objections and cite specific studies.",
    "expert": "Argue at competition level with technical depth, precise terminology and layered rebuttals.",
}


def _value(option) -> str:
    """Return the plain string for an enum member or a string."""
    return getattr(option, "value", option)


def _messages(system_prompt: str, user_prompt: str) -> List[Message]:
    return [
        {"role": "system", "content": system_prompt},
        {"role": "user", "content": user_prompt},
    ]


def build_debate_messages(topic: str, language: str, complexity) -> List[Message]:
    """Build messages asking for the full set of debate points as one JSON object."""
    language = _value(language)
    complexity = _value(complexity)
    guidance = COMPLEXITY_GUIDANCE.get(complexity, "")

    user_prompt = f"""Generate comprehensive debate points on the topic: "{topic}"

LANGUAGE: {language}
COMPLEXITY: {complexity}
{guidance}

In your response, provide:
1. At least 5 compelling points for the proposition side
2. At least 5 compelling points for the opposition side
3. At least 3 potential rebuttals for the proposition side
4. At least 3 potential rebuttals for the opposition side
5. IMPORTANT: You must include at least 5 pieces of supporting evidence with reliable sources

Return your response as JSON with the following structure:
{{
  "proposition": ["point1", "point2", ...],
  "opposition": ["point1", "point2", ...],
  "propositionRebuttals": ["rebuttal1", "rebuttal2", ...],
  "oppositionRebuttals": ["rebuttal1", "rebuttal2", ...],
  "evidence": [{{"point": "...", "sources": ["source1", "source2", ...]}}, ...],
  "language": "{language}"
}}

Every evidence entry must list at least one source.
Write all content in {language}. Provide valid JSON only, no additional text:"""

    return _messages(DEBATE_COACH_SYSTEM_PROMPT, user_prompt)


def build_rebuttal_messages(topic: str, side, count: int, language: str = "english") -> List[Message]:
    """Build messages asking for a JSON array of rebuttals for one side."""
    side = _value(side)

    user_prompt = f"""Generate {count} additional rebuttal points for the "{side}" side of the debate topic: "{topic}".

Make these rebuttals strong, concise, and focused on countering the main arguments of the opposing side.

PROVIDE ALL CONTENT IN THE {language} LANGUAGE.

Return only the array of rebuttals in JSON format:
["rebuttal1", "rebuttal2", ...]

Make sure the output is properly formatted JSON that can be parsed."""

    return _messages(REBUTTAL_SYSTEM_PROMPT, user_prompt)


def build_counter_argument_messages(
    argument: str,
    topic: Optional[str],
    count: int,
    language: str = "english",
) -> List[Message]:
    """Build messages asking for a JSON array of counter-arguments to one argument."""
    topic_context = f' for the debate topic "{topic}"' if topic else ""

    user_prompt = f"""Generate {count} effective counter-arguments against the following argument{topic_context}:

"{argument}"

Make these counter-arguments strong, logical, and focused on weaknesses in the original argument.

PROVIDE ALL CONTENT IN THE {language} LANGUAGE.

Return only the array of counter-arguments in JSON format:
["counter1", "counter2", ...]

Make sure the output is properly formatted JSON that can be parsed."""

    return _messages(COUNTER_ARGUMENT_SYSTEM_PROMPT, user_prompt)
