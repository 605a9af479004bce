"""Tests for recovering JSON from free-form model output."""

import pytest

from debate_engine.types import ResponseShape
from models.exceptions import MalformedResponseError
from models.json_repair import extract_json, repair_json


def test_valid_object_is_parsed_directly() -> None:
    assert extract_json('{"proposition": ["a"]}', ResponseShape.OBJECT) == {
        "proposition": ["a"]
    }


def test_object_is_found_inside_surrounding_prose() -> None:
    text = 'Sure! Here are the points:\n{"opposition": ["b"]}\nHope this helps.'

    assert extract_json(text, ResponseShape.OBJECT) == {"opposition": ["b"]}


def test_object_is_taken_from_markdown_fence() -> None:
    text = 'Result:\n```json\n{"evidence": []}\n```\nExtra notes {not json}'

    assert extract_json(text, ResponseShape.OBJECT) == {"evidence": []}


def test_bare_keys_and_single_quotes_are_repaired() -> None:
    text = (
        "{proposition: ['Cheaper energy'], opposition: ['Costly'], "
        "propositionRebuttals: [], oppositionRebuttals: [], "
        "evidence: [{point: 'Solar costs fell', sources: ['IEA 2023']}]}"
    )

    value = extract_json(text, ResponseShape.OBJECT)

    assert value["proposition"] == ["Cheaper energy"]
    assert value["evidence"] == [{"point": "Solar costs fell", "sources": ["IEA 2023"]}]


def test_trailing_commas_are_removed() -> None:
    assert extract_json('{"a": ["x", "y",],}', ResponseShape.OBJECT) == {"a": ["x", "y"]}


def test_valid_substring_is_not_altered_by_repair() -> None:
    text = 'Answer: {"point": "costs, benefits: both matter"}'

    assert extract_json(text, ResponseShape.OBJECT) == {
        "point": "costs, benefits: both matter"
    }


def test_repair_leaves_colons_inside_strings_alone() -> None:
    text = '{"proposition": ["Costs rise, namely: energy",], "opposition": []}'

    assert extract_json(text, ResponseShape.OBJECT) == {
        "proposition": ["Costs rise, namely: energy"],
        "opposition": [],
    }


def test_repair_keeps_apostrophes_inside_double_quoted_strings() -> None:
    text = "{\"point\": \"He said: 'act now'\", sources: [\"x\"]}"

    assert extract_json(text, ResponseShape.OBJECT) == {
        "point": "He said: 'act now'",
        "sources": ["x"],
    }


def test_single_quoted_value_may_contain_commas_and_colons() -> None:
    assert extract_json("{point: 'a, b: c'}", ResponseShape.OBJECT) == {"point": "a, b: c"}


def test_array_is_found_inside_prose() -> None:
    text = 'Here are your rebuttals:\n["First", "Second"]\nGood luck!'

    assert extract_json(text, ResponseShape.ARRAY) == ["First", "Second"]


def test_array_with_single_quoted_elements_is_repaired() -> None:
    assert extract_json("['First', 'Second']", ResponseShape.ARRAY) == ["First", "Second"]


def test_array_inside_wrapping_object_is_extracted() -> None:
    text = '{"rebuttals": ["One", "Two"]}'

    assert extract_json(text, ResponseShape.ARRAY) == ["One", "Two"]


def test_missing_json_raises_malformed_response() -> None:
    with pytest.raises(MalformedResponseError) as excinfo:
        extract_json("I cannot help with that.", ResponseShape.OBJECT)

    assert excinfo.value.content == "I cannot help with that."


def test_array_text_does_not_satisfy_object_shape() -> None:
    with pytest.raises(MalformedResponseError):
        extract_json('["a", "b"]', ResponseShape.OBJECT)


def test_unrepairable_text_raises_malformed_response() -> None:
    with pytest.raises(MalformedResponseError):
        extract_json('{"proposition": ["unterminated}', ResponseShape.OBJECT)


def test_unrepairable_array_raises_instead_of_placeholder() -> None:
    with pytest.raises(MalformedResponseError):
        extract_json('["one" "two"]', ResponseShape.ARRAY)


def test_repair_json_quotes_keys() -> None:
    assert repair_json("{side: 'proposition'}") == '{"side": "proposition"}'


def test_repair_json_escapes_double_quotes_in_single_quoted_strings() -> None:
    assert repair_json("""{quote: 'She said "no"'}""") == '{"quote": "She said \\"no\\""}'
