from __future__ import annotations

import json

import pytest

from services.errors import ResponseParseError
from services.response_parser import parse_match_result, strip_code_fence


PAYLOAD = {
    "parsed_requirements": {
        "seniority_level": "Manager",
        "industry": None,
        "gender_preference": None,
        "key_focus_areas": ["delegation"],
        "other_notes": None,
    },
    "recommendations": [
        {
            "coach_id": "c-002",
            "name": "Priya Raman",
            "match_score": 90,
            "rationale": "Delegation specialist.",
            "key_strengths": ["Delegation"],
            "potential_concerns": None,
        }
    ],
}


def test_fenced_and_bare_json_decode_identically():
    raw = json.dumps(PAYLOAD)
    bare = parse_match_result(raw)
    fenced = parse_match_result(f"```json\n{raw}\n```")
    plain_fence = parse_match_result(f"Here you go:\n```\n{raw}\n```\nThanks")
    assert bare == fenced == plain_fence
    assert bare.recommendations[0].coach_id == "c-002"


def test_strip_code_fence_takes_first_block():
    assert strip_code_fence("```json\n{\"a\": 1}\n```\n```json\n{\"b\": 2}\n```") == '{"a": 1}'
    assert strip_code_fence("  {\"a\": 1}  ") == '{"a": 1}'


def test_doubly_wrapped_fails():
    raw = json.dumps(PAYLOAD)
    with pytest.raises(ResponseParseError):
        parse_match_result(f"```json\n```json\n{raw}\n```\n```")


def test_missing_closing_fence_fails():
    with pytest.raises(ResponseParseError) as exc:
        parse_match_result(f"```json\n{json.dumps(PAYLOAD)}")
    assert "not valid JSON" in str(exc.value)


@pytest.mark.parametrize("text", ["", "   ", "not json at all", "[1, 2, 3]"])
def test_garbage_fails(text):
    with pytest.raises(ResponseParseError):
        parse_match_result(text)


def test_missing_required_field_is_reported():
    broken = json.loads(json.dumps(PAYLOAD))
    del broken["recommendations"][0]["rationale"]
    with pytest.raises(ResponseParseError) as exc:
        parse_match_result(json.dumps(broken))
    assert "recommendations.0.rationale" in str(exc.value)


def test_missing_coach_id_is_rejected():
    broken = json.loads(json.dumps(PAYLOAD))
    del broken["recommendations"][0]["coach_id"]
    with pytest.raises(ResponseParseError):
        parse_match_result(json.dumps(broken))


def test_wrong_types_are_rejected():
    broken = json.loads(json.dumps(PAYLOAD))
    broken["recommendations"][0]["key_strengths"] = "Delegation"
    with pytest.raises(ResponseParseError):
        parse_match_result(json.dumps(broken))


def test_match_score_outside_range_is_rejected():
    broken = json.loads(json.dumps(PAYLOAD))
    broken["recommendations"][0]["match_score"] = 140
    with pytest.raises(ResponseParseError):
        parse_match_result(json.dumps(broken))
