from __future__ import annotations

import json
import os
import sys
from pathlib import Path

import pytest


ROOT = Path(__file__).resolve().parents[1]


def pytest_configure():
    # Ensure project root is on sys.path for absolute imports like 'services.enrichment'
    if str(ROOT) not in sys.path:
        sys.path.insert(0, str(ROOT))
    # Set test environment knobs
    os.environ.setdefault("RUN_ENV", "test")


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch, tmp_path):
    """Keep tests off real keys and the working-directory DB; reset cached settings."""
    from config.settings import get_settings
    from services.coach_dataset import get_dataset

    monkeypatch.setenv("DB_PATH", str(tmp_path / "shares.db"))
    monkeypatch.setenv("COACHES_PATH", str(ROOT / "data" / "coaches.json"))
    monkeypatch.setenv("LLM_PROVIDER", "anthropic")
    monkeypatch.delenv("LLM_MODEL", raising=False)
    monkeypatch.delenv("LLM_TRACE", raising=False)
    monkeypatch.delenv("ANTHROPIC_API_KEY", raising=False)
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)
    get_settings.cache_clear()
    get_dataset.cache_clear()
    yield
    get_settings.cache_clear()
    get_dataset.cache_clear()


@pytest.fixture
def settings():
    from config.settings import get_settings

    return get_settings()


@pytest.fixture
def make_coach():
    from models.coach_record import CoachRecord

    def _make(coach_id: str = "c1", name: str = "Alex Example", **overrides) -> CoachRecord:
        data = {
            "id": coach_id,
            "name": name,
            "email": f"{coach_id}@example.com",
            "gender": "Female",
            "timezone": "America/New_York",
            "seniority_score": 5,
            "icf_level": "PCC",
            "practitioner_type": "Coaching Practitioner",
            "bio": "Experienced leadership coach. " * 8,
            "headline": "Leadership coach",
            "is_active": True,
        }
        data.update(overrides)
        return CoachRecord.model_validate(data)

    return _make


@pytest.fixture
def dataset():
    from services.coach_dataset import CoachDataset

    return CoachDataset.from_file(ROOT / "data" / "coaches.json")


class FakeLLM:
    """Stands in for LLMClient: returns a canned completion or raises."""

    def __init__(self, completion):
        self.completion = completion
        self.calls = []

    def complete(self, *, use_case: str, system_prompt: str, user_prompt: str) -> str:
        self.calls.append({"use_case": use_case, "system_prompt": system_prompt, "user_prompt": user_prompt})
        if isinstance(self.completion, Exception):
            raise self.completion
        return self.completion


@pytest.fixture
def fake_llm():
    return FakeLLM


@pytest.fixture
def vp_finance_completion() -> str:
    """Model answer for 'VP of Finance, low EQ, wants 2 options including a male coach'."""
    return json.dumps({
        "parsed_requirements": {
            "seniority_level": "VP - senior leader (coach score 5-8)",
            "industry": "Finance",
            "gender_preference": "At least one male coach option",
            "key_focus_areas": ["emotional intelligence", "team relationships"],
            "other_notes": None,
        },
        "recommendations": [
            {
                "coach_id": "c-001",
                "name": "Marcus Hale",
                "match_score": 94,
                "rationale": "A former CFO who now coaches finance executives on emotional intelligence; "
                             "he understands the pressures of a VP of Finance and can address low EQ directly.",
                "key_strengths": ["Finance background", "EQ development", "Senior executive experience"],
                "potential_concerns": None,
            },
            {
                "coach_id": "c-003",
                "name": "David Okafor",
                "match_score": 86,
                "rationale": "Master certified coach with banking operations experience who helps senior leaders "
                             "build trust and handle conflict, which supports growth in emotional intelligence.",
                "key_strengths": ["MCC certification", "Banking background", "Conflict resolution"],
                "potential_concerns": "Based in London; check timezone overlap.",
            },
        ],
    })
