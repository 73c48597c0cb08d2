from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from models.coach_record import CoachRecord
from services.context_formatter import DEFAULT_BIO_EXCERPT_CHARS, format_coach_context


DEFAULT_NUM_MATCHES = 4

SYSTEM_PROMPT_TEMPLATE = """You are an expert coach matcher for a leadership coaching company. Your job is to analyze coaching requests and recommend the best-fit coaches from the database.

## COACH DATABASE
{coach_context}

## MATCHING RULES
1. **Seniority mapping:**
   - ICs/Individual Contributors → junior coaches (score 0-3)
   - Managers → mid-level (score 3-5)
   - Directors/VPs/C-suite → senior coaches (score 5-8)

2. **Gender preferences:** Honor any stated preferences. If they want "a male coach option," include at least one male.

3. **Industry match:** If the coachee is in Finance, Tech, Healthcare, etc., prefer coaches with that industry background (check Type = "Industry Practitioner" and the Industries field).

4. **Specialties:** If the request mentions specific needs (ADHD, burnout, EQ/emotional intelligence, delegation, etc.), match to coaches with those in their Specialties or bio.

5. **Timezone:** Consider timezone if mentioned or implied.

6. **Identity:** Only recommend coaches listed in the database above. Copy each coach's id exactly as shown in brackets.

## OUTPUT FORMAT
Return ONLY valid JSON (no markdown, no code blocks) with this structure:
{{
  "parsed_requirements": {{
    "seniority_level": "string describing inferred seniority",
    "industry": "string or null",
    "gender_preference": "string or null",
    "key_focus_areas": ["array", "of", "focus", "areas"],
    "other_notes": "any other relevant observations, or null"
  }},
  "recommendations": [
    {{
      "coach_id": "id copied from the database",
      "name": "Coach Name",
      "match_score": 95,
      "rationale": "2-3 sentences explaining why this coach is a strong fit for THIS specific request",
      "key_strengths": ["strength 1", "strength 2", "strength 3"],
      "potential_concerns": "Any potential concerns or mismatches, or null"
    }}
  ]
}}

match_score is a number from 0 to 100.

Return exactly {num_matches} coach recommendations, ordered by fit (best first)."""

USER_PROMPT_TEMPLATE = (
    "Please analyze this coaching request and recommend the {num_matches} best-fit coaches:\n\n{request_text}"
)


@dataclass(frozen=True)
class PromptPair:
    system: str
    user: str


def build_system_prompt(
    coaches: Sequence[CoachRecord],
    num_matches: int = DEFAULT_NUM_MATCHES,
    bio_excerpt_chars: int = DEFAULT_BIO_EXCERPT_CHARS,
) -> str:
    coach_context = format_coach_context(coaches, bio_excerpt_chars)
    return SYSTEM_PROMPT_TEMPLATE.format(coach_context=coach_context, num_matches=num_matches)


def build_user_prompt(request_text: str, num_matches: int = DEFAULT_NUM_MATCHES) -> str:
    return USER_PROMPT_TEMPLATE.format(request_text=request_text, num_matches=num_matches)


def build_prompts(
    request_text: str,
    coaches: Sequence[CoachRecord],
    num_matches: int = DEFAULT_NUM_MATCHES,
    bio_excerpt_chars: int = DEFAULT_BIO_EXCERPT_CHARS,
) -> PromptPair:
    """Assemble both prompt segments. Does not clamp num_matches; callers do."""
    return PromptPair(
        system=build_system_prompt(coaches, num_matches, bio_excerpt_chars),
        user=build_user_prompt(request_text, num_matches),
    )
