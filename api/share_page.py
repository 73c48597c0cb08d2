"""HTML rendering for the public share page."""

from __future__ import annotations

from html import escape

from models.shared_recommendation import CoachSnapshot, SharedRecommendation


_PAGE = """<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{title}</title>
    <script src="https://cdn.tailwindcss.com"></script>
</head>
<body class="min-h-screen bg-slate-50">
{body}
</body>
</html>
"""


def _initials(name: str) -> str:
    return "".join(part[0] for part in name.split() if part)


def _render_coach(coach: CoachSnapshot) -> str:
    if coach.photo_url:
        photo = (
            f'<img src="{escape(coach.photo_url)}" alt="{escape(coach.name)}" '
            'class="w-28 h-28 rounded-full object-cover">'
        )
    else:
        photo = (
            '<div class="w-28 h-28 rounded-full bg-slate-200 flex items-center justify-center '
            f'text-3xl text-slate-500">{escape(_initials(coach.name))}</div>'
        )
    headline = f'<p class="text-gray-600 mt-1">{escape(coach.headline)}</p>' if coach.headline else ""
    rationale = f'<p class="text-gray-700 mt-4">{escape(coach.rationale)}</p>' if coach.rationale else ""
    strengths = ""
    if coach.key_strengths:
        items = "".join(f"<li>{escape(s)}</li>" for s in coach.key_strengths)
        strengths = f'<ul class="list-disc ml-6 mt-2 text-gray-700">{items}</ul>'
    contact = ""
    if coach.email:
        contact = (
            f'<a href="mailto:{escape(coach.email)}" class="inline-block mt-4 text-blue-600">'
            f"Contact {escape(coach.first_name or coach.name)}</a>"
        )
    return (
        '<div class="bg-white rounded-xl shadow-sm border p-8 flex gap-6">'
        f'<div class="flex-shrink-0">{photo}</div>'
        f'<div class="flex-1"><h2 class="text-2xl font-semibold">{escape(coach.name)}</h2>'
        f"{headline}{rationale}{strengths}{contact}</div></div>"
    )


def render_share_page(share: SharedRecommendation) -> str:
    count = len(share.coaches)
    noun = "coach" if count == 1 else "coaches"
    summary = (
        f'<p class="text-gray-400 mt-1 text-sm">{escape(share.request_summary)}</p>' if share.request_summary else ""
    )
    cards = "\n".join(_render_coach(c) for c in share.coaches)
    body = (
        '<div class="bg-white border-b py-8 text-center">'
        '<h1 class="text-3xl font-semibold">Your Coach Recommendations</h1>'
        f'<p class="text-gray-500 mt-2">We\'ve selected {count} {noun} who would be a great fit for your needs.</p>'
        f"{summary}</div>"
        f'<div class="max-w-3xl mx-auto px-8 py-10 space-y-8">{cards}</div>'
    )
    return _PAGE.format(title="Your Coach Recommendations", body=body)


def render_not_found_page() -> str:
    body = (
        '<div class="max-w-xl mx-auto py-24 text-center">'
        '<h1 class="text-3xl font-semibold">Recommendation not found</h1>'
        '<p class="text-gray-500 mt-2">This link is invalid or no longer available.</p></div>'
    )
    return _PAGE.format(title="Not found", body=body)
