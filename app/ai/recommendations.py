"""
Personalized eco recommendations (OpenAI).

get_recommendations() never raises: whatever goes wrong with the model call
(no key, timeout, API error, unparseable or empty answer) the caller gets the
single FALLBACK_RECOMMENDATION instead. No retries, nothing cached.
"""
import json

from app.ai.openai_client import get_client, set_last_error
from app.core.config import OPENAI_MODEL, FALLBACK_RECOMMENDATION

MAX_RECOMMENDATIONS = 3

SYSTEM_PROMPT = (
    "You are an assistant in a campus environmental awareness program. "
    "You give students short, personalized suggestions that lower the carbon "
    "footprint of their daily transport and help them earn more points. "
    "Points are higher the lower the day's emissions are."
)

USER_PROMPT = """Today's transport for this user:

- Mode of transportation: {mode}
- Distance per trip: {distance_km} km
- Number of trips: {trips}
- Daily carbon emissions: {daily_emissions} kg CO2
- Total points earned: {total_points}
- Points earned today: {daily_points}

Give 2-3 specific and actionable recommendations to reduce their environmental
impact and increase their points: alternative ways to travel, fewer or
combined trips, or other relevant strategies. One sentence each.

Reply with a JSON object of the form:
{{"recommendations": ["...", "..."]}}
"""


class RecommendationError(Exception):
    """The model answered, but not with a usable list of recommendations."""


def build_prompt(context: dict) -> str:
    return USER_PROMPT.format(
        mode=context["mode"],
        distance_km=context["distance_km"],
        trips=context["trips"],
        daily_emissions=context["daily_emissions"],
        total_points=context["total_points"],
        daily_points=context["daily_points"],
    )


def parse_recommendations(raw: str | None) -> list[str]:
    """Extract up to MAX_RECOMMENDATIONS non-empty strings from the model's JSON."""
    if not raw:
        raise RecommendationError("empty response")
    try:
        payload = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise RecommendationError(f"invalid JSON: {exc}") from exc

    # Tolerate a bare JSON array as well as the requested object
    items = payload.get("recommendations") if isinstance(payload, dict) else payload
    if not isinstance(items, list):
        raise RecommendationError("no recommendations list")

    cleaned = [item.strip() for item in items if isinstance(item, str) and item.strip()]
    if not cleaned:
        raise RecommendationError("recommendations list is empty")
    return cleaned[:MAX_RECOMMENDATIONS]


def get_recommendations(context: dict, client=None) -> list[str]:
    """
    context keys: mode, distance_km, trips, daily_emissions, total_points, daily_points.
    client: an openai.OpenAI-compatible object; defaults to the shared client.
    """
    client = client or get_client()
    if client is None:
        print("[AI] recommendations: no OpenAI client configured, using fallback", flush=True)
        return [FALLBACK_RECOMMENDATION]

    try:
        response = client.chat.completions.create(
            model=OPENAI_MODEL,
            messages=[
                {"role": "system", "content": SYSTEM_PROMPT},
                {"role": "user", "content": build_prompt(context)},
            ],
            response_format={"type": "json_object"},
            temperature=0.7,
        )
        recommendations = parse_recommendations(response.choices[0].message.content)
    except Exception as exc:  # any model failure degrades to the fallback
        msg = f"{type(exc).__name__}: {exc}"
        set_last_error(msg)
        print(f"[AI] recommendations failed, using fallback: {msg}", flush=True)
        return [FALLBACK_RECOMMENDATION]

    print(f"[AI] recommendations ok count={len(recommendations)}", flush=True)
    return recommendations
