"""
Leaderboard ranking, computed on read.

Department view: one department's users by total_points (desc), top N.
Campus view: departments by the sum of their users' total_points (desc), all shown.
Ties are broken by user_id / department name ascending so the same input
always produces the same ranking.
"""
from collections import defaultdict
from typing import Iterable

from app.footprint.calculator import round2


def rank_department(
    entries: Iterable,
    department: str,
    viewer_id: int | None = None,
    limit: int = 10,
) -> list[dict]:
    """
    entries: objects with user_id, name, department, total_points, daily_points
    (LeaderboardEntry rows).
    """
    members = [e for e in entries if e.department == department]
    members.sort(key=lambda e: (-(e.total_points or 0), e.user_id))

    return [
        {
            "rank": index + 1,
            "user_id": e.user_id,
            "name": e.name,
            "total_points": e.total_points or 0,
            "daily_points": e.daily_points or 0,
            "is_current_user": viewer_id is not None and e.user_id == viewer_id,
        }
        for index, e in enumerate(members[:max(limit, 0)])
    ]


def rank_campus(entries: Iterable) -> list[dict]:
    totals: dict[str, int] = defaultdict(int)
    for e in entries:
        totals[e.department] += e.total_points or 0

    ordered = sorted(totals.items(), key=lambda item: (-item[1], item[0]))
    return [
        {"rank": index + 1, "department": department, "total_points": points}
        for index, (department, points) in enumerate(ordered)
    ]


def _average(values: list[float]) -> float:
    return round2(sum(values) / len(values)) if values else 0.0


def compare_emissions(personal: float, profiles: Iterable, department: str) -> dict:
    """
    Personal daily emissions next to the department and campus averages.
    profiles: objects with department and daily_emissions (users who logged today).
    """
    profiles = list(profiles)
    department_values = [p.daily_emissions or 0.0 for p in profiles if p.department == department]
    campus_values = [p.daily_emissions or 0.0 for p in profiles]
    return {
        "personal": round2(personal or 0.0),
        "department_average": _average(department_values),
        "campus_average": _average(campus_values),
    }
