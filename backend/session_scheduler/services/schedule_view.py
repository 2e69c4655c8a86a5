"""
Schedule View: display payload for a generated schedule.

Turns a GeneratedSchedule into the JSON shape the schedule screen renders:
  - summary stats
  - one entry per match, flagged where a rest period follows
  - empty-state message when there are not enough teams
  - exact per-team match tally next to the legacy matches_per_team figure

Rest markers use rest_break_follows(), the same rule the generator uses to
move the clock, so a marker always sits on a real gap.
"""

from dataclasses import asdict
from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel

from session_scheduler.models.schedule import GeneratedSchedule
from session_scheduler.utils.match_generation import count_appearances, rest_break_follows, team_label

NOT_ENOUGH_TEAMS_MESSAGE = "Not enough teams to generate a schedule."


# ============================================================================
# Pydantic Response Models
# ============================================================================


class RequestInfo(BaseModel):
    team_count: int
    session_duration_minutes: int
    rest_duration_minutes: int
    start_time: datetime


class MatchInfo(BaseModel):
    team_a: str
    team_b: str
    duration_minutes: int
    start_time: datetime


class StatsInfo(BaseModel):
    total_matches: int
    total_play_minutes: int
    match_duration_minutes: int
    total_rest_minutes: int
    matches_per_team: float


class ScheduleEntry(BaseModel):
    index: int
    team_a: str
    team_b: str
    label: str
    start_time: datetime
    duration_minutes: int
    rest_after: bool
    rest_minutes: int


class ScheduleView(BaseModel):
    request: RequestInfo
    matches: List[MatchInfo]
    stats: StatsInfo
    entries: List[ScheduleEntry]
    matches_by_team: Dict[str, int]
    message: Optional[str] = None


# ============================================================================
# Builders
# ============================================================================


def team_match_counts(generated: GeneratedSchedule) -> Dict[str, int]:
    """
    Exact number of matches each team plays, ordered Team 1..n.

    Teams with no match (only possible when the schedule is empty) are
    reported with 0.
    """
    tally = count_appearances([(m.team_a, m.team_b) for m in generated.matches])
    team_count = max(generated.request.team_count, 0)
    return {team_label(n): tally.get(team_label(n), 0) for n in range(1, team_count + 1)}


def build_entries(generated: GeneratedSchedule) -> List[ScheduleEntry]:
    total = len(generated.matches)
    rest_minutes = generated.request.rest_duration_minutes

    entries: List[ScheduleEntry] = []
    for index, match in enumerate(generated.matches):
        rest_after = rest_break_follows(index + 1, total)
        entries.append(
            ScheduleEntry(
                index=index,
                team_a=match.team_a,
                team_b=match.team_b,
                label=match.label,
                start_time=match.start_time,
                duration_minutes=match.duration_minutes,
                rest_after=rest_after,
                rest_minutes=rest_minutes if rest_after else 0,
            )
        )
    return entries


def build_schedule_view(generated: GeneratedSchedule) -> ScheduleView:
    return ScheduleView(
        request=RequestInfo(**asdict(generated.request)),
        matches=[MatchInfo(**asdict(m)) for m in generated.matches],
        stats=StatsInfo(**asdict(generated.stats)),
        entries=build_entries(generated),
        matches_by_team=team_match_counts(generated),
        message=NOT_ENOUGH_TEAMS_MESSAGE if generated.is_empty() else None,
    )


def schedule_to_record(generated: GeneratedSchedule) -> Dict[str, Any]:
    """
    Plain JSON-ready record of a generated schedule.

    Timestamps are ISO-8601 strings so the record round-trips through
    datetime.fromisoformat(). Nothing is stored; callers own persistence.
    """
    return build_schedule_view(generated).model_dump(mode="json")
