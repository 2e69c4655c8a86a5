"""
Schedule Generator: round robin timetable for a single session.

Pure function: same ScheduleRequest in, equal GeneratedSchedule out.
No I/O, no shared state. The running clock is a local value advanced by
advance_cursor() after each match.

Timing rules:
  - Every pair of teams plays once, in (Team i, Team j) order with i < j
  - All matches share one duration: floor(available / M), where
    available = session - floor(M / 2) * rest
  - A rest break follows every 2nd match except the last one
"""

import logging
from datetime import datetime, timedelta
from typing import List, Sequence

from session_scheduler.models.schedule import GeneratedSchedule, Match, ScheduleRequest, ScheduleStats
from session_scheduler.utils.match_generation import (
    rest_break_budget,
    rest_break_follows,
    round_robin_match_count,
    round_robin_pairs,
    team_label,
)

logger = logging.getLogger(__name__)


def match_duration_minutes(total_matches: int, session_minutes: int, rest_minutes: int) -> int:
    """
    Per-match duration for a session of total_matches.

    Floor division, no clamping: a rest budget larger than the session
    gives a negative duration and the caller owns that outcome.
    """
    if total_matches <= 0:
        return 0
    available = session_minutes - rest_break_budget(total_matches) * rest_minutes
    return available // total_matches


def advance_cursor(
    cursor: datetime,
    matches_emitted: int,
    total_matches: int,
    duration_minutes: int,
    rest_minutes: int,
) -> datetime:
    """Clock value for the next match, after the match that made matches_emitted."""
    step = duration_minutes
    if rest_break_follows(matches_emitted, total_matches):
        step += rest_minutes
    return cursor + timedelta(minutes=step)


def derive_stats(matches: Sequence[Match], team_count: int, rest_duration_minutes: int) -> ScheduleStats:
    """
    Summary figures read off a produced schedule.

    matches_per_team keeps the (matches * 2) / teams formula as-is; for a
    complete round robin the exact per-team count is always teams - 1
    (see schedule_view.team_match_counts).
    """
    total = len(matches)
    if total == 0 or team_count <= 0:
        return ScheduleStats()

    duration = matches[0].duration_minutes
    return ScheduleStats(
        total_matches=total,
        total_play_minutes=total * duration,
        match_duration_minutes=duration,
        total_rest_minutes=(total // 2) * rest_duration_minutes,
        matches_per_team=(total * 2) / team_count,
    )


def generate(request: ScheduleRequest) -> GeneratedSchedule:
    """
    Build the round robin timetable and its stats for one session.

    Fewer than 2 teams is not an error: the result is an empty schedule
    with zeroed stats, and the caller decides how to present that.
    """
    n = request.team_count
    total_matches = round_robin_match_count(n)

    if total_matches == 0:
        logger.debug("SCHEDULE_GENERATE: team_count=%s matches=0 (not enough teams)", n)
        return GeneratedSchedule(request=request, matches=(), stats=ScheduleStats())

    duration = match_duration_minutes(
        total_matches,
        request.session_duration_minutes,
        request.rest_duration_minutes,
    )

    matches: List[Match] = []
    cursor = request.start_time
    for i, j in round_robin_pairs(n):
        matches.append(
            Match(
                team_a=team_label(i),
                team_b=team_label(j),
                duration_minutes=duration,
                start_time=cursor,
            )
        )
        cursor = advance_cursor(cursor, len(matches), total_matches, duration, request.rest_duration_minutes)

    stats = derive_stats(matches, n, request.rest_duration_minutes)

    logger.debug(
        "SCHEDULE_GENERATE: team_count=%s matches=%s match_minutes=%s rest_minutes=%s",
        n,
        stats.total_matches,
        stats.match_duration_minutes,
        stats.total_rest_minutes,
    )

    return GeneratedSchedule(request=request, matches=tuple(matches), stats=stats)
