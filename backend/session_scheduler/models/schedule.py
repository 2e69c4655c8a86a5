from dataclasses import dataclass
from datetime import datetime
from typing import Iterator, Tuple, Union


@dataclass(frozen=True)
class ScheduleRequest:
    """Already-parsed session parameters supplied by the caller."""

    team_count: int
    session_duration_minutes: int
    rest_duration_minutes: int
    start_time: datetime


@dataclass(frozen=True)
class Match:
    team_a: str  # "Team <n>"
    team_b: str
    duration_minutes: int
    start_time: datetime

    @property
    def label(self) -> str:
        return f"{self.team_a} vs {self.team_b}"


@dataclass(frozen=True)
class ScheduleStats:
    total_matches: int = 0
    total_play_minutes: int = 0
    match_duration_minutes: int = 0
    total_rest_minutes: int = 0
    matches_per_team: Union[int, float] = 0


@dataclass(frozen=True)
class GeneratedSchedule:
    """
    Result of one generate() call.

    matches is in play order. Unpacks as (matches, stats) so callers can
    write ``matches, stats = generate(request)``.
    """

    request: ScheduleRequest
    matches: Tuple[Match, ...]
    stats: ScheduleStats

    def __iter__(self) -> Iterator:
        yield self.matches
        yield self.stats

    def is_empty(self) -> bool:
        return not self.matches
