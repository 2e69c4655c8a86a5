"""
Schedule Endpoints: round robin session timetable.

  1. POST /schedule/generate
     Validates the form parameters, runs the generator and returns the
     display payload (matches, stats, rest markers, empty-state message).

  2. GET /schedule/defaults
     Form defaults and accepted limits.

Nothing is persisted; every call computes a fresh schedule.
"""

import logging
from datetime import datetime
from typing import Optional

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, field_validator

from session_scheduler import config
from session_scheduler.models.schedule import ScheduleRequest
from session_scheduler.services.schedule_generator import generate
from session_scheduler.services.schedule_view import ScheduleView, build_schedule_view

logger = logging.getLogger(__name__)

router = APIRouter()


class ScheduleGenerateRequest(BaseModel):
    team_count: int
    session_duration_minutes: Optional[int] = None
    rest_duration_minutes: Optional[int] = None
    start_time: Optional[datetime] = None

    @field_validator("team_count")
    @classmethod
    def validate_team_count(cls, v):
        if v < 0:
            raise ValueError("team_count must be >= 0")
        if v > config.MAX_TEAMS:
            raise ValueError(f"team_count must be <= {config.MAX_TEAMS}")
        return v

    @field_validator("session_duration_minutes", "rest_duration_minutes")
    @classmethod
    def validate_minutes(cls, v):
        if v is not None and v < 0:
            raise ValueError("durations must be >= 0 minutes")
        return v

    def to_schedule_request(self) -> ScheduleRequest:
        """Fill omitted fields from the configured form defaults."""
        return ScheduleRequest(
            team_count=self.team_count,
            session_duration_minutes=(
                self.session_duration_minutes
                if self.session_duration_minutes is not None
                else config.DEFAULT_SESSION_MINUTES
            ),
            rest_duration_minutes=(
                self.rest_duration_minutes if self.rest_duration_minutes is not None else config.DEFAULT_REST_MINUTES
            ),
            start_time=self.start_time if self.start_time is not None else datetime.now(),
        )


@router.post("/schedule/generate", response_model=ScheduleView)
def generate_schedule(body: ScheduleGenerateRequest) -> ScheduleView:
    """
    Generate the round robin timetable for one session.

    team_count of 0 or 1 is accepted: the response has no matches, zeroed
    stats and a "not enough teams" message.
    """
    request = body.to_schedule_request()

    try:
        generated = generate(request)
    except OverflowError:
        logger.warning(
            "SCHEDULE_GENERATE: time overflow team_count=%s session=%s rest=%s start=%s",
            request.team_count,
            request.session_duration_minutes,
            request.rest_duration_minutes,
            request.start_time.isoformat(),
        )
        raise HTTPException(status_code=400, detail="Schedule times fall outside the supported date range")

    logger.info(
        "SCHEDULE_GENERATE: team_count=%s session=%s rest=%s matches=%s match_minutes=%s",
        request.team_count,
        request.session_duration_minutes,
        request.rest_duration_minutes,
        generated.stats.total_matches,
        generated.stats.match_duration_minutes,
    )

    return build_schedule_view(generated)


@router.get("/schedule/defaults")
def get_schedule_defaults():
    """Defaults the session form starts from, plus the accepted team range."""
    return {
        "session_duration_minutes": config.DEFAULT_SESSION_MINUTES,
        "rest_duration_minutes": config.DEFAULT_REST_MINUTES,
        "min_teams": 2,
        "max_teams": config.MAX_TEAMS,
    }
