from datetime import datetime

import pytest
from fastapi.testclient import TestClient

from session_scheduler.main import app
from session_scheduler.models.schedule import ScheduleRequest

SESSION_START = datetime(2026, 1, 15, 9, 0)


@pytest.fixture(name="client")
def client_fixture():
    """Provide a test client for the API

    No database and no dependency overrides: every endpoint is a pure
    computation over the request body.
    """
    with TestClient(app) as client:
        yield client


@pytest.fixture
def make_request():
    """Build a ScheduleRequest with the session form defaults (60 / 5, 09:00)"""

    def _make(team_count: int, session: int = 60, rest: int = 5, start: datetime = SESSION_START) -> ScheduleRequest:
        return ScheduleRequest(
            team_count=team_count,
            session_duration_minutes=session,
            rest_duration_minutes=rest,
            start_time=start,
        )

    return _make
