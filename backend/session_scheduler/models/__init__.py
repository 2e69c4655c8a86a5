from session_scheduler.models.schedule import GeneratedSchedule, Match, ScheduleRequest, ScheduleStats

__all__ = [
    "ScheduleRequest",
    "Match",
    "ScheduleStats",
    "GeneratedSchedule",
]
