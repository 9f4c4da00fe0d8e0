"""Background tasks package."""

from profile_api.tasks.scheduler import start_scheduler, stop_scheduler

__all__ = [
    "start_scheduler",
    "stop_scheduler",
]
