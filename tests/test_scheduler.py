"""Tests for the background scheduler wiring."""

from profile_api.config import get_settings
from profile_api.tasks import scheduler


class TestScheduler:
    """Tests for start_scheduler and stop_scheduler."""

    async def test_registers_daily_sweep(self):
        """The completion sweep runs daily at the configured hour."""
        await scheduler.start_scheduler()
        try:
            job = scheduler._scheduler.get_job("complete_finished_absences")
            assert job is not None
            assert job.func is scheduler.complete_finished_absences_job
            hour_field = next(f for f in job.trigger.fields if f.name == "hour")
            assert str(hour_field) == str(get_settings().absence_sweep_hour)
        finally:
            await scheduler.stop_scheduler()

        assert scheduler._scheduler is None
