"""Background task scheduler using APScheduler.

The scheduler is the external caller of the absence completion sweep; the
service layer holds no timers of its own.
"""

import logging

from apscheduler.schedulers.asyncio import AsyncIOScheduler
from apscheduler.triggers.cron import CronTrigger

from profile_api.config import get_settings

logger = logging.getLogger(__name__)

# Global scheduler instance
_scheduler: AsyncIOScheduler | None = None


async def complete_finished_absences_job() -> None:
    """Background job promoting finished approved absences to COMPLETED."""
    from profile_api.database import async_session_maker
    from profile_api.services.absence_service import AbsenceService
    from profile_api.utils.dates import service_today
    from profile_api.utils.secure_logging import log_error

    as_of = service_today()
    logger.info("Starting scheduled absence sweep as of %s", as_of)

    async with async_session_maker() as session:
        try:
            service = AbsenceService(session)
            completed = await service.sweep_completion(as_of)
            await session.commit()
            logger.info("Scheduled absence sweep completed: %d request(s)", completed)
        except Exception as e:
            log_error(logger, "Scheduled absence sweep failed", e)
            await session.rollback()


async def start_scheduler() -> None:
    """Start the background task scheduler."""
    global _scheduler

    settings = get_settings()
    _scheduler = AsyncIOScheduler(timezone=settings.zone)

    # Daily, shortly after midnight in the service calendar
    _scheduler.add_job(
        complete_finished_absences_job,
        trigger=CronTrigger(hour=settings.absence_sweep_hour, minute=0, timezone=settings.zone),
        id="complete_finished_absences",
        name="Complete finished absences",
        replace_existing=True,
    )

    _scheduler.start()
    logger.info("Background scheduler started")


async def stop_scheduler() -> None:
    """Stop the background task scheduler."""
    global _scheduler

    if _scheduler:
        _scheduler.shutdown(wait=False)
        _scheduler = None
        logger.info("Background scheduler stopped")
