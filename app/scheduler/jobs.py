"""SellScope — Scheduler Jobs.

APScheduler interval job that purges expired entries from the AI result
cache every CACHE_PURGE_INTERVAL_MINUTES.
"""

from apscheduler.schedulers.asyncio import AsyncIOScheduler

from app.analyzer.cache import analysis_cache
from app.config import settings
from app.core.logging import get_logger

logger = get_logger("scheduler")

scheduler = AsyncIOScheduler()


async def purge_expired_cache_job():
    """Drop expired AI results so the cache does not grow unbounded."""
    try:
        purged = analysis_cache.purge_expired()
        logger.info(f"Cache purge complete: {purged} removed, {len(analysis_cache)} remaining")
    except Exception as e:
        logger.error(f"Cache purge failed: {e}")


def start_scheduler():
    """Configure and start the scheduler."""
    if not settings.scheduler_enabled:
        logger.info("Scheduler disabled via config")
        return

    scheduler.add_job(
        purge_expired_cache_job,
        "interval",
        minutes=settings.cache_purge_interval_minutes,
        id="purge_expired_cache",
        replace_existing=True,
        misfire_grace_time=300,
    )
    scheduler.start()
    logger.info(f"Scheduler started. Cache purge every {settings.cache_purge_interval_minutes} min")


def stop_scheduler():
    """Shutdown the scheduler gracefully."""
    if scheduler.running:
        scheduler.shutdown(wait=False)
        logger.info("Scheduler stopped")
