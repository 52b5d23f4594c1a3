# tasks/background_worker.py

import asyncio
import os
import traceback
from datetime import datetime, timedelta
from typing import Optional

from linguacontent.logging_config import setup_logger
from linguacontent.tasks.session_cleanup import cleanup_expired_sessions

logger = setup_logger(__name__, "session.log")


def cleanup_interval_hours() -> float:
    return float(os.getenv("CLEANUP_INTERVAL_HOURS", "24"))


class BackgroundWorker:
    def __init__(self, interval_hours: Optional[float] = None):
        self.cleanup_task: Optional[asyncio.Task] = None
        self._shutdown = True
        self.interval_hours = interval_hours
        self.last_run: Optional[datetime] = None
        self.next_run: Optional[datetime] = None
        self.total_deleted: int = 0
        self.run_count: int = 0

    @property
    def interval(self) -> float:
        return self.interval_hours if self.interval_hours is not None else cleanup_interval_hours()

    def record_run(self, started: datetime, deleted: int) -> None:
        self.last_run = started
        self.total_deleted += deleted
        self.run_count += 1

    async def run_once(self, db=None) -> dict:
        """Run one cleanup pass and fold its result into the worker statistics."""
        start_time = datetime.now()
        result = await cleanup_expired_sessions(db)
        duration = (datetime.now() - start_time).total_seconds()

        deleted = result.get("total_deleted", 0)
        self.record_run(start_time, deleted)

        logger.info(f"Cleanup run finished in {duration:.2f} seconds, deleted {deleted} tokens")
        return {
            "deleted_count": deleted,
            "run_time": start_time.strftime('%Y-%m-%d %H:%M:%S'),
            "duration_seconds": round(duration, 2),
            "total_deleted": self.total_deleted,
            "total_runs": self.run_count,
            "error": result.get("error"),
        }

    async def periodic_cleanup(self):
        """Run cleanup every CLEANUP_INTERVAL_HOURS hours"""
        while not self._shutdown:
            try:
                wait_seconds = self.interval * 60 * 60
                self.next_run = datetime.now() + timedelta(seconds=wait_seconds)
                logger.info(f"Next cleanup scheduled for {self.next_run.strftime('%Y-%m-%d %H:%M:%S')}")

                await asyncio.sleep(wait_seconds)
                await self.run_once()

            except asyncio.CancelledError:
                logger.info("Cleanup task cancelled (normal shutdown)")
                break

            except Exception as e:
                logger.error(f"Error in periodic cleanup: {e}")
                logger.error(traceback.format_exc())

                # Wait 1 hour before retrying on error
                await asyncio.sleep(3600)

    def start(self):
        """Start the background worker"""
        if self.cleanup_task and not self.cleanup_task.done():
            logger.warning("Background worker is already running!")
            return

        self._shutdown = False
        self.cleanup_task = asyncio.create_task(self.periodic_cleanup())
        logger.info(f"Background worker started at {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}")

    def stop(self):
        """Stop the background worker"""
        self._shutdown = True

        if self.cleanup_task:
            self.cleanup_task.cancel()

        logger.info(f"Background worker stopped at {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}")

    def get_status(self) -> dict:
        """Get current status of the worker"""
        now = datetime.now()

        last_run_str = self.last_run.strftime('%Y-%m-%d %H:%M:%S') if self.last_run else "Never"
        next_run_str = self.next_run.strftime('%Y-%m-%d %H:%M:%S') if self.next_run else "Not scheduled yet"

        hours_until_next = None
        next_run_in = "Not scheduled"

        if self.next_run:
            seconds_until_next = (self.next_run - now).total_seconds()
            if seconds_until_next > 0:
                hours_until_next = seconds_until_next / 3600
                hours = int(hours_until_next)
                minutes = int((hours_until_next - hours) * 60)
                next_run_in = f"{hours}h {minutes}m"
            else:
                hours_until_next = 0
                next_run_in = "Due now"

        return {
            "running": not self._shutdown,
            "interval_hours": self.interval,
            "last_run": last_run_str,
            "next_run": next_run_str,
            "hours_until_next": round(hours_until_next, 2) if hours_until_next is not None else None,
            "next_run_in": next_run_in,
            "total_deleted": self.total_deleted,
            "run_count": self.run_count,
            "task_active": self.cleanup_task is not None and not self.cleanup_task.done(),
        }


# Global instance
worker = BackgroundWorker()
