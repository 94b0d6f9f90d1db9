import atexit

import structlog
from django.apps import AppConfig, apps
from django.conf import settings

logger = structlog.get_logger()


class ReviewServiceConfig(AppConfig):
    name = "review_service"
    label = "review_service"
    verbose_name = "Review Management Service"

    scheduler = None

    def ready(self):
        from .data.store import JsonFileStore
        from .logging import configure_logging
        from .services.scheduler import ReviewScheduler

        configure_logging(settings.LOG_LEVEL)
        # Serving starts only after the snapshot is in memory
        self.scheduler = ReviewScheduler.from_store(JsonFileStore(settings.PROGRESS_FILE))
        atexit.register(self.shutdown)
        logger.info("scheduler_ready",
            progress_file=settings.PROGRESS_FILE,
            card_count=len(self.scheduler),
        )

    def shutdown(self):
        if self.scheduler is not None:
            self.scheduler.close()
            logger.info("scheduler_closed")


def get_scheduler():
    return apps.get_app_config("review_service").scheduler
