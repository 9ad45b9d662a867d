# =============================================================================
# workers/config.py - Celery Worker Configuration
# =============================================================================
# Settings specific to Celery workers, plus the beat schedule for the
# recurring catalog imports.
# =============================================================================

from datetime import timedelta

from app.config import settings

DAILY_IMPORT_LIMIT = 20


class CeleryConfig:
    """
    Celery configuration settings.

    These are applied to the Celery app via app.config_from_object().
    """

    # -------------------------------------------------------------------------
    # Broker Settings (Redis)
    # -------------------------------------------------------------------------

    broker_url = settings.REDIS_URL
    result_backend = settings.REDIS_URL

    # -------------------------------------------------------------------------
    # Task Settings
    # -------------------------------------------------------------------------

    # Acknowledge tasks after they complete (not before)
    task_acks_late = True

    # One import at a time per worker
    worker_prefetch_multiplier = 1

    # Task results expire after 1 day
    result_expires = 86400

    # A popular-brands pass sleeps between every item and brand
    task_time_limit = 3600
    task_soft_time_limit = 3300

    # -------------------------------------------------------------------------
    # Serialization
    # -------------------------------------------------------------------------

    task_serializer = "json"
    result_serializer = "json"
    accept_content = ["json"]

    # -------------------------------------------------------------------------
    # Task Routing
    # -------------------------------------------------------------------------

    task_queues = {
        "default": {
            "exchange": "default",
            "routing_key": "default",
        },
        "imports": {
            "exchange": "imports",
            "routing_key": "imports",
        },
    }

    task_routes = {
        "workers.tasks.run_daily_import": {"queue": "imports"},
        "workers.tasks.run_weekly_update": {"queue": "imports"},
        "workers.tasks.import_brand_task": {"queue": "imports"},
    }

    task_default_queue = "default"

    # -------------------------------------------------------------------------
    # Beat Schedule
    # -------------------------------------------------------------------------

    beat_schedule = {
        "daily-latest-import": {
            "task": "workers.tasks.run_daily_import",
            "schedule": timedelta(hours=24),
            "kwargs": {"limit": DAILY_IMPORT_LIMIT},
        },
        "weekly-catalog-update": {
            "task": "workers.tasks.run_weekly_update",
            "schedule": timedelta(days=7),
        },
    }

    # -------------------------------------------------------------------------
    # Monitoring
    # -------------------------------------------------------------------------

    worker_send_task_events = True
    task_send_sent_event = True

    # -------------------------------------------------------------------------
    # Timezone
    # -------------------------------------------------------------------------

    timezone = "UTC"
    enable_utc = True
