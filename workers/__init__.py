# =============================================================================
# workers/ - Celery Background Task Workers
# =============================================================================
# This package contains the Celery configuration and the scheduled catalog
# imports.
#
# Components:
# - celery_app.py: Celery application configuration and lifecycle logging
# - tasks.py: Import tasks (daily latest, weekly update, single brand)
# - config.py: Worker settings and the beat schedule
#
# Usage:
#   # Start worker and scheduler
#   celery -A workers.celery_app worker --loglevel=info -Q imports,default
#   celery -A workers.celery_app beat --loglevel=info
#
#   # Submit a task
#   from workers.tasks import import_brand_task
#   result = import_brand_task.delay("Samsung", 10)
# =============================================================================

from .celery_app import celery_app
from . import tasks

__all__ = [
    "celery_app",
    "tasks",
]
