#!/usr/bin/env python3
# =============================================================================
# scripts/start_worker.py - Celery Worker Entry Point
# =============================================================================
# Starts a Celery worker with an embedded beat scheduler, so the daily and
# weekly imports run without a separate beat process.
#
# Usage:
#   python scripts/start_worker.py
#
#   # Or run worker and beat separately
#   celery -A workers.celery_app worker --loglevel=info -Q imports,default
#   celery -A workers.celery_app beat --loglevel=info
#
# Prerequisites:
#   - Redis must be running
#   - Environment variables must be set (.env file)
# =============================================================================

import os
import sys

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from workers.celery_app import celery_app


def main():
    """Start the Celery worker with beat."""
    print("=" * 60)
    print("MobilePrices Import Worker")
    print("=" * 60)
    print()
    print("Starting worker with scheduled imports...")
    print("Press Ctrl+C to stop")
    print()

    celery_app.worker_main([
        "worker",
        "--beat",
        "--loglevel=info",
        "--concurrency=1",
        "--queues=imports,default",
    ])


if __name__ == "__main__":
    main()
