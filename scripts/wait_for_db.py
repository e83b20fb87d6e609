#!/usr/bin/env python
"""Block until PostgreSQL accepts connections, then exit 0.

Used by container entrypoints before ``manage.py migrate``.
"""
import logging
import sys
import time

import psycopg2
from decouple import config

logging.basicConfig(level=logging.INFO, format='%(asctime)s %(levelname)s %(message)s')
logger = logging.getLogger('wait_for_db')


def wait_for_db(max_retries=None, retry_interval=None):
    max_retries = max_retries or config('DB_WAIT_RETRIES', default=30, cast=int)
    retry_interval = retry_interval or config('DB_WAIT_INTERVAL', default=2, cast=float)
    params = {
        'host': config('POSTGRES_HOST', default='localhost'),
        'port': config('POSTGRES_PORT', default='5432'),
        'dbname': config('POSTGRES_DB', default='asset_tracker'),
        'user': config('POSTGRES_USER', default='postgres'),
        'password': config('POSTGRES_PASSWORD', default='postgres'),
    }

    for attempt in range(1, max_retries + 1):
        try:
            psycopg2.connect(connect_timeout=5, **params).close()
        except psycopg2.OperationalError as e:
            logger.warning(f"Database {params['host']}:{params['port']} not ready "
                           f"({attempt}/{max_retries}): {e}")
            time.sleep(retry_interval)
            continue
        logger.info(f"Database ready after {attempt} attempt(s)")
        return True

    logger.error("Database did not become ready, giving up")
    return False


if __name__ == '__main__':
    sys.exit(0 if wait_for_db() else 1)
