"""
Service context for log lines.

Identifies which service and process a log record came from, so logs from
several API workers can be told apart once aggregated.
"""

import os
from functools import lru_cache


@lru_cache(maxsize=1)
def get_service_context() -> str:
    service_name = os.getenv('SERVICE_NAME', 'reservation-service')
    deploy_env = os.getenv('DEPLOY_ENV', 'local_dev')

    # Container hostname when running in docker, PID otherwise
    instance = os.getenv('HOSTNAME', '')[:8] or f'pid-{os.getpid()}'

    return f'{service_name}:{deploy_env}:{instance}'
