"""
Service context extraction for logging.

Identifies the running process (service name, deploy environment, host/pid)
so lines from several workers can be told apart in aggregated logs.
"""

import os
from functools import lru_cache
import socket


@lru_cache(maxsize=1)
def get_service_context() -> str:
    service_name = os.getenv('SERVICE_NAME', 'cinema-booking')
    deploy_env = os.getenv('DEPLOY_ENV', 'local_dev')

    # Containers get a short hostname; local runs fall back to the PID
    hostname = os.getenv('HOSTNAME') or socket.gethostname()
    instance = hostname[:12] if deploy_env != 'local_dev' else str(os.getpid())

    return f'{service_name}@{deploy_env}:{instance}'
