"""
Test Configuration and Fixtures

Architecture:
- Unit tests (test/**/unit/): mocked repositories / unit of work, no database
- Integration tests (test/**/integration/): real SQLAlchemy async engine on a
  file-backed SQLite database per test

Environment setup MUST happen before application modules are imported:
settings and the loguru sinks read it at import time.
"""

import os
from pathlib import Path


def _early_setup_test_environment() -> None:
    test_log_dir = Path(__file__).parent / 'test_log'
    test_log_dir.mkdir(exist_ok=True)
    os.environ['TEST_LOG_DIR'] = str(test_log_dir)

    # Never reach for a real PostgreSQL from tests
    os.environ.setdefault('DATABASE_URL', 'sqlite+aiosqlite:///:memory:')
    os.environ.setdefault('DEFAULT_PRICE_FACTOR', '1')


_early_setup_test_environment()
