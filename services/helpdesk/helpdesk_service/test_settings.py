"""Settings used by the test suite."""
from __future__ import annotations

from .settings import *  # noqa: F401,F403

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": ":memory:",
    }
}

# TestCase data lives in a per-connection transaction; worker threads would not see it.
BOOTSTRAP_MAX_WORKERS = 1
BOOTSTRAP_ON_STARTUP = False
BACKUP_TOOLS_URL = ""

CELERY_BROKER_URL = "memory://"
CELERY_RESULT_BACKEND = "cache+memory://"
CELERY_TASK_ALWAYS_EAGER = True
CELERY_TASK_EAGER_PROPAGATES = True
