"""Shared pytest configuration."""
from __future__ import annotations

import os

# Settings are resolved at import time, so the test database must be chosen first.
# An in-memory sqlite database leaves nothing behind after the run.
os.environ.setdefault("DATABASE_URL", "sqlite+pysqlite://")
