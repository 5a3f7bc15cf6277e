"""Root conftest — shared test configuration."""

import os

# Never touch a real database or a real owner from tests
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("ADMIN_IDENTITY", "admin-A")
os.environ.setdefault("LOG_FORMAT", "text")
