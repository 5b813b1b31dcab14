"""Test package. Settings are read at import time, so defaults for tests are set here first."""

import os

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("BCRYPT_ROUNDS", "4")
