from __future__ import annotations

import os
import tempfile

# Settings are read once at import time, so the test environment has to be in
# place before any classtrack module is imported.
_TMP_DIR = tempfile.mkdtemp(prefix="classtrack-tests-")
os.environ.setdefault("DATABASE_URL", f"sqlite:///{os.path.join(_TMP_DIR, 'test.db')}")
os.environ.setdefault("LOG_FILE", os.path.join(_TMP_DIR, "app.log"))
os.environ.setdefault("ENABLE_RATE_LIMIT", "0")
os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("APP_ENV", "test")
